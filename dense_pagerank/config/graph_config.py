"""Graph run configuration: a frozen, slotted, serializable dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GraphConfig:
    """Vertices, edges, and sweep count for one PageRank run.

    Cross-field validation runs in __post_init__ so a bad edge list is
    rejected before any graph is built.
    """

    n_vertices: int
    edges: tuple[tuple[int, int], ...] = ()  # directed (src, dst) pairs
    iterations: int = 100  # fixed sweep count, no early exit
    description: str = ""

    def __post_init__(self) -> None:
        if self.n_vertices < 0:
            raise ValueError(
                f"n_vertices must be >= 0, got {self.n_vertices}"
            )
        if self.iterations < 0:
            raise ValueError(
                f"iterations must be >= 0, got {self.iterations}"
            )
        for src, dst in self.edges:
            if not (0 <= src < self.n_vertices and 0 <= dst < self.n_vertices):
                raise ValueError(
                    f"edge ({src}, {dst}) out of range for "
                    f"n_vertices={self.n_vertices}"
                )
