"""Result container for a PageRank run."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class PageRankResult:
    """Immutable snapshot of the scores produced by one configured run.

    Uses frozen=True but omits slots=True since numpy arrays don't interact
    well with __slots__. `scores` is a copy, so later sweeps on the graph do
    not change it.
    """

    scores: np.ndarray  # float64 array of length n, index = vertex
    iterations: int  # sweeps performed
    dangling: tuple[int, ...]  # vertices with out-degree 0
