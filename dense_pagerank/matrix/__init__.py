"""Fixed-size row-major 2-D container backing the adjacency matrix."""

from dense_pagerank.matrix.dense import DenseMatrix, IndexOutOfRange

__all__ = [
    "DenseMatrix",
    "IndexOutOfRange",
]
