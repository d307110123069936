"""
Lazy block (Kronecker) expansion of one matrix by another.

Given A of shape (p, q) and a pattern B of shape (r, s), the expanded
matrix E has shape (p*r, q*s) with

    E[i, j] = A[i // r, j // s] * B[i % r, j % s]

i.e. each entry of A is replaced by that entry times B. A typical use is
spreading a nodal matrix over the degrees of freedom of each node:

    expand_matrix(K_nodes, np.eye(3))   # 3 DOFs per node

E is a read-only view: entries are computed on access and the full
array is only built by to_array() (or np.asarray(E)), where it equals
np.kron(A, B).
"""

import numpy as np
from typing import Tuple

from .errors import DimensionMismatch


def _as_matrix(M, name: str) -> np.ndarray:
    M = np.array(M)
    if M.ndim != 2:
        raise DimensionMismatch(f"{name} must be a 2-D matrix, got shape {M.shape}")
    M.setflags(write=False)
    return M


class ExpandedMatrix:
    """
    Index-mapped view of a block-expanded matrix.

    Holds private read-only copies of the base and pattern matrices, so
    changing the caller's arrays afterwards does not change the view.

    Attributes:
        base: Base matrix A, shape (p, q)
        pattern: Expansion pattern B, shape (r, s)
    """

    def __init__(self, base, pattern):
        self.base = _as_matrix(base, "base")
        self.pattern = _as_matrix(pattern, "pattern")

    @property
    def shape(self) -> Tuple[int, int]:
        (p, q), (r, s) = self.base.shape, self.pattern.shape
        return (p * r, q * s)

    @property
    def ndim(self) -> int:
        return 2

    @property
    def dtype(self) -> np.dtype:
        return np.result_type(self.base, self.pattern)

    def __len__(self) -> int:
        return self.shape[0]

    def _normalize_index(self, idx: int, axis: int) -> int:
        n = self.shape[axis]
        if isinstance(idx, (bool, np.bool_)) or not isinstance(idx, (int, np.integer)):
            raise TypeError(f"Indices must be integers, got {type(idx).__name__}")
        idx = int(idx)
        if idx < -n or idx >= n:
            raise IndexError(f"Index {idx} out of range for axis {axis} with size {n}")
        return idx + n if idx < 0 else idx

    def __getitem__(self, key):
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("ExpandedMatrix is indexed by a (row, col) pair")
        row = self._normalize_index(key[0], 0)
        col = self._normalize_index(key[1], 1)
        r, s = self.pattern.shape
        return self.base[row // r, col // s] * self.pattern[row % r, col % s]

    def to_array(self) -> np.ndarray:
        """Materialize the full expanded matrix."""
        return np.kron(self.base, self.pattern)

    def __array__(self, dtype=None, copy=None):
        arr = self.to_array()
        return arr if dtype is None else arr.astype(dtype)

    def __repr__(self) -> str:
        return (f"ExpandedMatrix(shape={self.shape}, base_shape={self.base.shape}, "
                f"pattern_shape={self.pattern.shape})")


def expand_matrix(base, pattern) -> ExpandedMatrix:
    """
    Expand base by pattern without materializing the result.

    Parameters:
        base: Matrix A, shape (p, q)
        pattern: Matrix B, shape (r, s)

    Returns:
        ExpandedMatrix of shape (p*r, q*s)
    """
    return ExpandedMatrix(base, pattern)
