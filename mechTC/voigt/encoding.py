"""
Algebra on Voigt vectors.

A Voigt vector stores the n(n+1)/2 independent components of a symmetric
second-order tensor. The diagonal always comes first, so the first three
entries of a 3D vector are (xx, yy, zz) and everything from index 3 on is
an off-diagonal (shear) term:

    3D: [xx, yy, zz, xy, yz, xz]
    2D: [xx, yy, xy]

The helpers below (trace, identity, scale_off_diagonal, norm, contract)
rely on that layout and require more than 3 components. A 2D vector has
exactly 3, so they are 3D-only; passing a 2D vector raises
DimensionMismatch instead of silently treating xy as a diagonal term.

Scaling conventions:
- strain vectors store shear terms doubled (engineering shear strain)
- stress vectors store shear terms as they are
The vector itself does not know which convention it carries; callers pick
the matching function.
"""

import numpy as np
from typing import Tuple

from ..errors import DimensionMismatch


# Index pairs (row, col) of the tensor component stored at each Voigt slot
VOIGT_ORDER_2D: Tuple[Tuple[int, int], ...] = ((0, 0), (1, 1), (0, 1))
VOIGT_ORDER_3D: Tuple[Tuple[int, int], ...] = (
    (0, 0), (1, 1), (2, 2), (0, 1), (1, 2), (0, 2)
)

_N_DIAG = 3


def voigt_size(dim: int) -> int:
    """
    Number of Voigt components for a symmetric tensor of dimension dim.

    Parameters:
        dim: Spatial dimension (2 or 3)

    Returns:
        3 for dim=2, 6 for dim=3
    """
    if dim not in (2, 3):
        raise DimensionMismatch(f"Unsupported tensor dimension {dim}, expected 2 or 3")
    return dim * (dim + 1) // 2


def voigt_dim(length: int) -> int:
    """Spatial dimension matching a Voigt vector length (3 -> 2, 6 -> 3)."""
    if length == 3:
        return 2
    if length == 6:
        return 3
    raise DimensionMismatch(
        f"Voigt vector length {length} does not match a 2D (3) or 3D (6) tensor"
    )


def _as_voigt(vec) -> np.ndarray:
    """Validate and convert a Voigt vector with off-diagonal terms."""
    v = np.asarray(vec, dtype=np.float64)
    if v.ndim != 1:
        raise DimensionMismatch(f"Voigt vector must be 1-D, got shape {v.shape}")
    if v.shape[0] <= _N_DIAG:
        raise DimensionMismatch(
            f"Voigt vector must have more than {_N_DIAG} components, "
            f"got {v.shape[0]}"
        )
    return v


def trace(vec) -> float:
    """
    Trace of the tensor behind a Voigt vector.

    Sum of the three diagonal slots. Same result for the strain and the
    stress convention.
    """
    v = _as_voigt(vec)
    return float(v[:_N_DIAG].sum())


def identity(length: int) -> np.ndarray:
    """
    Second-order identity tensor in Voigt form.

    Parameters:
        length: Voigt vector length (> 3)

    Returns:
        Array with ones in the diagonal slots and zeros elsewhere
    """
    if length <= _N_DIAG:
        raise DimensionMismatch(
            f"Voigt identity must have more than {_N_DIAG} components, got {length}"
        )
    vec = np.zeros(length)
    vec[:_N_DIAG] = 1.0
    return vec


def scale_off_diagonal(vec, factor: float = 2.0) -> np.ndarray:
    """
    Copy of a Voigt vector with its off-diagonal terms multiplied by factor.

    factor=2 turns a stress-convention vector into the doubled form used
    when contracting with a stiffness matrix; factor=0.5 undoes it.
    """
    scaled = _as_voigt(vec).copy()
    scaled[_N_DIAG:] *= factor
    return scaled


def norm(vec) -> float:
    """
    Frobenius norm of a tensor stored with unscaled shear terms.

    Each off-diagonal entry appears twice in the full tensor, so it is
    weighted by sqrt(2) before taking the Euclidean norm. This is the
    norm of a stress-convention vector; use strain_norm for strains.
    """
    return float(np.linalg.norm(scale_off_diagonal(vec, np.sqrt(2.0))))


def strain_norm(vec) -> float:
    """Frobenius norm of a tensor stored with doubled (engineering) shear terms."""
    return float(np.linalg.norm(scale_off_diagonal(vec, 1.0 / np.sqrt(2.0))))


def contract(matrix, vec) -> np.ndarray:
    """
    Apply a Voigt operator (e.g. a stiffness matrix) to a Voigt vector.

    Computes matrix @ scale_off_diagonal(vec): the shear terms of the
    vector are doubled so each symmetric pair is counted twice.

    Parameters:
        matrix: Array of shape (m, k)
        vec: Voigt vector of length k (> 3)

    Returns:
        Array of shape (m,)
    """
    M = np.asarray(matrix, dtype=np.float64)
    v = _as_voigt(vec)
    if M.ndim != 2 or M.shape[1] != v.shape[0]:
        raise DimensionMismatch(
            f"Cannot contract matrix of shape {M.shape} with Voigt vector "
            f"of length {v.shape[0]}"
        )
    return M @ scale_off_diagonal(v)
