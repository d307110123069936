"""
Polar decomposition of a deformation gradient.

Any invertible matrix F factors into a rotation and a symmetric
positive-definite stretch:

    right:  F = R U,   U = sqrt(F^T F)
    left:   F = V R,   V = sqrt(F F^T)

and the two stretches are related by U = R^T V R.

The square roots come from the symmetric eigen-decomposition
(scipy.linalg.eigh) of F^T F or F F^T:

    C = Q diag(lambda) Q^T
    sqrt(C)     = Q diag(sqrt(lambda)) Q^T
    sqrt(C)^-1  = Q diag(1/sqrt(lambda)) Q^T

This is a single closed-form pass, exact up to the eigen-solver accuracy,
which suits the small (2x2 / 3x3) matrices of finite element kinematics.

Preconditions:
- F is square with dimension 2 or 3 (DimensionMismatch otherwise)
- F is invertible; a smallest eigenvalue below rtol * largest raises
  SingularInput
- det F > 0 for R to be a proper rotation. For det F < 0 the factors still
  reproduce F, but det R = -1; a warning is logged.

Usage:
    pd = PolarDecompositionRU.compute(F)
    pd.R, pd.U, pd.Uinv
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import scipy.linalg

from ..config import get_tolerances
from ..errors import DimensionMismatch, SingularInput

LOG = logging.getLogger(__name__)


def _as_deformation_matrix(F) -> np.ndarray:
    F = np.asarray(F, dtype=np.float64)
    if F.ndim != 2 or F.shape[0] != F.shape[1] or F.shape[0] not in (2, 3):
        raise DimensionMismatch(
            f"Polar decomposition needs a 2x2 or 3x3 matrix, got shape {F.shape}"
        )
    return F


def _frozen(A: np.ndarray) -> np.ndarray:
    A.setflags(write=False)
    return A


def symmetric_sqrt(S: np.ndarray,
                   rtol: Optional[float] = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    Principal square root and inverse square root of a symmetric PSD matrix.

    Parameters:
        S: Symmetric positive semi-definite matrix, shape (n, n)
        rtol: Singularity tolerance relative to the largest eigenvalue.
              Defaults to get_tolerances().singular_rtol.

    Returns:
        (sqrt_S, inv_sqrt_S)

    Raises:
        DimensionMismatch: if S is not a square matrix
        ValueError: if S is not symmetric, or rtol is negative or NaN
        SingularInput: if the smallest eigenvalue is <= rtol * largest
    """
    if rtol is None:
        rtol = get_tolerances().singular_rtol
    if not rtol >= 0.0:
        raise ValueError(f"rtol must be non-negative, got {rtol}")

    S = np.asarray(S, dtype=np.float64)
    if S.ndim != 2 or S.shape[0] != S.shape[1]:
        raise DimensionMismatch(f"Expected a square matrix, got shape {S.shape}")
    if not np.allclose(S, S.T, rtol=1e-10, atol=1e-14 * np.abs(S).max(initial=0.0)):
        raise ValueError("Matrix is not symmetric")

    eigvals, eigvecs = scipy.linalg.eigh(S)
    lam_min, lam_max = eigvals[0], eigvals[-1]
    LOG.debug("eigenvalues %s", eigvals)

    # lam_min <= 0 is singular whatever the tolerance
    if lam_max <= 0.0 or lam_min <= 0.0 or lam_min <= rtol * lam_max:
        raise SingularInput(
            f"Matrix is singular to tolerance {rtol:g}: eigenvalues of the "
            f"stretch-squared tensor are {eigvals}"
        )

    root = np.sqrt(eigvals)
    sqrt_S = (eigvecs * root) @ eigvecs.T
    inv_sqrt_S = (eigvecs / root) @ eigvecs.T
    return sqrt_S, inv_sqrt_S


def _check_orientation(F: np.ndarray) -> None:
    if np.linalg.det(F) < 0.0:
        LOG.warning(
            "Deformation matrix has negative determinant; the rotation "
            "factor is improper (det R = -1)"
        )


@dataclass(frozen=True, eq=False)
class PolarDecompositionRU:
    """
    Right polar decomposition F = R U.

    Attributes:
        R: Orthogonal rotation, shape (n, n)
        U: Right stretch, symmetric positive definite
        Uinv: Inverse of U
    """
    R: np.ndarray
    U: np.ndarray
    Uinv: np.ndarray

    @classmethod
    def compute(cls, F, rtol: Optional[float] = None) -> "PolarDecompositionRU":
        """
        Decompose F.

        Parameters:
            F: Invertible 2x2 or 3x3 matrix
            rtol: Singularity tolerance (see symmetric_sqrt)
        """
        F = _as_deformation_matrix(F)
        U, Uinv = symmetric_sqrt(F.T @ F, rtol)
        _check_orientation(F)
        R = F @ Uinv
        return cls(R=_frozen(R), U=_frozen(U), Uinv=_frozen(Uinv))

    @property
    def dim(self) -> int:
        return self.R.shape[0]

    def __repr__(self) -> str:
        return f"PolarDecompositionRU(dim={self.dim})"


@dataclass(frozen=True, eq=False)
class PolarDecompositionVR:
    """
    Left polar decomposition F = V R.

    Attributes:
        R: Orthogonal rotation, shape (n, n)
        V: Left stretch, symmetric positive definite
        Vinv: Inverse of V
    """
    R: np.ndarray
    V: np.ndarray
    Vinv: np.ndarray

    @classmethod
    def compute(cls, F, rtol: Optional[float] = None) -> "PolarDecompositionVR":
        """
        Decompose F.

        Parameters:
            F: Invertible 2x2 or 3x3 matrix
            rtol: Singularity tolerance (see symmetric_sqrt)
        """
        F = _as_deformation_matrix(F)
        V, Vinv = symmetric_sqrt(F @ F.T, rtol)
        _check_orientation(F)
        R = Vinv @ F
        return cls(R=_frozen(R), V=_frozen(V), Vinv=_frozen(Vinv))

    @property
    def dim(self) -> int:
        return self.R.shape[0]

    def __repr__(self) -> str:
        return f"PolarDecompositionVR(dim={self.dim})"


def polar_decomposition_right(F, rtol: Optional[float] = None) -> PolarDecompositionRU:
    """Right polar decomposition F = R U."""
    return PolarDecompositionRU.compute(F, rtol)


def polar_decomposition_left(F, rtol: Optional[float] = None) -> PolarDecompositionVR:
    """Left polar decomposition F = V R."""
    return PolarDecompositionVR.compute(F, rtol)
