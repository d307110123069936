"""
Conversion between symmetric tensors and Voigt vectors.

Strain and stress have separate functions because they scale the shear
terms differently:

    strain:  [e_xx, e_yy, e_zz, 2 e_xy, 2 e_yz, 2 e_xz]
    stress:  [s_xx, s_yy, s_zz,   s_xy,   s_yz,   s_xz]

In 2D the vectors are [xx, yy, (2) xy].

Off-diagonal terms are read from the upper triangle; the input tensor is
assumed symmetric. Tensors built from vectors are always exactly
symmetric.

Round trip:
    voigt_to_strain(strain_to_voigt(T)) == T
    voigt_to_stress(stress_to_voigt(T)) == T
"""

import numpy as np

from ..errors import DimensionMismatch
from .encoding import VOIGT_ORDER_2D, VOIGT_ORDER_3D


def _as_tensor(tensor, dim: int) -> np.ndarray:
    T = np.asarray(tensor, dtype=np.float64)
    if T.shape != (dim, dim):
        raise DimensionMismatch(f"Expected a {dim}x{dim} tensor, got shape {T.shape}")
    return T


def _as_vector(vec, length: int) -> np.ndarray:
    v = np.asarray(vec, dtype=np.float64)
    if v.shape != (length,):
        raise DimensionMismatch(
            f"Expected a Voigt vector of shape ({length},), got shape {v.shape}"
        )
    return v


def _tensor_to_voigt(T: np.ndarray, order, shear_factor: float) -> np.ndarray:
    dim = T.shape[0]
    vec = np.array([T[i, j] for i, j in order])
    vec[dim:] *= shear_factor
    return vec


def _voigt_to_tensor(v: np.ndarray, order, shear_factor: float) -> np.ndarray:
    dim = 3 if len(order) == 6 else 2
    T = np.zeros((dim, dim))
    for k, (i, j) in enumerate(order):
        value = v[k] if k < dim else shear_factor * v[k]
        T[i, j] = value
        T[j, i] = value
    return T


# =============================================================================
# 3D
# =============================================================================

def strain_to_voigt_3d(strain) -> np.ndarray:
    """3x3 strain tensor -> [e_xx, e_yy, e_zz, 2e_xy, 2e_yz, 2e_xz]."""
    return _tensor_to_voigt(_as_tensor(strain, 3), VOIGT_ORDER_3D, 2.0)


def voigt_to_strain_3d(voigt) -> np.ndarray:
    """Strain Voigt vector (6,) -> symmetric 3x3 strain tensor."""
    return _voigt_to_tensor(_as_vector(voigt, 6), VOIGT_ORDER_3D, 0.5)


def stress_to_voigt_3d(stress) -> np.ndarray:
    """3x3 stress tensor -> [s_xx, s_yy, s_zz, s_xy, s_yz, s_xz]."""
    return _tensor_to_voigt(_as_tensor(stress, 3), VOIGT_ORDER_3D, 1.0)


def voigt_to_stress_3d(voigt) -> np.ndarray:
    """Stress Voigt vector (6,) -> symmetric 3x3 stress tensor."""
    return _voigt_to_tensor(_as_vector(voigt, 6), VOIGT_ORDER_3D, 1.0)


# =============================================================================
# 2D
# =============================================================================

def strain_to_voigt_2d(strain) -> np.ndarray:
    """2x2 strain tensor -> [e_xx, e_yy, 2e_xy]."""
    return _tensor_to_voigt(_as_tensor(strain, 2), VOIGT_ORDER_2D, 2.0)


def voigt_to_strain_2d(voigt) -> np.ndarray:
    """Strain Voigt vector (3,) -> symmetric 2x2 strain tensor."""
    return _voigt_to_tensor(_as_vector(voigt, 3), VOIGT_ORDER_2D, 0.5)


def stress_to_voigt_2d(stress) -> np.ndarray:
    """2x2 stress tensor -> [s_xx, s_yy, s_xy]."""
    return _tensor_to_voigt(_as_tensor(stress, 2), VOIGT_ORDER_2D, 1.0)


def voigt_to_stress_2d(voigt) -> np.ndarray:
    """Stress Voigt vector (3,) -> symmetric 2x2 stress tensor."""
    return _voigt_to_tensor(_as_vector(voigt, 3), VOIGT_ORDER_2D, 1.0)


# =============================================================================
# Dimension dispatch
# =============================================================================

_TENSOR_TO_VOIGT = {
    ('strain', 2): strain_to_voigt_2d,
    ('strain', 3): strain_to_voigt_3d,
    ('stress', 2): stress_to_voigt_2d,
    ('stress', 3): stress_to_voigt_3d,
}

_VOIGT_TO_TENSOR = {
    ('strain', 3): voigt_to_strain_2d,
    ('strain', 6): voigt_to_strain_3d,
    ('stress', 3): voigt_to_stress_2d,
    ('stress', 6): voigt_to_stress_3d,
}


def _dispatch_tensor(kind: str, tensor) -> np.ndarray:
    T = np.asarray(tensor, dtype=np.float64)
    if T.ndim != 2 or T.shape[0] != T.shape[1] or T.shape[0] not in (2, 3):
        raise DimensionMismatch(
            f"Expected a 2x2 or 3x3 {kind} tensor, got shape {T.shape}"
        )
    return _TENSOR_TO_VOIGT[(kind, T.shape[0])](T)


def _dispatch_vector(kind: str, vec) -> np.ndarray:
    v = np.asarray(vec, dtype=np.float64)
    if v.ndim != 1 or v.shape[0] not in (3, 6):
        raise DimensionMismatch(
            f"Expected a {kind} Voigt vector of length 3 (2D) or 6 (3D), "
            f"got shape {v.shape}"
        )
    return _VOIGT_TO_TENSOR[(kind, v.shape[0])](v)


def strain_to_voigt(strain) -> np.ndarray:
    """Strain tensor (2x2 or 3x3) -> strain Voigt vector (3 or 6)."""
    return _dispatch_tensor('strain', strain)


def voigt_to_strain(voigt) -> np.ndarray:
    """Strain Voigt vector (3 or 6) -> strain tensor (2x2 or 3x3)."""
    return _dispatch_vector('strain', voigt)


def stress_to_voigt(stress) -> np.ndarray:
    """Stress tensor (2x2 or 3x3) -> stress Voigt vector (3 or 6)."""
    return _dispatch_tensor('stress', stress)


def voigt_to_stress(voigt) -> np.ndarray:
    """Stress Voigt vector (3 or 6) -> stress tensor (2x2 or 3x3)."""
    return _dispatch_vector('stress', voigt)
