"""
Voigt notation for symmetric second-order tensors.

Provides:
- encoding: trace, identity, norms and operator products on Voigt vectors
- conversion: strain/stress tensor <-> Voigt vector, 2D and 3D
"""

from .encoding import (
    VOIGT_ORDER_2D,
    VOIGT_ORDER_3D,
    voigt_size,
    voigt_dim,
    trace,
    identity,
    scale_off_diagonal,
    norm,
    strain_norm,
    contract,
)
from .conversion import (
    strain_to_voigt,
    voigt_to_strain,
    stress_to_voigt,
    voigt_to_stress,
    strain_to_voigt_2d,
    strain_to_voigt_3d,
    voigt_to_strain_2d,
    voigt_to_strain_3d,
    stress_to_voigt_2d,
    stress_to_voigt_3d,
    voigt_to_stress_2d,
    voigt_to_stress_3d,
)
