"""
mechTC - Continuum mechanics tensor kernel

Small, stateless building blocks for material models and finite element
codes, working in 2D and 3D:

Key modules:
- voigt: strain/stress tensor <-> Voigt vector conversion and Voigt algebra
- kinematics: right (F = RU) and left (F = VR) polar decomposition
- expansion: lazy block-Kronecker expansion of one matrix by another
- config: numerical tolerances
- errors: DimensionMismatch, SingularInput

Quick start:
    import numpy as np
    from mechTC.voigt import strain_to_voigt, voigt_to_stress, contract
    from mechTC.kinematics import PolarDecompositionRU

    eps = np.array([[1e-3, 2e-4, 0.0],
                    [2e-4, -5e-4, 0.0],
                    [0.0, 0.0, 0.0]])
    sigma = voigt_to_stress(C @ strain_to_voigt(eps))   # C: 6x6 stiffness

    pd = PolarDecompositionRU.compute(F)
    pd.R, pd.U
"""

__version__ = "0.1.0"
__author__ = "Wataru Fukuda"

# Core imports for convenience
from .errors import DimensionMismatch, SingularInput
from .voigt import (
    trace, identity, scale_off_diagonal, norm, strain_norm, contract,
    strain_to_voigt, voigt_to_strain, stress_to_voigt, voigt_to_stress,
)
from .kinematics import (
    PolarDecompositionRU, PolarDecompositionVR,
    polar_decomposition_right, polar_decomposition_left,
)
from .expansion import ExpandedMatrix, expand_matrix
