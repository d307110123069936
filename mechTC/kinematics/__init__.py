"""
Kinematics of finite deformation.
"""

from .polar import (
    PolarDecompositionRU,
    PolarDecompositionVR,
    polar_decomposition_right,
    polar_decomposition_left,
    symmetric_sqrt,
)
