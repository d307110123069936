"""
Exceptions raised by the tensor kernel.

Both derive from ValueError: they signal invalid input, never a transient
condition, so callers should not retry.
"""


class DimensionMismatch(ValueError):
    """
    A vector length or matrix shape does not fit the requested operation.

    Raised for Voigt vectors of length <= 3 passed to the encoding helpers,
    operator/vector size mismatches in contract(), tensors of the wrong
    shape passed to a conversion, and non-square or unsupported matrices
    passed to the polar decomposition.
    """
    pass


class SingularInput(ValueError):
    """
    Polar decomposition requested for a (near-)singular matrix.

    F^T F (or F F^T) has a smallest eigenvalue below the relative tolerance,
    so the inverse square root and the rotation factor are undefined.
    """
    pass
