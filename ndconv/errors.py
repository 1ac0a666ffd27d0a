"""
Exception types raised by the ndconv functions.
Both derive from ValueError so that callers can keep catching the builtin.
"""
from __future__ import annotations

# API public
__all__ = ['InvalidArgumentError', 'DimensionMismatchError']



class InvalidArgumentError(ValueError):
    """
    Raised when an argument is rejected during validation (unknown padding mode, non-scalar
    fill value, non-numeric or malformed array, ...). Always raised before any computation.
    """


class DimensionMismatchError(ValueError):
    """
    Raised when the array and the kernel cannot be brought to a common number of dimensions, or
    when the output shape does not match the input shape.
    """
