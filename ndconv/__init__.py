"""
Directory contains code to perform n-dimensional convolutions on numpy arrays that keep the input
shape, with constant (NaN included), replicate, symmetric or circular padding. Also contains a
helper to get the indices of the smallest values of an array.
"""

from ndconv.errors import InvalidArgumentError, DimensionMismatchError
from ndconv.padding import PAD_MODES, PadMode, PaddingConfig, Padding, pad_widths
from ndconv.convolution import Convolution, MethodType, convolve_same
from ndconv.selection import argmin
