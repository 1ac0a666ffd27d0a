"""
Directory contains the code to do a convolution that keeps the input shape, with a choice of
padding for the borders.
"""

from ndconv.convolution.convolution import Convolution, MethodType, convolve_same
