"""
Contains utilities to compare the padded convolution with a reference implementation.
"""

from tests.utils.reference import TestUtils
