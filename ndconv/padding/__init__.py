"""
Directory contains the code to pad an array so that a 'valid' convolution keeps its shape.
"""

from ndconv.padding.padding import PAD_MODES, PadMode, PaddingConfig, Padding, pad_widths
