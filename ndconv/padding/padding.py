"""
Code to pad an array before a 'valid' convolution so that the result keeps the array shape.
The padding names ('replicate', 'circular', ...) are converted to their np.pad equivalent.
"""
from __future__ import annotations

# IMPORTs standard
import logging

# IMPORTs alias
import numpy as np

# IMPORTs sub
from dataclasses import dataclass

# IMPORTs local
from ndconv.errors import DimensionMismatchError, InvalidArgumentError

# TYPE ANNOTATIONs
from typing import Literal, Any, cast
import numpy.typing as npt
type PadMode = Literal['constant', 'replicate', 'symmetric', 'circular']

# API public
__all__ = ['PAD_MODES', 'PadMode', 'PaddingConfig', 'Padding', 'pad_widths']

logger = logging.getLogger(__name__)

PAD_MODES: tuple[str, ...] = ('constant', 'replicate', 'symmetric', 'circular')



@dataclass(frozen=True, slots=True)
class PaddingConfig:
    """
    The padding choice used around the array before the convolution.

    Args:
        pad_mode (PadMode, optional): the padding method. Defaults to 'constant'.
        fill_value (Any, optional): the value used when 'pad_mode' is 'constant'. Must be a
            numeric scalar, NaN included. Defaults to 0.

    Raises:
        InvalidArgumentError: if the padding mode is not recognised or if the fill value is not a
            numeric scalar.
    """

    pad_mode: PadMode = 'constant'
    fill_value: Any = 0

    def __post_init__(self) -> None:

        if not isinstance(self.pad_mode, str) or self.pad_mode not in PAD_MODES:
            raise InvalidArgumentError(
                f"Unknown padding mode: {self.pad_mode!r}. Choose one of {', '.join(PAD_MODES)}."
            )

        # CHECK fill value
        try:
            value = np.asarray(self.fill_value) if self.fill_value is not None else None
        except ValueError:
            value = None
        if value is None or value.ndim != 0 or not _is_numeric(value.dtype):
            raise InvalidArgumentError(
                f"'fill_value' must be a numeric scalar, got {self.fill_value!r}."
            )

        # PYTHON scalar (keeps np.result_type promotion weak)
        object.__setattr__(self, 'fill_value', value.item())

    def np_pad_kwargs(self) -> dict[str, Any]:
        """
        Gives the np.pad keyword arguments equivalent to the padding choice.

        Returns:
            dict[str, Any]: the 'mode' and mode specific arguments for np.pad.
        """

        if self.pad_mode == 'constant':
            result = {
                'mode': 'constant',
                'constant_values': self.fill_value,
            }
        elif self.pad_mode == 'replicate':
            result = {'mode': 'edge'}
        elif self.pad_mode == 'symmetric':
            result = {
                'mode': 'symmetric',
                'reflect_type': 'even',
            }
        else:
            result = {'mode': 'wrap'}
        return result


def _is_numeric(dtype: np.dtype) -> bool:
    """
    Checks if a dtype holds numbers (booleans included).
    """

    return np.issubdtype(dtype, np.number) or np.issubdtype(dtype, np.bool_)

def pad_widths(kernel_shape: tuple[int, ...]) -> tuple[tuple[int, int], ...]:
    """
    Gives the (before, after) padding widths for each axis so that a 'valid' convolution with a
    kernel of the given shape returns an output with the shape of the unpadded array.
    The total padding on an axis is 'extent - 1' and the 'before' part is rounded down, i.e. for
    even extents the 'after' side gets the extra element.

    Args:
        kernel_shape (tuple[int, ...]): the kernel shape.

    Raises:
        InvalidArgumentError: if an extent is smaller than 1.

    Returns:
        tuple[tuple[int, int], ...]: the padding widths as used by np.pad.
    """

    if any(k < 1 for k in kernel_shape):
        raise InvalidArgumentError(f"Kernel extents must be at least 1, got {kernel_shape}.")

    widths = []
    for extent in kernel_shape:
        total = extent - 1
        pre = total // 2
        widths.append((pre, total - pre))
    return tuple(widths)


class Padding[Data: npt.NDArray[Any]]:
    """
    To add padding to data so that a 'valid' convolution keeps the data shape.
    Each side of each axis is padded independently so that even sized kernels are handled.
    """

    def __init__(
            self,
            data: Data,
            kernel: tuple[int, ...],
            config: PaddingConfig | None = None,
        ) -> None:
        """
        Adds padding to the given data according to the kernel shape and the padding choice.
        The padding is added using np.pad.
        To get the padded data, use the 'padded' property.

        Args:
            data (Data): the data to pad.
            kernel (tuple[int, ...]): the kernel shape used for the convolution. Must have as many
                dimensions as 'data'.
            config (PaddingConfig | None, optional): the padding choice. If None, zero padding is
                used. Defaults to None.

        Raises:
            DimensionMismatchError: if the kernel and the data dimensions differ.
        """

        if len(kernel) != data.ndim:
            raise DimensionMismatchError(
                f"The kernel shape {kernel} must have as many dimensions as the data "
                f"({data.ndim})."
            )

        self._data = data
        self._config = config if config is not None else PaddingConfig()
        self._widths = pad_widths(kernel)

        # RUN
        self._padded_data = self._add_padding()

    @property
    def padded(self) -> Data:
        """
        The padded data.

        Returns:
            Data: the padded data. Its extents are the data extents plus the kernel extents minus
                one.
        """
        return self._padded_data

    @property
    def widths(self) -> tuple[tuple[int, int], ...]:
        """
        The (before, after) padding widths for each axis.
        """
        return self._widths

    @property
    def pad_pre(self) -> tuple[int, ...]:
        """
        The padding widths added before the data on each axis, i.e. '(extent - 1) // 2'.
        """
        return tuple(pre for pre, _ in self._widths)

    @property
    def pad_post(self) -> tuple[int, ...]:
        """
        The padding widths added after the data on each axis. One more than 'pad_pre' for even
        kernel extents.
        """
        return tuple(post for _, post in self._widths)

    def _add_padding(self) -> Data:
        """
        To add padding to the data according to the padding choice.

        Returns:
            Data: the padded data.
        """

        kwargs = self._config.np_pad_kwargs()
        logger.debug(
            "Padding data of shape %s with widths %s (mode=%s).",
            self._data.shape, self._widths, kwargs['mode'],
        )
        padded = np.pad(self._data, pad_width=self._widths, **kwargs)
        return cast(Data, padded)
