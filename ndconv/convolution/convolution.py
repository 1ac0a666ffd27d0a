"""
Code to compute an n-dimensional convolution whose output has the same shape as the input array.
The array is padded (c.f. ndconv.padding) and then convolved in 'valid' mode with scipy.signal.
"""
from __future__ import annotations

# IMPORTs standard
import logging

# IMPORTs alias
import numpy as np

# IMPORTs sub
from scipy.signal import convolve
from threadpoolctl import threadpool_limits

# IMPORTs local
from ndconv.errors import DimensionMismatchError, InvalidArgumentError
from ndconv.padding import PaddingConfig, Padding, PadMode

# TYPE ANNOTATIONs
from typing import Literal, Any, cast
import numpy.typing as npt
type MethodType = Literal['direct', 'fft', 'auto']

# API public
__all__ = ['Convolution', 'MethodType', 'convolve_same']

logger = logging.getLogger(__name__)



class Convolution[Data: npt.NDArray[Any]]:
    """
    To compute the 'same' sized convolution between an n-dimensional array and a kernel, with a
    choice of padding for the borders.
    No NaN handling is done: NaNs (in the data or used as padding) propagate to every output
    whose window reads them.
    """

    METHODS: tuple[str, ...] = ('direct', 'fft', 'auto')

    def __init__(
            self,
            data: npt.ArrayLike,
            kernel: npt.ArrayLike,
            config: PaddingConfig | None = None,
            flip_kernel: bool = False,
            method: MethodType = 'direct',
            threads: int | None = None,
        ) -> None:
        """
        Computes the convolution between the given array and the kernel. The output has the same
        shape as the array. To access the results, use the 'result' property.
        If the array and the kernel don't have the same number of dimensions, the one with less
        dimensions is extended with trailing axes of length 1.
        ! by default the kernel is not flipped, i.e. a cross-correlation is done. Use
        'flip_kernel' to get the mathematical convolution.

        Args:
            data (npt.ArrayLike): the n-dimensional numeric array to convolve.
            kernel (npt.ArrayLike): the n-dimensional numeric kernel. Can have any extents
                (odd or even).
            config (PaddingConfig | None, optional): the padding choice for the borders. If None,
                zero padding is used. Defaults to None.
            flip_kernel (bool, optional): if True, the kernel is flipped along every axis (true
                convolution). Defaults to False.
            method (MethodType, optional): the scipy.signal computation method. 'fft' is faster
                for large kernels but spreads NaN values over the whole output. Defaults to
                'direct'.
            threads (int | None, optional): the number of threads to use for the computation.
                The limit is set with threadpoolctl and is process-wide while the computation
                runs, so concurrent calls should keep it to None. If None, doesn't change the
                default behaviour. Defaults to None.

        Raises:
            InvalidArgumentError: if an argument is not valid. Nothing is computed in that case.
        """

        self._config = config if config is not None else PaddingConfig()
        self._data = self._check_array(data, name='data')
        self._kernel = self._check_array(kernel, name='kernel')
        self._flip_kernel = flip_kernel
        self._method = self._check_method(method)

        if 0 in self._kernel.shape:
            raise InvalidArgumentError(
                f"The kernel must not have a zero extent, got shape {self._kernel.shape}."
            )

        self._padding: Padding | None = None

        # RUN
        if threads is not None:
            with threadpool_limits(limits=threads): self._result = self._run()
        else:
            self._result = self._run()

    @property
    def result(self) -> Data:
        """
        Gives the result of the convolution between the data and the kernel.

        Returns:
            Data: the result of the convolution. Has the same shape as the input array and the
                promoted dtype of the array, the kernel and (for constant padding) the fill value.
        """
        return self._result

    @property
    def padding(self) -> Padding | None:
        """
        The padding used for the convolution. None if the data was empty.

        Returns:
            Padding | None: the padding instance (widths and padded data).
        """
        return self._padding

    @property
    def dtype(self) -> np.dtype:
        """
        The dtype in which the convolution is computed.
        """

        dtype = np.result_type(self._data, self._kernel)
        if dtype == np.bool_: dtype = np.dtype(np.float64)
        if self._config.pad_mode == 'constant':
            fill_value = self._config.fill_value

            # INTEGER fill value outside the dtype range
            if np.issubdtype(dtype, np.integer) and isinstance(fill_value, int):
                info = np.iinfo(dtype)
                if not info.min <= fill_value <= info.max:
                    dtype = np.result_type(dtype, np.min_scalar_type(fill_value))
            dtype = np.result_type(dtype, fill_value)
        return dtype

    @staticmethod
    def _check_array(array: npt.ArrayLike, name: str) -> np.ndarray:
        """
        To check that the input is a numeric array with at least one dimension.

        Args:
            array (npt.ArrayLike): the input to check.
            name (str): the name of the argument (for the error message).

        Raises:
            InvalidArgumentError: if the input is not numeric or has no dimensions.

        Returns:
            np.ndarray: the input as a numpy ndarray.
        """

        try:
            array = np.asarray(array)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"'{name}' can't be converted to an array: {e}") from e

        if not (np.issubdtype(array.dtype, np.number) or np.issubdtype(array.dtype, np.bool_)):
            raise InvalidArgumentError(f"'{name}' must be numeric, got dtype {array.dtype}.")
        elif array.ndim == 0:
            raise InvalidArgumentError(f"'{name}' must have at least one dimension.")
        return array

    def _check_method(self, method: str) -> MethodType:
        """
        To check the scipy.signal computation method.

        Raises:
            InvalidArgumentError: if the method is not recognised.
        """

        if method not in self.METHODS:
            raise InvalidArgumentError(
                f"Unknown method: {method!r}. Choose one of {', '.join(self.METHODS)}."
            )
        return cast(MethodType, method)

    def _run(self) -> Data:
        """
        Pads the data and does the 'valid' convolution.

        Raises:
            DimensionMismatchError: if the output shape differs from the data shape.

        Returns:
            Data: the convolution result, reshaped to the input data shape.
        """

        dtype = self.dtype

        # SHAPEs common dimensions
        ndim = max(self._data.ndim, self._kernel.ndim)
        data = self._data.reshape(self._data.shape + (1,) * (ndim - self._data.ndim))
        kernel = self._kernel.reshape(self._kernel.shape + (1,) * (ndim - self._kernel.ndim))

        if data.size == 0:
            # EMPTY input
            return cast(Data, np.empty(self._data.shape, dtype=dtype))

        # PAD data
        self._padding = Padding(
            data=data.astype(dtype, copy=False),
            kernel=kernel.shape,
            config=self._config,
        )

        # CONVOLUTION valid
        kernel = kernel.astype(dtype, copy=False)
        if not self._flip_kernel: kernel = np.flip(kernel)
        result = convolve(self._padding.padded, kernel, mode='valid', method=self._method)
        logger.debug(
            "Convolved %s data of shape %s with kernel of shape %s (method=%s).",
            dtype, self._data.shape, self._kernel.shape, self._method,
        )

        if result.shape != data.shape:
            raise DimensionMismatchError(
                f"The convolution output shape {result.shape} differs from the data shape "
                f"{data.shape}."
            )
        return cast(Data, result.astype(dtype, copy=False).reshape(self._data.shape))


def convolve_same(
        array: npt.ArrayLike,
        kernel: npt.ArrayLike,
        pad_mode: PadMode = 'constant',
        fill_value: Any = 0,
        *,
        flip_kernel: bool = False,
        method: MethodType = 'direct',
        threads: int | None = None,
    ) -> np.ndarray:
    """
    To convolve an n-dimensional array with a kernel after padding it, so that the result has the
    same shape as the array.
    Equivalent to padding the array by '(kernel_extent - 1) // 2' before and the remaining
    'kernel_extent - 1' part after on each axis, then keeping the 'valid' part of the convolution.

    Args:
        array (npt.ArrayLike): the n-dimensional numeric array to convolve.
        kernel (npt.ArrayLike): the numeric kernel. Missing dimensions are treated as length 1.
        pad_mode (PadMode, optional): the padding method, one of 'constant', 'replicate',
            'symmetric' or 'circular'. Defaults to 'constant'.
        fill_value (Any, optional): the padding value when 'pad_mode' is 'constant' (NaN is
            allowed). Defaults to 0.
        flip_kernel (bool, optional): if True, the kernel is flipped (true convolution) instead of
            being applied as is (cross-correlation). Defaults to False.
        method (MethodType, optional): the scipy.signal computation method. Defaults to 'direct'.
        threads (int | None, optional): the number of threads to use (process-wide thread pool
            limit while the call runs). If None, doesn't change the default behaviour. Defaults to
            None.

    Raises:
        InvalidArgumentError: if the padding mode, the fill value or the inputs are not valid.

    Returns:
        np.ndarray: the convolution result with the same shape as 'array'.

    Example:
        >>> convolve_same([1, 2, 3, 4], [1, 0, 0], pad_mode='circular')
        array([4, 1, 2, 3])
    """

    return Convolution(
        data=array,
        kernel=kernel,
        config=PaddingConfig(pad_mode=pad_mode, fill_value=fill_value),
        flip_kernel=flip_kernel,
        method=method,
        threads=threads,
    ).result
