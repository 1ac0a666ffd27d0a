"""
To test the index of the k smallest values helper.
"""
from __future__ import annotations

# IMPORTs
import pytest

# IMPORTs alias
import numpy as np

# IMPORTs local
from ndconv import InvalidArgumentError, argmin



class TestArgmin:
    """
    To test argmin on vectors and matrices with known results.
    """

    @pytest.fixture(scope='class')
    def matrix(self) -> np.ndarray:
        return np.array([
            [3., 1., 2.],
            [0., 4., -1.],
        ])

    def test_minimum_index(self) -> None:

        index = argmin([3, 1, 2])
        assert index == 1
        assert isinstance(index, int)

    def test_k_smallest_ordered(self) -> None:

        indices = argmin([5., 3., 9., 1.], k=3)
        np.testing.assert_array_equal(indices, [3, 1, 0])

    def test_ties_keep_order(self) -> None:

        np.testing.assert_array_equal(argmin([3, 1, 2, 1], k=2), [1, 3])
        assert argmin([2, 0, 0]) == 1

    def test_nans_last(self) -> None:

        np.testing.assert_array_equal(argmin([np.nan, 2., 1.], k=3), [2, 1, 0])
        assert argmin([np.nan, 2., 1.]) == 2

    def test_k_larger_than_axis(self) -> None:

        np.testing.assert_array_equal(argmin([5, 4], k=5), [1, 0])

    def test_k_zero(self) -> None:

        assert argmin([5, 4], k=0).shape == (0,)#type:ignore

    def test_map_accessor(self) -> None:

        vectors = [[2, 1], [0, 5, 3], [7]]
        assert list(map(argmin, vectors)) == [1, 0, 0]

    def test_matrix_axes(self, matrix: np.ndarray) -> None:

        np.testing.assert_array_equal(argmin(matrix), [1, 2])
        np.testing.assert_array_equal(argmin(matrix, axis=0), [1, 0, 1])

    def test_matrix_k_keeps_axis(self, matrix: np.ndarray) -> None:

        indices = argmin(matrix, k=2, axis=0)
        np.testing.assert_array_equal(indices, [[1, 0, 1], [0, 1, 0]])

        indices = argmin(matrix, k=2)
        np.testing.assert_array_equal(indices, [[1, 2], [2, 0]])

    @pytest.mark.parametrize('k', [-1, 1.5, True, '2', None])
    def test_invalid_k(self, k) -> None:

        with pytest.raises(InvalidArgumentError):
            argmin([1, 2, 3], k=k)

    @pytest.mark.parametrize('values', [3., 'abc', ['a', 'b']])
    def test_invalid_values(self, values) -> None:

        with pytest.raises(InvalidArgumentError):
            argmin(values)

    def test_invalid_axis(self) -> None:

        with pytest.raises(InvalidArgumentError):
            argmin([1, 2, 3], axis=1)

    def test_empty(self) -> None:

        with pytest.raises(InvalidArgumentError):
            argmin([])
