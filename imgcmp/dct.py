"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.

Orthonormal two dimensional DCT-II.

Three implementations produce the same coefficients up to floating point
rounding:

* ``matrix`` - separable product ``C @ X @ C.T`` with a precomputed basis,
* ``naive`` - direct quadruple sum, O(N^4), used as a reference,
* ``opencv`` - ``cv2.dct``, the fast path, even sizes only.

Summation order differs between them, so a coefficient lying within rounding
error of the hash median can in rare cases end up on a different side of it.
This is accepted; it does not happen for images with actual structure.
"""

from functools import lru_cache

import cv2
import numpy as np

METHODS = ('matrix', 'naive', 'opencv')


@lru_cache(maxsize=16)
def dct_basis(size: int) -> np.ndarray:
    """
    Orthonormal DCT-II basis of the given size.

    Row ``k`` holds the ``k``-th cosine sampled at the ``size`` pixel centres:
    ``C[k, n] = a(k) * cos(pi * (2n + 1) * k / (2 * size))`` with
    ``a(0) = sqrt(1 / size)`` and ``a(k) = sqrt(2 / size)`` otherwise.
    The returned array is shared between callers and therefore read-only.
    """
    if size < 1:
        raise ValueError(f'DCT size must be positive, got {size}')
    k = np.arange(size, dtype=np.float64).reshape(-1, 1)
    n = np.arange(size, dtype=np.float64).reshape(1, -1)
    basis = np.cos(np.pi * (2.0 * n + 1.0) * k / (2.0 * size))
    basis[0, :] *= np.sqrt(1.0 / size)
    basis[1:, :] *= np.sqrt(2.0 / size)
    basis.setflags(write=False)
    return basis


def _check_square(matrix) -> np.ndarray:
    array = np.asarray(matrix, dtype=np.float64)
    if array.ndim != 2 or array.shape[0] != array.shape[1] or array.shape[0] == 0:
        raise ValueError(f'DCT input must be a non-empty square matrix, got shape {array.shape}')
    if not np.all(np.isfinite(array)):
        raise ValueError('DCT input contains NaN or infinite values')
    return array


def _dct2_matrix(array: np.ndarray) -> np.ndarray:
    basis = dct_basis(array.shape[0])
    return basis @ array @ basis.T


def _dct2_naive(array: np.ndarray) -> np.ndarray:
    size = array.shape[0]
    basis = dct_basis(size)
    coefficients = np.empty((size, size), dtype=np.float64)
    for u in range(size):
        for v in range(size):
            total = 0.0
            for x in range(size):
                for y in range(size):
                    total += basis[u, x] * basis[v, y] * array[x, y]
            coefficients[u, v] = total
    return coefficients


def _dct2_opencv(array: np.ndarray) -> np.ndarray:
    if array.shape[0] % 2:
        raise ValueError(f'OpenCV DCT supports even sizes only, got {array.shape[0]}')
    return cv2.dct(np.ascontiguousarray(array))


def dct2(matrix, method: str = 'matrix') -> np.ndarray:
    """
    Compute the orthonormal 2D DCT-II of a square matrix.

    Coefficient ``[0, 0]`` is the DC term, equal to ``sum(matrix) / N``.
    Row index is vertical frequency, column index horizontal frequency.

    :param matrix: Square real matrix
    :param method: One of ``matrix``, ``naive`` or ``opencv``
    :return: New float64 matrix of the same shape
    """
    array = _check_square(matrix)
    if method == 'matrix':
        return _dct2_matrix(array)
    if method == 'naive':
        return _dct2_naive(array)
    if method == 'opencv':
        return _dct2_opencv(array)
    raise ValueError(f'Unknown DCT method: {method!r}, expected one of {METHODS}')


def idct2(coefficients) -> np.ndarray:
    """Inverse of :func:`dct2`."""
    array = _check_square(coefficients)
    basis = dct_basis(array.shape[0])
    return basis.T @ array @ basis
