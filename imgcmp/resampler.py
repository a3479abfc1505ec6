"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.

Grayscale resampler: pixel buffer to a square intensity matrix.
"""

import cv2
import numpy as np

from .errors import InvalidImage

# ITU-R BT.601 luma weights for R, G, B
LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float64)


def validate_pixels(pixels) -> np.ndarray:
    """
    Check that ``pixels`` is a usable pixel buffer and return it as float64.

    Accepted layouts are ``(H, W)``, ``(H, W, 1)``, ``(H, W, 3)`` (RGB) and
    ``(H, W, 4)`` (RGBA). The alpha channel is dropped.

    :param pixels: Pixel buffer
    :return: float64 array of shape ``(H, W)`` or ``(H, W, 3)``
    :raises InvalidImage: Buffer is empty, has an unsupported shape, channel
        count or dtype, or contains non-finite values
    """
    if pixels is None:
        raise InvalidImage('Pixel buffer is missing')

    try:
        array = np.asarray(pixels)
    except (TypeError, ValueError) as e:
        raise InvalidImage(f'Pixel buffer is not a rectangular array: {e}') from e

    if array.dtype == np.bool_ or not np.issubdtype(array.dtype, np.number) \
            or np.issubdtype(array.dtype, np.complexfloating):
        raise InvalidImage(f'Unsupported pixel dtype: {array.dtype}')
    if array.ndim not in (2, 3):
        raise InvalidImage(f'Unsupported pixel buffer shape: {array.shape}')

    height, width = array.shape[:2]
    if width == 0 or height == 0:
        raise InvalidImage(f'Pixel buffer has zero size: width={width}, height={height}')

    if array.ndim == 3:
        channels = array.shape[2]
        if channels == 1:
            array = array[:, :, 0]
        elif channels == 4:
            array = array[:, :, :3]
        elif channels != 3:
            raise InvalidImage(f'Unsupported channel count: {channels}')

    array = array.astype(np.float64)
    if not np.all(np.isfinite(array)):
        raise InvalidImage('Pixel buffer contains NaN or infinite values')
    return array


def _interpolation(source: int, target: int) -> int:
    """Area averaging when shrinking, bilinear when enlarging."""
    return cv2.INTER_AREA if target < source else cv2.INTER_LINEAR


def resize(array: np.ndarray, width: int, height: int) -> np.ndarray:
    """
    Resize a float64 plane (or stack of planes) to ``width x height``.

    Each axis is resized on its own so that a shrinking axis is always area
    averaged, even when the other axis grows.
    """
    source_height, source_width = array.shape[:2]
    array = np.ascontiguousarray(array)
    if source_width != width:
        array = cv2.resize(array, (width, source_height), interpolation=_interpolation(source_width, width))
    if source_height != height:
        array = cv2.resize(array, (width, height), interpolation=_interpolation(source_height, height))
    return array


def to_grayscale(array: np.ndarray) -> np.ndarray:
    """Apply the luma weights to an RGB array; gray arrays pass through."""
    if array.ndim == 2:
        return array
    return array @ LUMA_WEIGHTS


def to_intensity_matrix(pixels, size: int) -> np.ndarray:
    """
    Reduce a pixel buffer to a ``size x size`` matrix of luminance values.

    The image is resized first and converted to gray afterwards. No rounding
    is applied, values stay in the sample range of the input.

    :param pixels: Pixel buffer, see :func:`validate_pixels`
    :param size: Side of the output matrix
    :return: float64 array of shape ``(size, size)``
    :raises InvalidImage: Pixel buffer is not usable
    """
    array = validate_pixels(pixels)
    resized = resize(array, size, size)
    return np.array(to_grayscale(resized), dtype=np.float64)
