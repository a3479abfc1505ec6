"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.

Image file decoding.
"""

import cv2
import numpy as np

from .errors import ImageLoadError

IMAGE_EXTENSIONS = ('.png', '.jpg', '.jpeg', '.bmp', '.tif', '.tiff', '.webp', '.ppm', '.pgm')


def load_image(path: str) -> np.ndarray:
    """
    Read an image file into a pixel buffer.

    Gray images come back as ``(H, W)``, color images as ``(H, W, 3)`` in RGB
    order and images with transparency as ``(H, W, 4)`` in RGBA order. The
    sample dtype of the file is kept (8 or 16 bit).

    :param path: Path to the image file
    :return: Decoded pixel buffer
    :raises ImageLoadError: File is missing, unreadable or not a supported image
    """
    try:
        data = np.fromfile(path, dtype=np.uint8)
    except OSError as e:
        raise ImageLoadError(f'Could not read image {path}: {e}') from e

    if data.size == 0:
        raise ImageLoadError(f'Could not decode image {path}: file is empty')

    # imdecode instead of imread, so that non-ASCII paths work everywhere
    image = cv2.imdecode(data, cv2.IMREAD_UNCHANGED)
    if image is None:
        raise ImageLoadError(f'Could not decode image {path}: unsupported format')

    if image.ndim == 3 and image.shape[2] == 3:
        image = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
    elif image.ndim == 3 and image.shape[2] == 4:
        image = cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)
    return image
