"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.

Entry points of the hash pipeline.

``pixels -> intensity matrix -> DCT coefficients -> PerceptualHash`` and
``hash, hash -> ComparisonResult``. All functions are stateless and can be
called from several threads or processes at once.
"""

from typing import Optional

from . import comparator
from .comparator import ComparisonResult
from .config import HashConfig
from .dct import dct2
from .image import load_image
from .perceptual_hasher import PerceptualHash, PerceptualHasher
from .resampler import to_intensity_matrix

DEFAULT_CONFIG = HashConfig()


def compute_hash(pixels, config: Optional[HashConfig] = None) -> PerceptualHash:
    """
    Calculate the perceptual hash of a pixel buffer.

    :param pixels: Array of shape (H, W), (H, W, 1), (H, W, 3) RGB or (H, W, 4) RGBA
    :param config: Hash configuration, defaults to :data:`DEFAULT_CONFIG`
    :return: Hash with ``config.hash_size ** 2`` bits
    :raises InvalidImage: Pixel buffer is empty or unusable
    """
    config = config or DEFAULT_CONFIG
    intensity = to_intensity_matrix(pixels, config.dct_size)
    coefficients = dct2(intensity)
    return PerceptualHasher.extract(coefficients, config.hash_size)


def compare(hash1: PerceptualHash, hash2: PerceptualHash, threshold: Optional[int] = None) -> ComparisonResult:
    """
    Compare two hashes produced under the same configuration.

    :raises ConfigMismatch: Hashes have different lengths
    """
    if threshold is None:
        threshold = DEFAULT_CONFIG.threshold
    return comparator.compare(hash1, hash2, threshold)


def compare_images(left, right, config: Optional[HashConfig] = None) -> ComparisonResult:
    """Hash two pixel buffers with one configuration and compare them."""
    config = config or DEFAULT_CONFIG
    return compare(compute_hash(left, config), compute_hash(right, config), config.threshold)


def hash_file(path: str, config: Optional[HashConfig] = None) -> PerceptualHash:
    """
    Read an image file and calculate its perceptual hash.

    :raises ImageLoadError: File cannot be read or decoded
    :raises InvalidImage: Decoded image is unusable
    """
    return compute_hash(load_image(path), config)
