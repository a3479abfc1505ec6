"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.

Synthetic photographs for tests.
"""

import cv2
import numpy as np


def make_photo(seed: int, height: int = 240, width: int = 320) -> np.ndarray:
    """
    Smooth random RGB image with values between 20 and 200.

    Blurred noise has most of its energy in low frequencies, like a real
    photograph, and two different seeds share no content.
    """
    rng = np.random.default_rng(seed)
    noise = rng.random((height, width, 3)) * 255.0
    smooth = cv2.GaussianBlur(noise, (0, 0), 12)
    low, high = smooth.min(), smooth.max()
    return (20.0 + (smooth - low) / (high - low) * 180.0).astype(np.uint8)


def brighten(image: np.ndarray, offset: int) -> np.ndarray:
    """Add a constant to every sample, clamped to the uint8 range."""
    return np.clip(image.astype(np.int16) + offset, 0, 255).astype(np.uint8)


def to_bgr(image: np.ndarray) -> np.ndarray:
    return cv2.cvtColor(image, cv2.COLOR_RGB2BGR)
