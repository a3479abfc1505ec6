"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.

HashConfig class.
"""

import numbers
from dataclasses import dataclass

import numpy as np

from .errors import InvalidConfig

DEFAULT_DCT_SIZE = 32
DEFAULT_HASH_SIZE = 8
DEFAULT_THRESHOLD = 10


def is_integer(value) -> bool:
    """True for Python and numpy integers, False for bools."""
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


@dataclass(frozen=True)
class HashConfig:
    """
    Parameters of the perceptual hash pipeline.

    Hashes can only be compared meaningfully when both were produced with the
    same ``dct_size`` and ``hash_size``.

    :param dct_size: Side of the intensity and DCT coefficient matrices (N)
    :type dct_size: int
    :param hash_size: Side of the low-frequency block kept for the hash
    :type hash_size: int
    :param threshold: Maximum Hamming distance at which two images are the same
    :type threshold: int
    """
    dct_size: int = DEFAULT_DCT_SIZE
    hash_size: int = DEFAULT_HASH_SIZE
    threshold: int = DEFAULT_THRESHOLD

    def __post_init__(self):
        for name in ('dct_size', 'hash_size', 'threshold'):
            value = getattr(self, name)
            if not is_integer(value):
                raise InvalidConfig(f'{name} must be an integer, got {value!r}')
            object.__setattr__(self, name, int(value))
        if self.dct_size < 2:
            raise InvalidConfig(f'dct_size must be at least 2, got {self.dct_size}')
        if not 1 <= self.hash_size < self.dct_size:
            raise InvalidConfig(
                f'hash_size must be between 1 and dct_size - 1 ({self.dct_size - 1}), got {self.hash_size}'
            )
        if self.threshold < 0:
            raise InvalidConfig(f'threshold must be non-negative, got {self.threshold}')

    @property
    def bit_count(self) -> int:
        """Number of bits in every hash produced under this configuration."""
        return self.hash_size * self.hash_size
