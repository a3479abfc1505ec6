"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.

PerceptualHash value and PerceptualHasher class.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np

from .config import DEFAULT_HASH_SIZE
from .errors import ConfigMismatch
from .resampler import resize, to_grayscale, validate_pixels

# Coefficients smaller than this fraction of the largest one are treated as 0
ZERO_TOLERANCE = 1e-9


@dataclass(frozen=True)
class PerceptualHash:
    """
    Fixed-length bit sequence produced by the hash pipeline.

    The bits are packed into ``value`` with the first raster bit as the most
    significant bit, so ``to_hex`` and ``int(...)`` are portable
    representations as long as ``bit_count`` is known.
    """
    value: int
    bit_count: int

    def __post_init__(self):
        if self.bit_count < 1:
            raise ValueError(f'bit_count must be positive, got {self.bit_count}')
        if not 0 <= self.value < (1 << self.bit_count):
            raise ValueError(f'value {self.value} does not fit in {self.bit_count} bits')

    @classmethod
    def from_bits(cls, bits: Iterable) -> 'PerceptualHash':
        """Pack a sequence of truthy/falsy bits, first bit most significant."""
        value = 0
        count = 0
        for bit in bits:
            value = (value << 1) | (1 if bit else 0)
            count += 1
        return cls(value, count)

    @classmethod
    def from_binary_string(cls, text: str) -> 'PerceptualHash':
        """Parse a string of ``0`` and ``1`` characters."""
        if not text or any(c not in '01' for c in text):
            raise ValueError(f'Not a binary hash string: {text!r}')
        return cls(int(text, 2), len(text))

    @classmethod
    def from_hex(cls, text: str, bit_count: int = None) -> 'PerceptualHash':
        """
        Parse a hex string produced by :meth:`to_hex`.

        :param text: Hex digits, without prefix
        :param bit_count: Hash length; defaults to four bits per digit
        """
        if bit_count is None:
            bit_count = len(text) * 4
        if len(text) != (bit_count + 3) // 4:
            raise ValueError(f'{len(text)} hex digits do not match a {bit_count} bit hash')
        return cls(int(text, 16), bit_count)

    @property
    def bits(self) -> Tuple[int, ...]:
        """Bits in raster order."""
        return tuple((self.value >> shift) & 1 for shift in range(self.bit_count - 1, -1, -1))

    def to_binary_string(self) -> str:
        return format(self.value, f'0{self.bit_count}b')

    def to_hex(self) -> str:
        return format(self.value, f'0{(self.bit_count + 3) // 4}x')

    def __len__(self) -> int:
        return self.bit_count

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.to_hex()

    def __sub__(self, other: 'PerceptualHash') -> int:
        return PerceptualHasher.hamming_distance(self, other)


class PerceptualHasher:
    """
    Bit extraction for perceptual hashes.
    Quantizes low-frequency DCT coefficients against their median.
    """

    @staticmethod
    def low_frequency_block(coefficients: np.ndarray, hash_size: int) -> np.ndarray:
        """
        Top-left ``hash_size x hash_size`` block of a coefficient matrix.

        Values within rounding noise of zero are snapped to exactly zero.

        :param coefficients: Square DCT coefficient matrix
        :param hash_size: Side of the block, smaller than the matrix side
        :return: New float64 array
        """
        coefficients = np.asarray(coefficients, dtype=np.float64)
        if coefficients.ndim != 2 or coefficients.shape[0] != coefficients.shape[1]:
            raise ValueError(f'Coefficient matrix must be square, got shape {coefficients.shape}')
        if not 1 <= hash_size < coefficients.shape[0]:
            raise ValueError(
                f'hash_size must be between 1 and {coefficients.shape[0] - 1}, got {hash_size}'
            )

        block = coefficients[:hash_size, :hash_size].copy()
        scale = np.max(np.abs(coefficients))
        block[np.abs(block) < scale * ZERO_TOLERANCE] = 0.0
        return block

    @staticmethod
    def quantize(block: np.ndarray) -> np.ndarray:
        """
        One boolean per coefficient in row-major order.

        The DC term at ``[0, 0]`` only tracks overall brightness: it is left
        out of the median and its bit is always 0. A coefficient equal to the
        median gives 0.
        """
        flat = np.asarray(block, dtype=np.float64).flatten()
        ac = flat[1:]
        if ac.size == 0:
            return np.zeros(flat.shape, dtype=bool)
        median = np.median(ac)
        bits = flat > median
        bits[0] = False
        return bits

    @staticmethod
    def extract(coefficients: np.ndarray, hash_size: int = DEFAULT_HASH_SIZE) -> PerceptualHash:
        """
        Turn a DCT coefficient matrix into a perceptual hash.

        :param coefficients: Square DCT coefficient matrix
        :param hash_size: Side of the low-frequency block
        :return: Hash with ``hash_size ** 2`` bits
        """
        block = PerceptualHasher.low_frequency_block(coefficients, hash_size)
        return PerceptualHash.from_bits(PerceptualHasher.quantize(block))

    @staticmethod
    def dhash(pixels, hash_size: int = DEFAULT_HASH_SIZE) -> PerceptualHash:
        """
        Calculate difference hash (dHash) for a pixel buffer.

        Each bit tells whether a pixel is brighter than its left neighbour in
        a ``hash_size x (hash_size + 1)`` gray thumbnail.

        :param pixels: Pixel buffer
        :param hash_size: Size of the hash (default 8 for 64-bit hash)
        :return: Hash with ``hash_size ** 2`` bits
        """
        if hash_size < 1:
            raise ValueError(f'hash_size must be positive, got {hash_size}')
        resized = resize(validate_pixels(pixels), hash_size + 1, hash_size)
        gray = to_grayscale(resized)
        diff = gray[:, 1:] > gray[:, :-1]
        return PerceptualHash.from_bits(diff.flatten())

    @staticmethod
    def hamming_distance(hash1: PerceptualHash, hash2: PerceptualHash) -> int:
        """
        Count the bit positions at which two hashes differ.

        :raises ConfigMismatch: Hashes have different lengths, i.e. they were
            produced with different configurations
        """
        if hash1.bit_count != hash2.bit_count:
            raise ConfigMismatch(
                f'Cannot compare a {hash1.bit_count} bit hash with a {hash2.bit_count} bit hash'
            )
        return bin(hash1.value ^ hash2.value).count('1')
