"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.

Hash comparison.
"""

from dataclasses import dataclass
from enum import Enum

from .config import DEFAULT_THRESHOLD, is_integer
from .errors import InvalidConfig
from .perceptual_hasher import PerceptualHash, PerceptualHasher


class Verdict(Enum):
    """Outcome of a hash comparison."""
    SAME = 'same'
    DIFFERENT = 'different'


@dataclass(frozen=True)
class ComparisonResult:
    """Data class to store the result of comparing two hashes."""
    distance: int
    threshold: int
    bit_count: int
    verdict: Verdict

    @property
    def is_same(self) -> bool:
        return self.verdict is Verdict.SAME

    @property
    def similarity_score(self) -> float:
        """1.0 for identical hashes, 0.0 when every bit differs."""
        return 1.0 - self.distance / self.bit_count


def hamming_distance(hash1: PerceptualHash, hash2: PerceptualHash) -> int:
    """
    Count the bit positions at which two hashes differ.

    :raises ConfigMismatch: Hashes have different lengths, i.e. they were
        produced with different configurations
    """
    return PerceptualHasher.hamming_distance(hash1, hash2)


def similarity_score(hash1: PerceptualHash, hash2: PerceptualHash) -> float:
    """
    Calculate similarity score between two hashes (0.0 to 1.0).
    1.0 means identical, 0.0 means completely different.
    """
    return 1.0 - hamming_distance(hash1, hash2) / hash1.bit_count


def compare(hash1: PerceptualHash, hash2: PerceptualHash, threshold: int = DEFAULT_THRESHOLD) -> ComparisonResult:
    """
    Decide whether two hashes belong to the same picture.

    :param hash1: First hash
    :param hash2: Second hash, same length as the first
    :param threshold: Largest distance still reported as the same picture
    :return: Distance and verdict
    :raises ConfigMismatch: Hashes have different lengths
    :raises InvalidConfig: Threshold is negative or not an integer
    """
    if not is_integer(threshold) or threshold < 0:
        raise InvalidConfig(f'threshold must be a non-negative integer, got {threshold!r}')
    threshold = int(threshold)

    distance = hamming_distance(hash1, hash2)
    verdict = Verdict.SAME if distance <= threshold else Verdict.DIFFERENT
    return ComparisonResult(
        distance=distance,
        threshold=threshold,
        bit_count=hash1.bit_count,
        verdict=verdict,
    )
