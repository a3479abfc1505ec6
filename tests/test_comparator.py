"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.

Hash comparator unit tests.
"""

import random

import numpy as np
import pytest

from imgcmp import ConfigMismatch, InvalidConfig, PerceptualHash, Verdict
from imgcmp.comparator import ComparisonResult, compare, hamming_distance, similarity_score


def random_hash(rng: random.Random, bit_count: int = 64) -> PerceptualHash:
    return PerceptualHash(rng.getrandbits(bit_count), bit_count)


class TestHammingDistance:
    """Test cases for hamming_distance and similarity_score."""

    def test_identical(self):
        assert hamming_distance(PerceptualHash(12345, 64), PerceptualHash(12345, 64)) == 0

    def test_known_distance(self):
        assert hamming_distance(PerceptualHash(0b1010, 4), PerceptualHash(0b0110, 4)) == 2
        assert hamming_distance(PerceptualHash(0, 64), PerceptualHash((1 << 64) - 1, 64)) == 64

    def test_symmetric(self):
        rng = random.Random(5)
        for _ in range(200):
            a, b = random_hash(rng), random_hash(rng)
            assert hamming_distance(a, b) == hamming_distance(b, a)

    def test_different_lengths(self):
        """64 bit against 36 bit hash must fail instead of returning a distance."""
        with pytest.raises(ConfigMismatch):
            hamming_distance(PerceptualHash(0, 64), PerceptualHash(0, 36))
        with pytest.raises(ValueError):
            hamming_distance(PerceptualHash(0, 36), PerceptualHash(0, 64))

    def test_similarity_score(self):
        assert similarity_score(PerceptualHash(0b1010, 4), PerceptualHash(0b0110, 4)) == 0.5
        assert similarity_score(PerceptualHash(7, 64), PerceptualHash(7, 64)) == 1.0
        assert similarity_score(PerceptualHash(0, 4), PerceptualHash(15, 4)) == 0.0


class TestCompare:
    """Test cases for compare."""

    def test_result_fields(self):
        result = compare(PerceptualHash(0b1010, 4), PerceptualHash(0b0110, 4), threshold=3)
        assert result == ComparisonResult(distance=2, threshold=3, bit_count=4, verdict=Verdict.SAME)
        assert result.is_same is True
        assert result.similarity_score == 0.5

    def test_threshold_is_inclusive(self):
        a, b = PerceptualHash(0b1111, 4), PerceptualHash(0b0001, 4)
        assert compare(a, b, threshold=3).verdict is Verdict.SAME
        assert compare(a, b, threshold=2).verdict is Verdict.DIFFERENT
        assert compare(a, b, threshold=2).is_same is False

    def test_default_threshold(self):
        a = PerceptualHash(0, 64)
        assert compare(a, PerceptualHash((1 << 10) - 1, 64)).is_same
        assert not compare(a, PerceptualHash((1 << 11) - 1, 64)).is_same

    def test_self_identity(self):
        rng = random.Random(9)
        for _ in range(50):
            a = random_hash(rng)
            assert compare(a, a, threshold=0).verdict is Verdict.SAME

    def test_threshold_monotonic(self):
        rng = random.Random(13)
        for _ in range(50):
            a, b = random_hash(rng), random_hash(rng)
            verdicts = [compare(a, b, threshold=t).is_same for t in range(65)]
            first_same = verdicts.index(True)
            assert all(verdicts[first_same:])
            assert not any(verdicts[:first_same])

    def test_symmetric(self):
        rng = random.Random(17)
        for _ in range(50):
            a, b = random_hash(rng, 36), random_hash(rng, 36)
            assert compare(a, b, 10) == compare(b, a, 10)

    def test_mismatch(self):
        with pytest.raises(ConfigMismatch):
            compare(PerceptualHash(0, 64), PerceptualHash(0, 36), threshold=64)

    @pytest.mark.parametrize('threshold', [np.int64(5), np.int32(5), np.uint8(5), 5])
    def test_numpy_integer_threshold(self, threshold):
        a, b = PerceptualHash(0b11111, 64), PerceptualHash(0, 64)
        result = compare(a, b, threshold)
        assert result.is_same
        assert result.threshold == 5
        assert type(result.threshold) is int
        assert compare(a, b, np.int64(4)).verdict is Verdict.DIFFERENT

    @pytest.mark.parametrize('threshold', [-1, 1.5, True, '3', np.int64(-1), np.bool_(True), np.float64(5)])
    def test_invalid_threshold(self, threshold):
        with pytest.raises(InvalidConfig):
            compare(PerceptualHash(0, 4), PerceptualHash(0, 4), threshold=threshold)
