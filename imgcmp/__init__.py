"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.
"""

from imgcmp.comparator import ComparisonResult, Verdict, hamming_distance, similarity_score  # noqa: F401
from imgcmp.config import HashConfig  # noqa: F401
from imgcmp.errors import ConfigMismatch, ImageLoadError, ImgCmpError, InvalidConfig, InvalidImage  # noqa: F401
from imgcmp.image import load_image  # noqa: F401
from imgcmp.imgcmp import ImageHash, ImageMatch, SimilarityResult  # noqa: F401
from imgcmp.perceptual_hasher import PerceptualHash, PerceptualHasher  # noqa: F401
from imgcmp.pipeline import compare, compare_images, compute_hash, hash_file  # noqa: F401
