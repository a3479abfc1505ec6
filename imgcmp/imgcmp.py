"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.

ImageMatch main class.
"""

import os
from dataclasses import dataclass
from itertools import combinations
from multiprocessing import Pool, cpu_count
from typing import List, Optional, Tuple

from .comparator import compare
from .config import HashConfig
from .image import IMAGE_EXTENSIONS, load_image
from .perceptual_hasher import PerceptualHash
from .pipeline import compute_hash


@dataclass
class ImageHash:
    """Data class to store image hash information."""
    file_path: str
    resolution: Tuple[int, int]
    channels: int
    perceptual_hash: PerceptualHash


@dataclass
class SimilarityResult:
    """Data class to store similarity comparison results."""
    file1: str
    file2: str
    distance: int
    similarity_score: float
    is_similar: bool


class ImageMatch:  # pylint: disable=too-few-public-methods
    """
    A class for finding near-duplicate images using perceptual hashing.

    This class hashes every image file in a directory and compares all pairs
    of hashes. Images that differ only by resizing, recompression or small
    exposure changes end up within the distance threshold of each other.

    :param directory: Path to the directory containing image files
    :type directory: str
    :param recursive: Whether to search for images recursively in subdirectories
    :type recursive: bool
    :param image_extensions: Tuple of supported image file extensions
    :type image_extensions: tuple
    :param n_processes: Number of processes to use for parallel processing (0 = auto)
    :type n_processes: int
    :param config: Hash configuration shared by all images
    :type config: HashConfig
    """

    def __init__(
            self,
            directory: str,
            recursive: bool = False,
            image_extensions: tuple = IMAGE_EXTENSIONS,
            n_processes: int = 0,
            config: Optional[HashConfig] = None,
    ):
        self.directory = directory
        self.recursive = recursive
        self.image_extensions = image_extensions
        self.n_processes = n_processes
        if n_processes == 0 or n_processes > cpu_count():
            self.n_processes = cpu_count() - 1 if cpu_count() > 1 else 1
        self.config = config or HashConfig()

        self.files = None
        self.image_hashes: List[ImageHash] = []

    def run(self) -> List[SimilarityResult]:
        """
        Execute the complete image similarity analysis workflow.

        This method orchestrates the entire process:
        1. Finds all image files in the specified directory
        2. Hashes each image
        3. Compares all image pairs
        4. Returns similarity results

        :returns: List of similarity results, one per image pair
        :rtype: List[SimilarityResult]
        """
        self._find_images(self.directory)

        if not self.files:
            print('No image files found.')
            return []

        print(f'Found {len(self.files)} image files')
        print('Processing image files:')

        if self.n_processes > 1:
            self._process_images_parallel()
        else:
            self._process_images_sequential()

        print(f'Processed {len(self.image_hashes)} images successfully')

        print('Comparing images for similarities...')
        similarities = self._compare_images()

        similar_images = [s for s in similarities if s.is_similar]
        print(f'Found {len(similar_images)} similar image pairs')

        return similarities

    def _find_images(self, directory: str):
        """
        Find all image files in the specified directory.

        Updates the self.files attribute with the sorted list of found image
        file paths. Extensions are matched case-insensitively.

        :param directory: Path to the directory to search for image files
        :type directory: str
        """
        if self.recursive:
            files = []
            for root, _, fs in os.walk(directory, followlinks=True):
                for file in fs:
                    file = os.path.join(root, file)
                    if os.path.isfile(file) and self._is_image(file):
                        files.append(file)
        else:
            files = [
                os.path.abspath(entry.path)
                for entry in os.scandir(directory)
                if entry.is_file() and self._is_image(entry.name)
            ]
        self.files = sorted(files)

    def _is_image(self, file: str) -> bool:
        return os.path.splitext(file)[1].lower() in self.image_extensions

    def _process_images_sequential(self):
        """Process images sequentially to extract perceptual hashes."""
        for i, image_path in enumerate(self.files):
            print(f'Processing {i+1}/{len(self.files)}: {os.path.basename(image_path)}')
            image_hash = self._process_image_worker(image_path)
            if image_hash:
                self.image_hashes.append(image_hash)

    def _process_images_parallel(self):
        """Process images in parallel using multiprocessing."""
        print(f'Using {self.n_processes} processes for parallel processing')

        with Pool(processes=self.n_processes) as pool:
            results = pool.map(self._process_image_worker, self.files)
        self.image_hashes = [result for result in results if result is not None]

    def _compare_images(self) -> List[SimilarityResult]:
        """
        Compare all image pairs.

        :return: List of similarity results for all image pairs
        """
        return [self._compare_image_pair(image1, image2) for image1, image2 in combinations(self.image_hashes, 2)]

    def _compare_image_pair(self, image1: ImageHash, image2: ImageHash) -> SimilarityResult:
        result = compare(image1.perceptual_hash, image2.perceptual_hash, self.config.threshold)
        return SimilarityResult(
            file1=image1.file_path,
            file2=image2.file_path,
            distance=result.distance,
            similarity_score=result.similarity_score,
            is_similar=result.is_same,
        )

    def _process_image_worker(self, image_path: str) -> Optional[ImageHash]:
        """
        Worker function to process a single image file.

        :param image_path: Path to the image file
        :return: ImageHash object or None if processing failed
        """
        try:
            pixels = load_image(image_path)
            height, width = pixels.shape[:2]
            channels = pixels.shape[2] if pixels.ndim == 3 else 1
            return ImageHash(
                file_path=image_path,
                resolution=(width, height),
                channels=channels,
                perceptual_hash=compute_hash(pixels, self.config),
            )
        except Exception as e:  # pylint: disable=broad-exception-caught
            print(f'Error processing image {image_path}: {str(e)}')
            return None
