"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.
"""

import os
import shutil
import tempfile

import cv2
import pytest

from imgcmp.image import IMAGE_EXTENSIONS
from sample_images import make_photo, to_bgr


@pytest.fixture
def test_setup():
    """Set up a directory with one dummy file per supported image extension."""
    test_dir = tempfile.mkdtemp()
    image_files = [f'test{i}{ext}' for i, ext in enumerate(IMAGE_EXTENSIONS, 1)]
    # Extensions are matched case-insensitively
    image_files.append(f'upper{IMAGE_EXTENSIONS[0].upper()}')
    other_files = ['not_image.txt', 'archive.png.zip', 'noextension']

    for filename in image_files + other_files:
        with open(os.path.join(test_dir, filename), 'w') as f:
            f.write('dummy content')

    sub_dir = os.path.join(test_dir, 'subdir')
    os.makedirs(sub_dir)

    sub_image_files = [f'sub{i}{ext}' for i, ext in enumerate(IMAGE_EXTENSIONS[:2], 1)]
    for filename in sub_image_files + ['sub_notes.txt']:
        with open(os.path.join(sub_dir, filename), 'w') as f:
            f.write('dummy content')

    yield {
        'test_dir': test_dir,
        'sub_dir': sub_dir,
        'image_files': image_files,
        'sub_image_files': sub_image_files
    }

    shutil.rmtree(test_dir)


@pytest.fixture
def photo_dir(tmp_path):
    """
    Directory with two versions of one photo, an unrelated photo and a
    corrupt file.
    """
    photo = make_photo(1)
    small = cv2.resize(photo, (160, 120), interpolation=cv2.INTER_AREA)

    cv2.imwrite(str(tmp_path / 'photo.png'), to_bgr(photo))
    cv2.imwrite(str(tmp_path / 'photo_small.jpg'), to_bgr(small), [cv2.IMWRITE_JPEG_QUALITY, 85])
    cv2.imwrite(str(tmp_path / 'other.png'), to_bgr(make_photo(2)))
    (tmp_path / 'broken.png').write_bytes(b'not really a png')

    return tmp_path
