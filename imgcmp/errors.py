"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.

Exceptions raised by imgcmp.
"""


class ImgCmpError(Exception):
    """Base class for all imgcmp errors."""


class InvalidImage(ImgCmpError, ValueError):
    """Pixel buffer is empty or structurally unusable."""


class ConfigMismatch(ImgCmpError, ValueError):
    """Two hashes of different length were compared."""


class InvalidConfig(ImgCmpError, ValueError):
    """Hash configuration or threshold is out of range."""


class ImageLoadError(ImgCmpError, OSError):
    """Image file could not be read or decoded."""
