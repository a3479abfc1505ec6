"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.
"""

import sys

from imgcmp.cli import main

if __name__ == '__main__':
    sys.exit(main())
