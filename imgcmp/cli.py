"""
Copyright (c) 2025 Piotr Gawron (dev@gawron.biz)
This file is licensed under the MIT License.
For details, see the LICENSE file in the project root.

Command line interface.
"""

import argparse
import json
import sys
from dataclasses import asdict
from typing import List, Optional

from .config import DEFAULT_DCT_SIZE, DEFAULT_HASH_SIZE, DEFAULT_THRESHOLD, HashConfig
from .errors import ImageLoadError, InvalidConfig, InvalidImage
from .imgcmp import ImageMatch
from .pipeline import compare, hash_file


def _add_config_arguments(parser: argparse.ArgumentParser):
    parser.add_argument('-t', '--threshold', type=int, default=DEFAULT_THRESHOLD,
                        help=f'Largest Hamming distance still reported as the same picture '
                             f'(default: {DEFAULT_THRESHOLD})')
    parser.add_argument('--dct-size', type=int, default=DEFAULT_DCT_SIZE,
                        help=f'Side of the DCT matrix (default: {DEFAULT_DCT_SIZE})')
    parser.add_argument('--hash-size', type=int, default=DEFAULT_HASH_SIZE,
                        help=f'Side of the low-frequency block, hash has hash-size^2 bits '
                             f'(default: {DEFAULT_HASH_SIZE})')


def _config_from_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> HashConfig:
    try:
        return HashConfig(dct_size=args.dct_size, hash_size=args.hash_size, threshold=args.threshold)
    except InvalidConfig as e:
        return parser.error(str(e))


def main(argv: Optional[List[str]] = None) -> int:
    """Compare two image files. Returns the process exit code."""
    parser = argparse.ArgumentParser(
        prog='imgcmp',
        description='Tell whether two images show the same picture using perceptual hashing.'
    )
    parser.add_argument('image1', help='Path to the first image')
    parser.add_argument('image2', help='Path to the second image')
    parser.add_argument('--show-hashes', action='store_true', help='Print both hashes in hex')
    _add_config_arguments(parser)
    args = parser.parse_args(argv)
    config = _config_from_args(parser, args)

    try:
        hash1 = hash_file(args.image1, config)
        hash2 = hash_file(args.image2, config)
    except (ImageLoadError, InvalidImage) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    result = compare(hash1, hash2, config.threshold)
    if args.show_hashes:
        print(f'{args.image1}: {hash1.to_hex()}')
        print(f'{args.image2}: {hash2.to_hex()}')

    if result.is_same:
        print('Pictures are the same')
    else:
        print('Pictures are different')
    print(f'Distance: {result.distance} / {result.bit_count} (threshold {result.threshold})')
    return 0


def scan_main(argv: Optional[List[str]] = None) -> int:
    """Find similar images in a directory and print them as JSON."""
    parser = argparse.ArgumentParser(
        prog='imgcmp-scan',
        description='Find near-duplicate images in a directory.'
    )
    parser.add_argument('directory', help='Directory to scan')
    parser.add_argument('-r', '--recursive', action='store_true', help='Scan subdirectories too')
    parser.add_argument('-j', '--processes', type=int, default=0,
                        help='Number of worker processes (default: 0 = auto)')
    _add_config_arguments(parser)
    args = parser.parse_args(argv)
    config = _config_from_args(parser, args)

    try:
        image_match = ImageMatch(args.directory, recursive=args.recursive,
                                 n_processes=args.processes, config=config)
        results = image_match.run()
    except OSError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    similar = sorted((r for r in results if r.is_similar), key=lambda r: r.distance)
    print(json.dumps([asdict(r) for r in similar], indent=2))
    return 0
