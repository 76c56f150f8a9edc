"""
Argument parsing for the CLI interface.

Provides functions to create and configure the argument parser for the
imgcollide command-line interface.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from ..config import EXPORT_FORMATS


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Options left unset (None) fall back to the user configuration.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='imgcollide',
        description='Find images whose perceptual fingerprints collide',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s /path/to/photos
      Report collisions with a 10x10 DCT fingerprint

  %(prog)s /path/to/photos -r 16
      Finer grid, fewer false positives

  %(prog)s /path/to/photos --no-dct
      Compare spatial luminance directly

  %(prog)s /path/to/photos --export results.json --export-format json
      Export results for external review
        """
    )

    parser.add_argument(
        'path',
        type=Path,
        help='Directory containing the images (not scanned recursively)'
    )

    parser.add_argument(
        '--no-dct',
        action='store_true',
        default=None,
        help='Deactivate the DCT pre-step'
    )

    parser.add_argument(
        '-r', '--resolution',
        type=int,
        default=None,
        help='Override fingerprint resolution (default 10)'
    )

    parser.add_argument(
        '-w', '--workers',
        type=int,
        default=None,
        help='Number of parallel workers'
    )

    parser.add_argument(
        '-e', '--export',
        type=Path,
        help='Export results to file'
    )

    parser.add_argument(
        '--export-format',
        choices=list(EXPORT_FORMATS),
        default='txt',
        help='Export format. Default: txt'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose output'
    )

    parser.add_argument(
        '--no-progress',
        action='store_true',
        help='Disable progress bars (useful for piping output)'
    )

    return parser


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: List of argument strings (default: sys.argv)

    Returns:
        Parsed arguments as Namespace object

    Examples:
        >>> args = parse_arguments(['/path/to/photos', '-r', '16'])
        >>> args.resolution
        16
    """
    parser = create_parser()
    return parser.parse_args(argv)


__all__ = [
    'create_parser',
    'parse_arguments',
]
