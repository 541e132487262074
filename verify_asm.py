#!/usr/bin/env python3
"""
Verify that a hand-written SIMD assembly file only uses the whitelisted
vocabulary of its architecture and brackets every labeled block with the
critical macros.

    verify_asm.py --x86_64 prediction-x86_64-avx.asm
    verify_asm.py --arm prediction-arm-neon.asm
"""
import argparse
import logging
import sys
from pathlib import Path

from simdverify.core import VerifierConfig, available_profiles, get_profile, verify_file
from simdverify.core.pipeline import DEFAULT_SENTINEL
from simdverify.utils import term
from simdverify.utils.colors import Colors
from simdverify.utils.errors import ProfileError, UsageError


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog='verify_asm.py',
                             description='Static whitelist verifier for hand-written SIMD assembly')
    parser.add_argument('input', nargs='?', help='Assembly source file to verify')
    arch = parser.add_mutually_exclusive_group()
    arch.add_argument('--x86_64', dest='arch', action='store_const', const='x86_64',
                      help='Verify x86_64 (NASM, SSE/AVX) assembly')
    arch.add_argument('--arm', dest='arch', action='store_const', const='arm',
                      help='Verify ARM (GNU as, NEON) assembly')
    parser.add_argument('--sentinel', default=DEFAULT_SENTINEL,
                        help=f"Marker line that starts the verified region (default: {DEFAULT_SENTINEL})")
    parser.add_argument('--show-profile', action='store_true',
                        help='Print the allowed vocabulary of the selected architecture and exit')
    parser.add_argument('--minimal', action='store_true', help='Compact, unstyled output')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def _usage_error(parser: argparse.ArgumentParser, message: str) -> int:
    parser.print_usage(sys.stderr)
    term.print_error(message)
    return 1


def main(argv=None):
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        return _usage_error(parser, e.message)

    if args.minimal:
        Colors.MINIMAL = True
    Colors.VERBOSE = args.verbose
    config = VerifierConfig(sentinel=args.sentinel, verbose=args.verbose)
    logging.basicConfig(level=logging.DEBUG if config.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        profile = get_profile(args.arch)
    except ProfileError as e:
        return _usage_error(parser, f"select one architecture of: {', '.join(available_profiles())} ({e.message})")

    if args.show_profile:
        term.print_profile(profile)
        return 0

    if not args.input:
        return _usage_error(parser, "missing input file")

    input_path = Path(args.input)
    if not input_path.is_file():
        term.print_error(f"File not found: {input_path}")
        return 2

    term.print_info(f"Verifying {input_path} ({profile.name})")
    result = verify_file(input_path, profile, config)

    if result.error_count > 0:
        term.print_summary(result.error_count)
        return 1

    term.print_info(f"{input_path}: {result.lines_scanned} line(s) verified")
    return 0


if __name__ == '__main__':
    sys.exit(main())
