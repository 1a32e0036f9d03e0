#!/usr/bin/env python3
"""
passphrasekit CLI
=================
Command-line interface for passphrase generation.

Usage:
    passphrasekit generate -n 5 --strength strong
    passphrasekit generate --phrase my_phrase.yaml --no-spaces
    passphrasekit combinations --strength random
    passphrasekit strengths
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from passphrasekit import __version__
from passphrasekit.config import get_config, get_strength, list_strengths
from passphrasekit.errors import PassphraseError
from passphrasekit.generator import ReadablePassphraseGenerator
from passphrasekit.phrase.description import load_phrase_description
from passphrasekit.phrase.strength import PhraseStrength
from passphrasekit.randomness import RANDOM_PROFILES, get_random_source
from passphrasekit.settings import get_setting, resolve_path

# =============================================================================
# Constants
# =============================================================================

STRENGTHS = [s.value for s in PhraseStrength]

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def phrase(self, text: str):
        # Phrases are the payload and print even in quiet mode.
        print(text)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)


def configure_logging(verbose: bool = False):
    level_name = "DEBUG" if verbose else str(get_setting("logging.level", "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=get_setting("logging.format", "%(levelname)s %(name)s: %(message)s"),
    )


def build_generator(args, config) -> ReadablePassphraseGenerator:
    """Create a generator with the requested random profile and dictionary loaded."""
    profile = getattr(args, 'random', None) or config.random_profile
    gen = ReadablePassphraseGenerator(get_random_source(profile))

    if getattr(args, 'dict', None):
        # Like --phrase, relative to the working directory.
        dict_path = resolve_path(args.dict, base=Path.cwd())
    elif config.dictionary_path:
        dict_path = resolve_path(config.dictionary_path)
    else:
        dict_path = None
    if dict_path and not dict_path.exists():
        raise FileNotFoundError(f"Unable to find dictionary file '{dict_path}'")
    gen.load_dictionary(arguments={'file': str(dict_path)} if dict_path else None)
    return gen


def resolve_phrase(args, config):
    """Return the strength or custom clause list requested on the command line."""
    if getattr(args, 'phrase', None):
        return load_phrase_description(args.phrase)
    strength = get_strength(args.strength) if args.strength else config.strength
    if strength == PhraseStrength.CUSTOM:
        raise ValueError("Strength 'custom' needs a phrase description (--phrase FILE)")
    return strength


def describe_phrase(args, phrase) -> str:
    if isinstance(phrase, PhraseStrength):
        return f"strength '{phrase.value}'"
    return f"phrase description in '{Path(args.phrase).name}'"


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate passphrases."""
    config = get_config()
    phrase = resolve_phrase(args, config)
    include_spaces = config.include_spaces if args.spaces is None else args.spaces
    count = args.count if args.count is not None else config.count

    out.print("Readable Passphrase Generator")
    out.print(f"Generating {count:,} phrase(s) of {describe_phrase(args, phrase)}...")

    started = time.perf_counter()
    gen = build_generator(args, config)
    load_ms = (time.perf_counter() - started) * 1000

    if not out.quiet:
        combinations = gen.calculate_combinations(phrase)
        out.print(f"Dictionary contains {gen.dictionary.count:,} words (loaded in {load_ms:.2f}ms)")
        out.print(
            f"Total combinations ~{combinations.optional_average:,.0f} representing "
            f"{combinations.optional_average_as_entropy_bits:.2f} bits of entropy"
        )
        out.print()

    started = time.perf_counter()
    for _ in range(count):
        out.phrase(gen.generate(phrase, include_spaces=include_spaces))
    gen_ms = (time.perf_counter() - started) * 1000

    out.print()
    out.print(f"Generated {count} phrase(s) in {gen_ms:.2f}ms.")
    return 0


def cmd_combinations(args, out: Output):
    """Show combination counts and entropy."""
    from passphrasekit.ui import render_combinations

    config = get_config()
    gen = build_generator(args, config)

    if args.phrase:
        rows = {Path(args.phrase).name: gen.calculate_combinations(load_phrase_description(args.phrase))}
    elif args.strength:
        strength = get_strength(args.strength)
        rows = {strength.value: gen.calculate_combinations(strength)}
    else:
        rows = {
            s.value: gen.calculate_combinations(s)
            for s in PhraseStrength if s != PhraseStrength.CUSTOM
        }

    if args.quiet:
        for name, comb in rows.items():
            print(f"{name}\t{comb.optional_average_as_entropy_bits:.2f}")
    else:
        render_combinations(rows)
    return 0


def cmd_strengths(args, out: Output):
    """List strength presets."""
    from passphrasekit.ui import render_strengths

    if args.quiet:
        for name in list_strengths():
            print(name)
    else:
        render_strengths(list_strengths())
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='passphrasekit',
        description='Readable passphrase generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  passphrasekit generate -n 5 -s strong
  passphrasekit generate --phrase phrase.yaml --no-spaces
  passphrasekit combinations
  passphrasekit strengths
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate passphrases')
    p.add_argument('-n', '--count', type=int, help='Number of phrases (default: 1)')
    p.add_argument('-s', '--strength', choices=STRENGTHS, help='Phrase strength (default: normal)')
    p.add_argument('-p', '--phrase', help='Custom phrase description file (YAML)')
    p.add_argument('-d', '--dict', help='Custom dictionary file (YAML)')
    p.add_argument('--random', choices=sorted(RANDOM_PROFILES), help='Random source profile')
    spaces = p.add_mutually_exclusive_group()
    spaces.add_argument('--spaces', dest='spaces', action='store_true', default=None,
                        help='Include spaces between words')
    spaces.add_argument('--no-spaces', dest='spaces', action='store_false',
                        help='Run words together')

    # --- combinations ---
    p = subparsers.add_parser('combinations', aliases=['comb', 'c'], help='Show combinations and entropy')
    p.add_argument('-s', '--strength', choices=[s for s in STRENGTHS if s != 'custom'],
                   help='Single strength (default: all)')
    p.add_argument('-p', '--phrase', help='Custom phrase description file (YAML)')
    p.add_argument('-d', '--dict', help='Custom dictionary file (YAML)')

    # --- strengths ---
    subparsers.add_parser('strengths', help='List phrase strengths')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args.verbose)

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'comb': 'combinations', 'c': 'combinations',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'generate': cmd_generate,
        'combinations': cmd_combinations,
        'strengths': cmd_strengths,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except (PassphraseError, ValueError, OSError) as e:
            out.error(str(e))
            if args.verbose:
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
