#!/usr/bin/env python3
"""
Command-line interface for ErPun - "I hardly know her!" pun finder

Usage:
    python -m erpun.cli "my sweater is too warm"
    python -m erpun.cli --word lover
    python -m erpun.cli --file messages.txt
    python -m erpun.cli --interactive
"""

import argparse
import json
import logging
import os
import sys

from erpun import settings
from erpun.engine import HardlyKnowHerEngine
from erpun.lexicon import LexiconLoadError


def print_result(result):
    """Pretty print a message scan result."""
    print("\n" + "=" * 70)
    print(f"Message: {result.sentence}")
    print("=" * 70)

    if result.has_pun:
        print(f"\n✓ {result.word} -> {result.er_less_word}")
        print(f"  {result.reply}")
    else:
        print("\n✗ No puns detected.")

    print()


def print_resolution(resolution, verbose=False):
    """Pretty print a single-word lookup."""
    if resolution.er_less_word:
        print(f"{resolution.word} -> {resolution.er_less_word}")
    else:
        print(f"{resolution.word} -> no match")

    if verbose:
        print(f"  Candidates: {', '.join(resolution.candidates) or '(none)'}")


def interactive_mode(engine):
    """Run in interactive mode."""
    print("\nErPun - I hardly know her! (Interactive Mode)")
    print("Enter messages to scan. Type 'quit' or 'exit' to stop.\n")

    while True:
        try:
            message = input("Enter message: ").strip()

            if message.lower() in ('quit', 'exit', 'q'):
                print("Goodbye!")
                break

            if not message:
                continue

            print_result(engine.find_pun(message))

        except (KeyboardInterrupt, EOFError):
            print("\nGoodbye!")
            break


def build_parser():
    parser = argparse.ArgumentParser(
        prog='erpun',
        description="ErPun - find \"I hardly know her!\" puns",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        'sentence',
        nargs='?',
        help='Message to scan for puns'
    )

    parser.add_argument(
        '--word', '-w',
        help='Look up a single word'
    )

    parser.add_argument(
        '--file', '-f',
        help='File containing messages (one per line)'
    )

    parser.add_argument(
        '--interactive', '-i',
        action='store_true',
        help='Run in interactive mode'
    )

    parser.add_argument(
        '--pronunciations',
        help='Pronunciation lexicon (or set ERPUN_PRONUNCIATIONS env var)'
    )

    parser.add_argument(
        '--pos',
        help='Part-of-speech lexicon (or set ERPUN_PARTS_OF_SPEECH env var)'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output results as JSON'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Show verbose output'
    )

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    pronunciations_path = args.pronunciations or settings.get_pronunciations_path()
    parts_of_speech_path = args.pos or settings.get_parts_of_speech_path()

    # Load lexicon
    try:
        engine = HardlyKnowHerEngine.from_files(pronunciations_path, parts_of_speech_path)
    except (LexiconLoadError, OSError) as e:
        print(f"Error loading lexicon: {e}")
        sys.exit(1)

    # Handle different modes
    if args.interactive:
        interactive_mode(engine)

    elif args.word:
        resolution = engine.resolve_word(args.word)

        if args.json:
            print(json.dumps(resolution.to_dict(), indent=2, ensure_ascii=False))
        else:
            print_resolution(resolution, args.verbose)

    elif args.file:
        # Process file
        if not os.path.exists(args.file):
            print(f"Error: File not found: {args.file}")
            sys.exit(1)

        with open(args.file, encoding='utf-8') as f:
            messages = [line.strip() for line in f if line.strip()]

        results = engine.find_puns(messages)

        if args.json:
            print(json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False))
        else:
            for result in results:
                print_result(result)

    elif args.sentence:
        result = engine.find_pun(args.sentence)

        if args.json:
            print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        else:
            print_result(result)

    else:
        parser.print_help()
        sys.exit(1)


if __name__ == '__main__':
    main()
