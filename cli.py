# -*- coding: utf-8 -*-
"""
Command line front end for numwords.

How to run:
  numwords 42
  numwords 2.45 --currency
  numwords 21 --lang es
  numwords            (interactive prompt, Ctrl+D to exit)
"""
import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from numwords import NumWordsError, convert, parse_number
from numwords.parsing import Mode

logger = logging.getLogger("numwords.cli")

QUIT_WORDS = {"quit", "exit", "q"}


def build_parser():
    parser = argparse.ArgumentParser(prog="numwords", description="Convert numbers to words.")
    parser.add_argument("number", nargs="?", help="number to convert; omit for an interactive prompt")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--ordinal", dest="mode", action="store_const", const=Mode.ORDINAL,
                       help="append the ordinal form, e.g. (21st)")
    group.add_argument("--currency", dest="mode", action="store_const", const=Mode.CURRENCY,
                       help="read as dollars and cents")
    group.add_argument("--decimal", dest="mode", action="store_const", const=Mode.DECIMAL,
                       help="read two decimal places after 'point'")
    group.add_argument("--roman", dest="mode", action="store_const", const=Mode.ROMAN,
                       help="print a Roman numeral (1-3999)")
    parser.add_argument("--lang", default=None,
                        help="output language: en, es or ar (words mode only, default $NUMWORDS_LANG)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.set_defaults(mode=Mode.WORDS)
    return parser


def convert_text(text, mode=Mode.WORDS, lang=None):
    return convert(parse_number(text), mode, lang)


def interactive(mode, lang, stdin=None, stdout=None, stderr=None):
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    print("Number to Text Converter", file=stdout)
    print("------------------------", file=stdout)
    print("Enter a number to convert to text (press Ctrl+D to exit):", file=stdout)

    while True:
        try:
            line = stdin.readline()
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error reading input: {exc}", file=stderr)
            return 1
        if not line:
            return 0

        text = line.strip()
        if not text:
            continue
        if text.lower() in QUIT_WORDS:
            return 0

        try:
            print(f"Result: {convert_text(text, mode, lang)}", file=stdout)
        except NumWordsError as exc:
            logger.debug("rejected %r: %s", text, exc)
            print(f"Error: {exc}", file=stderr)
            continue
        print("\nEnter another number (press Ctrl+D to exit):", file=stdout)


def main(argv=None):
    load_dotenv()
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s  %(levelname)s  %(message)s",
    )
    if args.lang is None and args.mode is Mode.WORDS:
        args.lang = os.environ.get("NUMWORDS_LANG") or None

    if args.number is None:
        return interactive(args.mode, args.lang)

    try:
        print(convert_text(args.number, args.mode, args.lang))
    except NumWordsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
