#!/usr/bin/env python
"""Parse crawled maxroll pages into training blocks.

Usage: parse_pages.py [options] <input.json> [<input.json> ...]
  Each input is a JSON array of pages or one page per line.
"""
import sys
from universal.options import exec_main, option_parser
from universal.errors import FatalInputError
from maxroll.pages import parse_file


def parse_input(filename, options):
    try:
        return parse_file(filename, options)
    except FatalInputError as e:
        sys.stderr.write("Error: %s\n" % e)
        sys.exit(1)


def main():
    parser = option_parser("usage: %prog [options] [filenames]")
    (options, args) = parser.parse_args()
    exec_main(options, args, parse_input)


if __name__ == "__main__":
    main()
