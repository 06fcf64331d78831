import sys
import os
from optparse import OptionParser


def exec_main(options, args, function):
    if not args:
        sys.stderr.write("input file required\n")
        sys.exit(1)
    if not options.output and not options.dryrun:
        sys.stderr.write("-o/--output required\n")
        sys.exit(1)
    if not options.dryrun and not os.path.exists(options.output):
        sys.stderr.write(
            "-o/--output points to a directory that does not exist\n")
        sys.exit(1)
    if not options.dryrun and not os.path.isdir(options.output):
        sys.stderr.write(
            "-o/--output points to a file, it must point to a directory\n")
        sys.exit(1)
    failed = False
    for arg in args:
        result = function(arg, options)
        if result['errors']:
            failed = True
    if failed:
        sys.exit(1)


def option_parser(usage):
    parser = OptionParser(usage=usage)
    parser.add_option(
        "-o", "--output", dest="output",
        help="Output data directory. Pages land in <output>/<folder>/<slug>.json (required)")
    parser.add_option(
        "-d", "--dry-run", dest="dryrun", default=False, action="store_true",
        help="Dry run (no actual output)")
    parser.add_option(
        "-v", "--verbose", dest="verbose", default=False, action="store_true",
        help="Report every page as it is processed")
    parser.add_option(
        "-H", "--hierarchy", dest="hierarchy", default=False, action="store_true",
        help="Also write <slug>-hierarchical.json for boss pages")
    parser.add_option(
        "-e", "--external-strategies", dest="external_strategies",
        default=False, action="store_true",
        help="Keep strategies in a list beside the abilities instead of inside them")
    parser.add_option(
        "-k", "--skip-schema", dest="skip_schema", default=False, action="store_true",
        help="Skip schema validation")
    parser.add_option(
        "-s", "--stdout", dest="stdout", default=False, action="store_true",
        help="Write json to stdout")
    return parser


def default_options(**overrides):
    parser = option_parser("")
    options, _ = parser.parse_args([])
    for k, v in overrides.items():
        setattr(options, k, v)
    return options
