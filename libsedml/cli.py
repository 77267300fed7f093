#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Command Line Interface"""
import sys
import os
import argparse
import json
import logging
import pathlib

from libsedml.exceptions import SedException, SedValueError
from libsedml.reader import read_sedml_from_file

PROGRAM_NAME = os.path.basename(sys.argv[0])


def get_loglevel(verbosity: int) -> int:
    if verbosity <= 0:
        return logging.ERROR
    elif verbosity == 1:
        return logging.WARNING
    elif verbosity == 2:
        return logging.INFO
    else:
        return logging.DEBUG


def validate() -> None:
    parser = argparse.ArgumentParser(prog=PROGRAM_NAME, add_help=True,
                                     description="validate a set of SED-ML files.")
    parser.usage = "%(prog)s [OPTION]... [FILE]...\n" \
                   "Try '%(prog)s --help' for more information."
    parser.add_argument('-v', dest='verbosity', action='count', default=0,
                        help="increase output verbosity.")
    parser.add_argument('--huge-tree', action='store_true', default=False,
                        help="disable the security limits of the XML parser.")
    parser.add_argument('files', metavar='[SEDML_FILE ...]', nargs='+',
                        help="SED-ML files to be validated.")

    args = parser.parse_args()
    loglevel = get_loglevel(args.verbosity)

    tot_errors = 0
    for filepath in args.files:
        try:
            document = read_sedml_from_file(filepath, check_consistency=True,
                                            huge_tree=args.huge_tree, loglevel=loglevel)
        except SedException as err:
            tot_errors += 1
            sys.stderr.write(f"{err}\n")
            continue

        num_errors = document.error_log.get_num_failures()
        if not num_errors:
            sys.stdout.write(f"{filepath} is valid\n")
        else:
            tot_errors += num_errors
            sys.stderr.write(f"{filepath} is not valid\n")

        if args.verbosity > 0 or num_errors:
            for error in document.error_log:
                if args.verbosity > 0 or error.is_error() or error.is_fatal():
                    sys.stderr.write(f"{error}\n")

    sys.exit(tot_errors)


def sedml2json() -> None:
    parser = argparse.ArgumentParser(prog=PROGRAM_NAME, add_help=True,
                                     description="dump a set of SED-ML files to JSON.")
    parser.usage = "%(prog)s [OPTION]... [FILE]...\n" \
                   "Try '%(prog)s --help' for more information."

    parser.add_argument('-v', dest='verbosity', action='count', default=0,
                        help="increase output verbosity.")
    parser.add_argument('--indent', type=int, default=None,
                        help="indentation for a pretty-printed JSON output "
                             "(default is the most compact representation)")
    parser.add_argument('-o', '--output', type=str, default='.',
                        help="where to write the JSON files, current dir by default.")
    parser.add_argument('-f', '--force', action="store_true", default=False,
                        help="do not prompt before overwriting.")
    parser.add_argument('files', metavar='[SEDML_FILE ...]', nargs='+',
                        help="SED-ML files to be dumped to JSON.")

    args = parser.parse_args()
    loglevel = get_loglevel(args.verbosity)

    json_options = {}
    if args.indent is not None and args.indent >= 0:
        json_options['indent'] = args.indent

    base_path = pathlib.Path(args.output)
    if not base_path.exists():
        base_path.mkdir()
    elif not base_path.is_dir():
        raise SedValueError(f"{str(base_path)!r} is not a directory")

    tot_errors = 0
    for sedml_path in map(pathlib.Path, args.files):
        json_path = base_path.joinpath(sedml_path.name).with_suffix('.json')
        if json_path.exists() and not args.force:
            print(f"skip {str(json_path)}: the destination file exists!")
            continue

        try:
            document = read_sedml_from_file(sedml_path, loglevel=loglevel)
        except SedException as err:
            tot_errors += 1
            print(f"error with {str(sedml_path)}: {str(err)}")
            continue

        with open(str(json_path), 'w') as fp:
            json.dump(document.to_dict(), fp, **json_options)

        num_errors = document.error_log.get_num_failures()
        if not num_errors:
            print(f"{str(sedml_path)} converted to {str(json_path)}")
        else:
            tot_errors += num_errors
            print("{} converted to {} with {} errors".format(
                str(sedml_path), str(json_path), num_errors
            ))

    sys.exit(tot_errors)
