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
import logging

import wsdltypes
from wsdltypes import WsdlTypes
from wsdltypes.cursor import DEFUSE_MODES


PROGRAM_NAME = os.path.basename(sys.argv[0])


def defuse_data(value):
    if value not in DEFUSE_MODES:
        raise argparse.ArgumentTypeError("%r is not a valid value" % value)
    return value


def get_loglevel(verbosity):
    if verbosity <= 0:
        return logging.ERROR
    elif verbosity == 1:
        return logging.WARNING
    elif verbosity == 2:
        return logging.INFO
    else:
        return logging.DEBUG


def format_schema(schema):
    lines = [f"schema targetNamespace={schema.target_namespace!r}"]
    for label, registry in [('complexTypes', schema.complex_types),
                            ('simpleTypes', schema.simple_types),
                            ('elements', schema.elements),
                            ('attributes', schema.attributes),
                            ('attributeGroups', schema.attribute_groups)]:
        lines.append(f"  {label}: {', '.join(sorted(registry)) or '-'}")
    return '\n'.join(lines)


def dump():
    parser = argparse.ArgumentParser(prog=PROGRAM_NAME, add_help=True,
                                     description="dump the schema registries of WSDL "
                                                 "types sections and XSD files.")
    parser.usage = "%(prog)s [OPTION]... [FILE]...\n" \
                   "Try '%(prog)s --help' for more information."
    parser.add_argument('-v', dest='verbosity', action='count', default=0,
                        help="increase output verbosity.")
    parser.add_argument('--defuse', metavar='(always, nonlocal, never)',
                        type=defuse_data, default='nonlocal',
                        help="when to defuse XML data, on non-local sources for default.")
    parser.add_argument('files', metavar='[FILE ...]', nargs='+',
                        help="WSDL or XSD files to be read.")

    args = parser.parse_args()
    loglevel = get_loglevel(args.verbosity)

    tot_errors = 0
    for filepath in args.files:
        try:
            types = WsdlTypes.parse(filepath, defuse=args.defuse, loglevel=loglevel)
        except wsdltypes.WsdlTypesException as err:
            tot_errors += 1
            sys.stderr.write(f"error with {filepath}: {err}\n")
            continue
        else:
            sys.stdout.write(f"{filepath}: {len(types)} schema blocks\n")
            for schema in types:
                sys.stdout.write(f"{format_schema(schema)}\n")

    sys.exit(tot_errors)
