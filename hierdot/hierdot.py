#!/usr/bin/env python3
############################################################ IDENT(1)
#
# $Title: hierdot - Class Hierarchy and Module Dependency Graphs $
# $Copyright: 2025 Devin Teske. All rights reserved. $
# pylint: disable=line-too-long
# $FrauBSD$
# pylint: enable=line-too-long
#
############################################################ LICENSE
#
# BSD 2-Clause
#
############################################################ DOCSTRING

"""
Standalone tool for drawing class hierarchies and module dependency graphs
of Python programs in the Graphviz dot language.
"""

############################################################ IMPORTS

import argparse
import logging
import os
import re
import sys
from pathlib import Path

# Add parent directory to path so we can import package
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# pylint: disable=wrong-import-position
from hierdot.builders import Strategy
from hierdot.errors import HierdotError
from hierdot.pipeline import GRAPH_KINDS, make_feed, run_introspection
from hierdot.utils import plur
from hierdot.version import VERSION, VERSION_VERBOSE
# pylint: enable=wrong-import-position

############################################################ FUNCTIONS

def main(argv=None):
    """Main entry point for hierdot CLI."""
    parser = argparse.ArgumentParser(
        prog='hierdot',
        description='Class hierarchy and module dependency graphs for Python',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Class hierarchy of a source tree, without standard library names
  hierdot -x '^(builtins|abc|typing)\\.' /path/to/project | dot -Tpng > hier.png

  # Ancestors of a single class
  hierdot -s mypkg.widgets.Widget /path/to/project

  # Module dependencies, ranked by how often each module is imported
  hierdot -g modules -r -o deps.dot /path/to/project

  # Direct imports of one module in the running interpreter
  hierdot -g modules -i json -s json --direct

  # Use a JSON manifest produced elsewhere
  hierdot -M manifest.json
""",
    )

    parser.add_argument(
        'path',
        nargs='?',
        help='Python project to parse (default: introspect the runtime)',
    )

    parser.add_argument(
        '-g', '--graph',
        choices=GRAPH_KINDS,
        default='classes',
        help='Graph to draw: class hierarchy (default) or module dependencies',
    )

    parser.add_argument(
        '-s', '--start',
        metavar='NAME',
        help='Start from this type or module instead of everything',
    )

    parser.add_argument(
        '--direct',
        action='store_true',
        help='With -g modules -s NAME, only follow one level of imports',
    )

    parser.add_argument(
        '-x', '--exclude',
        metavar='REGEX',
        help='Leave out types or modules whose names match REGEX',
    )

    parser.add_argument(
        '-r', '--ranked',
        action='store_true',
        help='Rank modules by number of importers (requires -g modules)',
    )

    parser.add_argument(
        '-u', '--uml',
        action='store_true',
        help='Draw classes as UML records listing their members',
    )

    parser.add_argument(
        '-M', '--manifest',
        metavar='FILE',
        help='Read types and modules from a JSON manifest',
    )

    parser.add_argument(
        '-i', '--import',
        dest='imports',
        metavar='MODULE',
        action='append',
        default=[],
        help='Import MODULE before introspecting the runtime (repeatable)',
    )

    parser.add_argument(
        '-o', '--output',
        metavar='FILE',
        help='Write output to file (default: stdout)',
    )

    parser.add_argument(
        '-d', '--debug',
        action='store_true',
        help='Enable debug output',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information and exit',
    )

    parser.add_argument(
        '-V', '--version-verbose',
        action='store_true',
        help='Show verbose version with build info and exit',
    )

    args = parser.parse_args(argv)

    # Handle version flags
    if args.version_verbose:
        print(VERSION_VERBOSE)
        return 0

    if args.version:
        print(VERSION)
        return 0

    logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')
    if args.debug:
        logging.getLogger('hierdot').setLevel(logging.DEBUG)

    # Validate path
    if args.path is not None:
        root_path = Path(args.path).resolve()
        if not root_path.is_dir():
            print(f"Error: Not a directory: {root_path}", file=sys.stderr)
            return 1
        args.path = str(root_path)

    exclude = None
    if args.exclude:
        try:
            exclude = re.compile(args.exclude)
        except re.error as e:
            print(f"Error: Bad --exclude pattern: {e}", file=sys.stderr)
            return 1

    strategy = Strategy.DIRECT if args.direct else Strategy.TRANSITIVE

    try:
        feed = make_feed(path=args.path, manifest=args.manifest,
                         imports=args.imports)
        m = len(feed.modules())
        t = len(feed.types())
        print(f"Loaded {m} {plur(m, 'module')}, {t} {plur(t, 'type')}",
              file=sys.stderr)

        run_introspection(
            feed,
            kind=args.graph,
            start=args.start,
            strategy=strategy,
            exclude=exclude,
            ranked=args.ranked,
            uml=args.uml,
            output_file=args.output,
        )
        return 0
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except (HierdotError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

############################################################ MAIN

if __name__ == '__main__':
    sys.exit(main())

################################################################################
# END
################################################################################
