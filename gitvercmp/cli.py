# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Command-line interface for gitvercmp.

Commands:

    normalize: Print the canonical key of each version
    compare: Print <, = or > for two versions
    test: Exit 0 if "A OP B" holds, 1 otherwise (for shell scripts)
    sort: Print versions oldest first
    installed: Print the installed git version, optionally check a minimum

Example:
    ```bash
    $ gitvercmp compare 0.99.9h 1.0.rc1
    =
    $ gitvercmp test "$(git --version)" ge 1.7.10 && echo "new enough"
    $ gitvercmp sort 1.7.4.rc1 1.9.3 1.7.0.rc0 2.0.0.rc2
    $ gitvercmp installed --min 2.20
    ```

Exit Codes:

- 0: Success (or the tested relation holds)
- 1: Error, failed `test`, or installed git older than `--min`
- 2: Invalid command-line usage

Note:
    Alias files given with --aliases (repeatable) or the GITVERCMP_ALIASES
    environment variable are loaded before any comparison.
"""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import sys

from gitvercmp.config import build_alias_table
from gitvercmp.exceptions import GitVerCmpError
from gitvercmp.logging import get_logger, set_global_logger
from gitvercmp.versioning import (
    OPERATORS,
    GitVersionComparator,
    installed_git_version,
    relate,
)


def _make_comparator(args: argparse.Namespace) -> GitVersionComparator:
    """Configure the global logger and build a comparator from --aliases."""
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)
    return GitVersionComparator(build_alias_table(args.aliases or ()))


def cmd_normalize(args: argparse.Namespace) -> int:
    """Handler for 'gitvercmp normalize'. Prints `version<TAB>key` lines."""
    comparator = _make_comparator(args)
    for raw in args.versions:
        print(f"{raw}\t{comparator.normalize(raw)}")
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Handler for 'gitvercmp compare'. Prints the relation of A to B."""
    comparator = _make_comparator(args)
    result = comparator.cmp(args.a, args.b)
    print({-1: "<", 0: "=", 1: ">"}[result])
    return 0


def cmd_test(args: argparse.Namespace) -> int:
    """Handler for 'gitvercmp test'. Silent; the exit code is the answer."""
    comparator = _make_comparator(args)
    return 0 if relate(args.a, args.op, args.b, comparator) else 1


def cmd_sort(args: argparse.Namespace) -> int:
    """Handler for 'gitvercmp sort'."""
    comparator = _make_comparator(args)
    for raw in comparator.sorted(args.versions, reverse=args.reverse):
        print(raw)
    return 0


def cmd_installed(args: argparse.Namespace) -> int:
    """Handler for 'gitvercmp installed'.

    Prints the `git --version` output. With --min, returns 1 when the
    installed version is older than the minimum.
    """
    comparator = _make_comparator(args)
    installed = installed_git_version(args.git)
    print(installed)

    if args.min is None:
        return 0
    if comparator.ge(installed, args.min):
        return 0
    print(f"[FAILED] {installed} is older than {args.min}", file=sys.stderr)
    return 1


def _package_version() -> str:
    try:
        return version("gitvercmp")
    except PackageNotFoundError:
        from gitvercmp import __version__

        return __version__


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subparser per command."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--aliases",
        action="append",
        type=Path,
        metavar="FILE",
        help="YAML alias file (repeatable; later files win)",
    )
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and configuration details",
    )
    common.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show every normalization (implies --verbose)",
    )

    parser = argparse.ArgumentParser(
        prog="gitvercmp",
        description="Compare Git version numbers, tags and `git --version` output",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"gitvercmp {_package_version()}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'normalize' command
    parser_normalize = subparsers.add_parser(
        "normalize",
        parents=[common],
        help="Print the canonical key of each version",
    )
    parser_normalize.add_argument("versions", nargs="+", metavar="VERSION")
    parser_normalize.set_defaults(func=cmd_normalize)

    # 'compare' command
    parser_compare = subparsers.add_parser(
        "compare",
        parents=[common],
        help="Print <, = or > for two versions",
    )
    parser_compare.add_argument("a", metavar="A")
    parser_compare.add_argument("b", metavar="B")
    parser_compare.set_defaults(func=cmd_compare)

    # 'test' command
    parser_test = subparsers.add_parser(
        "test",
        parents=[common],
        help="Exit 0 if 'A OP B' holds, 1 otherwise",
    )
    parser_test.add_argument("a", metavar="A")
    parser_test.add_argument("op", choices=sorted(OPERATORS), metavar="OP")
    parser_test.add_argument("b", metavar="B")
    parser_test.set_defaults(func=cmd_test)

    # 'sort' command
    parser_sort = subparsers.add_parser(
        "sort",
        parents=[common],
        help="Print versions oldest first",
    )
    parser_sort.add_argument("versions", nargs="+", metavar="VERSION")
    parser_sort.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        help="Newest first",
    )
    parser_sort.set_defaults(func=cmd_sort)

    # 'installed' command
    parser_installed = subparsers.add_parser(
        "installed",
        parents=[common],
        help="Print the installed git version",
    )
    parser_installed.add_argument(
        "--git",
        default="git",
        help="git executable to query (default: git)",
    )
    parser_installed.add_argument(
        "--min",
        default=None,
        metavar="VERSION",
        help="Exit 1 if the installed git is older than VERSION",
    )
    parser_installed.set_defaults(func=cmd_installed)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point, registered as the 'gitvercmp' console script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return args.func(args)
    except GitVerCmpError as err:
        print(f"Error: {err}", file=sys.stderr)
        if args.verbose or args.debug:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
