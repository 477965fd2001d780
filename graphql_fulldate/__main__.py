import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

from flogging import flogging

from graphql_fulldate import metadata
from graphql_fulldate.exceptions import DateScalarError
from graphql_fulldate.scalars.date import parse_value, serialize, type_defs
from graphql_fulldate.serialization import serialize_date


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the command line and return the parsed arguments."""

    class Formatter(argparse.ArgumentDefaultsHelpFormatter, argparse.RawTextHelpFormatter):
        pass

    parser = argparse.ArgumentParser(
        metadata.__package__,
        description=metadata.__description__,
        formatter_class=Formatter,
    )
    flogging.add_logging_args(parser, erase_args=False)
    parser.add_argument("--version", action="version", version=metadata.__version__)
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("sdl", help="Print the GraphQL definition of the Date scalar.")
    check_parser = subparsers.add_parser(
        "check", help="Parse the values the way GraphQL variables are parsed.",
    )
    check_parser.add_argument("values", nargs="+", help="Dates to parse, e.g. 2007-12-03.")
    serialize_parser = subparsers.add_parser(
        "serialize", help="Serialize the values the way resolved field values are serialized.",
    )
    serialize_parser.add_argument("values", nargs="+", help="Dates to serialize.")
    return parser.parse_args(argv)


def _convert_all(
    values: Sequence[str],
    convert: Callable[[str], str],
    log: logging.Logger,
) -> int:
    failed = 0
    for value in values:
        try:
            converted = convert(value)
        except DateScalarError as e:
            log.error("%s", e)
            failed += 1
            continue
        print(f"{value} -> {converted}")
    if failed:
        log.warning("rejected %d of %d values", failed, len(values))
    return int(failed > 0)


def main(args: argparse.Namespace) -> int:
    """Run the requested command and return the exit code."""
    log = logging.getLogger(f"{metadata.__package__}.{args.command}")
    if args.command == "sdl":
        print(type_defs.strip())
        return 0
    if args.command == "check":
        return _convert_all(args.values, lambda v: serialize_date(parse_value(v)), log)
    if args.command == "serialize":
        return _convert_all(args.values, serialize, log)
    raise AssertionError(f"unsupported command: {args.command}")


def run() -> int:
    """Entry point of the `graphql-fulldate` console script."""
    return main(parse_args())


if __name__ == "__main__":
    sys.exit(run())
