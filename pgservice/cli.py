#!/usr/bin/env python3

import argparse
import importlib.metadata
import logging
import sys

import yaml

from .connection import service_conninfo
from .exceptions import PgServiceException
from .location import find_path
from .service_file import ServiceFile


def setup_logging(verbosity: int = 0):
    """Setup logging on stderr based on verbosity level (0=WARNING, 1=INFO, 2+=DEBUG)."""
    level = (logging.WARNING, logging.INFO, logging.DEBUG)[min(verbosity, 2)]
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", force=True)


def create_parser() -> argparse.ArgumentParser:
    """Creates the main parser with its sub-parsers"""
    parser = argparse.ArgumentParser(prog="pgservice")
    parser.add_argument(
        "-f",
        "--service-file",
        help="Path of the service file. Default: $PGSERVICEFILE or ~/.pg_service.conf",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase output verbosity (e.g. -v, -vv)",
    )

    try:
        version = importlib.metadata.version("pgservice")
    except importlib.metadata.PackageNotFoundError:
        version = "0.0.0"
    parser.add_argument(
        "--version",
        action="version",
        version=f"pgservice {version}",
        help="Show program's version number and exit.",
    )

    subparsers = parser.add_subparsers(
        title="commands", description="valid pgservice commands", dest="command"
    )

    subparsers.add_parser("path", help="show the path of the service file.")
    subparsers.add_parser("list", help="list the services defined in the service file.")

    parser_show = subparsers.add_parser("show", help="show the parameters of a service.")
    parser_show.add_argument("service", help="Name of the service")

    parser_conninfo = subparsers.add_parser(
        "conninfo", help="show the connection string of a service or of a connection string."
    )
    parser_conninfo.add_argument(
        "connection", help="Name of the service or connection string, e.g. 'service=prod user=me'"
    )

    return parser


def cli(argv: list[str] | None = None) -> int:
    """Main function to run the command line interface."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    # if no command is passed, print the help and exit
    if not args.command:
        parser.print_help()
        parser.exit()

    path = find_path(override=args.service_file)
    logger.info("Using service file %s", path)

    try:
        if args.command == "path":
            print(path)
        elif args.command == "list":
            for name in ServiceFile.from_path(path).services():
                print(name)
        elif args.command == "show":
            service = ServiceFile.from_path(path).get_service(args.service)
            print(yaml.safe_dump(service, default_flow_style=False, sort_keys=True), end="")
        elif args.command == "conninfo":
            print(service_conninfo(args.connection, service_file=path))
    except PgServiceException as e:
        logger.error(e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(cli())
