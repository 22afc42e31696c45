#!/usr/bin/env python
"""dna2protein - DNA transcription and translation CLI."""

import argparse
import logging
import sys

from dna2protein import __version__

LOG_FORMAT = "%(asctime)s:%(name)s:%(message)s"


def setup_logging(debug: bool = False):
    """Send log records to stderr so results on stdout stay clean."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with all subcommands registered."""
    parser = argparse.ArgumentParser(
        prog="dna2protein",
        description="Transcribe DNA to mRNA and translate it to amino acids",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dna2protein translate -f gene.txt -o -
  dna2protein translate -f - -o protein.txt --rna
  echo cggtacggt | dna2protein transcribe -f - -o -

For more information on a specific command:
  dna2protein <command> --help
""",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available subcommands",
        metavar="<command>",
    )

    # Import and register subcommands
    from dna2protein.commands import transcribe, translate

    transcribe.register(subparsers)
    translate.register(subparsers)

    return parser


def main(argv=None):
    """Main entry point for the dna2protein CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    setup_logging(args.debug)

    # Execute the subcommand
    args.func(args)


if __name__ == "__main__":
    main()
