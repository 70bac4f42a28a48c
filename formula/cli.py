"""
Command-line interface for formula.

Parses a formula given on the command line and prints it back, either in
its textual form or as an indented tree.
"""

import argparse
import logging
import sys

from .frontend import Parser
from .ir import format_tree, depth

DEMO_FORMULA = "Ola(Bom,Dia(DD,MM(),AAAA))"

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        argparse.ArgumentParser: The configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="formula",
        description="formula: parse and print term formulas",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m formula parse "Foo(A,Bar())"
  python -m formula parse "Foo(A,Bar())" --tree
  python -m formula demo
        """
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Parse command
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a formula and print it"
    )
    parse_parser.add_argument(
        "text",
        type=str,
        help="Formula text to parse"
    )
    parse_parser.add_argument(
        "--tree",
        action="store_true",
        help="Print the parsed term as an indented tree followed by its depth"
    )
    parse_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    # Demo command
    subparsers.add_parser(
        "demo",
        help=f"Parse and print {DEMO_FORMULA}"
    )

    # Version command
    subparsers.add_parser(
        "version",
        help="Show version information"
    )

    return parser


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    )


def handle_parse(args: argparse.Namespace) -> int:
    """Handle the parse command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (0 for success, 1 if the text does not parse)
    """
    result = Parser().parse(args.text)

    if not result.success:
        print(f"[formula] Error: {result.error_message}", file=sys.stderr)
        return 1

    if args.tree:
        print(format_tree(result.term))
        print(f"depth: {depth(result.term)}")
    else:
        print(result.render())
    return 0


def handle_demo(args: argparse.Namespace) -> int:
    result = Parser().parse(DEMO_FORMULA)
    print(result.render())
    return 0


def handle_version(args: argparse.Namespace) -> int:
    """Handle the version command.

    Returns:
        int: Exit code (always 0 for version)
    """
    from . import __version__, __author__
    print(f"formula version {__version__}")
    print(f"Author: {__author__}")
    return 0


def main(argv: list = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        int: Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(args, "verbose", False))
    logger.debug("Running command %r", args.command)

    if args.command == "parse":
        return handle_parse(args)
    elif args.command == "demo":
        return handle_demo(args)
    elif args.command == "version":
        return handle_version(args)
    else:
        parser.print_help()
        return 2


if __name__ == "__main__":
    sys.exit(main())
