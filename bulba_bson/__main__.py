"""
Entry point for Bulba BSON.

Usage:
    python -m bulba_bson /path/to/document.bson
    python -m bulba_bson --validate /path/to/document.bson
    python -m bulba_bson --help
"""

import argparse
import json
import sys

from . import __version__
from .const import APP_NAME
from .logging import get_logger, setup_logging_from_args
from .notation import BsonError, DocumentLoader, LoadError, print_document
from .notation.lexer import Token


logger = get_logger("cli")


def _format_token(token: Token) -> str:
    text = f"{token.line:>4}  {token.type.name:<13}"
    if token.literal:
        text += f" {token.literal!r}"
    if token.level:
        text += f" level={token.level}"
    return text


def validate_document(loader: DocumentLoader, path: str) -> int:
    """Parse a document and print a summary."""
    document = loader.load_file(path)
    summary = loader.summarize(document)

    print("Document summary:")
    print(f"  Keys: {summary.keys}")
    print(f"  Sections: {summary.sections}")
    print(f"  Arrays: {summary.arrays}")
    print(f"  Deepest stage: {summary.max_stage}")
    print("\nDocument is valid!")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="bulba-bson",
        description=f"{APP_NAME}: parse BULBA! notation documents and print the resulting tree",
    )

    parser.add_argument(
        "document",
        help="Path to the document file",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate the document, print a summary and exit",
    )

    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Print the token stream instead of the tree",
    )

    parser.add_argument(
        "--format",
        choices=("tree", "json"),
        default="tree",
        help="Output format for the parsed document (default: tree)",
    )

    parser.add_argument(
        "--sort-keys",
        action="store_true",
        help="Sort keys in the output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    setup_logging_from_args(
        verbose=args.verbose,
        debug=args.debug,
        quiet=args.quiet,
        no_color=args.no_color,
        log_file=args.log_file,
    )

    loader = DocumentLoader()

    try:
        if args.validate:
            return validate_document(loader, args.document)

        document = loader.load_file(args.document)

        if args.tokens:
            for token in loader.last_tokens or []:
                print(_format_token(token))
        elif args.format == "json":
            print(json.dumps(document, indent=2, sort_keys=args.sort_keys, ensure_ascii=False))
        else:
            print_document(document, sort_keys=args.sort_keys)
        return 0

    except LoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except BsonError as e:
        print(f"Error ({e.location}): {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
