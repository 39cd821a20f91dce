"""Main CLI entry point for encodingx."""

from __future__ import annotations

import argparse
import logging
import sys
import zlib
from pathlib import Path

from .. import __version__
from ..chain import ChainEncoding
from ..encoding import Encoding, EncodingStyle
from ..exceptions import EncodingxError
from ..models import Bytes
from ..registry import default_registry

logger = logging.getLogger(__name__)


def _select(selector: str) -> Encoding:
    """Resolve ``NAME`` to a registered encoding or ``A:B:C`` to a chain."""
    names = selector.split(":")
    if len(names) == 1:
        encoding = default_registry().lookup(selector)
        if encoding.style is not EncodingStyle.BYTES:
            raise EncodingxError(f"{selector} is not a byte-oriented encoding")
        logger.debug("selected encoding %s", encoding)
        return encoding
    chain = ChainEncoding(names, list(reversed(names)))
    logger.debug("selected chain %s", chain)
    return chain


def _read_input(path: str | None) -> bytes:
    if path is None:
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the encodingx CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="encodingx: pluggable encoding registry",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  encodingx --list                              List registered encodings
  echo -n hello | encodingx --encode HexTier    Encode stdin
  encodingx --decode Lazy:HexTier --input f.txt Decode a file through a chain
  encodingx --version                           Show version
        """,
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--list",
        action="store_true",
        help="List registered encodings and their styles",
    )
    action.add_argument(
        "--encode",
        metavar="NAME",
        type=str,
        help="Encode input with a byte-oriented encoding or an A:B chain",
    )
    action.add_argument(
        "--decode",
        metavar="NAME",
        type=str,
        help="Decode input with a byte-oriented encoding or an A:B chain",
    )

    parser.add_argument(
        "--input",
        metavar="FILE",
        type=str,
        help="Read input from FILE instead of stdin",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"encodingx {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.list:
        for name, encoding in default_registry().items():
            print(f"{name:<20} {encoding.style.value}")
        return 0

    if args.encode or args.decode:
        try:
            data = _read_input(args.input)
            logger.debug("read %d input bytes", len(data))
            if args.encode:
                output = _select(args.encode).marshal(data)
            else:
                sink = Bytes()
                _select(args.decode).unmarshal(data.strip(), sink)
                output = sink.data
        except OSError as e:
            print(f"Error reading input: {e}", file=sys.stderr)
            return 1
        except (EncodingxError, ValueError, zlib.error) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        sys.stdout.buffer.write(output)
        sys.stdout.buffer.flush()
        return 0

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
