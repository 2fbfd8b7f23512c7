"""Command-line entry point: escape, strip comments, or build a tag."""

import argparse
import logging
import sys
from pathlib import Path

from hyperstr import __version__
from hyperstr.errors import HyperStrError
from hyperstr.markup import escape_html, remove_html_comments, tag

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hyperstr",
        description="HTML string helpers",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", help="Available commands")

    esc_p = sub.add_parser("escape", help="Escape HTML special characters")
    esc_p.add_argument("file", nargs="?", help="Input file (default: stdin)")

    strip_p = sub.add_parser("strip-comments", help="Remove <!-- --> comments")
    strip_p.add_argument("file", nargs="?", help="Input file (default: stdin)")

    tag_p = sub.add_parser("tag", help="Render a single HTML element")
    tag_p.add_argument("name", help="Tag name, e.g. div")
    attrs = tag_p.add_mutually_exclusive_group()
    attrs.add_argument("--class", dest="class_name", help="Class attribute")
    attrs.add_argument(
        "--attr", action="append", default=[], metavar="KEY=VALUE",
        help="Attribute (repeatable)",
    )
    tag_p.add_argument("--escape", action="store_true", help="Escape the content")
    tag_p.add_argument("content", nargs="*", help="Content, joined with spaces")

    return parser


def read_input(file: str | None) -> str:
    """Read the named file, or stdin when no file is given."""
    if file is None or file == "-":
        logger.debug("Reading stdin")
        return sys.stdin.read()
    logger.debug("Reading %s", file)
    return Path(file).read_text(encoding="utf-8")


def parse_attrs(pairs: list[str]) -> dict[str, str]:
    attrs = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise HyperStrError(f"Malformed attribute {pair!r}, expected KEY=VALUE")
        attrs[key] = value
    return attrs


def cmd_escape(args: argparse.Namespace) -> str:
    return escape_html(read_input(args.file))


def cmd_strip_comments(args: argparse.Namespace) -> str:
    return remove_html_comments(read_input(args.file))


def cmd_tag(args: argparse.Namespace) -> str:
    attributes = args.class_name or parse_attrs(args.attr) or None
    content = " ".join(args.content)
    if args.escape:
        content = escape_html(content)
    return tag(args.name, attributes, content)


# argparse restricts args.command to these keys
COMMANDS = {
    "escape": cmd_escape,
    "strip-comments": cmd_strip_comments,
    "tag": cmd_tag,
}


def run(args: argparse.Namespace) -> str:
    """Execute a parsed command and return its output."""
    logger.debug("Running %s", args.command)
    return COMMANDS[args.command](args)


def main(argv: list[str] | None = None) -> int:
    """Run the hyperstr CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        output = run(args)
    except (HyperStrError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    if not output.endswith("\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
