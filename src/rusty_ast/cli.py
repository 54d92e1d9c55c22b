"""CLI entry point: ``rusty-ast -f file.rs`` or ``python -m rusty_ast -c CODE``."""

import argparse
import logging
import sys
from collections.abc import Iterator
from pathlib import Path

from rusty_ast import build_document, parse, parse_file, print_ast, render_json, render_text
from rusty_ast.config import RenderConfig, render_config_context
from rusty_ast.errors import ParseError
from rusty_ast.parser import SyntaxTree
from rusty_ast.serialization import to_json
from rusty_ast.utils.logger import get_logger

logger = get_logger(__name__)

PROG = "rusty-ast"

# Failures reported per input; anything else is a bug and propagates
_INPUT_ERRORS = (ParseError, OSError, UnicodeDecodeError)


def _indent(value: str) -> int:
    try:
        width = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid indent: {value!r}") from None
    if width < 0:
        raise argparse.ArgumentTypeError("indent must not be negative")
    return width


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the command line."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Render the syntax tree of Rust source as a text outline or JSON.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-f", "--file", type=Path, help="Rust source file to render")
    source.add_argument("-c", "--code", help="Rust source code to render")
    source.add_argument(
        "-d",
        "--dir",
        type=Path,
        help="Directory whose .rs files are rendered recursively",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "-i",
        "--indent",
        type=_indent,
        default=2,
        help="Spaces per nesting level, for both formats (default: 2)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    return parser


def _error(message: object) -> None:
    sys.stderr.write(f"{PROG}: error: {message}\n")


def _emit(tree: SyntaxTree, output_format: str) -> None:
    if output_format == "json":
        sys.stdout.write(render_json(tree) + "\n")
    else:
        print_ast(tree)


def rust_files(directory: Path) -> Iterator[Path]:
    """Every ``*.rs`` file under ``directory``, in sorted path order."""
    yield from sorted(path for path in directory.rglob("*.rs") if path.is_file())


def _render_directory(directory: Path, output_format: str) -> int:
    if not directory.is_dir():
        _error(f"not a directory: {directory}")
        return 1

    status = 0
    documents: list[dict] = []
    rendered = 0
    for path in rust_files(directory):
        try:
            tree = parse_file(path)
        except _INPUT_ERRORS as e:
            _error(e)
            status = 1
            continue
        logger.debug("Rendering %s", path)
        if output_format == "json":
            documents.append({"path": str(path), "ast": build_document(tree)})
        else:
            if rendered:
                sys.stdout.write("\n")
            rendered += 1
            sys.stdout.write(f"==> {path} <==\n")
            render_text(tree)

    if output_format == "json":
        sys.stdout.write(to_json({"files": tuple(documents)}) + "\n")
    return status


def main(argv: list[str] | None = None) -> int:
    """Run the command line. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = RenderConfig(indent_width=args.indent, json_indent=args.indent)
    with render_config_context(config):
        if args.dir is not None:
            return _render_directory(args.dir, args.format)
        try:
            if args.file is not None:
                tree = parse_file(args.file)
            else:
                tree = parse(args.code)
        except _INPUT_ERRORS as e:
            _error(e)
            return 1
        _emit(tree, args.format)
    return 0


if __name__ == "__main__":
    sys.exit(main())
