import argparse
import logging
import sys
from pathlib import Path

from .codegen import IndentedBuilder
from .config import BuilderConfig, CRLF, LF, TAB

NEWLINES = {"crlf": CRLF, "lf": LF}


def _read_body(args: argparse.Namespace) -> str:
    if args.in_file:
        return Path(args.in_file).read_text(encoding="utf-8")
    if args.body is not None:
        return args.body
    return sys.stdin.read()


def _write_exact(text: str) -> None:
    # bypass text-mode newline translation so CRLF reaches stdout unchanged
    sys.stdout.flush()
    sys.stdout.buffer.write(text.encode(sys.stdout.encoding or "utf-8"))
    sys.stdout.buffer.flush()


def cmd_wrap(args: argparse.Namespace) -> None:
    config = BuilderConfig(indent=args.indent, newline=NEWLINES[args.newline])
    body: str = _read_body(args)

    with IndentedBuilder.from_config(config) as builder:
        if args.header:
            builder.write_line(args.header)
        with builder.block(semicolon=args.semicolon):
            builder.writelines(body)
    _write_exact(builder.render())


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser("codeblocker")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    # also accepted after the subcommand; SUPPRESS keeps a top-level -v from being reset
    verbose = argparse.ArgumentParser(add_help=False)
    verbose.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS,
                         help="Log debug output to stderr")
    sub = p.add_subparsers(required=True)

    s = sub.add_parser("wrap", parents=[verbose], help="Wrap body lines in an indented brace block")
    s.add_argument("body", nargs="?", help="Inline body text. If omitted, read stdin.")
    s.add_argument("--in", dest="in_file", help="Read body text from file path")
    s.add_argument("--header", help="Line written before the opening brace (e.g. 'class Foo')")
    s.add_argument("--indent", default=TAB, help="Indent unit (default: one tab)")
    s.add_argument("--newline", choices=sorted(NEWLINES), default="crlf")
    s.add_argument("--semicolon", action="store_true", help="Close the block with '};'")
    s.set_defaults(func=cmd_wrap)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    args.func(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
