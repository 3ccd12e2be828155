from __future__ import annotations

import argparse
import logging
import sys

from sexp2cpp.api import try_translate
from sexp2cpp.config import TranslatorSettings, load_settings
from sexp2cpp.errors import TranslateError
from sexp2cpp.files import STDIO, read_source, write_output
from sexp2cpp.lexer import TokenKind, Tokenizer
from sexp2cpp.samples import SAMPLE_PROGRAM
from sexp2cpp.schemas import TokenRecord

logger = logging.getLogger("sexp2cpp")

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _configure_logging(level_name: str) -> None:
    logger.setLevel(_LEVELS.get(level_name.lower(), logging.WARNING))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(name)s - %(levelname)s - %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False


def _add_source_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("input", nargs="?", default=None, help="source file ('-' for stdin)")
    g = p.add_mutually_exclusive_group()
    g.add_argument("--source", type=str, default=None, help="program text given inline")
    g.add_argument("--sample", action="store_true", help="use the built-in sample program")


def _load_source(args: argparse.Namespace, *, settings: TranslatorSettings) -> str:
    chosen = [x for x in (args.input, args.source, args.sample or None) if x is not None]
    if len(chosen) != 1:
        raise SystemExit("exactly one of INPUT, --source or --sample is required")
    if args.sample:
        return SAMPLE_PROGRAM
    if args.source is not None:
        return args.source
    try:
        return read_source(args.input, encoding=settings.encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise SystemExit(f"cannot read input: {e}") from e


def _cmd_translate(args: argparse.Namespace, *, settings: TranslatorSettings) -> int:
    src = _load_source(args, settings=settings)
    out_path = args.output or settings.output_path
    result = try_translate(src)

    if not result.ok:
        # Nothing is written: text accumulated before the failure is discarded.
        if args.json:
            print(result.model_dump_json())
        else:
            print(f"Error during parsing: {result.error}", file=sys.stderr)
        return 1

    assert result.output is not None
    if not (args.json and out_path == STDIO):
        try:
            write_output(out_path, result.output, encoding=settings.encoding)
        except OSError as e:
            raise SystemExit(f"cannot write output: {e}") from e
    logger.info("wrote %d chars to %s", len(result.output), out_path)

    if args.json:
        print(result.model_dump_json())
    else:
        report = sys.stderr if out_path == STDIO else sys.stdout
        print("Parsing completed successfully.", file=report)
    return 0


def _cmd_tokens(args: argparse.Namespace, *, settings: TranslatorSettings) -> int:
    src = _load_source(args, settings=settings)
    lexer = Tokenizer(src)
    try:
        while True:
            tok = lexer.next()
            print(TokenRecord.from_token(tok).model_dump_json())
            if tok.kind == TokenKind.EOF:
                return 0
    except TranslateError as e:
        print(f"Error during tokenizing: {e}", file=sys.stderr)
        return 1


def main(argv: list[str] | None = None) -> int:
    try:
        settings = load_settings()
    except ValueError as e:
        raise SystemExit(f"invalid configuration: {e}") from e

    parser = argparse.ArgumentParser(prog="sexp2cpp")
    parser.add_argument(
        "--log-level",
        choices=sorted(_LEVELS),
        default=None,
        help="logging level (default: SEXP2CPP_LOG_LEVEL or warning)",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    tr_p = sub.add_parser("translate", help="translate a program to C++")
    _add_source_args(tr_p)
    tr_p.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help=f"output file, '-' for stdout (default: SEXP2CPP_OUTPUT or {settings.output_path})",
    )
    tr_p.add_argument("--json", action="store_true", help="print a JSON report")

    tok_p = sub.add_parser("tokens", help="print the token stream as JSON lines")
    _add_source_args(tok_p)

    args = parser.parse_args(argv)
    _configure_logging(args.log_level or settings.log_level)

    if args.cmd == "translate":
        return _cmd_translate(args, settings=settings)
    if args.cmd == "tokens":
        return _cmd_tokens(args, settings=settings)

    raise AssertionError(f"unhandled cmd: {args.cmd}")
