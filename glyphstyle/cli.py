#!/usr/bin/env python3
"""
Render plain ASCII letters as styled Unicode look-alikes (bold, script,
fraktur, double-struck, ...).

Examples:
  glyphstyle b "Hello world"      ->  𝐇𝐞𝐥𝐥𝐨 𝐰𝐨𝐫𝐥𝐝
  glyphstyle d "RQZ"              ->  ℝℚℤ

Usage:
  - Convert a positional argument (a newline is appended):
      glyphstyle sc "Hello"
  - Text starting with a dash goes after "--":
      glyphstyle b -- "-5 apples"
  - Convert stdin, written back verbatim (TEXT omitted or '-'):
      echo Hello | glyphstyle f -
  - List the style tokens:
      glyphstyle --list
  - Write a Markdown specimen of every style:
      glyphstyle --specimen --sample "Quick brown fox" -o specimen.md
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, Tuple

from .catalog import STYLE_TOKENS, Style, resolve
from .config import Settings, load_settings
from .convert import stylize
from .errors import ConfigError, UnrecognizedStyle, usage_hint
from .specimen import render_specimen, write_specimen

logger = logging.getLogger("glyphstyle.cli")

STDIN_TOKEN = "-"
STDOUT_TOKEN = "-"
LIST_SAMPLE = "Glyph"


def parse_args(argv: Iterable[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="glyphstyle",
        description="Convert ASCII letters to styled Unicode (Mathematical Alphanumeric Symbols).",
    )
    parser.add_argument(
        "style",
        nargs="?",
        metavar="STYLE",
        help=f"Style token, one of: {' '.join(STYLE_TOKENS)} (default: configured default_style)",
    )
    parser.add_argument(
        "text",
        nargs="?",
        metavar="TEXT",
        default=STDIN_TOKEN,
        help="Text to convert, or '-' (default) to read standard input.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML settings file (default: $GLYPHSTYLE_CONFIG if set).",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List style tokens with a sample rendering and exit.",
    )
    parser.add_argument(
        "--specimen",
        action="store_true",
        help="Render a Markdown specimen of every style and exit.",
    )
    parser.add_argument(
        "--sample",
        default=None,
        help=f"Sample text for --specimen (default: settings sample_text) or --list (default: {LIST_SAMPLE}).",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="PATH",
        default=STDOUT_TOKEN,
        help="Where to write the specimen ('-' for stdout). Only used with --specimen.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity on stderr (-v info, -vv debug).",
    )
    return parser.parse_args(list(argv))


def _configure_logging(settings: Settings, verbose: int) -> None:
    level = logging.getLevelName(settings.log_level)
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = min(level, logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s", stream=sys.stderr)


def _read_text(text: str) -> Tuple[str, bool]:
    """Return the subject text and whether it came from stdin."""
    if text == STDIN_TOKEN:
        return sys.stdin.read(), True
    return text, False


def _list_styles(sample: str) -> str:
    lines = [f"{style.token}\t{style.label}\t{stylize(style, sample)}" for style in Style]
    return "\n".join(lines) + "\n"


def _resolve_style(token: Optional[str], settings: Settings) -> Style:
    chosen = token if token is not None else settings.default_style
    if chosen is None:
        raise UnrecognizedStyle("", STYLE_TOKENS)
    return resolve(chosen)


def main(argv: Iterable[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    _configure_logging(settings, args.verbose)

    if args.list:
        sys.stdout.write(_list_styles(args.sample if args.sample is not None else LIST_SAMPLE))
        return 0

    if args.specimen:
        sample = args.sample if args.sample is not None else settings.sample_text
        if args.output == STDOUT_TOKEN:
            sys.stdout.write(render_specimen(sample))
        else:
            write_specimen(Path(args.output), sample)
        return 0

    try:
        style = _resolve_style(args.style, settings)
    except UnrecognizedStyle as exc:
        logger.debug("Rejected style token %r", exc.token)
        print(usage_hint(exc.accepted), file=sys.stderr)
        return 2

    text, from_stdin = _read_text(args.text)
    logger.debug("Converting %s characters from %s as %s", len(text), "stdin" if from_stdin else "argument", style.label)

    converted = stylize(style, text)
    sys.stdout.write(converted if from_stdin else converted + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
