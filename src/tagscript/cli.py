"""Command-line interface for TagScript."""

from __future__ import annotations

import argparse
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tagscript.render import FORMATS


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    format: str
    watch: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="tagscript",
        description="Tokenize TagScript source and print the token stream",
    )
    p.add_argument("input", help="Input .tag file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: text)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover tagscript.toml)",
    )
    p.add_argument("--watch", action="store_true", help="Watch for changes and re-tokenize")
    p.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Report dropped characters and unterminated strings to stderr",
    )
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "tagscript.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    cfg_output = config.get("output")
    if not isinstance(cfg_output, dict):
        cfg_output = {}

    # Output format: default < config < CLI
    fmt = "text"
    cfg_format = cfg_output.get("format")
    if cfg_format is not None:
        if cfg_format not in FORMATS:
            raise argparse.ArgumentTypeError(
                f"invalid output format in config: {cfg_format!r} "
                f"(expected one of: {', '.join(FORMATS)})"
            )
        fmt = cfg_format
    if args.format is not None:
        fmt = args.format

    # Output file: config < CLI
    output_file: Path | None = None
    cfg_file = cfg_output.get("file")
    if isinstance(cfg_file, str) and cfg_file:
        output_file = Path(cfg_file)
    if args.output:
        output_file = Path(args.output)

    # Debug: config < CLI
    debug = bool(config.get("debug", False))
    if args.debug is not None:
        debug = args.debug

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        format=fmt,
        watch=args.watch,
        debug=debug,
    )


def tokenize_file(options: CliOptions) -> str:
    """Read and tokenize a TagScript file, returning the rendered token stream."""
    from tagscript.debug import dump_notes
    from tagscript.lexer import Lexer
    from tagscript.render import render

    source = options.input_file.read_text(encoding="utf-8")
    lexer = Lexer(source)
    tokens = lexer.tokenize()

    if options.debug:
        dump_notes(lexer.notes, source, str(options.input_file), file=sys.stderr)

    return render(tokens, options.format)


def _write_output(options: CliOptions, text: str) -> None:
    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
        sys.stdout.flush()


def watch_loop(options: CliOptions) -> None:
    """Poll input file for changes, re-tokenize on each modification."""
    last_mtime = 0.0
    print(f"Watching {options.input_file} for changes...", file=sys.stderr)
    try:
        while True:
            try:
                mtime = options.input_file.stat().st_mtime
            except OSError:
                time.sleep(0.5)
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                try:
                    _write_output(options, tokenize_file(options))
                    print(f"Tokenized {options.input_file}", file=sys.stderr)
                except (OSError, UnicodeDecodeError) as exc:
                    print(f"error: {exc}", file=sys.stderr)
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.watch:
        watch_loop(options)
        return 0

    try:
        text = tokenize_file(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {options.input_file}: {exc}", file=sys.stderr)
        return 1

    _write_output(options, text)
    return 0
