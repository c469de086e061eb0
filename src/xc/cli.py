"""Command-line interface for xc."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, NoReturn

from xc import __version__
from xc.errors import ConfigError, FileError, UsageError, XcError

_EPILOG = """\
classes:
  [:alnum:], [:alpha:], [:blank:], [:cntrl:], [:digit:]
  [:graph:], [:lower:], [:print:], [:punct:], [:space:]
  [:htab:], [:vtab:], [:newline:], [:upper:], [:xdigit:]

Class tokens remove every matching byte. Other characters in PATTERN are
removed at most LIMIT times each.
"""


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    pattern: str
    limit: int | None
    output_file: Path | None
    debug: bool


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = _ArgumentParser(
        prog="xc",
        description="Remove characters from a file by literal or by class",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("pattern", help="Characters and [:class:] tokens to remove")
    p.add_argument("-f", "--file", required=True, metavar="FILE", help="Input file")
    p.add_argument(
        "-l",
        "--limit",
        type=int,
        default=None,
        metavar="N",
        help="How many of each literal character to remove (default: all)",
    )
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover xc.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Print a resolution trace to stderr")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def config_file(config_path: Path | None, input_dir: Path) -> Path:
    """Return the explicit config path, or xc.toml next to the input file."""
    return config_path if config_path is not None else input_dir / "xc.toml"


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_file(config_path, input_dir)

    if not path.is_file():
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"{path}: {exc}") from None
    except OSError as exc:
        raise FileError.from_os_error(exc, str(path)) from None


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.file)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)
    config_dir = config_file(config_path, input_dir).parent

    # Limit: config < CLI
    limit: int | None = None
    cfg_limit = config.get("limit")
    if cfg_limit is not None:
        if isinstance(cfg_limit, bool) or not isinstance(cfg_limit, int):
            raise ConfigError(f"limit must be an integer, got {cfg_limit!r}")
        limit = cfg_limit
    if args.limit is not None:
        limit = args.limit
    if limit is not None and limit < 0:
        raise ConfigError("limit cannot be less than 0")

    # Output: config < CLI; a relative config path is taken from the config's directory
    output_file: Path | None = None
    cfg_output = config.get("output")
    if cfg_output is not None:
        if not isinstance(cfg_output, str):
            raise ConfigError(f"output must be a string, got {cfg_output!r}")
        output_file = config_dir / cfg_output
    if args.output:
        output_file = Path(args.output)

    return CliOptions(
        input_file=input_file,
        pattern=args.pattern,
        limit=limit,
        output_file=output_file,
        debug=args.debug,
    )


def read_input(path: Path) -> bytes:
    """Read the whole input file into memory."""
    try:
        return path.read_bytes()
    except OSError as exc:
        raise FileError.from_os_error(exc, str(path)) from None


def filter_file(options: CliOptions) -> bytes:
    """Read the input file and apply the pattern to its contents."""
    from xc.debug import dump_resolution
    from xc.pattern import check_quota, resolve

    quota = check_quota(options.limit)
    source = read_input(options.input_file)
    result = resolve(options.pattern, source, quota)

    if options.debug:
        dump_resolution(result, len(source), quota, file=sys.stderr)

    return result.output


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1). Does not call sys.exit()."""
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
        options = resolve_options(args)
        output = filter_file(options)
    except XcError as exc:
        print(exc.format(), file=sys.stderr)
        return 1

    if options.output_file:
        try:
            options.output_file.write_bytes(output)
        except OSError as exc:
            err = FileError.from_os_error(exc, str(options.output_file))
            print(err.format(), file=sys.stderr)
            return 1
    else:
        sys.stdout.buffer.write(output)
        sys.stdout.flush()

    return 0
