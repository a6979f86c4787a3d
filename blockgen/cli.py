"""blockgen CLI: workspace XML in, Python source out."""

from __future__ import annotations

import json
import sys

from .errors import GenerationError
from .generator import generate
from .parse import ParseError, parse_xml
from .util import parse_count

PHASES: list[str] = ["parse", "generate"]

USAGE: str = """\
blockgen [OPTIONS] [INPUT] [-o OUTPUT]

Generate a Python program from a block workspace (XML). Reads INPUT, or
stdin when INPUT is omitted.

Options:
  --stop-at PHASE     Stop after phase: parse (print block tree as JSON)
  --indent N          Spaces per indentation level (default 4)
  -o, --output FILE   Write output to FILE instead of stdout
  --help              Show this help message
"""


class Options:
    """Parsed command line."""

    def __init__(self) -> None:
        self.stop_at: str | None = None
        self.indent: int = 4
        self.input_file: str | None = None
        self.output_file: str | None = None


class CliError(Exception):
    """A failure reported as one diagnostic line; carries the exit code."""

    def __init__(self, msg: str, exit_code: int = 1):
        self.msg: str = msg
        self.exit_code: int = exit_code
        super().__init__(msg)


def load_workspace(input_file: str | None) -> str:
    """Workspace XML from INPUT or stdin; blank input is a usage error."""
    if input_file is None:
        raw = sys.stdin.buffer.read()
    else:
        try:
            with open(input_file, "rb") as f:
                raw = f.read()
        except OSError:
            raise CliError("cannot open '" + input_file + "'") from None
    try:
        source = raw.decode("utf-8")
    except ValueError:
        raise CliError("invalid utf-8 in input") from None
    if source.strip() == "":
        raise CliError("no input provided", 2)
    return source


def save_program(output: str, output_file: str | None) -> None:
    """Write generated code to FILE, or to stdout when no -o was given."""
    if output_file is None:
        sys.stdout.write(output)
        return
    try:
        with open(output_file, "w") as f:
            f.write(output)
    except OSError:
        raise CliError("cannot write '" + output_file + "'") from None


def run_pipeline(source: str, opts: Options) -> str:
    """Parse and generate, stopping early for --stop-at."""
    try:
        blocks = parse_xml(source)
    except ParseError as e:
        raise CliError(str(e.line) + ":" + str(e.col) + ": " + e.msg) from e
    if opts.stop_at == "parse":
        return json.dumps([b.to_dict() for b in blocks], indent=2) + "\n"
    try:
        return generate(blocks, indent=" " * opts.indent)
    except GenerationError as e:
        raise CliError(str(e)) from e


def parse_args(args: list[str]) -> tuple[Options | None, int]:
    """Parse arguments. Returns (options, exit_code); options is None to stop."""
    opts = Options()
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--help" or arg == "-h":
            print(USAGE, end="")
            return (None, 0)
        elif arg in ("--stop-at", "--indent", "-o", "--output"):
            if i + 1 >= len(args):
                print("error: " + arg + " requires an argument", file=sys.stderr)
                return (None, 2)
            value = args[i + 1]
            if arg == "--stop-at":
                if value not in PHASES:
                    print("error: unknown phase '" + value + "'", file=sys.stderr)
                    return (None, 2)
                opts.stop_at = value
            elif arg == "--indent":
                opts.indent = parse_count(value)
                if opts.indent == 0:
                    print("error: invalid indent '" + value + "'", file=sys.stderr)
                    return (None, 2)
            else:
                opts.output_file = value
            i += 2
        elif arg.startswith("-") and arg != "-":
            print("error: unknown flag '" + arg + "'", file=sys.stderr)
            return (None, 2)
        else:
            if opts.input_file is not None:
                print("error: unexpected argument '" + arg + "'", file=sys.stderr)
                return (None, 2)
            if arg != "-":
                opts.input_file = arg
            i += 1
    return (opts, 0)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    opts, code = parse_args(argv if argv is not None else sys.argv[1:])
    if opts is None:
        return code
    try:
        source = load_workspace(opts.input_file)
        save_program(run_pipeline(source, opts), opts.output_file)
    except CliError as e:
        print("error: " + e.msg, file=sys.stderr)
        return e.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
