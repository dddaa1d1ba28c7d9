"""CLI entry point for the Brainfart interpreter.

Usage:
    python -m brainfart [-v|-vv|-vvv] [--no-optimize] <program_file> [<program_file> ...]

Options:
  -v             Increase debug verbosity (can be repeated)
  --no-optimize  Run each program command by command, without merging runs

Each program file is lexed, parsed and run with its own interpreter, in
the order given. An error in one file is reported on stderr and the next
file still runs; the exit status is 1 if any file failed.

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero.
"""

import argparse
import sys
from pathlib import Path

from .errors import BrainfartError
from .interpreter import run_program

DEBUG_FILE = 'debug.txt'


def run_one(program_file: Path, debug_level: int, optimize: bool) -> bool:
    """Run a single program file, reporting any failure on stderr."""
    if not program_file.exists():
        print(f"Error: file {program_file} not found", file=sys.stderr)
        return False
    try:
        with open(program_file, 'r', encoding='utf-8') as f:
            source = f.read()
    except UnicodeDecodeError:
        print(f"Error: file {program_file} is not valid UTF-8", file=sys.stderr)
        return False
    except OSError:
        print(f"Error: cannot read file {program_file}", file=sys.stderr)
        return False
    if debug_level > 0:
        with open(DEBUG_FILE, 'a', encoding='utf-8') as fp:
            fp.write(f"== {program_file}\n")
    try:
        run_program(source, debug_level=debug_level, optimize=optimize, debug_file=DEBUG_FILE)
    except BrainfartError as e:
        sys.stdout.flush()
        print(e.message, file=sys.stderr)
        return False
    finally:
        sys.stdout.flush()
    return True


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Brainfart language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--no-optimize', action='store_true', help='run without peephole optimization')
    parser.add_argument('programs', nargs='+', metavar='program', help='Brainfart program file(s) to execute')
    args = parser.parse_args(argv)

    if args.v > 0:
        # start a fresh log for this invocation
        open(DEBUG_FILE, 'w', encoding='utf-8').close()

    failed = False
    for name in args.programs:
        if not run_one(Path(name), args.v, not args.no_optimize):
            failed = True
    if failed:
        sys.exit(1)


if __name__ == '__main__':
    main()
