"""CLI entry point for the Sprig interpreter.

Usage:
    python -m sprig [-v|-vv|-vvv] [program_file]

Options:
  -v            Increase debug verbosity (can be repeated)

With a program file the whole file is run as one submission and its
output is written to stdout. Without one, an interactive shell reads
source one line at a time; bindings carry over from line to line and a
line reading `exit` ends the session.

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero.
"""

import argparse
import sys
from pathlib import Path
from typing import TextIO
from .interpreter import Interpreter

BANNER = "Sprig - Enter your code (type 'exit' to quit):"


def repl(interpreter: Interpreter, stdin: TextIO, stdout: TextIO) -> None:
    stdout.write(BANNER + '\n')
    for raw in stdin:
        line = raw.rstrip('\n')
        if line == 'exit':
            break
        if line:
            stdout.write(interpreter.interpret(line))
            stdout.flush()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sprig language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('program', nargs='?', help='Sprig program file to execute; omit for the interactive shell')
    args = parser.parse_args(argv)

    interpreter = Interpreter(debug_level=args.v)
    try:
        if not args.program:
            repl(interpreter, sys.stdin, sys.stdout)
            return
        program_file = Path(args.program)
        if not program_file.exists():
            print(f"Error: file {program_file} not found", file=sys.stderr)
            sys.exit(1)
        with open(program_file, 'r', encoding='utf-8') as f:
            source = f.read()
        result = interpreter.interpret(source)
        sys.stdout.write(result)
        if interpreter.last_error is not None:
            sys.exit(1)
    finally:
        interpreter.close()

if __name__ == '__main__':
    main()
