# Sprig language package
# This package provides a lexer, parser and tree-walking interpreter for Sprig.
from .interpreter import run_program, run_file, Interpreter
from .errors import SprigError, LexError, ParseError, SprigRuntimeError

__all__ = [
    'run_program',
    'run_file',
    'Interpreter',
    'SprigError',
    'LexError',
    'ParseError',
    'SprigRuntimeError',
]
