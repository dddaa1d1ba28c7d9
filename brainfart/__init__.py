# Brainfart language package
# This package provides a lexer, an optimizing parser and an interpreter for Brainfart.
from .errors import (
    BrainfartError, UnmatchedOpenBracket, UnmatchedCloseBracket,
    PointZeroDec, ValZeroDec, IoError,
)
from .lexer import tokenize
from .parser import parse_program, parse_tokens
from .reference import parse_unoptimized
from .interpreter import Interpreter, run_program, run_file

__all__ = [
    'BrainfartError',
    'UnmatchedOpenBracket',
    'UnmatchedCloseBracket',
    'PointZeroDec',
    'ValZeroDec',
    'IoError',
    'tokenize',
    'parse_program',
    'parse_tokens',
    'parse_unoptimized',
    'Interpreter',
    'run_program',
    'run_file',
]
