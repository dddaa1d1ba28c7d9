"""Token definitions for Brainfart source code.

Each of the eight command characters becomes a `Token` that remembers
the line and column where it appeared, so later stages can point at the
exact character that caused a failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    MOVE_RIGHT = '>'
    MOVE_LEFT = '<'
    ADD = '+'
    SUB = '-'
    OUTPUT = '.'
    INPUT = ','
    LOOP_START = '['
    LOOP_END = ']'


@dataclass(frozen=True)
class Token:
    type: TokenType
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.type.value!r} @ {self.line}:{self.column})"
