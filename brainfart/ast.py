"""Expression tree definitions for Brainfart.

The parser collapses runs of commands into counted expressions. Every
expression is a single `Expr` tagged with its `ExprKind`; the tag is what
the parser and interpreter dispatch on. Non-loop expressions keep the
tokens they were built from so runtime errors can point back at source.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .token import Token


class ExprKind(Enum):
    MOVE_RIGHT = 'MoveRight'
    MOVE_LEFT = 'MoveLeft'
    ADD = 'Add'
    SUB = 'Sub'
    SET = 'Set'
    OUTPUT = 'Output'
    INPUT = 'Input'
    LOOP = 'Loop'


@dataclass
class Expr:
    kind: ExprKind
    count: int = 0
    tokens: List[Token] = field(default_factory=list)
    body: Optional[List['Expr']] = None  # LOOP only

    def __repr__(self) -> str:
        if self.kind is ExprKind.LOOP:
            return f"Loop({self.body!r})"
        return f"{self.kind.value}({self.count})"


def run(kind: ExprKind, token: Token) -> Expr:
    """A fresh run of one unit."""
    return Expr(kind, 1, [token])


def set_zero(token: Token) -> Expr:
    return Expr(ExprKind.SET, 0, [token])


def loop(body: List[Expr]) -> Expr:
    return Expr(ExprKind.LOOP, body=body)
