"""Parser and peephole optimizer for Brainfart.

The parser is a single pass over the token list. Each block (the program
itself or a loop body) gets an `ExprBuilder` that owns the expressions
emitted so far and rewrites its last element as new commands arrive.
Open loops are kept on an explicit stack of builders, so nesting depth is
not limited by Python's recursion limit. The rewrites are:

* runs of the same command collapse into one counted expression;
* opposite commands cancel (`><`, `+-` and friends vanish);
* the `[-]` idiom becomes a direct `Set(0)`, and later `+`/`-` adjust
  the constant instead of starting a new run.

Brackets are validated by the lexer before parsing, so the parser does
not report structural errors. The only failure it can raise is
`ValZeroDec`, when a `-` would take a known-zero constant below zero.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .ast import Expr, ExprKind, loop, run, set_zero
from .errors import ValZeroDec
from .lexer import tokenize
from .token import Token, TokenType


COMMAND_KINDS: Dict[TokenType, ExprKind] = {
    TokenType.MOVE_RIGHT: ExprKind.MOVE_RIGHT,
    TokenType.MOVE_LEFT: ExprKind.MOVE_LEFT,
    TokenType.ADD: ExprKind.ADD,
    TokenType.SUB: ExprKind.SUB,
    TokenType.OUTPUT: ExprKind.OUTPUT,
    TokenType.INPUT: ExprKind.INPUT,
}

# Pairs that cancel each other out. Output and input runs never cancel.
OPPOSITE: Dict[ExprKind, ExprKind] = {
    ExprKind.MOVE_RIGHT: ExprKind.MOVE_LEFT,
    ExprKind.MOVE_LEFT: ExprKind.MOVE_RIGHT,
    ExprKind.ADD: ExprKind.SUB,
    ExprKind.SUB: ExprKind.ADD,
}


class ExprBuilder:
    """Expressions of one block under construction."""

    def __init__(self):
        self.exprs: List[Expr] = []

    def last(self) -> Optional[Expr]:
        if self.exprs:
            return self.exprs[-1]
        return None

    def append(self, expr: Expr) -> None:
        self.exprs.append(expr)

    def emit(self, kind: ExprKind, token: Token) -> None:
        if kind in OPPOSITE:
            self.emit_cancelable(kind, token)
        else:
            self.emit_run(kind, token)

    def emit_run(self, kind: ExprKind, token: Token) -> None:
        last = self.last()
        if last is not None and last.kind is kind:
            self.extend(last, token)
        else:
            self.append(run(kind, token))

    def emit_cancelable(self, kind: ExprKind, token: Token) -> None:
        last = self.last()
        if last is None:
            self.append(run(kind, token))
        elif last.kind is kind:
            self.extend(last, token)
        elif last.kind is OPPOSITE[kind]:
            self.cancel(last)
        elif last.kind is ExprKind.SET and kind in (ExprKind.ADD, ExprKind.SUB):
            self.adjust_set(last, kind, token)
        else:
            self.append(run(kind, token))

    def extend(self, expr: Expr, token: Token) -> None:
        expr.count += 1
        expr.tokens.append(token)

    def cancel(self, expr: Expr) -> None:
        if expr.count == 1:
            self.exprs.pop()
        else:
            expr.count -= 1
            expr.tokens.pop()

    def adjust_set(self, expr: Expr, kind: ExprKind, token: Token) -> None:
        # tokens[0] is the zeroing token; the rest are one per unit of the constant
        if kind is ExprKind.ADD:
            self.extend(expr, token)
        elif expr.count == 0:
            raise ValZeroDec(token)
        else:
            expr.count -= 1
            expr.tokens.pop()

    def close_loop(self) -> Expr:
        """Turn this builder's contents into the expression for a loop."""
        if len(self.exprs) == 1:
            only = self.exprs[0]
            if only.kind is ExprKind.SUB and only.count == 1:
                return set_zero(only.tokens[0])
        return loop(self.exprs)


class Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Token:
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def parse_program(self) -> List[Expr]:
        # one builder per open loop; the bottom one is the program itself
        builders = [ExprBuilder()]
        while self.peek() is not None:
            token = self.advance()
            if token.type is TokenType.LOOP_START:
                builders.append(ExprBuilder())
            elif token.type is TokenType.LOOP_END:
                if len(builders) == 1:
                    # the lexer rejects these; skip one in a hand-built token list
                    continue
                self.close_loop(builders)
            else:
                builders[-1].emit(COMMAND_KINDS[token.type], token)
        while len(builders) > 1:
            self.close_loop(builders)
        return builders[0].exprs

    def close_loop(self, builders: List[ExprBuilder]) -> None:
        body = builders.pop()
        builders[-1].append(body.close_loop())


def parse_tokens(tokens: List[Token]) -> List[Expr]:
    return Parser(tokens).parse_program()


def parse_program(source: str) -> List[Expr]:
    """Lex and parse Brainfart source into an optimized expression list."""
    return parse_tokens(tokenize(source))
