"""Unoptimized parse of Brainfart source using a Lark grammar.

Every command becomes its own single-unit expression and every bracket
pair becomes a loop, with no merging, cancelling or `[-]` rewriting.
Running this tree gives the behaviour of executing the source directly,
which is what the optimized tree from `brainfart.parser` must match.
"""

from __future__ import annotations

from typing import List

from lark import Lark, Transformer_NonRecursive

from .ast import Expr, ExprKind, loop, run
from .lexer import COMMANDS, tokenize
from .parser import COMMAND_KINDS
from .token import Token


BRAINFART_GRAMMAR = r"""
    start: _instr*
    _instr: COMMAND | loop
    loop: "[" _instr* "]"

    COMMAND: /[<>+\-.,]/
    COMMENT: /[^<>+\-.,\[\]]+/
    %ignore COMMENT
"""


BRAINFART_PARSER = Lark(
    BRAINFART_GRAMMAR,
    parser='lalr',
    propagate_positions=True,
    maybe_placeholders=False,
    lexer='basic',
)


class UnoptimizedTransformer(Transformer_NonRecursive):
    """Transforms the parse tree into single-unit expressions.

    The non-recursive walk keeps deeply nested loops within the recursion limit.
    """

    def start(self, items) -> List[Expr]:
        return list(items)

    def loop(self, items) -> Expr:
        return loop(list(items))

    def COMMAND(self, token) -> Expr:
        token_type = COMMANDS[token.value]
        kind: ExprKind = COMMAND_KINDS[token_type]
        return run(kind, Token(token_type, token.line, token.column))


def parse_unoptimized(source: str) -> List[Expr]:
    """Parse source without optimization.

    The source is tokenized first so unbalanced brackets raise the same
    errors as the optimizing pipeline. Positions in the resulting tokens
    come from Lark, which only counts `\\n` as a line break.
    """
    tokenize(source)
    tree = BRAINFART_PARSER.parse(source)
    return UnoptimizedTransformer().transform(tree)
