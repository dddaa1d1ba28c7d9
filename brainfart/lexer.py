"""Lexer for Brainfart source code.

The lexer walks the source one character at a time, turning the eight
command characters into tokens and skipping everything else. Bracket
nesting is validated during the same pass, so the parser never sees an
unbalanced token stream.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .errors import UnmatchedCloseBracket, UnmatchedOpenBracket
from .token import Token, TokenType


COMMANDS: Dict[str, TokenType] = {t.value: t for t in TokenType}
NEWLINES = ('\n', '\r')


def lex_char(c: str) -> Optional[TokenType]:
    return COMMANDS.get(c)


def tokenize(source: str) -> List[Token]:
    """Convert source text into a list of command tokens.

    Lines and columns are 1-indexed. A newline or carriage return starts
    a new line; every other character, command or not, occupies one
    column. Raises `UnmatchedCloseBracket` as soon as a `]` has nothing to
    close, and `UnmatchedOpenBracket` after the scan if any `[` is left
    open.
    """
    tokens: List[Token] = []
    line = 1
    col = 1
    depth = 0
    for c in source:
        if c in NEWLINES:
            line += 1
            col = 1
            continue
        token_type = lex_char(c)
        if token_type is not None:
            token = Token(token_type, line, col)
            if token_type is TokenType.LOOP_START:
                depth += 1
            elif token_type is TokenType.LOOP_END:
                if depth == 0:
                    raise UnmatchedCloseBracket(token)
                depth -= 1
            tokens.append(token)
        col += 1
    if depth != 0:
        raise UnmatchedOpenBracket()
    return tokens
