from typing import Optional

from brainfart.token import Token


class BrainfartError(Exception):
    """Base exception for every lexing, parsing and runtime failure."""
    description = 'Unknown error'

    def __init__(self, token: Optional[Token] = None):
        self.token = token
        super().__init__(self.format_message())

    def format_message(self) -> str:
        if self.token is None:
            return f"ERROR: {self.description}"
        return f"ERROR line {self.token.line} col {self.token.column}: {self.description}"

    @property
    def message(self) -> str:
        return self.args[0]


class UnmatchedOpenBracket(BrainfartError):
    """A `[` was never closed. Only detected once the whole source is scanned."""
    description = 'Missing matching closing bracket ]'

    def __init__(self):
        super().__init__(None)


class UnmatchedCloseBracket(BrainfartError):
    description = 'Encountered unmatched closing bracket ]'


class PointZeroDec(BrainfartError):
    description = 'Attempted to decrement pointer that is at index 0'


class ValZeroDec(BrainfartError):
    description = 'Attempted to decrement value that is 0'


class IoError(BrainfartError):
    description = 'Failed to read character from input'
