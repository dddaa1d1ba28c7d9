import sys
from typing import Optional, TextIO


class Console:
    """Line-oriented access to the process's standard streams.

    The interpreter only ever writes text and reads whole lines. Streams
    are looked up on each call unless given explicitly, so swapping
    `sys.stdin`/`sys.stdout` (as tests do) takes effect immediately.
    """
    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stdout.write(text)

    def flush(self) -> None:
        self.stdout.flush()

    def read_line(self) -> str:
        """Read one line, newline included. Raises EOFError at end of input."""
        self.flush()
        line = self.stdin.readline()
        if line == '':
            raise EOFError('end of input')
        return line
