"""Interpreter for the Brainfart language.

This module executes the optimized expression tree produced by
`brainfart.parser` against a tape of unsigned 32-bit cells. The tape
starts with a single zero cell and grows to the right on demand; the
pointer may never move left of cell 0 and a cell may never be
decremented below 0. Both conditions raise errors that point at the
source token responsible.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, TextIO

from .ast import Expr, ExprKind
from .console import Console
from .errors import IoError, PointZeroDec, ValZeroDec
from .lexer import tokenize
from .parser import parse_tokens
from .reference import parse_unoptimized
from .token import Token


CELL_MASK = 0xFFFFFFFF
MAX_SCALAR = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)
FALLBACK_CHAR = ' '


def is_scalar_value(value: int) -> bool:
    """True if `value` is a Unicode scalar value (a code point that is not a surrogate)."""
    return value <= MAX_SCALAR and value not in SURROGATES


class Interpreter:
    """Executes Brainfart expression trees."""
    def __init__(self, console: Optional[Console] = None, debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.tape: List[int] = [0]
        self.pointer = 0
        self.console = console if console is not None else Console()
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.debug_fp: Optional[TextIO] = None
        self.debug_closed = False
        self.handlers: Dict[ExprKind, Callable[[Expr], None]] = {
            ExprKind.MOVE_RIGHT: self.run_move_right,
            ExprKind.MOVE_LEFT: self.run_move_left,
            ExprKind.ADD: self.run_add,
            ExprKind.SUB: self.run_sub,
            ExprKind.SET: self.run_set,
            ExprKind.OUTPUT: self.run_output,
            ExprKind.INPUT: self.run_input,
        }

    def debug(self, msg: str):
        # the log is opened on first use and stays closed once run() is done
        if self.debug_level <= 0 or self.debug_closed:
            return
        if self.debug_fp is None:
            self.debug_fp = open(self.debug_file, 'a', encoding='utf-8')
        self.debug_fp.write(msg + '\n')
        self.debug_fp.flush()

    def close_debug(self) -> None:
        if self.debug_fp is not None:
            self.debug_fp.close()
            self.debug_fp = None
        self.debug_closed = True

    @property
    def cell(self) -> int:
        return self.tape[self.pointer]

    @cell.setter
    def cell(self, value: int) -> None:
        self.tape[self.pointer] = value

    # Public API
    def run(self, exprs: List[Expr]) -> None:
        try:
            self.execute_block(exprs)
            if self.debug_level >= 1:
                self.debug(f"finished with pointer {self.pointer}, tape size {len(self.tape)}")
        finally:
            self.close_debug()

    def execute_block(self, exprs: List[Expr]) -> None:
        """Run `exprs` depth-first with an explicit stack of loop bodies.

        Each frame is a body and the index of its next expression. A loop
        keeps its frame's index on itself while its body runs, so finishing
        the body brings execution back to the loop's cell check.
        """
        frames: List[List] = [[exprs, 0]]
        while frames:
            frame = frames[-1]
            body, index = frame
            if index >= len(body):
                frames.pop()
                continue
            expr = body[index]
            if self.debug_level >= 2:
                self.debug(f"{expr.kind.value}({expr.count}) at cell {self.pointer} = {self.cell}")
            if expr.kind is ExprKind.LOOP:
                if self.loop_continues():
                    frames.append([expr.body, 0])
                else:
                    frame[1] += 1
            else:
                self.handlers[expr.kind](expr)
                frame[1] += 1

    def failing_token(self, expr: Expr, units_done: int) -> Token:
        """Token of the unit that failed after `units_done` units succeeded."""
        return expr.tokens[min(units_done, len(expr.tokens) - 1)]

    def run_add(self, expr: Expr) -> None:
        self.cell = (self.cell + expr.count) & CELL_MASK

    def run_sub(self, expr: Expr) -> None:
        value = self.cell
        if expr.count > value:
            raise ValZeroDec(self.failing_token(expr, value))
        self.cell = value - expr.count

    def run_set(self, expr: Expr) -> None:
        self.cell = expr.count

    def run_move_right(self, expr: Expr) -> None:
        self.pointer += expr.count
        if self.pointer >= len(self.tape):
            self.grow(self.pointer + 1)

    def grow(self, needed: int) -> None:
        size = max(needed, 2 * len(self.tape))
        if self.debug_level >= 3:
            self.debug(f"grow tape {len(self.tape)} -> {size}")
        self.tape.extend([0] * (size - len(self.tape)))

    def run_move_left(self, expr: Expr) -> None:
        if expr.count > self.pointer:
            raise PointZeroDec(self.failing_token(expr, self.pointer))
        self.pointer -= expr.count

    def run_output(self, expr: Expr) -> None:
        value = self.cell
        if is_scalar_value(value):
            self.console.write(chr(value) * expr.count)
        else:
            # one space for the whole run, however long it is
            self.console.write(FALLBACK_CHAR)

    def run_input(self, expr: Expr) -> None:
        for _ in range(expr.count):
            try:
                line = self.console.read_line()
            except (EOFError, OSError, UnicodeDecodeError) as e:
                raise IoError(expr.tokens[0]) from e
            self.cell = ord(line[0])

    def loop_continues(self) -> bool:
        """Checked before every iteration of a loop, the first included."""
        if self.debug_level >= 3:
            self.debug(f"loop check cell {self.pointer} = {self.cell}")
        return self.cell != 0


def run_program(source: str, console: Optional[Console] = None, debug_level: int = 0,
                optimize: bool = True, debug_file: str = 'debug.txt') -> Interpreter:
    """Lex, parse and run a Brainfart program, returning the finished interpreter."""
    tokens = tokenize(source)
    exprs = parse_tokens(tokens) if optimize else parse_unoptimized(source)
    interpreter = Interpreter(console=console, debug_level=debug_level, debug_file=debug_file)
    if debug_level >= 1:
        interpreter.debug(f"lexed {len(tokens)} tokens into {len(exprs)} expressions")
    interpreter.run(exprs)
    return interpreter


def run_file(file_path: str, console: Optional[Console] = None, debug_level: int = 0,
             optimize: bool = True, debug_file: str = 'debug.txt') -> Interpreter:
    """Read a Brainfart file and run it."""
    with open(file_path, 'r', encoding='utf-8') as f:
        source = f.read()
    return run_program(source, console=console, debug_level=debug_level,
                       optimize=optimize, debug_file=debug_file)
