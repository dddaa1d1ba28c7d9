from pathlib import Path

import pytest

from brainfart.errors import PointZeroDec
from brainfart.parser import parse_program
from brainfart.interpreter import Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_5_pointer_underflow():
    """The second `<` of the merged run is the one that leaves the tape."""
    source = (EXAMPLES / 'program_5.bf').read_text(encoding='utf-8')
    exprs = parse_program(source)
    interp = Interpreter()
    with pytest.raises(PointZeroDec) as excinfo:
        interp.run(exprs)
    assert (excinfo.value.token.line, excinfo.value.token.column) == (3, 1)
    assert str(excinfo.value) == 'ERROR line 3 col 1: Attempted to decrement pointer that is at index 0'
    assert interp.pointer == 1
