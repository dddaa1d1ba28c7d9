from pathlib import Path

from brainfart.parser import parse_program
from brainfart.interpreter import Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_4_alphabet(capsys):
    source = (EXAMPLES / 'program_4.bf').read_text(encoding='utf-8')
    exprs = parse_program(source)
    interp = Interpreter()
    interp.run(exprs)
    out = capsys.readouterr().out
    assert out == 'abcdefghijklmnopqrstuvwxyz'
    assert interp.tape[0] == 0
    assert interp.tape[2] == ord('z')
