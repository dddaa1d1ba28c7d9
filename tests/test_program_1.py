from pathlib import Path

from brainfart.parser import parse_program
from brainfart.interpreter import Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_1_hello_world(capsys):
    source = (EXAMPLES / 'program_1.bf').read_text(encoding='utf-8')
    exprs = parse_program(source)
    interp = Interpreter()
    interp.run(exprs)
    out = capsys.readouterr().out
    assert out == 'Hello World!\n'
