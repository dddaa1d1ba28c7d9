import io
from pathlib import Path

from brainfart.parser import parse_program
from brainfart.interpreter import Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_2_echo(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO('A\n'))
    source = (EXAMPLES / 'program_2.bf').read_text(encoding='utf-8')
    exprs = parse_program(source)
    interp = Interpreter()
    interp.run(exprs)
    out = capsys.readouterr().out
    assert out == 'A'
