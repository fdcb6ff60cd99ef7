from pathlib import Path
from sprig.parser import parse_program
from sprig.interpreter import Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_6_arithmetic(capsys):
    # precedence, fractional results and division by zero
    with open(EXAMPLES / 'program_6.sprig', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['14', '20', '2.5', '0.333333', '-3', 'inf', '-inf']
