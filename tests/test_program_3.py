from pathlib import Path
from sprig.parser import parse_program
from sprig.interpreter import Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_3_counter(capsys):
    """Test program 3: assignment updates an existing binding.

    The counter is declared, bumped once through plain assignment and
    printed. Trailing blanks after the last statement are ignored.
    """
    with open(EXAMPLES / 'program_3.sprig', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    out = capsys.readouterr().out.strip()
    assert out == '1'
    assert interp.global_env.get('counter') == 1.0
