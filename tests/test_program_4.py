from pathlib import Path
from sprig.parser import parse_program
from sprig.interpreter import Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_4_nested_blocks(capsys):
    """Test program 4: nested blocks shadow and restore names.

    Each block declares its own `x`; the outer binding is visible again
    once the block ends. Assigning to `y` inside a block updates the
    global binding because the block never declared one.
    """
    with open(EXAMPLES / 'program_4.sprig', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['2', 'inner', '2', '1', '12']
