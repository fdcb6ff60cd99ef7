from pathlib import Path
import pytest
from sprig.errors import SprigRuntimeError
from sprig.parser import parse_program
from sprig.interpreter import Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_7_partial_output():
    """Test program 7: output printed before a failure is kept.

    Assigning to a name that was never declared stops the submission;
    the two lines printed earlier stay ahead of the error line and the
    final print never runs.
    """
    with open(EXAMPLES / 'program_7.sprig', 'r', encoding='utf-8') as f:
        source = f.read()
    interp = Interpreter()
    out = interp.interpret(source)
    assert out == "3\n6\nError: Undefined variable 'missing'\n"
    # bindings committed before the failure survive
    assert interp.interpret('print(total)') == '6\n'


def test_program_7_run_raises(capsys):
    with open(EXAMPLES / 'program_7.sprig', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    with pytest.raises(SprigRuntimeError):
        interp.run(ast)
    assert capsys.readouterr().out == '3\n6\n'
