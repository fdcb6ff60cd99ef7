import io
import sys
import pytest
from sprig.__main__ import BANNER, main, repl
from sprig.interpreter import Interpreter


def test_repl_keeps_state_between_lines():
    stdin = io.StringIO('let x = 2\n\nprint(x * 21)\nx = "s"\nprint(x)\nexit\nprint(x)\n')
    stdout = io.StringIO()
    repl(Interpreter(), stdin, stdout)
    assert stdout.getvalue() == BANNER + '\n42\ns\n'


def test_repl_reports_errors_and_continues():
    stdin = io.StringIO('print(nope)\nlet nope = 1\nprint(nope)\n')
    stdout = io.StringIO()
    repl(Interpreter(), stdin, stdout)
    assert stdout.getvalue().splitlines()[1:] == ["Error: Undefined variable 'nope'", '1']


def test_main_without_file_runs_shell(monkeypatch, capsys):
    monkeypatch.setattr(sys, 'stdin', io.StringIO('print("hi")\nexit\n'))
    main([])
    assert capsys.readouterr().out == BANNER + '\nhi\n'


def test_main_runs_file(tmp_path, capsys):
    program = tmp_path / 'hello.sprig'
    program.write_text('let who = "file"\nprint("from " + who)\n', encoding='utf-8')
    main([str(program)])
    assert capsys.readouterr().out == 'from file\n'


def test_main_exits_nonzero_on_error(tmp_path, capsys):
    program = tmp_path / 'broken.sprig'
    program.write_text('print(1)\nprint(missing)\n', encoding='utf-8')
    with pytest.raises(SystemExit) as exc:
        main([str(program)])
    assert exc.value.code == 1
    assert capsys.readouterr().out == "1\nError: Undefined variable 'missing'\n"


def test_main_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / 'nope.sprig')])
    assert exc.value.code == 1
    assert 'not found' in capsys.readouterr().err


def test_main_verbose_writes_debug_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    program = tmp_path / 'p.sprig'
    program.write_text('let a = 1\n', encoding='utf-8')
    main(['-vv', str(program)])
    assert 'define a: Number = 1 (depth 0)' in (tmp_path / 'debug.txt').read_text(encoding='utf-8')
