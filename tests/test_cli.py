import pytest

from lumen import __version__
from lumen.cli import build_parser, main


def test_eval_prints_values(capsys):
    assert main(["--no-prelude", "-e", "(+ 1 2)", "-e", "'(a \"b\")"]) == 0
    assert capsys.readouterr().out == '3\n(a "b")\n'


def test_eval_with_prelude(capsys):
    assert main(["-e", "(map (lambda (x) (+ x 1)) '(1 2))"]) == 0
    assert capsys.readouterr().out == "(2 3)\n"


def test_eval_error_prints_traceback(capsys):
    assert main(["--no-prelude", "-e", "(car 5)"]) == 1
    err = capsys.readouterr().err
    assert "type-error: expected cons, got 5" in err
    assert "from #<native-procedure:car>" in err


def test_run_files(tmp_path, capsys):
    script = tmp_path / "script.lsp"
    script.write_text('(define x 20)\n(print "x is" (+ x 1))\n')
    assert main(["--no-prelude", str(script)]) == 0
    assert capsys.readouterr().out == "x is 21\n"


def test_files_run_before_expressions(tmp_path, capsys):
    script = tmp_path / "defs.lsp"
    script.write_text("(define (double x) (* 2 x))")
    assert main(["--no-prelude", str(script), "-e", "(double 21)"]) == 0
    assert capsys.readouterr().out == "42\n"


def test_missing_file(tmp_path, capsys):
    assert main(["--no-prelude", str(tmp_path / "nope.lsp")]) == 1
    assert "io-error" in capsys.readouterr().err


def test_repl_reads_until_forms_are_complete(monkeypatch, capsys):
    lines = iter(["(define (f x)", "  (* x 10))", "(f 4)", "(car 1)", "(f 5)"])

    def fake_input(prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    assert main(["--no-prelude"]) == 0
    captured = capsys.readouterr()
    assert "40\n" in captured.out
    assert "50\n" in captured.out
    assert "type-error" in captured.err


def test_version(capsys):
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--version"])
    assert __version__ in capsys.readouterr().out


def test_verbosity_flag():
    args = build_parser().parse_args(["-vv", "a.lsp"])
    assert args.verbose == 2
    assert args.files == ["a.lsp"]
