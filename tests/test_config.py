import os
from pathlib import Path

import pytest

from lumen import config
from lumen.builtin import default_environment
from lumen.errors import LispIOError
from lumen.interpreter import Interpreter
from lumen.types.symbol import Symbol


def test_default_prelude_path(monkeypatch):
    monkeypatch.delenv("LUMEN_PRELUDE_PATH", raising=False)
    path = config.get_prelude_path()
    assert path.name == "prelude.lsp"
    assert path.is_file()


def test_load_path_from_environment(monkeypatch, tmp_path):
    other = tmp_path / "other"
    monkeypatch.setenv("LUMEN_LOAD_PATH", f"{tmp_path}{os.pathsep}{other}")
    assert config.get_load_path() == [Path(tmp_path), other]


def test_load_path_default_is_empty(monkeypatch):
    monkeypatch.delenv("LUMEN_LOAD_PATH", raising=False)
    assert config.get_load_path() == []


@pytest.mark.parametrize("raw,expected", [("1", True), ("true", True), ("YES", True), ("0", False), ("", False)])
def test_allow_redefine(monkeypatch, raw, expected):
    monkeypatch.setenv("LUMEN_ALLOW_REDEFINE", raw)
    assert config.get_allow_redefine() is expected


def test_allow_redefine_reaches_the_environment(monkeypatch):
    monkeypatch.setenv("LUMEN_ALLOW_REDEFINE", "on")
    env = default_environment()
    assert env.lookup(Symbol("*allow-redefine*")) == Symbol("true")


@pytest.mark.parametrize("raw,expected", [(None, 20000), ("50000", 50000), ("many", 20000)])
def test_recursion_limit(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("LUMEN_RECURSION_LIMIT", raising=False)
    else:
        monkeypatch.setenv("LUMEN_RECURSION_LIMIT", raw)
    assert config.get_recursion_limit() == expected


def test_log_level(monkeypatch):
    monkeypatch.setenv("LUMEN_LOG_LEVEL", "debug")
    assert config.get_log_level() == "DEBUG"


def test_load_file_uses_the_load_path(monkeypatch, tmp_path):
    (tmp_path / "lib.lsp").write_text("(define z 42)\n(+ z 1)\n")
    monkeypatch.setenv("LUMEN_LOAD_PATH", str(tmp_path))
    interp = Interpreter(env=default_environment(allow_redefine=False), prelude=None)
    assert interp.eval('(load-file "lib.lsp")') == 43
    assert interp.eval("z") == 42


def test_load_file_defines_at_top_level(tmp_path, interp):
    lib = tmp_path / "inner.lsp"
    lib.write_text("(define inner-value 'loaded)")
    interp.eval(f'(let ((x 1)) (load-file "{lib}"))')
    assert interp.eval("inner-value") == Symbol("loaded")


def test_load_missing_file(interp, tmp_path):
    missing = tmp_path / "missing.lsp"
    with pytest.raises(LispIOError):
        interp.eval(f'(load-file "{missing}")')
