"""Tests for the command handler, interpreter loop and demo."""

import logging
import os
import sys

import pytest

# Add the src directory to the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import funcascade
from funcascade import config
from funcascade.cascade import Stage
from funcascade.table import SharedTable

from table_test_data import DEMO_SAMPLES, missing_path, write_table


@pytest.fixture(autouse=True)
def reset_logging():
    """main() attaches handlers to the captured stdout or a log file; drop them afterwards."""
    yield
    logger = logging.getLogger("funcascade")
    for log_handler in logger.handlers:
        log_handler.close()
    logger.handlers.clear()


@pytest.fixture
def demo(tmp_path):
    return SharedTable(write_table(tmp_path, DEMO_SAMPLES))


def feed(monkeypatch, lines):
    """Replace input() with one that returns `lines` and then hits EOF."""
    lines = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr("builtins.input", fake_input)


def test_parse_args(monkeypatch):
    monkeypatch.setenv(config.TABLE_ENV_VAR, "/data/env.dat")
    assert funcascade.parse_args([]) == ("/data/env.dat", [])
    assert funcascade.parse_args(["demo"]) == ("/data/env.dat", ["demo"])
    assert funcascade.parse_args(["my.dat", "table", "1 2 3"]) == ("my.dat", ["table", "1 2 3"])
    assert funcascade.parse_args(["1 0.5 0"]) == ("/data/env.dat", ["1 0.5 0"])


def test_default_table_path(monkeypatch):
    monkeypatch.delenv(config.TABLE_ENV_VAR, raising=False)
    assert config.get_table_path() == os.path.join(os.getcwd(), "dat_1.dat")


def test_handler_computes_triple(demo, capsys):
    assert funcascade.handler(demo, "15 2 3")
    out = capsys.readouterr().out
    assert "fun(15, 2, 3) = " in out
    assert "1.5" in out
    assert "[Algorithm 2]" in out


def test_handler_sentinel_and_quit(demo):
    assert funcascade.handler(demo, "-1") is False
    assert funcascade.handler(demo, "-1 0 0") is False
    assert funcascade.handler(demo, "quit") is False
    assert funcascade.handler(demo, "") is True


def test_handler_rejects_bad_input(demo, capsys):
    assert funcascade.handler(demo, "1 2")
    assert "Expected three numbers" in capsys.readouterr().out
    assert funcascade.handler(demo, "1 two 3")
    assert "Expected three numbers" in capsys.readouterr().out
    assert funcascade.handler(demo, "bogus")
    assert "not found" in capsys.readouterr().out


def test_handler_prints_table(demo, capsys):
    funcascade.handler(demo, "table")
    out = capsys.readouterr().out
    assert "23.5" in out
    assert "1.21" in out


def test_handler_reports_load_failure(tmp_path, capsys):
    table = SharedTable(missing_path(tmp_path))
    assert funcascade.handler(table, "table")
    out = capsys.readouterr().out
    assert "LoadFailure" in out
    assert "Can't open table file" in out


def test_handler_reports_undecodable_table(tmp_path, capsys):
    path = os.path.join(str(tmp_path), "binary.dat")
    with open(path, 'wb') as f:
        f.write(b"\xff\xfe\x00\x81")
    table = SharedTable(path)
    assert funcascade.handler(table, "table")
    out = capsys.readouterr().out
    assert "LoadFailure" in out
    assert "not a text file" in out


def test_interpreter_stops_at_sentinel(demo, monkeypatch, capsys):
    feed(monkeypatch, ["-20 1 1", "1 0.5 0", "-1", "15 2 3"])
    funcascade.interpreter(demo)
    out = capsys.readouterr().out
    assert "fun(-20, 1, 1) = " in out
    assert "fun(1, 0.5, 0) = " in out
    assert "fun(15, 2, 3)" not in out
    assert "Program finished." in out


def test_interpreter_stops_at_eof(demo, monkeypatch, capsys):
    feed(monkeypatch, ["15 2 3"])
    funcascade.interpreter(demo)
    assert "Program finished." in capsys.readouterr().out


def test_run_demo(capsys):
    rows = funcascade.run_demo()
    assert [inputs for inputs, _ in rows] == config.DEMO_CASES
    stages = [result.stage for _, result in rows]
    assert stages == [Stage.ALGORITHM_2, Stage.ALGORITHM_2, Stage.ALGORITHM_1, Stage.ALGORITHM_2]
    assert rows[1][1].value == 1.5
    assert rows[2][1].value == pytest.approx(13.135)
    assert rows[3][1].value == 2.0
    assert "fun(x, y, z)" in capsys.readouterr().out


def test_main_runs_commands_without_interpreter(demo, monkeypatch, capsys):
    def no_input(prompt=""):
        raise AssertionError("interpreter should not start")
    monkeypatch.setattr("builtins.input", no_input)

    funcascade.main([demo.path, "15 2 3", "-v"])
    out = capsys.readouterr().out
    assert "funcascade" in out
    assert "fun(15, 2, 3) = " in out
    assert logging.getLogger("funcascade").level == logging.DEBUG


def test_main_interactive(demo, monkeypatch, capsys):
    feed(monkeypatch, ["1 0.5 0", "-1"])
    funcascade.main([demo.path])
    out = capsys.readouterr().out
    assert "fun(1, 0.5, 0) = " in out
    assert "Program finished." in out


def test_main_writes_log_file(demo, tmp_path, capsys):
    log_path = os.path.join(str(tmp_path), "run.log")
    funcascade.main(["--log", log_path, demo.path, "15 2 3"])
    assert "fun(15, 2, 3) = " in capsys.readouterr().out

    for log_handler in logging.getLogger("funcascade").handlers:
        log_handler.flush()
    with open(log_path, 'r', encoding='utf-8') as f:
        log_text = f.read()
    assert "Algorithm 1 -> Algorithm 2" in log_text


def test_log_option_needs_a_value():
    with pytest.raises(SystemExit):
        funcascade.main(["demo", "--log"])
