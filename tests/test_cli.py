import io
import json

import pytest

from dare._config import get_settings
from dare._source import read_source
from dare.cli import build_parser, main


def run(capsys, *argv: str) -> str:
    main(list(argv))
    return capsys.readouterr().out


# ---------------------------------------------------------------------------
# solve
# ---------------------------------------------------------------------------

def test_solve_json(capsys):
    out = run(capsys, "solve", "--json", "A -> B")
    assert json.loads(out) == [{"A": False}, {"B": True}]


def test_solve_json_false(capsys):
    out = run(capsys, "solve", "--json", "--false", "A -> B")
    assert json.loads(out) == [{"A": True, "B": False}]


def test_solve_table(capsys):
    out = run(capsys, "solve", "A & B")
    assert "Wyrażenie:" in out
    assert "1 rozwiązanie" in out


def test_solve_no_solutions(capsys):
    out = run(capsys, "solve", "A & ~A")
    assert "Brak rozwiązań" in out


def test_solve_verbose(capsys):
    out = run(capsys, "solve", "-v", "A | A")
    assert "2 rozwiązań przed / 1 po" in out


def test_solve_from_file(capsys, tmp_path):
    path = tmp_path / "formula.txt"
    path.write_text("A ^ B\n", encoding="utf-8")
    out = run(capsys, "solve", "--json", "--path", str(path))
    assert json.loads(out) == [{"A": True, "B": False}, {"A": False, "B": True}]


def test_solve_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("A & B\n"))
    out = run(capsys, "solve", "--json")
    assert json.loads(out) == [{"A": True, "B": True}]


def test_argument_takes_precedence_over_path(tmp_path):
    path = tmp_path / "formula.txt"
    path.write_text("B", encoding="utf-8")
    assert read_source("A", str(path)) == "A"
    assert read_source(None, str(path)) == "B"


def test_solve_missing_file(capsys, tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["solve", "--path", str(tmp_path / "missing.txt")])
    assert exc.value.code == 1
    assert "Błąd odczytu" in capsys.readouterr().out


def test_solve_parse_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["solve", "A -> B -> C"])
    assert exc.value.code == 1
    out = capsys.readouterr().out
    assert "E_NON_ASSOCIATIVE" in out
    assert "^^^^^^^^^^^" in out


def test_solve_lex_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["solve", "A $ B"])
    assert exc.value.code == 1
    assert "E_UNEXPECTED_SYMBOL" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# tableau
# ---------------------------------------------------------------------------

def test_tableau_latex(capsys):
    out = run(capsys, "tableau", "latex", "A & B")
    assert out.startswith("\\begin{picture}(40, 30)\n")
    assert out.rstrip().endswith("\\end{picture}")


def test_tableau_latex_show_ids(capsys):
    out = run(capsys, "tableau", "latex", "-s", "A")
    assert r"{\scriptsize 0.}~$A$" in out


def test_tableau_tree(capsys):
    out = run(capsys, "tableau", "tree", "A & ~A")
    assert "✗" in out
    assert "1 gałęzi końcowych" in out


def test_tableau_tree_false(capsys):
    out = run(capsys, "tableau", "tree", "--false", "A | B")
    assert "A | B : F" in out
    assert "○" in out


def test_tableau_parse_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["tableau", "tree", "(A & B"])
    assert exc.value.code == 1
    assert "E_EXPECTED_DELIMITER" in capsys.readouterr().out


def test_tableau_rejects_unknown_format():
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["tableau", "svg", "A"])
    assert exc.value.code == 2


def test_command_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("DARE_CONSOLE_WIDTH", "80")
    monkeypatch.setenv("DARE_RECURSION_LIMIT", "5000")
    settings = get_settings()
    assert settings.console_width == 80
    assert settings.recursion_limit == 5000
