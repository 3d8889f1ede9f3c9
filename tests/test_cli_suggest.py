import json
from pathlib import Path

from apps.cli.suggest import main
from wordle_guesser.datasets import write_dictionary


def _dict(tmp_path: Path) -> str:
    p = tmp_path / "words.txt"
    write_dictionary(["crane", "civic", "cliff", "crone", "stare"], p)
    return str(p)


def test_cli_explicit_constraints(tmp_path, capsys):
    rc = main(["--dictionary", _dict(tmp_path), "--state", "C__NE", "--exclude", "DEUOG",
               "--unplaced", "A", "--placement", "_A__", "--json"])
    assert rc == 0
    assert json.loads(capsys.readouterr().out) == {"word_suggestions": ["CRANE"]}


def test_cli_history_with_answer(tmp_path, capsys):
    rc = main(["--dictionary", _dict(tmp_path), "--answer", "civic", "--history", "crane"])
    assert rc == 0
    assert "CIVIC" in capsys.readouterr().out.split()


def test_cli_history_needs_pattern_or_answer(tmp_path):
    assert main(["--dictionary", _dict(tmp_path), "--history", "crane"]) == 2


def test_cli_malformed_state(tmp_path):
    assert main(["--dictionary", _dict(tmp_path), "--state", "C_"]) == 2


def test_cli_missing_dictionary(tmp_path):
    assert main(["--dictionary", str(tmp_path / "nope.txt")]) == 1


def test_cli_batch(tmp_path):
    reqs = tmp_path / "reqs.jsonl"
    reqs.write_text(
        json.dumps({"current_state": "c____", "excluded_letters": ["r"],
                    "unplaced_letters": ["i"]}) + "\n"
        + json.dumps({"current_state": "c"}) + "\n",
        encoding="utf-8",
    )
    out = tmp_path / "out.jsonl"
    rc = main(["--dictionary", _dict(tmp_path), "--requests", str(reqs), "--out", str(out),
               "--progress", "off"])
    lines = [json.loads(ln) for ln in out.read_text(encoding="utf-8").splitlines()]
    assert rc == 2
    assert lines[0] == {"status": 200, "word_suggestions": ["CIVIC", "CLIFF"]}
    assert lines[1]["status"] == 400


def test_cli_bad_setting(tmp_path, monkeypatch):
    monkeypatch.setenv("WORDLE_CHUNK_SIZE", "0")
    assert main(["--dictionary", _dict(tmp_path)]) == 2


def test_cli_word_length_flag(tmp_path, capsys):
    p = tmp_path / "six.txt"
    write_dictionary(["planet", "palate", "crane"], p)
    rc = main(["--dictionary", str(p), "--word-length", "6", "--state", "P_____",
               "--unplaced", "N", "--json"])
    assert rc == 0
    assert json.loads(capsys.readouterr().out) == {"word_suggestions": ["PLANET"]}
