import io
import json

import pytest

from passcode.analysis import analyze_password
from passcode.cli import ANSI, format_report, main


@pytest.fixture
def wordlist(tmp_path):
    path = tmp_path / "common.txt"
    path.write_text("# test list\npassword\nletmein\n", encoding="utf-8")
    return str(path)


def test_json_output(wordlist, capsys):
    assert main(["--password", "Tr0ub4dor&3xyz!", "--wordlist", wordlist, "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["score"] == 100
    assert payload["strength"] == "STRONG"
    assert payload["suggestions"] == []


def test_text_output_with_profile(wordlist, capsys):
    assert main(["--password", "johnsmith99", "--name", "John Smith", "--wordlist", wordlist, "--no-color"]) == 0
    out = capsys.readouterr().out
    assert "Personal info:" in out
    assert "Password resembles your name." in out
    assert "\033[" not in out


def test_common_password_flagged(wordlist, capsys):
    main(["--password", "LetMeIn", "--wordlist", wordlist])
    assert "Common password: yes" in capsys.readouterr().out


def test_birth_date_flag(wordlist, capsys):
    main(["--password", "x20080521", "--birth-date", "2008-05-21", "--wordlist", wordlist, "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert "Password contains your birth date (20080521)." in payload["personal_info_warnings"]


def test_invalid_birth_date_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--password", "x", "--birth-date", "21/05/2008"])
    assert exc_info.value.code == 2
    assert "YYYY-MM-DD" in capsys.readouterr().err


def test_unreadable_wordlist_is_error(tmp_path, capsys):
    assert main(["--password", "x", "--wordlist", str(tmp_path / "missing.txt")]) == 2
    assert "Word list unavailable" in capsys.readouterr().err


def test_password_from_stdin(wordlist, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc12345xyz\n"))
    main(["--stdin", "--wordlist", wordlist])
    out = capsys.readouterr().out
    assert "Patterns:" in out
    assert "Sequential digits detected" in out


def test_password_prompt(wordlist, monkeypatch, capsys):
    monkeypatch.setattr("passcode.cli.getpass", lambda prompt: "")
    main(["--wordlist", wordlist, "--json"])
    assert json.loads(capsys.readouterr().out)["score"] == 0


def test_format_report_colors():
    res = analyze_password("Tr0ub4dor&3xyz!", dictionary=frozenset())
    colored = format_report(res, use_color=True)
    assert colored.startswith(ANSI["green"] + "Strength: STRONG (100/100)")
    assert "Suggestions: none" in colored
    assert format_report(res).startswith("Strength: STRONG (100/100)")
