import json
import os
import tempfile

from keysmith.cli import main


def test_generate_prints_passwords(capsys):
    with tempfile.TemporaryDirectory() as td:
        rc = main(["generate", "--length", "10", "--copies", "3", "--config", os.path.join(td, "none.json")])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Password #1:" in out
    assert "Password #3:" in out


def test_generate_uses_config_file(capsys):
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "config.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump({"length": 6, "upper": False, "lower": False, "digits": True}, f)
        rc = main(["generate", "--config", path])
    out = capsys.readouterr().out
    assert rc == 0
    pw = out.split("Password #1:")[1].split()[0]
    assert len(pw) == 6 and pw.isdigit()


def test_generate_nothing_selected(capsys):
    rc = main(["generate", "--no-upper", "--no-lower", "--no-digits", "--no-symbols"])
    assert rc == 0
    assert "nothing to generate" in capsys.readouterr().out


def test_generate_negative_length(capsys):
    rc = main(["generate", "--length", "-1"])
    assert rc == 2
    assert "length must be >= 0" in capsys.readouterr().out


def test_score(capsys):
    rc = main(["score", "password"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Very Weak" in out or "Weak" in out
    assert "Suggestions" in out


def test_classes(capsys):
    rc = main(["classes"])
    out = capsys.readouterr().out
    assert rc == 0
    for name in ("uppercase", "lowercase", "numbers", "symbols"):
        assert name in out


def _write_config(td, data):
    path = os.path.join(td, "config.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f)
    return path


def test_generate_rejects_bad_config_values(capsys):
    bad_values = [
        ({"copies": "3"}, "copies must be an integer"),
        ({"copies": -1}, "copies must be >= 0"),
        ({"length": "12"}, "length must be an integer"),
        ({"length": 8.5}, "length must be an integer"),
        ({"symbols": "yes"}, "symbols must be true or false"),
    ]
    for data, message in bad_values:
        with tempfile.TemporaryDirectory() as td:
            rc = main(["generate", "--config", _write_config(td, data)])
        assert rc == 2, data
        assert message in capsys.readouterr().out


def test_generate_zero_length(capsys):
    with tempfile.TemporaryDirectory() as td:
        rc = main(["generate", "--length", "0", "--config", os.path.join(td, "none.json")])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Length is 0" in out
    assert "No character class selected" not in out
