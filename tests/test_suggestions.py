from keysmith.generator import GenerationConfig
from keysmith.suggestions import suggest_improvements

from fakes import SeededRandomSource


def test_suggest_for_common_password():
    s = suggest_improvements("password123")
    assert isinstance(s, dict)
    assert s["suggestions"]
    assert s["chars_needed"]
    joined = " ".join(s["suggestions"]).lower()
    assert "add about" in joined


def test_examples_produced():
    s = suggest_improvements("weak")
    assert s.get("examples")
    assert len(s["examples"]) == 1
    assert isinstance(s["examples"][0], str)
    assert len(s["examples"][0]) == 16
    assert s["examples"][0] != "weak"


def test_examples_follow_config():
    cfg = GenerationConfig(length=20, include_uppercase=False, include_lowercase=False,
                           include_numbers=True, include_symbols=False)
    s = suggest_improvements("weak", config=cfg, rng=SeededRandomSource(1), examples=3)
    assert len(s["examples"]) == 3
    assert all(len(ex) == 20 and ex.isdigit() for ex in s["examples"])


def test_empty_config_falls_back_to_default_examples():
    cfg = GenerationConfig(length=20, include_uppercase=False, include_lowercase=False,
                           include_numbers=False, include_symbols=False)
    s = suggest_improvements("weak", config=cfg)
    assert len(s["examples"][0]) == 16


def test_strong_password_needs_nothing():
    s = suggest_improvements("X7f!9Lq@2Vb#tR4sYp")
    assert s["chars_needed"] is None
