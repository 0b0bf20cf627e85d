"""
keysmith.suggestions

Turn evaluator output into concrete suggestions and produce example
replacement passwords (using generator) to demonstrate stronger choices.
"""

import math
from typing import Dict, List, Optional

from .evaluator import evaluate, estimate_entropy
from .generator import CHARACTER_CLASSES, GenerationConfig, generate
from .score import StrengthTier

EXAMPLE_CONFIG = GenerationConfig(
    length=16,
    include_uppercase=True,
    include_lowercase=True,
    include_numbers=True,
    include_symbols=True,
)
TARGET_BITS = 60


def _chars_needed(password: str, target_bits: int) -> Optional[int]:
    missing = target_bits - estimate_entropy(password)
    if missing <= 0:
        return None
    # assume the additions come from every class
    bits_per_char = math.log2(sum(len(c) for c in CHARACTER_CLASSES))
    return math.ceil(missing / bits_per_char)


def suggest_improvements(
    password: str,
    config: Optional[GenerationConfig] = None,
    rng=None,
    examples: int = 1,
    target_bits: int = TARGET_BITS,
) -> Dict:
    """
    Return a suggestion object derived from the evaluator plus concrete actions.
    {
        "score": int,
        "label": str,
        "suggestions": [str],  # zxcvbn feedback first, then length advice
        "examples": [str],     # generated with ``config`` (16 chars, every class by default)
        "chars_needed": Optional[int]
    }
    """
    result = evaluate(password)
    suggestions: List[str] = []
    if result["warning"]:
        suggestions.append(result["warning"])
    suggestions.extend(result["suggestions"])

    chars_needed = _chars_needed(password, target_bits)
    if chars_needed:
        suggestions.append(
            f"Add about {chars_needed} random characters to raise entropy toward {target_bits} bits."
        )
    elif result["score"] == StrengthTier.VERY_STRONG.score:
        suggestions.append("Your password is very strong. Good job!")

    cfg = config or EXAMPLE_CONFIG
    # an all-empty config still yields a useful example
    if not cfg.selected_classes() or cfg.length == 0:
        cfg = EXAMPLE_CONFIG
    example_pws = [generate(cfg, rng) for _ in range(examples)]

    return {
        "password": password,
        "score": result["score"],
        "label": result["label"],
        "entropy": result["entropy"],
        "suggestions": list(dict.fromkeys(suggestions)),
        "examples": example_pws,
        "chars_needed": chars_needed,
    }
