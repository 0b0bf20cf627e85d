"""
keysmith.evaluator

Password strength evaluation:
- measure(password): 0-4 score from zxcvbn (the empty password scores 0)
- estimate_entropy(password): conservative pool-size entropy estimate (bits)
- evaluate(password): score, tier, label, colour, entropy and zxcvbn feedback
"""

import math
from typing import Callable, Dict, List, Optional

from zxcvbn import zxcvbn

from .generator import CHARACTER_CLASSES
from .score import tier_of

# zxcvbn slows down sharply on very long input
MAX_MEASURED_LENGTH = 72


def _feedback(password: str) -> Dict:
    if not password:
        return {"score": 0, "feedback": {"warning": "", "suggestions": []}}
    return zxcvbn(password[:MAX_MEASURED_LENGTH])


def measure(password: str) -> int:
    """Return the zxcvbn score (0..4) for ``password``."""
    return _feedback(password)["score"]


def estimate_entropy(password: str) -> float:
    """
    Conservative entropy estimate:
    - Determine which character classes actually appear in the password.
    - Estimate pool size = sum of sizes of classes used.
    - Entropy bits = length * log2(pool_size)
    """
    if not password:
        return 0.0

    pool = sum(len(c) for c in CHARACTER_CLASSES if any(ch in c.chars for ch in password))
    # characters outside every known class
    pool = max(pool, 2)
    return len(password) * math.log2(pool)


def evaluate(password: str, measure: Optional[Callable[[str], int]] = None) -> Dict:
    """
    Score ``password`` and describe the result.

    Returns a dict:
    {
        "password": password,
        "score": int,  # 0..4
        "tier": str,   # StrengthTier name
        "label": str,
        "color": str,
        "entropy": float,
        "warning": str,
        "suggestions": [str]
    }

    A custom ``measure`` replaces zxcvbn; warning and suggestions are then empty.
    """
    warning = ""
    suggestions: List[str] = []
    if measure is None:
        result = _feedback(password)
        score = result["score"]
        warning = result["feedback"].get("warning") or ""
        suggestions = list(result["feedback"].get("suggestions") or [])
    else:
        score = measure(password)
    tier = tier_of(score)

    return {
        "password": password,
        "score": tier.score,
        "tier": tier.name,
        "label": tier.label,
        "color": tier.color,
        "entropy": estimate_entropy(password),
        "warning": warning,
        "suggestions": suggestions,
    }
