"""
keysmith.score
Map a 0-4 strength score onto a display tier with a label and colour.
"""

from enum import Enum

from .errors import InvalidArgument

MIN_SCORE = 0
MAX_SCORE = 4


class StrengthTier(Enum):
    VERY_WEAK = (0, "Very Weak", "red")
    WEAK = (1, "Weak", "red")
    MODERATE = (2, "Moderate", "yellow")
    STRONG = (3, "Strong", "green")
    VERY_STRONG = (4, "Very Strong", "green")

    def __init__(self, score: int, label: str, color: str):
        self.score = score
        self.label = label
        self.color = color

    @property
    def progress(self) -> float:
        """Fill fraction for a strength bar; even a score of 0 shows one step."""
        return (self.score + 1) / (MAX_SCORE + 1)


_BY_SCORE = {t.score: t for t in StrengthTier}


def tier_of(score: int) -> StrengthTier:
    if isinstance(score, bool) or not isinstance(score, int):
        raise InvalidArgument(f"strength score must be an integer, got {score!r}")
    if not MIN_SCORE <= score <= MAX_SCORE:
        raise InvalidArgument(f"strength score must be in [{MIN_SCORE}, {MAX_SCORE}], got {score}")
    return _BY_SCORE[score]
