"""
keysmith: secure password generation with strength tiers.
"""

from .errors import InvalidArgument
from .generator import (
    CHARACTER_CLASSES,
    LOWERCASE,
    NUMBERS,
    SYMBOLS,
    UPPERCASE,
    CharacterClass,
    GenerationConfig,
    SecureRandomSource,
    SystemRandomSource,
    build_alphabet,
    generate,
)
from .score import StrengthTier, tier_of
from .state import PasswordState, regenerate

__all__ = [
    "InvalidArgument",
    "CHARACTER_CLASSES",
    "UPPERCASE",
    "LOWERCASE",
    "NUMBERS",
    "SYMBOLS",
    "CharacterClass",
    "GenerationConfig",
    "SecureRandomSource",
    "SystemRandomSource",
    "build_alphabet",
    "generate",
    "StrengthTier",
    "tier_of",
    "PasswordState",
    "regenerate",
]
