"""
keysmith.generator
Secure password generator using Python's secrets module.

Each character is an independent uniform draw over the alphabet built from the
selected character classes. Nothing forces every class to appear.
"""

import logging
import secrets
import string
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from .errors import InvalidArgument

log = logging.getLogger(__name__)

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
NUMBERS = string.digits
SYMBOLS = "!@#$%^&*()_-+=<>?/[]{}|"


@dataclass(frozen=True)
class CharacterClass:
    name: str
    chars: str

    def __len__(self) -> int:
        return len(self.chars)


UPPERCASE_CLASS = CharacterClass("uppercase", UPPERCASE)
LOWERCASE_CLASS = CharacterClass("lowercase", LOWERCASE)
NUMBERS_CLASS = CharacterClass("numbers", NUMBERS)
SYMBOLS_CLASS = CharacterClass("symbols", SYMBOLS)

# alphabet order
CHARACTER_CLASSES: Tuple[CharacterClass, ...] = (
    UPPERCASE_CLASS,
    LOWERCASE_CLASS,
    NUMBERS_CLASS,
    SYMBOLS_CLASS,
)


@dataclass(frozen=True)
class GenerationConfig:
    length: int = 12
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = False

    def selected_classes(self) -> Tuple[CharacterClass, ...]:
        flags = (
            self.include_uppercase,
            self.include_lowercase,
            self.include_numbers,
            self.include_symbols,
        )
        return tuple(c for c, on in zip(CHARACTER_CLASSES, flags) if on)


class SecureRandomSource(Protocol):
    def next_uniform(self, bound: int) -> int:
        ...


class SystemRandomSource:
    """Uniform integers from the operating system CSPRNG."""

    def next_uniform(self, bound: int) -> int:
        return secrets.randbelow(bound)


_sysrand = SystemRandomSource()


def check_length(length) -> int:
    # bool is an int subclass but never a sensible length
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidArgument(f"length must be an integer, got {length!r}")
    if length < 0:
        raise InvalidArgument(f"length must be >= 0, got {length}")
    return length


def check_flag(name: str, value) -> bool:
    if not isinstance(value, bool):
        raise InvalidArgument(f"{name} must be true or false, got {value!r}")
    return value


def build_alphabet(config: GenerationConfig) -> str:
    return "".join(c.chars for c in config.selected_classes())


def generate(config: GenerationConfig, rng: Optional[SecureRandomSource] = None) -> str:
    """
    Generate a password of exactly ``config.length`` characters.

    Returns the empty string when no character class is selected. ``rng`` must
    provide ``next_uniform(bound)``; the OS CSPRNG is used when it is omitted.
    """
    length = check_length(config.length)
    alphabet = build_alphabet(config)
    if not alphabet or length == 0:
        return ""

    if rng is None:
        rng = _sysrand
    log.debug("generating %d chars from alphabet of %d", length, len(alphabet))
    return "".join(alphabet[rng.next_uniform(len(alphabet))] for _ in range(length))

