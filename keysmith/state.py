"""
keysmith.state

The "current settings + current password" record a caller holds between
actions. Every transition returns a new value.
"""

from dataclasses import dataclass, replace
from typing import Optional

from .generator import GenerationConfig, check_length, generate

FLAGS = ("include_uppercase", "include_lowercase", "include_numbers", "include_symbols")


@dataclass(frozen=True)
class PasswordState:
    length: int = 12
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = False
    password: str = ""

    @property
    def config(self) -> GenerationConfig:
        return GenerationConfig(
            length=self.length,
            include_uppercase=self.include_uppercase,
            include_lowercase=self.include_lowercase,
            include_numbers=self.include_numbers,
            include_symbols=self.include_symbols,
        )

    @classmethod
    def from_config(cls, config: GenerationConfig, password: str = "") -> "PasswordState":
        return cls(
            length=config.length,
            include_uppercase=config.include_uppercase,
            include_lowercase=config.include_lowercase,
            include_numbers=config.include_numbers,
            include_symbols=config.include_symbols,
            password=password,
        )

    def with_length(self, length: int) -> "PasswordState":
        return replace(self, length=check_length(length))

    def with_flags(self, **flags: bool) -> "PasswordState":
        unknown = set(flags) - set(FLAGS)
        if unknown:
            raise TypeError(f"unknown flag(s): {', '.join(sorted(unknown))}")
        return replace(self, **flags)


def regenerate(state: PasswordState, rng=None) -> PasswordState:
    """Return ``state`` holding a freshly generated password; settings are unchanged."""
    return replace(state, password=generate(state.config, rng))
