"""Lint severity levels and level provenance."""

from __future__ import annotations

from enum import Enum, IntEnum


class Level(IntEnum):
    """Lint severity, ordered Allow < Warn < Deny < Forbid.

    Forbid sits above Deny so that a caller can refuse to let a more
    specific source lower a forbidden lint.
    """

    ALLOW = 0
    WARN = 1
    DENY = 2
    FORBID = 3

    def __str__(self) -> str:
        return self.name.lower()

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    def is_error(self) -> bool:
        return self >= Level.DENY

    @classmethod
    def parse(cls, text: str) -> "Level":
        """Parse a lowercase level word (``allow``, ``warn``, ``deny``, ``forbid``)."""
        if not text.islower():
            raise ValueError(f"unknown lint level: {text!r}")
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"unknown lint level: {text!r}") from None


class LevelSource(str, Enum):
    """Where a resolved level came from."""

    DEFAULT = "default"
    GROUP = "group"
    LINT = "lint"

    def describe(self) -> str:
        if self is LevelSource.DEFAULT:
            return "by default"
        return "in `[lints]`"
