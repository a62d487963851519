"""RGB colour values."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGB colour with integer channels."""

    r: int = 0
    g: int = 0
    b: int = 0

    def to_str(self) -> str:
        """Return the channels as plain-PPM text, each followed by a space."""
        return f"{self.r} {self.g} {self.b} "