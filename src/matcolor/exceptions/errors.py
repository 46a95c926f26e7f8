"""Exception types for matcolor.

Scheme derivation itself cannot fail; these errors are only raised where
values enter the system (parsing colors, evaluating a tonal ramp).
"""

from typing import Any


class MatColorError(Exception):
    """Base class for all matcolor errors."""


class ColorParseError(MatColorError, ValueError):
    """Raised when a value cannot be interpreted as an RGBA color."""

    def __init__(self, value: Any, reason: str = "not a valid color"):
        self.value = value
        self.reason = reason
        super().__init__(f"{value!r}: {reason}")


class ToneRangeError(MatColorError, ValueError):
    """Raised when a tonal ramp is asked for a tone outside [0, 100]."""

    def __init__(self, tone: float):
        self.tone = tone
        super().__init__(f"Tone {tone} is outside the range [0, 100]")
