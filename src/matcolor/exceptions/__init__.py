"""Custom exceptions for matcolor."""

from matcolor.exceptions.errors import (
    MatColorError,
    ColorParseError,
    ToneRangeError,
)

__all__ = [
    "MatColorError",
    "ColorParseError",
    "ToneRangeError",
]
