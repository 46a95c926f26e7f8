"""8-bit RGBA color value."""

import re
from dataclasses import dataclass

from matcolor.exceptions.errors import ColorParseError

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


@dataclass(frozen=True)
class RGBA:
    """An immutable 8-bit red, green, blue and alpha color."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for channel in (self.r, self.g, self.b, self.a):
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ColorParseError(
                    (self.r, self.g, self.b, self.a),
                    "channels must be integers in [0, 255]",
                )

    @classmethod
    def from_hex(cls, value: str) -> "RGBA":
        """Parse '#RRGGBB', '#RRGGBBAA' or the same without the leading '#'.

        Raises:
            ColorParseError: If the string is not a hex color.
        """
        if not isinstance(value, str):
            raise ColorParseError(value, "expected a hex string")
        match = _HEX_RE.match(value.strip())
        if not match:
            raise ColorParseError(value, "expected #RRGGBB or #RRGGBBAA")
        digits = match.group(1)
        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        return cls(*channels)

    @classmethod
    def from_argb(cls, argb: int) -> "RGBA":
        """Unpack a 32-bit 0xAARRGGBB integer."""
        return cls(
            (argb >> 16) & 0xFF,
            (argb >> 8) & 0xFF,
            argb & 0xFF,
            (argb >> 24) & 0xFF,
        )

    def to_argb(self) -> int:
        """Pack into a 32-bit 0xAARRGGBB integer."""
        return (self.a << 24) | (self.r << 16) | (self.g << 8) | self.b

    def to_hex(self, alpha: bool = False) -> str:
        """Format as '#RRGGBB' (or '#RRGGBBAA' when alpha is True)."""
        text = f"#{self.r:02X}{self.g:02X}{self.b:02X}"
        if alpha:
            text += f"{self.a:02X}"
        return text

    def __str__(self) -> str:
        return self.to_hex(alpha=self.a != 255)
