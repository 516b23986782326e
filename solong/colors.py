"""Pixel formats and colour-name resolution for images."""

from __future__ import annotations

from dataclasses import dataclass

from solong.colornames import lookup_color

_NAME_BUFFER = 64


def _mask_shape(mask: int) -> tuple[int, int]:
    """Return (shift, width) of the contiguous run of set bits in mask."""
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit mask, got {mask!r}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return shift, width


@dataclass(frozen=True)
class PixelFormat:
    """How a 0xRRGGBB colour maps to a pixel value of a display visual."""

    depth: int
    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int

    @classmethod
    def from_masks(cls, depth, red_mask, green_mask, blue_mask):
        """Build a format from the channel masks of a TrueColor visual."""
        red_shift, red_bits = _mask_shape(red_mask)
        green_shift, green_bits = _mask_shape(green_mask)
        blue_shift, blue_bits = _mask_shape(blue_mask)
        return cls(
            depth=depth,
            red_shift=red_shift,
            red_bits=red_bits,
            green_shift=green_shift,
            green_bits=green_bits,
            blue_shift=blue_shift,
            blue_bits=blue_bits,
        )

    def good_color(self, color):
        """Convert a 0xRRGGBB colour to this format's pixel value."""
        if self.depth >= 24:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            ((red >> (16 - self.red_bits)) << self.red_shift)
            + ((green >> (16 - self.green_bits)) << self.green_shift)
            + ((blue >> (16 - self.blue_bits)) << self.blue_shift)
        )


def _parse_hex(text: str) -> int:
    """Parse a hexadecimal number the lenient way strtol does; 0 if none."""
    text = text.lstrip(" \t\n\r\v\f")
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    if text[:2].lower() == "0x" and text[2:3] and text[2] in "0123456789abcdefABCDEF":
        text = text[2:]
    digits = []
    for ch in text:
        if ch not in "0123456789abcdefABCDEF":
            break
        digits.append(ch)
    if not digits:
        return 0
    value = (sign * int("".join(digits), 16)) & 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def text_to_rgb(name, end):
    """Resolve an XPM colour spec to 0xRRGGBB.

    "#RRGGBB" is read as hex; otherwise name and the optional following
    word end are joined by a space and looked up by colour name.
    Unknown names give 0; "none" gives -1.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[: _NAME_BUFFER - 1]
    try:
        return lookup_color(name)
    except KeyError:
        return 0