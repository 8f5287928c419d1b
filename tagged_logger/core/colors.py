"""
Tag colors

A tag's color is a pure function of the tag: the FNV-1a hash of its
UTF-8 bytes, modulo the palette size. Changing the hash or the palette
order changes the color of every existing tag.
"""

from enum import Enum
from typing import Tuple, Union

FNV32_OFFSET_BASIS = 0x811C9DC5
FNV32_PRIME = 0x01000193


class Color(str, Enum):
    """ANSI color escape sequences."""

    RESET = "\x1b[0m"
    RED = "\x1b[91m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    WHITE = "\x1b[37m"

    def __str__(self) -> str:
        return self.value


# RESET is not a tag color
PALETTE: Tuple[Color, ...] = (
    Color.RED,
    Color.GREEN,
    Color.YELLOW,
    Color.BLUE,
    Color.MAGENTA,
    Color.CYAN,
    Color.WHITE,
)

ColorLike = Union[Color, str]


def fnv1a_32(data: bytes) -> int:
    """
    32-bit FNV-1a hash.

    Args:
        data: Bytes to hash

    Returns:
        Unsigned 32-bit hash value
    """
    h = FNV32_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV32_PRIME) & 0xFFFFFFFF
    return h


def color_for_tag(tag: str) -> Color:
    """Pick the palette color for a tag."""
    return PALETTE[fnv1a_32(tag.encode("utf-8")) % len(PALETTE)]


def colorize(text: str, color: ColorLike) -> str:
    """Wrap text in a color escape and the reset escape."""
    return "%s%s%s" % (color, text, Color.RESET)
