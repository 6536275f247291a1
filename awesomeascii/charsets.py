"""Character sets used to render brightness as text."""

from __future__ import annotations

from enum import Enum

__all__ = ["AsciiCharType", "parse_ascii_type"]


class AsciiCharType(str, Enum):
    """Named sets of characters, ordered from dark to bright."""

    BASIC = "basic"
    BINARY = "binary"
    CONTRAST = "contrast"
    EXTENDED = "extended"
    HIGH_DETAIL = "high_detail"

    def __str__(self) -> str:
        return self.value

    def chars(self) -> str:
        """Return the characters of this set, darkest first."""
        return _CHARSETS[self]


_CHARSETS: dict[AsciiCharType, str] = {
    AsciiCharType.BASIC: " .:-=+*#%@",
    AsciiCharType.BINARY: "10",
    AsciiCharType.CONTRAST: " ,.:%?S#@",
    AsciiCharType.EXTENDED: " .:-~|*i!t2x6qZ%0B98W@",
    AsciiCharType.HIGH_DETAIL: (
        " .`'^\",:;Il!i><~+_-?[]{}1()|/tjrfxnruvcxzXYUJCLQO0Zmwqpbkdhao*#MW&8%B$@"
    ),
}


def parse_ascii_type(value: str) -> AsciiCharType:
    """Turn a set name such as ``"basic"`` into an :class:`AsciiCharType`."""
    try:
        return AsciiCharType(value)
    except ValueError:
        raise ValueError(
            'must be one of "basic", "binary", "contrast", "extended", or "high_detail"'
        ) from None