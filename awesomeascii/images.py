"""Scaling, grayscale conversion and mapping pixels to characters."""

from __future__ import annotations

from PIL import Image

from awesomeascii.charsets import AsciiCharType

__all__ = [
    "scale_image",
    "convert_to_grayscale",
    "rgb_to_ansi",
    "map_pixels_to_ascii",
    "convert_image_to_ascii",
]

_RESET = "\033[0m"


def _premultiplied(img: Image.Image) -> Image.Image:
    if img.mode == "RGBa":
        return img
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    return img.convert("RGBa")


def _pixel_rows(img: Image.Image, channels: int) -> list[list]:
    """Split an image's raw bytes into rows of pixel values."""
    width, height = img.size
    if width == 0:
        return [[] for _ in range(height)]
    data = img.tobytes()
    stride = width * channels
    rows = []
    for start in range(0, len(data), stride):
        row = data[start:start + stride]
        if channels == 1:
            rows.append(list(row))
        else:
            rows.append(list(zip(*[iter(row)] * channels)))
    return rows


def scale_image(img: Image.Image, new_width: int) -> Image.Image:
    """Resize to ``new_width`` columns keeping the aspect ratio, as RGBA."""
    if new_width < 0:
        raise ValueError("width must not be negative")
    width, height = img.size
    new_height = int(height / width * new_width)
    rgba = img if img.mode == "RGBA" else img.convert("RGBA")
    if new_width == 0 or new_height == 0:
        return Image.new("RGBA", (new_width, new_height))
    return rgba.resize((new_width, new_height), Image.Resampling.BICUBIC)


def _luma(r: int, g: int, b: int) -> int:
    r16, g16, b16 = r * 0x101, g * 0x101, b * 0x101
    return (19595 * r16 + 38470 * g16 + 7471 * b16 + (1 << 15)) >> 24


def convert_to_grayscale(img: Image.Image) -> Image.Image:
    """Return an 8-bit grayscale copy, treating colour as alpha-premultiplied."""
    source = _premultiplied(img)
    gray = Image.new("L", img.size)
    pixels = [
        _luma(r, g, b)
        for row in _pixel_rows(source, 4)
        for r, g, b, _ in row
    ]
    gray.putdata(pixels)
    return gray


def rgb_to_ansi(r: int, g: int, b: int) -> str:
    """Return the escape sequence that sets a 24-bit foreground colour."""
    return f"\033[38;2;{r};{g};{b}m"


def map_pixels_to_ascii(
    gray: Image.Image,
    color_image: Image.Image | None = None,
    ascii_type: AsciiCharType | None = AsciiCharType.BASIC,
    colored: bool = False,
    ascii_char: str = "#",
) -> str:
    """Render a grayscale image as text, one character per pixel.

    With ``ascii_type`` set to ``None`` every pixel becomes ``ascii_char``.
    With ``colored`` each character is wrapped in the colour of the matching
    pixel of ``color_image``.
    """
    charset = ascii_type.chars() if ascii_type is not None else None
    gray_rows = _pixel_rows(gray.convert("L") if gray.mode != "L" else gray, 1)

    if colored:
        if color_image is None:
            raise ValueError("a colour image is required for coloured output")
        color_rows = _pixel_rows(_premultiplied(color_image), 4)
    else:
        color_rows = [None] * len(gray_rows)

    def char_for(value: int) -> str:
        if charset is None:
            return ascii_char
        return charset[value * len(charset) // 256]

    lines = []
    for gray_row, color_row in zip(gray_rows, color_rows):
        if colored:
            cells = (
                f"{rgb_to_ansi(r, g, b)}{char_for(value)}{_RESET}"
                for value, (r, g, b, _) in zip(gray_row, color_row)
            )
        else:
            cells = (char_for(value) for value in gray_row)
        lines.append("".join(cells) + "\n")
    return "".join(lines)


def convert_image_to_ascii(
    img: Image.Image,
    new_width: int,
    ascii_type: AsciiCharType = AsciiCharType.BASIC,
    colored: bool = False,
) -> str:
    """Scale, convert to grayscale and render an image as text."""
    scaled = scale_image(img, new_width)
    gray = convert_to_grayscale(scaled)
    return map_pixels_to_ascii(gray, scaled, ascii_type, colored)