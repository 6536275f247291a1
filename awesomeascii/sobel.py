"""Sobel edge detection and edge-direction text rendering."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from PIL import Image

__all__ = ["SOBEL_THRESHOLD", "SobelImage", "apply_sobel"]

SOBEL_THRESHOLD = 130


@dataclass
class SobelImage:
    """Edge strength as a grayscale image (dark means strong) plus edge angles.

    Angles are normalised to the range [0, 1].
    """

    gray: Image.Image
    angles: list[list[float]] = field(repr=False)

    @property
    def size(self) -> tuple[int, int]:
        return self.gray.size

    def edge_angle_at(self, x: int, y: int) -> float:
        """Return the normalised edge angle at a pixel."""
        return self.angles[y][x]

    def to_ascii(self, threshold: int = SOBEL_THRESHOLD) -> str:
        """Draw edges darker than ``threshold`` with ``_ / | \\`` characters."""
        if not 0 <= threshold <= 255:
            raise ValueError("threshold must be between 0 and 255")
        width = self.gray.width
        data = self.gray.tobytes()
        lines = []
        for y, angle_row in enumerate(self.angles):
            values = data[y * width:(y + 1) * width]
            cells = (
                _edge_char(angle) if value < threshold else " "
                for value, angle in zip(values, angle_row)
            )
            lines.append("".join(cells) + "\n")
        return "".join(lines)


def _edge_char(angle: float) -> str:
    if 0 <= angle < 0.05 or 0.95 < angle <= 1:
        return "_"
    if 0.45 <= angle <= 0.55:
        return "|"
    if 0.05 <= angle < 0.45:
        return "/"
    return "\\"


def _triples(row: list[int]):
    return zip(row, row[1:], row[2:])


def apply_sobel(gray: Image.Image) -> SobelImage:
    """Run the Sobel operator; border pixels are treated as having no edge."""
    if gray.mode != "L":
        gray = gray.convert("L")
    width, height = gray.size
    data = gray.tobytes()
    rows = [list(data[y * width:(y + 1) * width]) for y in range(height)]

    magnitudes = [[0.0] * width for _ in range(height)]
    angles = [[0.0] * width for _ in range(height)]
    max_magnitude = 0.0

    for y, (top, mid, bot) in enumerate(zip(rows, rows[1:], rows[2:]), start=1):
        windows = zip(_triples(top), _triples(mid), _triples(bot))
        for x, ((a, b, c), (d, _, f), (g, h, i)) in enumerate(windows, start=1):
            sobel_x = -a + c - 2 * d + 2 * f - g + i
            sobel_y = -a - 2 * b - c + g + 2 * h + i
            magnitude = math.sqrt(sobel_x * sobel_x + sobel_y * sobel_y)
            magnitudes[y][x] = magnitude
            angles[y][x] = 0.5 * math.atan2(sobel_y, sobel_x) / math.pi + 0.5
            max_magnitude = max(max_magnitude, magnitude)

    if max_magnitude > 0:
        pixels = [
            int((1 - magnitude / max_magnitude) * 255)
            for row in magnitudes
            for magnitude in row
        ]
    else:
        pixels = [255] * (width * height)

    result = Image.new("L", (width, height))
    result.putdata(pixels)
    return SobelImage(gray=result, angles=angles)