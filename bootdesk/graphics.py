"""An 8-bit indexed desktop framebuffer with a 16-colour palette and 8x16 glyphs.

The desktop is drawn into an off-screen buffer. It can be turned into RGB
bytes or a binary PPM image with a chosen palette.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

__all__ = [
    "FONT_A",
    "GLYPH_HEIGHT",
    "GLYPH_WIDTH",
    "BootInfo",
    "Color",
    "Framebuffer",
    "default_palette",
    "init_screen",
    "main",
    "palette_dac_values",
]

GLYPH_WIDTH = 8
GLYPH_HEIGHT = 16

RGB = tuple[int, int, int]


class Color(IntEnum):
    """Indices into the 16-colour system palette."""

    BLACK = 0
    RED = 1
    LIME = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    LIGHT_GREY = 8
    DARK_RED = 9
    DARK_GREEN = 10
    DARK_YELLOW = 11
    NAVY = 12
    DARK_MAGENTA = 13
    TEAL = 14
    DARK_GREY = 15


_TABLE_RGB: tuple[RGB, ...] = (
    (0x00, 0x00, 0x00),
    (0xFF, 0x00, 0x00),
    (0x00, 0xFF, 0x00),
    (0xFF, 0xFF, 0x00),
    (0x00, 0x00, 0xFF),
    (0xFF, 0x00, 0xFF),
    (0x00, 0xFF, 0xFF),
    (0xFF, 0xFF, 0xFF),
    (0xC6, 0xC6, 0xC6),
    (0x84, 0x00, 0x00),
    (0x00, 0x84, 0x00),
    (0x84, 0x84, 0x00),
    (0x00, 0x00, 0x84),
    (0x84, 0x00, 0x84),
    (0x00, 0x84, 0x84),
    (0x84, 0x84, 0x84),
)

# The letter "A" as 16 rows of 8 pixels, most significant bit leftmost.
FONT_A = bytes((
    0x00, 0x18, 0x18, 0x18, 0x18, 0x24, 0x24, 0x24,
    0x24, 0x7E, 0x42, 0x42, 0x42, 0xE7, 0x00, 0x00,
))


def default_palette() -> tuple[RGB, ...]:
    """Return the 16 RGB triples of the system palette, indexed by :class:`Color`."""
    return _TABLE_RGB


def palette_dac_values(start: int, end: int, rgb: Sequence[RGB]) -> list[RGB]:
    """Return the 6-bit DAC triples that program palette entries ``start..end``.

    Entry ``start`` takes the first triple of ``rgb``, the next entry the
    second, and so on. Each 8-bit component is divided by four.
    """
    count = end - start + 1
    if count <= 0:
        return []
    if len(rgb) < count:
        raise ValueError(f"need {count} colours for entries {start}..{end}, got {len(rgb)}")
    return [(r // 4, g // 4, b // 4) for r, g, b in rgb[:count]]


@dataclass
class BootInfo:
    """Boot parameters handed over by the loader."""

    cyls: int = 0
    leds: int = 0
    vmode: int = 8
    scrnx: int = 320
    scrny: int = 200


@dataclass
class Framebuffer:
    """A ``width`` x ``height`` screen of palette indices, one byte per pixel."""

    width: int
    height: int
    pixels: bytearray = field(default_factory=bytearray)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("framebuffer dimensions must be positive")
        size = self.width * self.height
        if not self.pixels:
            self.pixels = bytearray(size)
        elif len(self.pixels) != size:
            raise ValueError(f"expected {size} pixels, got {len(self.pixels)}")
        else:
            self.pixels = bytearray(self.pixels)

    @staticmethod
    def _colour_byte(color: int) -> int:
        value = int(color)
        if not 0 <= value <= 0xFF:
            raise ValueError(f"colour index {value} does not fit in a byte")
        return value

    def _check_area(self, x0: int, y0: int, x1: int, y1: int) -> None:
        if x0 < 0 or y0 < 0 or x1 >= self.width or y1 >= self.height:
            raise IndexError(
                f"area ({x0}, {y0})-({x1}, {y1}) lies outside the "
                f"{self.width}x{self.height} screen"
            )

    def fill_box(self, color: int, x0: int, y0: int, x1: int, y1: int) -> None:
        """Paint the rectangle with corners ``(x0, y0)`` and ``(x1, y1)``, inclusive."""
        value = self._colour_byte(color)
        if x0 > x1 or y0 > y1:
            return
        self._check_area(x0, y0, x1, y1)
        row = bytes([value]) * (x1 - x0 + 1)
        for y in range(y0, y1 + 1):
            start = y * self.width + x0
            self.pixels[start:start + len(row)] = row

    def put_glyph(self, x: int, y: int, color: int, font: bytes, char: str | int) -> None:
        """Draw the set pixels of ``char``'s 8x16 glyph from ``font`` at ``(x, y)``."""
        value = self._colour_byte(color)
        code = ord(char) if isinstance(char, str) else int(char)
        offset = code * GLYPH_HEIGHT
        glyph = font[offset:offset + GLYPH_HEIGHT] if code >= 0 else b""
        if len(glyph) != GLYPH_HEIGHT:
            raise ValueError(f"font has no glyph for character code {code}")
        self._check_area(x, y, x + GLYPH_WIDTH - 1, y + GLYPH_HEIGHT - 1)
        for row, bits in enumerate(glyph):
            base = (y + row) * self.width + x
            for column in range(GLYPH_WIDTH):
                if bits & (0x80 >> column):
                    self.pixels[base + column] = value

    def put_text(self, x: int, y: int, color: int, font: bytes, text: str | bytes) -> int:
        """Draw ``text`` left to right from ``(x, y)``; return the x after the last glyph."""
        for char in text:
            self.put_glyph(x, y, color, font, char)
            x += GLYPH_WIDTH
        return x

    def to_rgb(self, palette: Sequence[RGB]) -> bytes:
        """Return the screen as packed 8-bit RGB triples, row by row."""
        used = max(self.pixels)
        if used >= len(palette):
            raise ValueError(f"pixel colour {used} is missing from a palette of {len(palette)}")
        table = [bytes(entry) for entry in palette]
        return b"".join(table[p] for p in self.pixels)

    def to_ppm(self, palette: Sequence[RGB]) -> bytes:
        """Return the screen as a binary PPM (P6) image."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        return header + self.to_rgb(palette)


def init_screen(framebuffer: Framebuffer) -> None:
    """Draw the desktop background, task bar, start button and tray frame."""
    fb = framebuffer
    w, h = fb.width, fb.height
    fb.fill_box(Color.TEAL, 0, 0, w - 1, h - 29)
    fb.fill_box(Color.LIGHT_GREY, 0, h - 28, w - 1, h - 28)
    fb.fill_box(Color.WHITE, 0, h - 27, w - 1, h - 27)
    fb.fill_box(Color.LIGHT_GREY, 0, h - 26, w - 1, h - 1)

    fb.fill_box(Color.WHITE, 3, h - 24, 59, h - 24)
    fb.fill_box(Color.WHITE, 2, h - 24, 2, h - 4)
    fb.fill_box(Color.DARK_GREY, 3, h - 4, 59, h - 4)
    fb.fill_box(Color.DARK_GREY, 59, h - 23, 59, h - 5)
    fb.fill_box(Color.BLACK, 2, h - 3, 59, h - 3)
    fb.fill_box(Color.BLACK, 60, h - 24, 60, h - 3)

    fb.fill_box(Color.DARK_GREY, w - 47, h - 24, w - 4, h - 24)
    fb.fill_box(Color.DARK_GREY, w - 47, h - 23, w - 47, h - 4)
    fb.fill_box(Color.WHITE, w - 47, h - 3, w - 4, h - 3)
    fb.fill_box(Color.WHITE, w - 3, h - 24, w - 3, h - 3)


_GREETING = ((8, "h"), (16, "h"), (24, "w"), (32, "u"),
             (48, "l"), (56, "o"), (64, "v"), (72, "e"), (80, "s"),
             (96, "A"), (104, "n"), (112, "n"), (120, "a"))


def main(argv: Sequence[str] | None = None) -> int:
    """Render the desktop to a PPM file."""
    parser = argparse.ArgumentParser(description="Render the desktop screen to a PPM image.")
    parser.add_argument("-o", "--output", default="desktop.ppm", help="PPM file to write")
    parser.add_argument("--width", type=int, default=320, help="screen width in pixels")
    parser.add_argument("--height", type=int, default=200, help="screen height in pixels")
    parser.add_argument("--font", type=Path, help="8x16 bitmap font, 16 bytes per character")
    args = parser.parse_args(argv)

    binfo = BootInfo(scrnx=args.width, scrny=args.height)
    try:
        fb = Framebuffer(binfo.scrnx, binfo.scrny)
        init_screen(fb)
        if args.font is not None:
            font = args.font.read_bytes()
            for x, char in _GREETING:
                fb.put_glyph(x, 8, Color.WHITE, font, char)
            fb.put_text(30, 130, Color.WHITE, font, "AI Framework!")
        Path(args.output).write_bytes(fb.to_ppm(default_palette()))
    except (OSError, ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0