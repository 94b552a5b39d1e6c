# bootdesk

`bootdesk` is pure Python with no third-party dependencies. It has two parts:

- Small C-style runtime helpers. `bootdesk.formatting` has `sprintf` and
  `vsprintf`, `bootdesk.rand` has a linear congruential `rand`, and
  `bootdesk.strings` has `strcmp` and `strncmp`.
- `bootdesk.graphics` has an 8-bit indexed framebuffer with a 16-colour palette.
  It fills boxes, draws 8x16 bitmap glyphs and text, draws a simple desktop with
  a task bar, and exports the screen as RGB bytes or a binary PPM image.

## Installation

```
pip install .
```

To add the test dependencies, install with `pip install .[test]`. Then run
`pytest`.

## Runtime helpers

```python
from bootdesk.formatting import sprintf, vsprintf
from bootdesk.rand import RAND_MAX, RandomGenerator, rand
from bootdesk.strings import strcmp, strncmp

sprintf("x=%04d hex=%X ptr=%p %s%%", 42, 255, 4096, "ok")
# 'x=0042 hex=FF ptr=0x1000 ok%'
vsprintf("%d-%d", [1, 2])   # '1-2'

rng = RandomGenerator()     # state starts at 1
rng.rand()                  # 16838
rand()                      # draws from a shared module-level generator

strcmp("abc", "abd")        # negative
strncmp("abcx", "abcy", 3)  # 0
```

Formatting rules:

- Only `%c`, `%d`, `%p`, `%s`, `%x`, `%X` and `%%` are supported. Each takes an
  optional `0` pad flag and a decimal width. Any other conversion character is
  consumed and produces no output.
- Numbers are treated as 32-bit words. `%d` is signed. `%x`, `%X` and `%p` are
  unsigned, and `%p` prints a `0x` prefix followed by upper-case digits.
- A zero value with no width produces no digits at all. With zero padding, a
  negative number has its padding placed before the minus sign.
- `%s` prints `<null>` for `None`.
- Too few arguments, or a non-integer where an integer is needed, raises
  `TypeError`. A one-character string is accepted as an integer.

`RandomGenerator(state)` keeps its state in a 32-bit word. `rand()` returns
values in `0..RAND_MAX`, where `RAND_MAX` is 32767.

`strcmp` and `strncmp` accept `str` or `bytes`. A string ends at its first NUL or
at its end. Bytes are compared as signed 8-bit characters, and strings are
compared by code point. `strncmp` raises `ValueError` when `n` is negative.

## Desktop rendering

```python
from bootdesk.graphics import Color, FONT_A, Framebuffer, default_palette, init_screen

fb = Framebuffer(320, 200)
init_screen(fb)
fb.fill_box(Color.RED, 10, 10, 20, 20)
with open("desk.ppm", "wb") as out:
    out.write(fb.to_ppm(default_palette()))
```

- `Color` is an `IntEnum` naming the 16 palette entries, such as `BLACK`,
  `WHITE`, `TEAL` and `DARK_GREY`. `default_palette()` returns their RGB triples.
- `Framebuffer(width, height)` holds one palette index per pixel in `pixels`.
  `fill_box` paints an inclusive rectangle and does nothing if the corners are
  reversed. Drawing outside the screen raises `IndexError`, and a colour that
  does not fit in a byte raises `ValueError`.
- `put_glyph(x, y, color, font, char)` draws only the set pixels of a glyph.
  A font is a bytes-like table of 16 bytes per character, so character code `c`
  uses bytes `c*16` through `c*16+15`. Each byte is one row, and its most
  significant bit is the leftmost pixel. `put_text` draws a string 8 pixels
  apart and returns the x position after the last glyph. `FONT_A` is the single
  glyph for the letter A.
- `to_rgb(palette)` and `to_ppm(palette)` raise `ValueError` when a pixel's
  index is missing from the palette.
- `palette_dac_values(start, end, rgb)` returns the 6-bit DAC triples (each
  component divided by four) for palette entries `start..end`.
- `BootInfo` holds loader parameters (`cyls`, `leds`, `vmode`, `scrnx`,
  `scrny`). By default the screen is 320x200.

## Command line

```
bootdesk -o desktop.ppm --width 320 --height 200 --font font.bin
```

This command draws the desktop and writes it as a PPM file. The default file
is `desktop.ppm`. When `--font` names an 8x16 font file, a greeting line and
the text "AI Framework!" are drawn in white. When an error occurs, the command
prints a message to standard error and exits with status 1.

## What it does not do

The package ships no full font. Without `--font` the command draws only the
desktop frame, with no text. Screens are rendered only to bytes or files.
Nothing is shown in a window or on real display hardware.