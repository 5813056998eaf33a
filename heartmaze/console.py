"""Terminal drawing primitives: colours, cursor placement and output."""

from __future__ import annotations

import sys
from typing import TextIO

BLACK = 0
BLUE = 1
GREEN = 2
CYAN = 3
RED = 4
MAGENTA = 5
YELLOW = 6
LIGHT_GRAY = 7
WHITE = 15

_CSI = "\x1b["

# Palette indices 0-7 store blue in bit 0 and red in bit 2; ANSI swaps them.
_PALETTE_TO_ANSI = (0, 4, 2, 6, 1, 5, 3, 7)


def _ansi_index(color: int) -> tuple[int, bool]:
    return _PALETTE_TO_ANSI[color & 0b111], bool(color & 0b1000)


class Console:
    """Writes coloured text at grid positions on a character terminal.

    One grid column is two characters wide, so that the square glyphs
    used for walls and items line up in a square grid.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.color = (BLACK, WHITE)

    def set_color(self, background: int, text: int) -> None:
        """Set background and text colour from the 16-entry palette.

        Values outside 0-15 are ignored and leave the colour unchanged.
        """
        if not (0 <= background <= 15 and 0 <= text <= 15):
            return
        bg, bg_bright = _ansi_index(background)
        fg, fg_bright = _ansi_index(text)
        bg_code = (100 if bg_bright else 40) + bg
        fg_code = (90 if fg_bright else 30) + fg
        self.color = (background, text)
        self.write(f"{_CSI}{bg_code};{fg_code}m")

    def set_cursor(self, x: int, y: int) -> None:
        """Move the cursor to grid cell (x, y)."""
        self.write(f"{_CSI}{y + 1};{x * 2 + 1}H")

    def hide_cursor(self) -> None:
        """Make the terminal cursor invisible."""
        self.write(f"{_CSI}?25l")

    def clear_screen(self) -> None:
        """Return the cursor to the top-left corner so the next frame overdraws."""
        self.set_cursor(0, 0)

    def write(self, text: str) -> None:
        """Write text at the current cursor position."""
        self.stream.write(text)
        flush = getattr(self.stream, "flush", None)
        if flush is not None:
            flush()