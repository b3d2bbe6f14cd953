"""Block glyphs for the big clock: a 3x5 cell matrix per digit, tty-clock style."""

from __future__ import annotations

BLOCK = "██"
BLANK = "  "

GLYPH_WIDTH = 3 * len(BLOCK)
GLYPH_HEIGHT = 5

_DIGITS: tuple[tuple[str, ...], ...] = (
    ("###", "#.#", "#.#", "#.#", "###"),  # 0
    ("..#", "..#", "..#", "..#", "..#"),  # 1
    ("###", "..#", "###", "#..", "###"),  # 2
    ("###", "..#", "###", "..#", "###"),  # 3
    ("#.#", "#.#", "###", "..#", "..#"),  # 4
    ("###", "#..", "###", "..#", "###"),  # 5
    ("###", "#..", "###", "#.#", "###"),  # 6
    ("###", "..#", "..#", "..#", "..#"),  # 7
    ("###", "#.#", "###", "#.#", "###"),  # 8
    ("###", "#.#", "###", "..#", "###"),  # 9
)

COLON_ROWS: tuple[str, ...] = (BLANK, BLOCK, BLANK, BLOCK, BLANK)


def digit_rows(digit: int) -> list[str]:
    """Return the five rows of a digit, each ``GLYPH_WIDTH`` characters wide."""
    pattern = _DIGITS[digit]
    return ["".join(BLOCK if cell == "#" else BLANK for cell in row) for row in pattern]
