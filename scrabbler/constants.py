"""Game constants for the Scrabbler move engine."""

from __future__ import annotations

import string

BOARD_SIZE = 15
CENTER = 7  # 0-indexed center square
RACK_SIZE = 7

BLANK = "?"
SEPARATOR = "+"
ALPHABET = string.ascii_uppercase

# Play axes.  "H" runs along a row, "V" runs down a column.
HORIZONTAL = "H"
VERTICAL = "V"
AXES = (HORIZONTAL, VERTICAL)

# Standard English Scrabble tile values
TILE_VALUES: dict[str, int] = {
    'A': 1, 'B': 3, 'C': 3, 'D': 2, 'E': 1, 'F': 4, 'G': 2,
    'H': 4, 'I': 1, 'J': 8, 'K': 5, 'L': 1, 'M': 3, 'N': 1,
    'O': 1, 'P': 3, 'Q': 10, 'R': 1, 'S': 1, 'T': 1, 'U': 1,
    'V': 4, 'W': 4, 'X': 8, 'Y': 4, 'Z': 10, '?': 0,
}

# Premium square layout
# Key: . = normal, DL = double letter, TL = triple letter,
#      DW = double word, TW = triple word, * = center (star, doubles the word)
# fmt: off
BONUS_GRID: list[list[str]] = [
    ["TW", ".",  ".",  "DL", ".",  ".",  ".",  "TW", ".",  ".",  ".",  "DL", ".",  ".",  "TW"],
    [".",  "DW", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "DW", "." ],
    [".",  ".",  "DW", ".",  ".",  ".",  "DL", ".",  "DL", ".",  ".",  ".",  "DW", ".",  "." ],
    ["DL", ".",  ".",  "DW", ".",  ".",  ".",  "DL", ".",  ".",  ".",  "DW", ".",  ".",  "DL"],
    [".",  ".",  ".",  ".",  "DW", ".",  ".",  ".",  ".",  ".",  "DW", ".",  ".",  ".",  "." ],
    [".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", "." ],
    [".",  ".",  "DL", ".",  ".",  ".",  "DL", ".",  "DL", ".",  ".",  ".",  "DL", ".",  "." ],
    ["TW", ".",  ".",  "DL", ".",  ".",  ".",  "*",  ".",  ".",  ".",  "DL", ".",  ".",  "TW"],
    [".",  ".",  "DL", ".",  ".",  ".",  "DL", ".",  "DL", ".",  ".",  ".",  "DL", ".",  "." ],
    [".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", "." ],
    [".",  ".",  ".",  ".",  "DW", ".",  ".",  ".",  ".",  ".",  "DW", ".",  ".",  ".",  "." ],
    ["DL", ".",  ".",  "DW", ".",  ".",  ".",  "DL", ".",  ".",  ".",  "DW", ".",  ".",  "DL"],
    [".",  ".",  "DW", ".",  ".",  ".",  "DL", ".",  "DL", ".",  ".",  ".",  "DW", ".",  "." ],
    [".",  "DW", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "DW", "." ],
    ["TW", ".",  ".",  "DL", ".",  ".",  ".",  "TW", ".",  ".",  ".",  "DL", ".",  ".",  "TW"],
]
# fmt: on

# (letter multiplier, word multiplier) for each bonus code
BONUS_MULTIPLIERS: dict[str, tuple[int, int]] = {
    ".": (1, 1),
    "DL": (2, 1),
    "TL": (3, 1),
    "DW": (1, 2),
    "TW": (1, 3),
    "*": (1, 2),
}

BINGO_BONUS = 50  # 50 points for using all 7 tiles in one turn
