"""15×15 Scrabble board with a uniform row/column line view."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Iterator

from scrabbler.constants import (
    ALPHABET,
    BLANK,
    BOARD_SIZE,
    BONUS_GRID,
    BONUS_MULTIPLIERS,
    HORIZONTAL,
    TILE_VALUES,
    VERTICAL,
)
from scrabbler.errors import IllegalMoveError

if TYPE_CHECKING:
    from scrabbler.move import Move

_LETTERS = frozenset(ALPHABET)


def perpendicular(axis: str) -> str:
    """The other play axis."""
    if axis == HORIZONTAL:
        return VERTICAL
    if axis == VERTICAL:
        return HORIZONTAL
    raise ValueError(f"Unknown axis {axis!r}")


def coordinates(axis: str, index: int, pos: int) -> tuple[int, int]:
    """(row, col) of position ``pos`` on line ``index`` of ``axis``."""
    return (index, pos) if axis == HORIZONTAL else (pos, index)


class Square:
    """One board square.  ``letter`` is None when empty; ``is_blank`` marks
    a blank tile standing in for ``letter``.  Premiums never change."""

    __slots__ = (
        "row", "col", "letter", "is_blank",
        "bonus", "letter_multiplier", "word_multiplier",
    )

    def __init__(self, row: int, col: int, bonus: str = "."):
        self.row = row
        self.col = col
        self.letter: str | None = None
        self.is_blank = False
        self.bonus = bonus
        self.letter_multiplier, self.word_multiplier = BONUS_MULTIPLIERS[bonus]

    @property
    def is_empty(self) -> bool:
        return self.letter is None

    @property
    def value(self) -> int:
        """Face value of the tile here (0 for blanks and empty squares)."""
        if self.letter is None or self.is_blank:
            return 0
        return TILE_VALUES[self.letter]

    def __repr__(self) -> str:
        if self.letter is None:
            return f"Square({self.row},{self.col} {self.bonus})"
        shown = self.letter.lower() if self.is_blank else self.letter
        return f"Square({self.row},{self.col} {shown})"


class Board:
    """15x15 game board.

    ``rows`` and ``cols`` hold the same Square objects, so the row-major and
    column-major views are always consistent: a tile placed through either
    view is visible through both.
    """

    def __init__(self):
        self.rows: list[list[Square]] = [
            [Square(r, c, BONUS_GRID[r][c]) for c in range(BOARD_SIZE)]
            for r in range(BOARD_SIZE)
        ]
        self.cols: list[list[Square]] = [
            [self.rows[r][c] for r in range(BOARD_SIZE)]
            for c in range(BOARD_SIZE)
        ]
        self._tile_count = 0

    @classmethod
    def from_rows(cls, rows: list[str]) -> Board:
        """Board from 15 strings of 15 characters.

        ``.`` is empty, ``A``-``Z`` a tile, ``a``-``z`` a blank playing as
        that letter.
        """
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")
        board = cls()
        for r, line in enumerate(rows):
            if len(line) != BOARD_SIZE:
                raise ValueError(f"Row {r} has {len(line)} squares, expected {BOARD_SIZE}")
            for c, ch in enumerate(line):
                if ch == ".":
                    continue
                if ch.upper() not in _LETTERS:
                    raise ValueError(f"Bad character {ch!r} at ({r},{c})")
                board.place(r, c, ch.upper(), is_blank=ch.islower())
        return board

    @classmethod
    def from_string(cls, text: str) -> Board:
        rows = [line.strip() for line in text.strip().splitlines() if line.strip()]
        return cls.from_rows(rows)

    # squares

    def square(self, row: int, col: int) -> Square:
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise IndexError(f"({row},{col}) is off the board")
        return self.rows[row][col]

    def get(self, row: int, col: int) -> str | None:
        """Letter at (row, col), or None (also None off the board)."""
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            return self.rows[row][col].letter
        return None

    def is_occupied(self, row: int, col: int) -> bool:
        """True if there's a tile at (row, col)."""
        return self.get(row, col) is not None

    def is_vacant(self, row: int, col: int) -> bool:
        """True if (row, col) is on the board and has no tile."""
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE and self.rows[row][col].letter is None

    def is_empty(self) -> bool:
        """True if no tiles on the board (the next move is the first)."""
        return self._tile_count == 0

    def count_tiles(self) -> int:
        return self._tile_count

    def tiles(self) -> Iterator[Square]:
        """Occupied squares in row-major order."""
        for row in self.rows:
            for sq in row:
                if sq.letter is not None:
                    yield sq

    def neighbors(self, row: int, col: int) -> list[Square]:
        """On-board squares directly up, down, left and right of (row, col)."""
        result: list[Square] = []
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = row + dr, col + dc
            if 0 <= nr < BOARD_SIZE and 0 <= nc < BOARD_SIZE:
                result.append(self.rows[nr][nc])
        return result

    # lines

    def squares_in_row(self, r: int) -> list[Square]:
        return self.rows[r]

    def squares_in_col(self, c: int) -> list[Square]:
        return self.cols[c]

    def line(self, axis: str, index: int) -> list[Square]:
        """Row ``index`` for "H", column ``index`` for "V"."""
        if axis == HORIZONTAL:
            return self.rows[index]
        if axis == VERTICAL:
            return self.cols[index]
        raise ValueError(f"Unknown axis {axis!r}")

    # mutation

    def place(self, row: int, col: int, letter: str, is_blank: bool = False) -> None:
        """Put a tile on an empty square."""
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise IllegalMoveError(f"({row},{col}) is off the board")
        if letter not in _LETTERS:
            raise IllegalMoveError(f"Cannot place {letter!r}; tiles are A-Z")
        sq = self.rows[row][col]
        if sq.letter is not None:
            raise IllegalMoveError(f"({row},{col}) already holds {sq.letter}")
        sq.letter = letter
        sq.is_blank = is_blank
        self._tile_count += 1

    def apply(self, move: Move) -> None:
        """Play ``move``, re-checking it against this board and its rack.

        The board is left untouched if the move is rejected.
        """
        placements = move.placements
        if not placements:
            raise IllegalMoveError("Move places no tiles")

        seen: set[tuple[int, int]] = set()
        for p in placements:
            if not self.is_vacant(p.row, p.col):
                raise IllegalMoveError(f"({p.row},{p.col}) is not an empty square")
            if (p.row, p.col) in seen:
                raise IllegalMoveError(f"({p.row},{p.col}) is used twice")
            if p.letter not in _LETTERS:
                raise IllegalMoveError(f"Bad letter {p.letter!r} at ({p.row},{p.col})")
            seen.add((p.row, p.col))

        fixed = {p.row for p in placements} if move.direction == HORIZONTAL else {p.col for p in placements}
        if move.direction not in (HORIZONTAL, VERTICAL) or len(fixed) != 1:
            raise IllegalMoveError(f"Placements do not lie on one {move.direction!r} line")

        available = Counter(move.rack)
        needed = Counter(BLANK if p.is_blank else p.letter for p in placements)
        for tile, count in needed.items():
            if available[tile] < count:
                raise IllegalMoveError(
                    f"Rack {move.rack!r} has {available[tile]} of {tile!r}, move needs {count}"
                )

        for p in placements:
            self.place(p.row, p.col, p.letter, is_blank=p.is_blank)

    def copy(self) -> Board:
        """Independent copy; changes to one board never show in the other."""
        b = Board()
        for sq in self.tiles():
            b.place(sq.row, sq.col, sq.letter, is_blank=sq.is_blank)
        return b

    def to_rows(self) -> list[str]:
        """Inverse of :meth:`from_rows`."""
        return [
            "".join(
                "." if sq.letter is None else (sq.letter.lower() if sq.is_blank else sq.letter)
                for sq in row
            )
            for row in self.rows
        ]

    def __str__(self) -> str:
        header = "    " + " ".join(f"{c:>2}" for c in range(BOARD_SIZE))
        sep = "   " + "---" * BOARD_SIZE
        lines = [header, sep]
        for r, row in enumerate(self.rows):
            parts = [f"{r:>2} |"]
            for sq in row:
                if sq.letter is not None:
                    parts.append(f" {sq.letter.lower() if sq.is_blank else sq.letter} ")
                elif sq.bonus in (".", "*"):
                    parts.append(f" {sq.bonus} ")
                else:
                    parts.append(f"{sq.bonus:>3}")
            lines.append("".join(parts))
        return "\n".join(lines)
