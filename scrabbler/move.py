"""Move representation for the Scrabbler engine."""

from __future__ import annotations

from typing import NamedTuple

from scrabbler.constants import HORIZONTAL, RACK_SIZE


class Placement(NamedTuple):
    """A tile put on an empty square.  ``is_blank`` tiles score 0."""

    row: int
    col: int
    letter: str
    is_blank: bool = False


class Move:
    """A single scored move.  Built by the engine and never changed after."""

    __slots__ = (
        "word", "row", "col", "direction", "score",
        "placements", "cross_words", "rack",
    )

    def __init__(
        self,
        word: str,
        row: int,
        col: int,
        direction: str,
        score: int,
        placements: tuple[Placement, ...],
        cross_words: tuple[str, ...] = (),
        rack: str = "",
    ):
        self.word = word              # main word, uppercase
        self.row = row                # first square of the main word
        self.col = col
        self.direction = direction    # 'H' or 'V'
        self.score = score
        self.placements = tuple(placements)
        self.cross_words = tuple(cross_words)
        self.rack = rack              # rack the move was generated from

    @property
    def words(self) -> tuple[str, ...]:
        """Main word followed by every perpendicular word formed."""
        return (self.word,) + self.cross_words

    @property
    def is_bingo(self) -> bool:
        return len(self.placements) == RACK_SIZE

    @property
    def tiles_used(self) -> str:
        """Rack tiles consumed, blanks as ``?``."""
        return "".join("?" if p.is_blank else p.letter for p in self.placements)

    @property
    def key(self) -> frozenset[Placement]:
        return frozenset(self.placements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        bingo = " +BINGO!" if self.is_bingo else ""
        arrow = "→" if self.direction == HORIZONTAL else "↓"
        return f"{self.word} at ({self.row},{self.col}) {arrow} = {self.score} pts{bingo}"
