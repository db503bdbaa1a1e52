"""Cross-checks: which letters each empty square accepts for a given play axis.

A tile placed on a square also extends the run of tiles crossing it on the
other axis.  For horizontal plays that is the run above and below the
square, for vertical plays the run to its left and right.  The cross-check
for a square is the set of letters that turn that run into a dictionary
word, plus the face value of the tiles already in the run.  Squares with
no perpendicular neighbour are unconstrained.

Cross-checks are derived from the board; recompute them after every move.
"""

from __future__ import annotations

from scrabbler.board import Board, Square, perpendicular
from scrabbler.constants import AXES, BOARD_SIZE, SEPARATOR
from scrabbler.gaddag import Gaddag


class CrossCheck:
    """Allowed letters for one empty square on one play axis.

    ``letters`` is None when every letter is allowed.  ``score`` is the
    summed value of the existing perpendicular tiles.
    """

    __slots__ = ("letters", "score")

    def __init__(self, letters: frozenset[str] | None = None, score: int = 0):
        self.letters = letters
        self.score = score

    @property
    def is_constrained(self) -> bool:
        return self.letters is not None

    def allows(self, letter: str) -> bool:
        return self.letters is None or letter in self.letters

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CrossCheck):
            return NotImplemented
        return self.letters == other.letters and self.score == other.score

    def __hash__(self) -> int:
        return hash((self.letters, self.score))

    def __repr__(self) -> str:
        if self.letters is None:
            return "CrossCheck(*)"
        return f"CrossCheck({''.join(sorted(self.letters))!r}, score={self.score})"


UNCONSTRAINED = CrossCheck()


class CrossChecks:
    """Cross-check tables for both play axes, keyed by (row, col)."""

    __slots__ = ("_tables",)

    def __init__(self, tables: dict[str, dict[tuple[int, int], CrossCheck]]):
        self._tables = tables

    def get(self, axis: str, row: int, col: int) -> CrossCheck | None:
        """Cross-check for an empty square; None for occupied squares."""
        return self._tables[axis].get((row, col))

    def allows(self, axis: str, row: int, col: int, letter: str) -> bool:
        check = self._tables[axis].get((row, col))
        return check is not None and check.allows(letter)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CrossChecks):
            return NotImplemented
        return self._tables == other._tables

    __hash__ = None  # type: ignore[assignment]


def cross_check_for(gaddag: Gaddag, before: str, after: str) -> frozenset[str]:
    """Letters x for which ``before + x + after`` is a word.

    The GADDAG path of that word split at x is ``x + reverse(before)``,
    followed by the separator and ``after`` when ``after`` is not empty.
    """
    backwards = before[::-1]
    tail = SEPARATOR + after if after else ""
    allowed: set[str] = set()
    for letter, node in gaddag.arcs(gaddag.root):
        if letter == SEPARATOR:
            continue
        node = gaddag.walk(backwards, node)
        if node is not None and tail:
            node = gaddag.walk(tail, node)
        if node is not None and gaddag.is_terminal(node):
            allowed.add(letter)
    return frozenset(allowed)


def _check_square(
    gaddag: Gaddag,
    line: list[Square],
    pos: int,
    cache: dict[tuple[str, str], frozenset[str]],
) -> CrossCheck:
    start = pos
    while start > 0 and line[start - 1].letter is not None:
        start -= 1
    end = pos + 1
    while end < len(line) and line[end].letter is not None:
        end += 1
    if start == pos and end == pos + 1:
        return UNCONSTRAINED

    before = "".join(sq.letter for sq in line[start:pos])
    after = "".join(sq.letter for sq in line[pos + 1:end])
    key = (before, after)
    letters = cache.get(key)
    if letters is None:
        letters = cache[key] = cross_check_for(gaddag, before, after)
    score = sum(sq.value for sq in line[start:pos]) + sum(sq.value for sq in line[pos + 1:end])
    return CrossCheck(letters, score)


def compute_cross_checks(board: Board, gaddag: Gaddag) -> CrossChecks:
    """Cross-checks of every empty square for both play axes."""
    cache: dict[tuple[str, str], frozenset[str]] = {}
    tables: dict[str, dict[tuple[int, int], CrossCheck]] = {}
    for axis in AXES:
        # plays along ``axis`` are checked against the lines of the other axis
        cross_axis = perpendicular(axis)
        table: dict[tuple[int, int], CrossCheck] = {}
        for index in range(BOARD_SIZE):
            line = board.line(cross_axis, index)
            for pos, sq in enumerate(line):
                if sq.letter is None:
                    table[(sq.row, sq.col)] = _check_square(gaddag, line, pos, cache)
        tables[axis] = table
    return CrossChecks(tables)
