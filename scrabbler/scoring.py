"""Move scoring: letter values, premium squares and the bingo bonus."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from scrabbler.board import Board, perpendicular
from scrabbler.constants import BINGO_BONUS, HORIZONTAL, RACK_SIZE, TILE_VALUES
from scrabbler.move import Placement

if TYPE_CHECKING:
    from scrabbler.move import Move


def _run(
    board: Board,
    placed: dict[tuple[int, int], Placement],
    row: int,
    col: int,
    axis: str,
) -> list[tuple[int, int]]:
    """Squares of the unbroken run of tiles through (row, col) along
    ``axis``, counting ``placed`` as already on the board."""
    dr, dc = (0, 1) if axis == HORIZONTAL else (1, 0)

    def filled(r: int, c: int) -> bool:
        return (r, c) in placed or board.is_occupied(r, c)

    r, c = row, col
    while filled(r - dr, c - dc):
        r -= dr
        c -= dc
    run: list[tuple[int, int]] = []
    while filled(r, c):
        run.append((r, c))
        r += dr
        c += dc
    return run


def _score_run(
    board: Board,
    placed: dict[tuple[int, int], Placement],
    run: list[tuple[int, int]],
) -> tuple[int, str]:
    """(points, word) for one run.  Premiums count only under new tiles."""
    total = 0
    word_mult = 1
    letters: list[str] = []
    for r, c in run:
        sq = board.rows[r][c]
        p = placed.get((r, c))
        if p is None:
            letters.append(sq.letter)
            total += sq.value
        else:
            letters.append(p.letter)
            letter_val = 0 if p.is_blank else TILE_VALUES[p.letter]
            total += letter_val * sq.letter_multiplier
            word_mult *= sq.word_multiplier
    return total * word_mult, "".join(letters)


def score_placements(
    board: Board,
    placements: Sequence[Placement],
    axis: str,
) -> tuple[int, str, tuple[str, ...]]:
    """Score ``placements`` played along ``axis`` on ``board`` (the state
    before the move).

    Returns ``(total, main_word, cross_words)``.  Every perpendicular word
    of two or more letters through a new tile is scored on its own
    premiums; 50 points are added when all 7 rack tiles are used.
    """
    placed = {(p.row, p.col): p for p in placements}
    first = placements[0]

    total, main_word = _score_run(board, placed, _run(board, placed, first.row, first.col, axis))

    cross_axis = perpendicular(axis)
    cross_words: list[str] = []
    for p in placements:
        run = _run(board, placed, p.row, p.col, cross_axis)
        if len(run) > 1:
            cross_score, cross_word = _score_run(board, placed, run)
            total += cross_score
            cross_words.append(cross_word)

    if len(placements) == RACK_SIZE:
        total += BINGO_BONUS
    return total, main_word, tuple(cross_words)


def score(move: Move, board: Board) -> int:
    """Points for ``move`` against ``board`` as it was before the move."""
    return score_placements(board, move.placements, move.direction)[0]
