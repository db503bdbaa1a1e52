"""Anchor squares: the empty squares a new play can grow from."""

from __future__ import annotations

from scrabbler.board import Board
from scrabbler.constants import CENTER


def find_anchors(board: Board) -> set[tuple[int, int]]:
    """An anchor is an empty square adjacent to at least one occupied square.
    On an empty board the only anchor is the center square."""
    if board.is_empty():
        return {(CENTER, CENTER)}
    anchors: set[tuple[int, int]] = set()
    for sq in board.tiles():
        for nb in board.neighbors(sq.row, sq.col):
            if nb.letter is None:
                anchors.add((nb.row, nb.col))
    return anchors
