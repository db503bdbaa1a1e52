"""Shared test fixtures for scrabbler."""

from collections import Counter

import pytest

from scrabbler.anchors import find_anchors
from scrabbler.board import Board, coordinates
from scrabbler.constants import AXES, BLANK, BOARD_SIZE
from scrabbler.engine import MoveEngine
from scrabbler.gaddag import build
from scrabbler.move import Placement
from scrabbler.scoring import score_placements

SMALL_WORDS = ["CAT", "CATS", "AT"]

LEXICON = [
    "AB", "AD", "AE", "AR", "AS", "AT", "BA", "BE", "DA", "DE", "ED",
    "ER", "ES", "ET", "RE", "TA",
    "ACT", "ACTS", "ARE", "ART", "ATE", "BARE", "BEAR", "BEARD", "BEAT",
    "BETA", "BREAD", "CARE", "CARES", "CAST", "CAT", "CATS", "DARE",
    "DEAR", "EAR", "EAT", "ERA", "RACE", "RACES", "RAT", "RATE", "RATES",
    "READ", "SAT", "SCAT", "SEA", "SET", "STARE", "TAR", "TEA", "TEAR",
    "TEARS", "TRADE", "TREAD",
]


@pytest.fixture
def small_gaddag():
    return build(SMALL_WORDS)


@pytest.fixture
def small_engine(small_gaddag):
    return MoveEngine(small_gaddag)


@pytest.fixture
def lexicon_gaddag():
    return build(LEXICON)


@pytest.fixture
def lexicon_engine(lexicon_gaddag):
    return MoveEngine(lexicon_gaddag)


def board_with(*words):
    """Board with ``(word, row, col, direction)`` entries laid down."""
    board = Board()
    for word, row, col, direction in words:
        for i, ch in enumerate(word):
            r, c = (row, col + i) if direction == "H" else (row + i, col)
            if board.get(r, c) is None:
                board.place(r, c, ch)
    return board


@pytest.fixture
def crossed_board():
    # CARES across row 7, RATE down column 7 sharing the R
    return board_with(("CARES", 7, 5, "H"), ("RATE", 7, 7, "V"))


def brute_force_moves(board, rack, words):
    """Every legal placement found by trying each word at each position.

    Returns a set of frozensets of ``(row, col, letter)``; blank use is
    checked for coverage only.
    """
    words = set(words)
    rack_counts = Counter(t for t in rack if t != BLANK)
    blanks = rack.count(BLANK)
    anchors = find_anchors(board)
    found = set()
    for word in words:
        n = len(word)
        if n < 2:
            continue
        for axis in AXES:
            for index in range(BOARD_SIZE):
                for start in range(BOARD_SIZE - n + 1):
                    if start > 0 and board.is_occupied(*coordinates(axis, index, start - 1)):
                        continue
                    if start + n < BOARD_SIZE and board.is_occupied(*coordinates(axis, index, start + n)):
                        continue
                    placed = []
                    fits = True
                    for i, ch in enumerate(word):
                        r, c = coordinates(axis, index, start + i)
                        existing = board.get(r, c)
                        if existing is None:
                            placed.append(Placement(r, c, ch))
                        elif existing != ch:
                            fits = False
                            break
                    if not fits or not placed:
                        continue
                    missing = Counter(p.letter for p in placed) - rack_counts
                    if sum(missing.values()) > blanks:
                        continue
                    if not any((p.row, p.col) in anchors for p in placed):
                        continue
                    _, _, cross_words = score_placements(board, placed, axis)
                    if all(w in words for w in cross_words):
                        found.add(frozenset((p.row, p.col, p.letter) for p in placed))
    return found


def move_squares(move):
    return frozenset((p.row, p.col, p.letter) for p in move.placements)
