"""Scrabbler — GADDAG-based Scrabble move generation."""

from scrabbler.constants import BOARD_SIZE, TILE_VALUES, BONUS_GRID, BINGO_BONUS, CENTER, RACK_SIZE
from scrabbler.errors import CancellationError, ConstructionError, IllegalMoveError, ScrabblerError
from scrabbler.gaddag import Gaddag, build, deserialize, serialize
from scrabbler.dictionary import Dictionary
from scrabbler.board import Board, Square
from scrabbler.crosscheck import CrossCheck, CrossChecks, compute_cross_checks
from scrabbler.anchors import find_anchors
from scrabbler.move import Move, Placement
from scrabbler.scoring import score
from scrabbler.engine import Deadline, MoveEngine

__all__ = [
    "BOARD_SIZE",
    "TILE_VALUES",
    "BONUS_GRID",
    "BINGO_BONUS",
    "CENTER",
    "RACK_SIZE",
    "Board",
    "CancellationError",
    "ConstructionError",
    "CrossCheck",
    "CrossChecks",
    "Deadline",
    "Dictionary",
    "Gaddag",
    "IllegalMoveError",
    "Move",
    "MoveEngine",
    "Placement",
    "ScrabblerError",
    "Square",
    "build",
    "compute_cross_checks",
    "deserialize",
    "find_anchors",
    "score",
    "serialize",
]
