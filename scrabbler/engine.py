"""Move engine: anchor-based generation over a GADDAG.

For every anchor the engine reads the automaton backwards from the anchor
square towards the start of a word, may cross the separator once, and then
reads forwards to the end of the word (Gordon, 1994).  Rack tiles are only
tried where the automaton has an arc for the letter and the square's
cross-check allows it, so whole subtrees of the dictionary are skipped
instead of generated and rejected.

Each search branch carries its own placements tuple and rack string, so
sibling branches never see each other's partial moves.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, Iterator

from scrabbler.anchors import find_anchors
from scrabbler.board import Board, coordinates
from scrabbler.constants import ALPHABET, AXES, BLANK, BOARD_SIZE, RACK_SIZE, SEPARATOR
from scrabbler.crosscheck import CrossCheck, compute_cross_checks
from scrabbler.dictionary import Dictionary
from scrabbler.errors import CancellationError
from scrabbler.gaddag import Gaddag
from scrabbler.move import Move, Placement
from scrabbler.scoring import score_placements

log = logging.getLogger("scrabbler.engine")

_RACK_SYMBOLS = frozenset(ALPHABET + BLANK)

# (position on the line, letter, is_blank)
_Tile = tuple[int, str, bool]


def normalize_rack(rack: str | Iterable[str]) -> str:
    """Rack as a sorted string of A-Z and ``?``; raises ValueError if invalid."""
    tiles = "".join(rack).upper()
    if len(tiles) > RACK_SIZE:
        raise ValueError(f"Rack holds at most {RACK_SIZE} tiles, got {len(tiles)}")
    bad = set(tiles) - _RACK_SYMBOLS
    if bad:
        raise ValueError(f"Invalid rack tiles: {''.join(sorted(bad))!r}")
    return "".join(sorted(tiles))


class Deadline:
    """Cancel signal that fires once ``seconds`` have elapsed."""

    def __init__(self, seconds: float):
        self.seconds = seconds
        self.expires = time.monotonic() + seconds

    def __call__(self) -> bool:
        return time.monotonic() >= self.expires


class MoveEngine:
    """Finds every legal move for a board and rack.

    The GADDAG is only read, so one engine can serve any number of boards.
    Generation and ``Board.apply`` must not run at the same time on the
    same board.
    """

    def __init__(self, lexicon: Gaddag | Dictionary):
        self.gaddag = lexicon.gaddag if isinstance(lexicon, Dictionary) else lexicon

    # public API

    def find_best_moves(self, board: Board, rack: str | list[str], top_n: int = 10) -> list[Move]:
        """Top N highest-scoring legal moves."""
        moves = self.generate(board, rack)
        moves.sort(key=lambda m: (-m.score, m.word, m.row, m.col, m.direction))
        return moves[:top_n]

    def generate(
        self,
        board: Board,
        rack: str | list[str],
        cancel: Callable[[], bool] | None = None,
    ) -> list[Move]:
        """Every legal move, in no particular order.

        ``cancel`` is polled before each anchor; when it returns True the
        search stops with CancellationError and nothing is returned.
        """
        rack = normalize_rack(rack)
        if not rack:
            return []

        t0 = time.perf_counter()
        checks = compute_cross_checks(board, self.gaddag)
        anchors = find_anchors(board)

        found: dict[frozenset[Placement], Move] = {}
        for axis in AXES:
            for index in range(BOARD_SIZE):
                line = board.line(axis, index)
                is_anchor = [(sq.row, sq.col) in anchors for sq in line]
                if not any(is_anchor):
                    continue
                letters = [sq.letter for sq in line]
                line_checks = [checks.get(axis, sq.row, sq.col) for sq in line]
                for pos in range(BOARD_SIZE):
                    if not is_anchor[pos]:
                        continue
                    if cancel is not None and cancel():
                        raise CancellationError(
                            f"Move generation cancelled at anchor {coordinates(axis, index, pos)}"
                        )
                    for move in self._moves_at_anchor(
                        board, rack, axis, index, pos, letters, line_checks, is_anchor,
                    ):
                        # a one-tile move can show up on both axes; keep the first
                        found.setdefault(move.key, move)

        log.debug(
            "Generated %d moves for rack %s from %d anchors in %.3fs",
            len(found), rack, len(anchors), time.perf_counter() - t0,
        )
        return list(found.values())

    # traversal

    def _moves_at_anchor(
        self,
        board: Board,
        rack: str,
        axis: str,
        index: int,
        anchor: int,
        letters: list[str | None],
        checks: list[CrossCheck | None],
        is_anchor: list[bool],
    ) -> list[Move]:
        """All moves on line ``index`` of ``axis`` whose leftmost new tile on
        an anchor square is ``anchor``."""
        gaddag = self.gaddag
        size = len(letters)
        open_after_anchor = anchor + 1 == size or letters[anchor + 1] is None
        moves: list[Move] = []

        def record(start: int, placed: tuple[_Tile, ...]) -> None:
            placements = tuple(
                Placement(*coordinates(axis, index, pos), letter, blank)
                for pos, letter, blank in sorted(placed)
            )
            total, word, cross_words = score_placements(board, placements, axis)
            row, col = coordinates(axis, index, start)
            moves.append(Move(word, row, col, axis, total, placements, cross_words, rack))

        def tile_options(node: int, pos: int, rack_left: str) -> Iterator[tuple[str, bool, int, str]]:
            """(letter, is_blank, child, remaining rack) for each rack tile
            the automaton and the cross-check both accept at ``pos``."""
            check = checks[pos]
            has_blank = BLANK in rack_left
            for letter, child in gaddag.arcs(node):
                if letter == SEPARATOR or not check.allows(letter):
                    continue
                if letter in rack_left:
                    yield letter, False, child, rack_left.replace(letter, "", 1)
                if has_blank:
                    yield letter, True, child, rack_left.replace(BLANK, "", 1)

        def go_left(pos: int, node: int, rack_left: str, placed: tuple[_Tile, ...]) -> None:
            letter = letters[pos]
            if letter is not None:
                child = gaddag.child(node, letter)
                if child is not None:
                    after_left(pos, child, rack_left, placed)
                return
            for ch, blank, child, rest in tile_options(node, pos, rack_left):
                after_left(pos, child, rest, placed + ((pos, ch, blank),))

        def after_left(start: int, node: int, rack_left: str, placed: tuple[_Tile, ...]) -> None:
            if start == 0 or letters[start - 1] is None:
                # The word can begin at ``start``: either it ends at the
                # anchor, or we pivot and read rightwards from there.
                if open_after_anchor and start < anchor and placed and gaddag.is_terminal(node):
                    record(start, placed)
                if anchor + 1 < size:
                    pivot = gaddag.child(node, SEPARATOR)
                    if pivot is not None:
                        go_right(anchor + 1, pivot, rack_left, placed, start)
            if start > 0:
                prev = start - 1
                if letters[prev] is not None:
                    go_left(prev, node, rack_left, placed)
                elif rack_left and not is_anchor[prev]:
                    # other anchors are left to their own search
                    go_left(prev, node, rack_left, placed)

        def go_right(pos: int, node: int, rack_left: str, placed: tuple[_Tile, ...], start: int) -> None:
            letter = letters[pos]
            if letter is not None:
                child = gaddag.child(node, letter)
                if child is not None:
                    after_right(pos, child, rack_left, placed, start)
                return
            for ch, blank, child, rest in tile_options(node, pos, rack_left):
                after_right(pos, child, rest, placed + ((pos, ch, blank),), start)

        def after_right(end: int, node: int, rack_left: str, placed: tuple[_Tile, ...], start: int) -> None:
            nxt = end + 1
            if (nxt == size or letters[nxt] is None) and placed and gaddag.is_terminal(node):
                record(start, placed)
            if nxt < size and (letters[nxt] is not None or rack_left):
                go_right(nxt, node, rack_left, placed, start)

        go_left(anchor, gaddag.root, rack, ())
        return moves
