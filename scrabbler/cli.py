"""Command-line front end: list the moves for a board and rack, or build
and cache the GADDAG for a word list."""

from __future__ import annotations

import argparse
import logging
import sys
import time

from scrabbler.board import Board
from scrabbler.dictionary import Dictionary, read_word_list
from scrabbler.engine import Deadline, MoveEngine
from scrabbler.errors import ScrabblerError
from scrabbler.gaddag import build, serialize

log = logging.getLogger("scrabbler")


def load_board(path: str | None) -> Board:
    """Board from a text file of 15 rows (``.`` empty, lowercase = blank)."""
    if path is None:
        return Board()
    with open(path, "r", encoding="utf-8") as f:
        return Board.from_string(f.read())


def run_moves(args: argparse.Namespace) -> int:
    dictionary = Dictionary(args.dict, cache_path=args.gaddag)
    engine = MoveEngine(dictionary)
    board = load_board(args.board)

    print(board)
    print(f"\nRack: {' '.join(args.rack.upper())}")
    print("Searching for moves...\n")

    cancel = Deadline(args.time_limit) if args.time_limit else None
    t0 = time.time()
    moves = engine.generate(board, args.rack, cancel=cancel)
    elapsed = time.time() - t0

    print(f"Found {len(moves)} moves in {elapsed:.2f}s.\n")
    if not moves:
        print("No valid moves found. Check your board and rack.")
        return 0

    moves.sort(key=lambda m: (-m.score, m.word, m.row, m.col, m.direction))
    best_moves = moves[:args.top]

    print("=" * 65)
    print(f" {'#':>2}  {'Score':>5}  {'Word':<15} {'Position':<10} {'Dir':>3}  Extra")
    print("-" * 65)
    for i, m in enumerate(best_moves):
        arrow = ">" if m.direction == "H" else "v"
        extra_parts: list[str] = []
        if m.is_bingo:
            extra_parts.append("BINGO +50")
        if m.cross_words:
            extra_parts.append(f"Cross: {', '.join(m.cross_words)}")
        extra = "  ".join(extra_parts)
        position = f"({m.row},{m.col})"
        print(f" {i+1:>2}  {m.score:>5}  {m.word:<15} {position:<10} {arrow:>3}  {extra}")
    print("=" * 65)

    best = best_moves[0]
    print(
        f"\nBEST MOVE: Play '{best.word}' at ({best.row},{best.col}) "
        f"{'horizontally >' if best.direction == 'H' else 'vertically v'} "
        f"for {best.score} points!"
    )
    print("   Tiles to place: " + " ".join(
        f"{'?' if p.is_blank else ''}{p.letter}>({p.row},{p.col})" for p in best.placements
    ))
    print(f"   Rack tiles used: {best.tiles_used}")
    return 0


def run_build(args: argparse.Namespace) -> int:
    path = args.dict or "dictionary.txt"
    words = read_word_list(path)
    log.info("Loaded %s words from %s", f"{len(words):,}", path)
    gaddag = build(words)
    data = serialize(gaddag)
    with open(args.out, "wb") as f:
        f.write(data)
    print(f"Wrote {gaddag!r} ({len(data):,} bytes) to {args.out}")
    return 0


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scrabbler",
        description="Scrabbler -- GADDAG move generator for Scrabble",
    )
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    sub = parser.add_subparsers(dest="command", required=True)

    moves = sub.add_parser("moves", help="List the legal moves for a board and rack")
    moves.add_argument("--rack", required=True,
                       help="Rack tiles, e.g. AEIRST? (? = blank)")
    moves.add_argument("--dict", type=str, default=None,
                       help="Path to dictionary / word list file")
    moves.add_argument("--board", type=str, default=None,
                       help="Board file: 15 rows of 15 characters, '.' for empty")
    moves.add_argument("--gaddag", type=str, default=None,
                       help="GADDAG cache file (loaded if present, written otherwise)")
    moves.add_argument("--top", type=int, default=10,
                       help="Number of moves to show (default 10)")
    moves.add_argument("--time-limit", type=float, default=None,
                       help="Give up after this many seconds")
    moves.set_defaults(func=run_moves)

    build_cmd = sub.add_parser("build", help="Build and serialize the GADDAG for a word list")
    build_cmd.add_argument("--dict", type=str, default=None,
                           help="Path to dictionary / word list file (default dictionary.txt)")
    build_cmd.add_argument("--out", required=True,
                           help="Where to write the serialized GADDAG")
    build_cmd.set_defaults(func=run_build)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = make_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    try:
        return args.func(args)
    except (ScrabblerError, OSError, ValueError) as exc:
        log.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
