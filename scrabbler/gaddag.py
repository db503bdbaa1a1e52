"""GADDAG automaton for bidirectional word search.

Every word is stored once per split point: the letters up to and including
the split are read backwards, then a separator, then the rest forwards.
The last split has nothing after it, so it is stored as the plain reversed
word with no separator::

    CARES  ->  C+ARES  AC+RES  RAC+ES  ERAC+S  SERAC

A traversal can therefore start on any letter of a word, extend to the
left, cross the separator once, and extend to the right.

Construction sorts all entries and minimizes incrementally (Daciuk et al.,
2000), so the full trie is never held in memory.  The finished automaton
is a compressed-sparse-row arena of numpy arrays indexed by node number,
with the root at node 0.
"""

from __future__ import annotations

import io
import logging
import zipfile
from typing import Iterable

import numpy as np

from scrabbler.constants import ALPHABET, SEPARATOR
from scrabbler.errors import ConstructionError

log = logging.getLogger("scrabbler.gaddag")

# Symbol codes: 0-25 are A-Z, 26 is the separator.
SYMBOLS = ALPHABET + SEPARATOR
SEPARATOR_CODE = len(ALPHABET)
_CODES: dict[str, int] = {ch: i for i, ch in enumerate(SYMBOLS)}
_LETTERS = frozenset(ALPHABET)

_MAGIC = b"GDDG"
_FORMAT_VERSION = 1
_ARRAYS = ("offsets", "symbols", "targets", "terminal")


def rotations(word: str) -> list[str]:
    """Return the GADDAG entries stored for ``word``."""
    entries = [word[i::-1] + SEPARATOR + word[i + 1:] for i in range(len(word) - 1)]
    entries.append(word[::-1])
    return entries


class Gaddag:
    """Read-only GADDAG.  Nodes are plain ints; the root is 0.

    ``offsets[n]:offsets[n + 1]`` is the slice of ``symbols`` / ``targets``
    holding the outgoing arcs of node ``n``, sorted by symbol code.  Every
    arc leads to a higher-numbered node, so the automaton has no cycles.
    """

    __slots__ = (
        "offsets", "symbols", "targets", "terminal",
        "_offsets", "_symbols", "_targets", "_terminal",
    )

    def __init__(
        self,
        offsets: np.ndarray,
        symbols: np.ndarray,
        targets: np.ndarray,
        terminal: np.ndarray,
    ):
        self.offsets = offsets
        self.symbols = symbols
        self.targets = targets
        self.terminal = terminal
        # Python lists are much faster than numpy scalars for per-arc reads
        self._offsets: list[int] = offsets.tolist()
        self._symbols: list[int] = symbols.tolist()
        self._targets: list[int] = targets.tolist()
        self._terminal: list[bool] = terminal.tolist()

    @property
    def root(self) -> int:
        return 0

    def __len__(self) -> int:
        return len(self._terminal)

    @property
    def edge_count(self) -> int:
        return len(self._symbols)

    def child(self, node: int, symbol: str) -> int | None:
        """Node reached from ``node`` on ``symbol``, or None if there is no arc."""
        code = _CODES.get(symbol)
        if code is None:
            return None
        symbols = self._symbols
        for i in range(self._offsets[node], self._offsets[node + 1]):
            if symbols[i] == code:
                return self._targets[i]
        return None

    def is_terminal(self, node: int) -> bool:
        return self._terminal[node]

    def arcs(self, node: int) -> list[tuple[str, int]]:
        """Outgoing ``(symbol, child)`` pairs of ``node`` in symbol order."""
        lo, hi = self._offsets[node], self._offsets[node + 1]
        return [
            (SYMBOLS[code], target)
            for code, target in zip(self._symbols[lo:hi], self._targets[lo:hi])
        ]

    def walk(self, path: str, node: int = 0) -> int | None:
        """Follow ``path`` symbol by symbol from ``node``."""
        for symbol in path:
            node = self.child(node, symbol)
            if node is None:
                return None
        return node

    def contains(self, word: str) -> bool:
        """True if ``word`` is in the dictionary the automaton was built from."""
        if not word:
            return False
        node = self.walk(word[::-1])
        return node is not None and self._terminal[node]

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def words(self) -> list[str]:
        """Every dictionary word, sorted.

        Reads the separator-free paths, which spell each word backwards.
        """
        found: list[str] = []
        stack: list[tuple[int, str]] = [(self.root, "")]
        while stack:
            node, backwards = stack.pop()
            if self._terminal[node] and backwards:
                found.append(backwards[::-1])
            for symbol, target in self.arcs(node):
                if symbol != SEPARATOR:
                    stack.append((target, backwards + symbol))
        found.sort()
        return found

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Gaddag):
            return NotImplemented
        return all(
            np.array_equal(getattr(self, name), getattr(other, name))
            for name in _ARRAYS
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<Gaddag nodes={len(self)} edges={self.edge_count}>"


class _Builder:
    """Incremental minimal automaton construction over sorted entries."""

    def __init__(self):
        self.edges: list[dict[int, int]] = [{}]
        self.terminal: list[bool] = [False]
        self._register: dict[tuple, int] = {}
        # (parent, code, child) for each symbol of the previous entry
        # whose child has not yet been checked against the register
        self._unchecked: list[tuple[int, int, int]] = []
        self._previous = ""

    def _new_node(self) -> int:
        self.edges.append({})
        self.terminal.append(False)
        return len(self.edges) - 1

    def insert(self, entry: str) -> None:
        """Add ``entry``; entries must arrive in strictly increasing order."""
        previous = self._previous
        common = 0
        limit = min(len(entry), len(previous))
        while common < limit and entry[common] == previous[common]:
            common += 1

        self._minimize(common)

        node = self._unchecked[-1][2] if self._unchecked else 0
        for symbol in entry[common:]:
            child = self._new_node()
            code = _CODES[symbol]
            self.edges[node][code] = child
            self._unchecked.append((node, code, child))
            node = child
        self.terminal[node] = True
        self._previous = entry

    def _minimize(self, down_to: int) -> None:
        while len(self._unchecked) > down_to:
            parent, code, child = self._unchecked.pop()
            signature = (self.terminal[child], tuple(sorted(self.edges[child].items())))
            existing = self._register.get(signature)
            if existing is None:
                self._register[signature] = child
            else:
                self.edges[parent][code] = existing
                self.edges[child] = {}

    def finish(self) -> Gaddag:
        self._minimize(0)

        # Renumber reachable nodes in reverse postorder, so every arc points
        # to a higher node number; merged-away nodes drop out.
        postorder: list[int] = []
        seen = {0}
        stack = [(0, iter(sorted(self.edges[0].items())))]
        while stack:
            node, children = stack[-1]
            for _code, child in children:
                if child not in seen:
                    seen.add(child)
                    stack.append((child, iter(sorted(self.edges[child].items()))))
                    break
            else:
                stack.pop()
                postorder.append(node)
        order = postorder[::-1]
        index = {node: i for i, node in enumerate(order)}

        offsets = [0]
        symbols: list[int] = []
        targets: list[int] = []
        for node in order:
            for code, child in sorted(self.edges[node].items()):
                symbols.append(code)
                targets.append(index[child])
            offsets.append(len(symbols))

        return Gaddag(
            np.array(offsets, dtype=np.int32),
            np.array(symbols, dtype=np.uint8),
            np.array(targets, dtype=np.int32),
            np.array([self.terminal[node] for node in order], dtype=bool),
        )


def build(words: Iterable[str]) -> Gaddag:
    """Build a minimized GADDAG from uppercase A-Z words.

    Empty strings are skipped; an empty word list gives a root-only
    automaton.  Raises ConstructionError on any other symbol.
    """
    entries: set[str] = set()
    word_count = 0
    for word in words:
        if not isinstance(word, str):
            raise ConstructionError(f"Expected a string, got {word!r}")
        if not word:
            continue
        if not _LETTERS.issuperset(word):
            raise ConstructionError(f"Word {word!r} contains symbols outside A-Z")
        entries.update(rotations(word))
        word_count += 1

    builder = _Builder()
    for entry in sorted(entries):
        builder.insert(entry)
    gaddag = builder.finish()

    log.debug(
        "Built GADDAG from %s words (%s entries): %s nodes, %s edges",
        f"{word_count:,}", f"{len(entries):,}", f"{len(gaddag):,}", f"{gaddag.edge_count:,}",
    )
    return gaddag


def serialize(gaddag: Gaddag) -> bytes:
    """Encode ``gaddag`` as bytes that :func:`deserialize` accepts."""
    buf = io.BytesIO()
    np.savez_compressed(
        buf,
        version=np.array([_FORMAT_VERSION], dtype=np.int32),
        offsets=gaddag.offsets,
        symbols=gaddag.symbols,
        targets=gaddag.targets,
        terminal=gaddag.terminal,
    )
    return _MAGIC + buf.getvalue()


def deserialize(data: bytes) -> Gaddag:
    """Rebuild a GADDAG from :func:`serialize` output.

    Raises ConstructionError if the bytes are not a well-formed automaton.
    """
    if not data.startswith(_MAGIC):
        raise ConstructionError("Not a serialized GADDAG (bad magic)")
    try:
        loaded = np.load(io.BytesIO(data[len(_MAGIC):]), allow_pickle=False)
    except (EOFError, ValueError, OSError, zipfile.BadZipFile) as exc:
        raise ConstructionError(f"Corrupt GADDAG data: {exc}") from exc
    if not isinstance(loaded, np.lib.npyio.NpzFile):
        raise ConstructionError("Corrupt GADDAG data: not an array archive")
    with loaded as archive:
        try:
            version = archive["version"]
            arrays = {name: archive[name] for name in _ARRAYS}
        except (KeyError, ValueError, OSError, zipfile.BadZipFile) as exc:
            raise ConstructionError(f"Corrupt GADDAG data: {exc}") from exc

    if version.shape != (1,) or int(version[0]) != _FORMAT_VERSION:
        raise ConstructionError(f"Unsupported GADDAG format version {version.tolist()}")

    offsets = arrays["offsets"].astype(np.int32, copy=False)
    symbols = arrays["symbols"].astype(np.uint8, copy=False)
    targets = arrays["targets"].astype(np.int32, copy=False)
    terminal = arrays["terminal"].astype(bool, copy=False)
    _check_arena(offsets, symbols, targets, terminal)
    return Gaddag(offsets, symbols, targets, terminal)


def _check_arena(
    offsets: np.ndarray,
    symbols: np.ndarray,
    targets: np.ndarray,
    terminal: np.ndarray,
) -> None:
    if any(a.ndim != 1 for a in (offsets, symbols, targets, terminal)):
        raise ConstructionError("GADDAG arrays must be one-dimensional")
    n_nodes = len(terminal)
    if n_nodes == 0 or len(offsets) != n_nodes + 1:
        raise ConstructionError("GADDAG offsets do not match node count")
    if offsets[0] != 0 or np.any(np.diff(offsets) < 0):
        raise ConstructionError("GADDAG offsets are not monotonic")
    n_edges = int(offsets[-1])
    if len(symbols) != n_edges or len(targets) != n_edges:
        raise ConstructionError("GADDAG edge arrays do not match offsets")
    if n_edges and (symbols.max() > SEPARATOR_CODE or targets.min() < 0 or targets.max() >= n_nodes):
        raise ConstructionError("GADDAG edge out of range")

    owners = np.repeat(np.arange(n_nodes, dtype=np.int64), np.diff(offsets))
    if np.any(targets <= owners):
        raise ConstructionError("GADDAG edge does not point to a later node (cycle)")
    same_node = owners[1:] == owners[:-1]
    if np.any(same_node & (np.diff(symbols.astype(np.int16)) <= 0)):
        raise ConstructionError("GADDAG arcs are not strictly sorted by symbol")
