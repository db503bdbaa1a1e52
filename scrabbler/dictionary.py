"""Dictionary / word list loaded into a GADDAG."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from scrabbler.constants import BOARD_SIZE
from scrabbler.gaddag import Gaddag, build, deserialize, serialize

log = logging.getLogger("scrabbler")

DEFAULT_SEARCH_PATHS = (
    "dictionary.txt",
    "twl06.txt",
    "sowpods.txt",
    "words.txt",
    "/usr/share/dict/words",
)


def read_word_list(path: str) -> list[str]:
    """Playable words from a newline-delimited list: uppercased, alphabetic,
    2 to 15 letters, sorted and without duplicates."""
    words: set[str] = set()
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().upper()
            if 2 <= len(word) <= BOARD_SIZE and word.isascii() and word.isalpha():
                words.add(word)
    return sorted(words)


class Dictionary:
    """Word list compiled to a GADDAG, optionally cached on disk."""

    def __init__(self, dict_path: str | None = None, cache_path: str | None = None):
        # decoded from the automaton on first len() when loaded from a cache
        self._word_count: int | None = None
        self.gaddag: Gaddag = self._load(dict_path, cache_path)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Dictionary:
        """Dictionary built from in-memory words (no filtering)."""
        d = cls.__new__(cls)
        d._word_count = None
        d.gaddag = build(words)
        return d

    def _load(self, dict_path: str | None, cache_path: str | None) -> Gaddag:
        if cache_path and os.path.exists(cache_path):
            with open(cache_path, "rb") as f:
                gaddag = deserialize(f.read())
            log.info("Loaded GADDAG (%s nodes) from %s", f"{len(gaddag):,}", cache_path)
            if dict_path:
                log.warning("Using cached GADDAG %s; word list %s was not read", cache_path, dict_path)
            return gaddag

        search_paths: list[str] = []
        if dict_path:
            search_paths.append(dict_path)
        search_paths.extend(DEFAULT_SEARCH_PATHS)

        for path in search_paths:
            if not os.path.exists(path):
                continue
            words = read_word_list(path)
            if not words:
                log.warning("No playable words in %s", path)
                continue
            log.info("Loaded %s words from %s", f"{len(words):,}", path)
            gaddag = build(words)
            self._word_count = len(words)
            if cache_path:
                with open(cache_path, "wb") as f:
                    f.write(serialize(gaddag))
                log.info("Wrote GADDAG cache to %s", cache_path)
            return gaddag

        log.error("No dictionary file found; searched: %s", ", ".join(search_paths))
        raise FileNotFoundError("No dictionary word list found -- pass a path to TWL06 or SOWPODS")

    def is_valid(self, word: str) -> bool:
        return self.gaddag.contains(word.upper())

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        if self._word_count is None:
            self._word_count = len(self.gaddag.words())
        return self._word_count
