"""Exceptions raised by the Scrabbler engine."""

from __future__ import annotations


class ScrabblerError(Exception):
    """Base class for all engine errors."""


class ConstructionError(ScrabblerError):
    """The automaton could not be built from the given words or bytes.

    No partial automaton is ever returned alongside this error.
    """


class IllegalMoveError(ScrabblerError):
    """A move is inconsistent with the board or the rack it came from.

    Recoverable: discard the move and query the generator again.
    """


class CancellationError(ScrabblerError):
    """Move generation was stopped by the caller's cancel signal.

    Any moves gathered before the stop are discarded.
    """
