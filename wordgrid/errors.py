"""Exceptions raised by the word finder."""


class WordGridError(Exception):
    """Base exception for word finder failures."""


class InvalidBoard(WordGridError, ValueError):
    """Raised when a board is empty, jagged, or holds a non-lowercase cell."""


class DictionaryUnavailable(WordGridError):
    """Raised when the word list cannot be located or read."""


class BranchAnomaly(WordGridError):
    """Raised when a search branch indexes outside the board.

    Only a defect in the search can trigger this. The solver contains it to
    the starting cell that produced it.
    """
