from __future__ import annotations

import bisect
import logging
import threading
from pathlib import Path
from typing import Iterable

from wordgrid.errors import DictionaryUnavailable

logger = logging.getLogger("wordgrid")


def _is_lexicon_word(word: str) -> bool:
    return word.isascii() and word.isalpha() and word.islower()


class Lexicon:
    """Sorted, read-only word list with lower-bound lookups."""

    __slots__ = ("_words", "_members")

    def __init__(self, words: Iterable[str]):
        self._members: frozenset[str] = frozenset(words)
        self._words: tuple[str, ...] = tuple(sorted(self._members))

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Lexicon:
        return cls(w.strip().lower() for w in words if w.strip())

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return word in self._members

    def __iter__(self):
        return iter(self._words)

    def lower_bound(self, candidate: str) -> str | None:
        """Smallest word that sorts at or after ``candidate``, or None."""
        i = bisect.bisect_left(self._words, candidate)
        if i == len(self._words):
            return None
        return self._words[i]

    def has_prefix(self, prefix: str) -> bool:
        found = self.lower_bound(prefix)
        return found is not None and found.startswith(prefix)


def load_lexicon(path: str | Path, min_length: int = 1) -> Lexicon:
    path = Path(path)
    words: list[str] = []
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                for token in line.split():
                    word = token.strip().lower()
                    if len(word) >= min_length and _is_lexicon_word(word):
                        words.append(word)
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryUnavailable(f"could not read word list {path}: {exc}") from exc
    lexicon = Lexicon(words)
    logger.info("Loaded %d words from %s", len(lexicon), path)
    return lexicon


class LexiconProvider:
    """Loads a lexicon on first use and hands out the same instance afterwards.

    A failed load is not remembered: the next ``get()`` tries the file again.
    """

    def __init__(self, path: str | Path, min_length: int = 1):
        self.path = Path(path)
        self.min_length = min_length
        self._lexicon: Lexicon | None = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._lexicon is not None

    def get(self) -> Lexicon:
        if self._lexicon is None:
            with self._lock:
                if self._lexicon is None:
                    self._lexicon = load_lexicon(self.path, self.min_length)
        return self._lexicon

    def reset(self, path: str | Path | None = None, min_length: int | None = None):
        """Drop the loaded lexicon; the next ``get()`` reloads it."""
        with self._lock:
            if path is not None:
                self.path = Path(path)
            if min_length is not None:
                self.min_length = min_length
            self._lexicon = None


_default_provider: LexiconProvider | None = None


def default_provider() -> LexiconProvider:
    """Process-wide provider for the configured word list."""
    global _default_provider
    if _default_provider is None:
        from wordgrid.settings import settings
        _default_provider = LexiconProvider(settings.DICTIONARY_PATH, settings.MIN_WORD_LENGTH)
    return _default_provider
