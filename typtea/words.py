"""Random word selection from a language's word list."""

from __future__ import annotations

import random
from bisect import bisect_left
from itertools import accumulate
from collections.abc import Iterable

from .languages import DEFAULT_LANGUAGE, LanguageError, LanguageManager


class WordGenerator:
    """Draws words from the current language.

    English words are drawn with weights that fall with their rank in the
    list; every other language is drawn uniformly.
    """

    def __init__(
        self,
        manager: LanguageManager | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.manager = manager if manager is not None else LanguageManager()
        self.rng = rng if rng is not None else random.Random()
        self.words: list[str] = []
        self.language = ""
        self._cumulative: list[int] = []
        self.set_language(DEFAULT_LANGUAGE)

    def set_language(self, lang_code: str) -> None:
        """Switch to another language's word list."""
        words = self.manager.load_language(lang_code)
        self.words = words
        self.language = lang_code
        if lang_code == DEFAULT_LANGUAGE:
            if words:
                count = len(words)
                self._cumulative = list(accumulate(range(count, 0, -1)))
        else:
            self._cumulative = []

    def generate_words(self, count: int) -> list[str]:
        """Return ``count`` randomly chosen words."""
        if not self.words:
            self.set_language(DEFAULT_LANGUAGE)
        if not self.words:
            raise LanguageError("no words available for the current language")

        if self.language == DEFAULT_LANGUAGE and self._cumulative:
            total = self._cumulative[-1]
            return [
                self.words[bisect_left(self._cumulative, self.rng.randint(1, total))]
                for _ in range(count)
            ]

        size = len(self.words)
        return [self.words[self.rng.randrange(size)] for _ in range(count)]


def generate_text(words: Iterable[str]) -> str:
    """Join words with single spaces."""
    return " ".join(words)