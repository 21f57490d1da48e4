"""Loading and caching of word lists for the supported languages."""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"
_DEFAULT_DATA_DIR = Path(__file__).with_name("data")


class LanguageError(Exception):
    """Raised when a language's word list cannot be loaded."""


class LanguageManager:
    """Finds language files in a directory and caches their word lists."""

    def __init__(self, data_dir: str | Path | None = None) -> None:
        self._data_dir = Path(data_dir) if data_dir is not None else _DEFAULT_DATA_DIR
        self._loaded: dict[str, list[str]] = {}
        self._available: list[str] = []
        try:
            self._available = sorted(
                entry.stem
                for entry in self._data_dir.iterdir()
                if entry.suffix == ".json"
            )
        except OSError as exc:
            logger.warning("failed to scan available languages: %s", exc)

    def load_language(self, lang_code: str) -> list[str]:
        """Return the word list for a language, falling back to English."""
        lang_code = lang_code.lower()
        cached = self._loaded.get(lang_code)
        if cached is not None:
            return cached

        path = self._data_dir / f"{lang_code}.json"
        try:
            raw = path.read_bytes()
        except OSError as exc:
            if lang_code != DEFAULT_LANGUAGE:
                logger.warning(
                    "Language '%s' not found, falling back to English", lang_code
                )
                return self.load_language(DEFAULT_LANGUAGE)
            raise LanguageError(
                f"could not load language data for '{lang_code}': {exc}"
            ) from exc

        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise LanguageError(
                f"could not parse language data for '{lang_code}': {exc}"
            ) from exc
        if not isinstance(data, dict):
            raise LanguageError(
                f"could not parse language data for '{lang_code}': expected an object"
            )

        words = data.get("words") or []
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise LanguageError(
                f"could not parse language data for '{lang_code}': words must be strings"
            )

        self._loaded[lang_code] = words
        return words

    def available_languages(self) -> list[str]:
        """Return a copy of the available language codes."""
        return list(self._available)

    def is_language_available(self, lang_code: str) -> bool:
        """Tell whether a language file exists for the code."""
        return lang_code.lower() in self._available