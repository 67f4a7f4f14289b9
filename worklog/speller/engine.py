# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .checker import CorrectnessChecker, entry_at, MisspelledEntry
from .errors import DictionaryLoadError, DictionaryNotFoundError
from .settings import SpellerSettings
from .speller import match_case, rank_candidates
from .vocabulary import VocabularyManager
from .wordset import WordSet
from os import PathLike
from types import TracebackType
from typing import Any, Iterator

import itertools
import logging
import time


class SpellChecker:
    """Spell checking state owned by the embedding application.

    Holds the main dictionary (read-only once loaded), the user dictionary
    (persisted) and the ignore list (session only), plus the result of the
    latest check. Calls are expected from a single thread.
    """

    def __init__(self, settings: SpellerSettings | None = None) -> None:
        self.log = logging.getLogger("SpellChecker")
        self.settings = settings or SpellerSettings()
        self.main = WordSet()
        self.user = WordSet()
        self.ignore = WordSet()
        self.vocabulary = VocabularyManager(self.user, self.ignore, encoding=self.settings.encoding)
        self.checker = CorrectnessChecker(self.main, self.user, self.ignore)
        self.dictionary_path: str | PathLike | None = None
        self.user_dictionary_path: str | PathLike | None = None
        self.last_check_time: float | None = None
        self._dictionary_loaded = False
        self._checking_enabled = True
        self._suggestions_enabled = True
        self._user_dictionary_unreadable = False
        self._misspelled: tuple[MisspelledEntry, ...] = ()
        self._misspelled_starts: tuple[int, ...] = ()

    @classmethod
    def create(
        cls,
        dictionary_path: str | PathLike | None = None,
        user_dictionary_path: str | PathLike | None = None,
        settings: SpellerSettings | None = None,
    ) -> SpellChecker:
        engine = cls(settings)
        if dictionary_path is not None:
            engine.load_dictionary(dictionary_path)
        else:
            engine.log.warning("no dictionary configured, spell checking disabled")
        if user_dictionary_path is not None:
            engine.load_user_dictionary(user_dictionary_path)
        return engine

    def __enter__(self) -> SpellChecker:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def _load(self, path: str | PathLike) -> WordSet:
        return WordSet.load(path, encoding=self.settings.encoding, max_bytes=self.settings.max_dictionary_bytes)

    def load_dictionary(self, path: str | PathLike) -> bool:
        self.dictionary_path = path
        try:
            words = self._load(path)
        except DictionaryLoadError as ex:
            self.log.warning("%s, spell checking disabled", ex)
            self.main.clear()
            self._dictionary_loaded = False
            self._set_misspelled(())
            return False

        self.main.clear()
        for word in words.sorted_words():
            self.main.insert(word)
        self._dictionary_loaded = True
        self.log.debug("loaded %d words from %r", len(self.main), str(path))
        return True

    def load_user_dictionary(self, path: str | PathLike) -> bool:
        self.user_dictionary_path = path
        self.user.clear()
        self.vocabulary.dirty = False
        self._user_dictionary_unreadable = False
        try:
            words = self._load(path)
        except DictionaryNotFoundError:
            self.log.debug("no user dictionary at %r yet", str(path))
            return True
        except DictionaryLoadError as ex:
            self.log.warning("%s, starting with an empty user dictionary", ex)
            self._user_dictionary_unreadable = True
            return False

        for word in words.sorted_words():
            self.user.insert(word)
        return True

    @property
    def enabled(self) -> bool:
        return self._dictionary_loaded and self._checking_enabled

    def set_enabled(self, enabled: bool) -> None:
        self._checking_enabled = enabled
        if not enabled:
            self._set_misspelled(())
        elif not self._dictionary_loaded:
            self.log.warning("spell checking stays disabled until a dictionary is loaded")

    @property
    def suggestions_enabled(self) -> bool:
        return self._suggestions_enabled

    def set_suggestions_enabled(self, enabled: bool) -> None:
        self._suggestions_enabled = enabled

    def check(self, text: str) -> None:
        """Replace the misspelled word list with the result of checking `text`"""
        self.last_check_time = time.monotonic()
        if not self.enabled:
            self._set_misspelled(())
            return
        self._set_misspelled(self.checker.check(text))

    def _set_misspelled(self, entries: tuple[MisspelledEntry, ...]) -> None:
        self._misspelled_starts = tuple(entry.start for entry in entries)
        self._misspelled = entries

    def is_word_correct(self, word: str) -> bool:
        if not self.enabled or not word.strip():
            return True
        return self.checker.is_known(word)

    def get_misspelled_words(self) -> tuple[MisspelledEntry, ...]:
        return self._misspelled

    def is_misspelled_at_position(self, offset: int) -> MisspelledEntry | None:
        return entry_at(self._misspelled, offset, self._misspelled_starts)

    def get_suggestions(self, word: str, limit: int | None = None) -> list[str]:
        if limit is None:
            limit = self.settings.suggestion_limit
        if limit <= 0 or not self.enabled or not self._suggestions_enabled or self.is_word_correct(word):
            return []

        ranked = rank_candidates(word.strip(), self._known_words(), self.settings.max_distance)
        suggestions: list[str] = []
        for _, candidate in ranked:
            source = self.user if candidate in self.user else self.main
            suggestion = match_case(word.strip(), source.display(candidate))
            if suggestion not in suggestions:
                suggestions.append(suggestion)
            if len(suggestions) >= limit:
                break
        return suggestions

    def _known_words(self) -> Iterator[str]:
        return itertools.chain(self.main, self.user)

    def add_to_user_dictionary(self, word: str) -> None:
        self.vocabulary.add_to_user_dictionary(word)

    def remove_from_user_dictionary(self, word: str) -> None:
        self.vocabulary.remove_from_user_dictionary(word)

    def add_to_ignore_list(self, word: str) -> None:
        self.vocabulary.add_to_ignore_list(word)

    def clear_ignore_list(self) -> None:
        self.vocabulary.clear_ignore_list()

    def save_user_dictionary(self, path: str | PathLike | None = None) -> bool:
        target = path if path is not None else self.user_dictionary_path
        if target is None:
            self.log.error("no user dictionary path to save to")
            return False
        if path is None and self._user_dictionary_unreadable:
            self.log.error("user dictionary %r could not be read, not overwriting it", str(target))
            return False
        return self.vocabulary.persist_user_dictionary(target)

    def stats(self) -> dict[str, Any]:
        return {
            "dictionary": str(self.dictionary_path) if self.dictionary_path is not None else None,
            "dictionary_words": len(self.main),
            "enabled": self.enabled,
            "ignored_words": len(self.ignore),
            "suggestions_enabled": self._suggestions_enabled,
            "user_dictionary": str(self.user_dictionary_path) if self.user_dictionary_path is not None else None,
            "user_words": len(self.user),
        }

    def close(self) -> None:
        """Persist the user dictionary if it has unsaved changes"""
        if self.vocabulary.dirty and self.user_dictionary_path is not None:
            self.save_user_dictionary()
