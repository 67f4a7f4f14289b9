# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Case-insensitive word collections backed by plain text word lists"""
from __future__ import annotations

from .errors import DictionaryIOError, DictionaryNotFoundError, PersistenceError
from .settings import SpellerSettings
from os import PathLike
from typing import Iterable, Iterator

import errno
import os
import shutil
import tempfile

DEFAULT_MAX_BYTES = SpellerSettings().max_dictionary_bytes


def normalize(word: str) -> str:
    # editors substitute typographic apostrophes as you type
    return word.strip().lower().replace("\u2019", "'")


class WordSet:
    """Deduplicated set of words compared case-insensitively.

    Keys are the canonical lowercase form; the casing a word was first seen
    with is kept so suggestions can be shown the way the word list spells them.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: dict[str, str] = {}
        for word in words:
            self.insert(word)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and normalize(word) in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"<WordSet words={len(self._words)}>"

    def contains(self, word: str) -> bool:
        return word in self

    def insert(self, word: str) -> None:
        stripped = word.strip()
        if stripped:
            self._words.setdefault(normalize(stripped), stripped)

    def remove(self, word: str) -> None:
        self._words.pop(normalize(word), None)

    def clear(self) -> None:
        self._words.clear()

    def display(self, word: str) -> str:
        """Return the word with the casing it was added with"""
        key = normalize(word)
        return self._words.get(key, key)

    def sorted_words(self) -> list[str]:
        return [self._words[key] for key in sorted(self._words)]

    @classmethod
    def load(
        cls,
        path: str | PathLike,
        *,
        encoding: str = "utf-8",
        max_bytes: int = DEFAULT_MAX_BYTES,
    ) -> WordSet:
        try:
            with open(path, "rb") as fp:
                data = fp.read(max_bytes + 1)
        except OSError as ex:
            if ex.errno == errno.ENOENT:
                raise DictionaryNotFoundError(path, "Word list not found") from ex
            raise DictionaryIOError(path, f"Failed to read word list: {ex.__class__.__name__}: {ex}") from ex

        if len(data) > max_bytes:
            raise DictionaryIOError(path, f"Word list exceeds {max_bytes} bytes")

        try:
            text = data.decode(encoding)
        except UnicodeDecodeError as ex:
            raise DictionaryIOError(path, f"Word list is not valid {encoding}") from ex

        # a BOM would otherwise stick to the first word
        return cls(text.lstrip("\ufeff").splitlines())

    def save(self, path: str | PathLike, *, encoding: str = "utf-8") -> None:
        target = os.fspath(path)
        target_dir = os.path.dirname(os.path.abspath(target))
        try:
            os.makedirs(target_dir, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(dir=target_dir, prefix=".wordlist-")
            try:
                with open(fd, "w", encoding=encoding, newline="\n") as fp:
                    for word in self.sorted_words():
                        fp.write(word + "\n")
                if os.path.exists(target):
                    shutil.copymode(target, temp_path)
                os.replace(temp_path, target)
            except BaseException:
                os.unlink(temp_path)
                raise
        except (OSError, UnicodeEncodeError) as ex:
            raise PersistenceError(f"Failed to save word list {target!r}: {ex.__class__.__name__}: {ex}") from ex
