# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .errors import PersistenceError
from .wordset import WordSet
from os import PathLike

import logging


class VocabularyManager:
    """Mutations of the user dictionary and the session ignore list.

    Nothing is rechecked here: callers run a new check to see the effect.
    The user dictionary is only written by an explicit persist call.
    """

    def __init__(self, user: WordSet, ignore: WordSet, encoding: str = "utf-8") -> None:
        self.log = logging.getLogger("VocabularyManager")
        self.user = user
        self.ignore = ignore
        self.encoding = encoding
        self.dirty = False

    def add_to_user_dictionary(self, word: str) -> None:
        if not word.strip() or word in self.user:
            return
        self.user.insert(word)
        self.dirty = True
        self.log.debug("added %r to user dictionary", word)

    def remove_from_user_dictionary(self, word: str) -> None:
        if word not in self.user:
            return
        self.user.remove(word)
        self.dirty = True
        self.log.debug("removed %r from user dictionary", word)

    def add_to_ignore_list(self, word: str) -> None:
        if word.strip():
            self.ignore.insert(word)

    def clear_ignore_list(self) -> None:
        self.ignore.clear()

    def persist_user_dictionary(self, path: str | PathLike) -> bool:
        try:
            self.user.save(path, encoding=self.encoding)
        except PersistenceError as ex:
            self.log.error("%s", ex)
            return False
        self.dirty = False
        self.log.info("saved %d words to user dictionary %r", len(self.user), str(path))
        return True
