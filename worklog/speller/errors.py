# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from os import PathLike


class Error(Exception):
    """Spell checker error"""


class DictionaryLoadError(Error):
    def __init__(self, path: str | PathLike, message: str) -> None:
        super().__init__(f"{message}: {str(path)!r}")
        self.path = path


class DictionaryNotFoundError(DictionaryLoadError):
    """Word list file does not exist"""


class DictionaryIOError(DictionaryLoadError):
    """Word list file exists but could not be read"""


class PersistenceError(Error):
    """Word list could not be written"""


class ConfigError(Error):
    """Invalid speller setting"""


class FetchError(Error):
    """Word list download failed"""
