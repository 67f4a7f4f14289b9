# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from .checker import MisspelledEntry
from .debounce import check_debouncer, Debouncer
from .engine import SpellChecker
from .settings import SpellerSettings
from .tokenizer import Span, tokenize
from .wordset import WordSet

try:
    from .version import __version__
except ImportError:
    __version__ = "UNKNOWN"

__all__ = [
    "check_debouncer",
    "Debouncer",
    "MisspelledEntry",
    "Span",
    "SpellChecker",
    "SpellerSettings",
    "tokenize",
    "WordSet",
]
