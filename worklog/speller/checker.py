# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .tokenizer import Span, tokenize
from .wordset import WordSet
from typing import NamedTuple, Sequence

import bisect


class MisspelledEntry(NamedTuple):
    span: Span
    word: str

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def end(self) -> int:
        return self.span.end

    def contains(self, offset: int) -> bool:
        return self.span.start <= offset < self.span.end


class CorrectnessChecker:
    """Classify tokens against the ignore list, the user dictionary and the main dictionary"""

    def __init__(self, main: WordSet, user: WordSet, ignore: WordSet) -> None:
        self.main = main
        self.user = user
        self.ignore = ignore

    def is_known(self, word: str) -> bool:
        return word in self.ignore or word in self.user or word in self.main

    def check(self, text: str) -> tuple[MisspelledEntry, ...]:
        return tuple(MisspelledEntry(span, span.text) for span in tokenize(text) if not self.is_known(span.text))


def entry_at(
    entries: Sequence[MisspelledEntry], offset: int, starts: Sequence[int] | None = None
) -> MisspelledEntry | None:
    """Find the entry covering `offset` in a list sorted by start offset.

    `starts` holds the start offsets of `entries` for callers doing repeated lookups on the same list.
    """
    if starts is None:
        starts = [entry.start for entry in entries]
    index = bisect.bisect_right(starts, offset) - 1
    if index >= 0 and entries[index].contains(offset):
        return entries[index]
    return None
