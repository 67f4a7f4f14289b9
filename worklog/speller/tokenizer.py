# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Split free-form text into word spans"""
from __future__ import annotations

from typing import Iterator, NamedTuple

import re

# Letters only; an apostrophe counts when it sits between two letter runs
WORD_RE = re.compile(r"[^\W\d_]+(?:['’][^\W\d_]+)*")


class Span(NamedTuple):
    start: int
    end: int
    text: str

    def byte_range(self, source: str, encoding: str = "utf-8") -> tuple[int, int]:
        """Convert the character offsets into offsets within `source` encoded as `encoding`"""
        start = len(source[: self.start].encode(encoding))
        return start, start + len(self.text.encode(encoding))


class Tokens:
    """Restartable sequence of word spans; each iteration rescans the text"""

    def __init__(self, text: str) -> None:
        self.text = text

    def __iter__(self) -> Iterator[Span]:
        for match in WORD_RE.finditer(self.text):
            yield Span(match.start(), match.end(), match.group())

    def __repr__(self) -> str:
        return f"<Tokens text_length={len(self.text)}>"


def tokenize(text: str) -> Tokens:
    """Offsets are indices into `text` as given; see Span.byte_range for encoded buffers"""
    return Tokens(text)
