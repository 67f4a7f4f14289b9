# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Spelling suggestions ranked by bounded Levenshtein distance"""
from __future__ import annotations

from .wordset import normalize
from typing import Iterable


def edit_distance(a: str, b: str, max_distance: int | None = None) -> int:
    """Unit cost insert/delete/substitute distance.

    With `max_distance` set, any result above the bound is reported as
    `max_distance + 1` and the computation stops as soon as the bound is out of reach.
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if max_distance is not None and len(a) - len(b) > max_distance:
        return max_distance + 1

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + (char_a != char_b),  # substitution
                )
            )
        if max_distance is not None and min(current) > max_distance:
            return max_distance + 1
        previous = current

    distance = previous[-1]
    if max_distance is not None and distance > max_distance:
        return max_distance + 1
    return distance


def rank_candidates(word: str, known_words: Iterable[str], max_distance: int) -> list[tuple[int, str]]:
    """All known words within `max_distance` edits of `word`, best first"""
    target = normalize(word)
    ranked: dict[str, int] = {}
    for candidate in known_words:
        key = normalize(candidate)
        if key in ranked or abs(len(key) - len(target)) > max_distance:
            continue
        distance = edit_distance(target, key, max_distance)
        if 0 < distance <= max_distance:
            ranked[key] = distance
    return sorted((distance, key) for key, distance in ranked.items())


def match_case(word: str, suggestion: str) -> str:
    """Carry the capitalisation of a misspelled word over to a lowercase suggestion"""
    if suggestion != suggestion.lower():
        return suggestion  # word list spelling has its own casing, e.g. proper nouns
    if len(word) > 1 and word.isupper():
        return suggestion.upper()
    if word[:1].isupper():
        return suggestion[:1].upper() + suggestion[1:]
    return suggestion


def suggest(word_to_check: str, known_words: Iterable[str], limit: int = 5, max_distance: int = 2) -> list[str]:
    if limit <= 0 or not word_to_check.strip():
        return []
    ranked = rank_candidates(word_to_check.strip(), known_words, max_distance)
    return [candidate for _, candidate in ranked[:limit]]
