# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from typing import Sequence
from worklog.speller.checker import CorrectnessChecker, entry_at, MisspelledEntry
from worklog.speller.tokenizer import Span
from worklog.speller.wordset import WordSet


def make_checker(main: Sequence[str], user: Sequence[str] = (), ignore: Sequence[str] = ()) -> CorrectnessChecker:
    return CorrectnessChecker(WordSet(main), WordSet(user), WordSet(ignore))


def test_reports_unknown_words_in_order() -> None:
    checker = make_checker(["work", "log"])
    assert checker.check("wrk log") == (MisspelledEntry(Span(0, 3, "wrk"), "wrk"),)
    result = checker.check("lgo work wrk")
    assert [entry.word for entry in result] == ["lgo", "wrk"]
    assert [(entry.start, entry.end) for entry in result] == [(0, 3), (9, 12)]


def test_empty_text() -> None:
    assert make_checker(["work"]).check("") == ()


def test_case_insensitive() -> None:
    assert make_checker(["work"]).check("Work WORK work") == ()


def test_user_and_ignore_words_are_correct() -> None:
    checker = make_checker(["log"], user=["wrk"], ignore=["lgo"])
    assert checker.check("wrk lgo log") == ()
    assert checker.is_known("wrk")
    assert checker.is_known("LGO")
    assert not checker.is_known("work")


def test_checker_sees_word_set_changes() -> None:
    checker = make_checker(["log"])
    assert len(checker.check("wrk log")) == 1
    checker.user.insert("wrk")
    assert checker.check("wrk log") == ()


def test_entry_at() -> None:
    entries = make_checker([]).check("ab cd  ef")
    assert entry_at(entries, 0) == entries[0]
    assert entry_at(entries, 1) == entries[0]
    assert entry_at(entries, 2) is None
    assert entry_at(entries, 3) == entries[1]
    assert entry_at(entries, 5) is None
    assert entry_at(entries, 8) == entries[2]
    assert entry_at(entries, 9) is None
    assert entry_at(entries, -1) is None
    assert entry_at((), 0) is None


def test_entry_at_with_precomputed_starts() -> None:
    entries = make_checker([]).check("ab cd  ef")
    starts = tuple(entry.start for entry in entries)
    assert starts == (0, 3, 7)
    assert entry_at(entries, 4, starts) == entries[1]
    assert entry_at(entries, 6, starts) is None
    assert entry_at((), 0, ()) is None
