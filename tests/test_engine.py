# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from _pytest.logging import LogCaptureFixture
from pathlib import Path
from typing import Iterable
from worklog.speller.engine import SpellChecker
from worklog.speller.settings import SpellerSettings
from worklog.speller.speller import edit_distance

import pytest


def write_words(path: Path, words: Iterable[str]) -> Path:
    path.write_text("".join(word + "\n" for word in words), encoding="utf-8")
    return path


@pytest.fixture(name="dictionary")
def fixture_dictionary(tmp_path: Path) -> Path:
    return write_words(tmp_path / "dictionary.txt", ["work", "log", "hello", "help", "held", "Paris", "world"])


@pytest.fixture(name="engine")
def fixture_engine(dictionary: Path, tmp_path: Path) -> SpellChecker:
    return SpellChecker.create(dictionary, tmp_path / "user.txt")


def test_check_reports_misspelled_words(engine: SpellChecker) -> None:
    assert engine.enabled
    engine.check("wrk log")
    entries = engine.get_misspelled_words()
    assert len(entries) == 1
    assert (entries[0].start, entries[0].end, entries[0].word) == (0, 3, "wrk")
    assert engine.last_check_time is not None


def test_check_replaces_previous_result(engine: SpellChecker) -> None:
    engine.check("wrk lgo")
    assert len(engine.get_misspelled_words()) == 2
    engine.check("")
    assert engine.get_misspelled_words() == ()


def test_is_word_correct(engine: SpellChecker) -> None:
    assert engine.is_word_correct("WORK")
    assert not engine.is_word_correct("wrk")
    assert engine.is_word_correct("")


def test_user_dictionary_words_are_not_reported_after_recheck(engine: SpellChecker) -> None:
    engine.check("wrk log")
    engine.add_to_user_dictionary("wrk")
    # no implicit recheck
    assert len(engine.get_misspelled_words()) == 1
    engine.check("wrk log")
    assert engine.get_misspelled_words() == ()
    assert engine.is_word_correct("wrk")


def test_ignore_list(engine: SpellChecker) -> None:
    engine.add_to_ignore_list("lgo")
    engine.check("lgo wrk")
    assert [entry.word for entry in engine.get_misspelled_words()] == ["wrk"]
    engine.clear_ignore_list()
    assert [entry.word for entry in engine.get_misspelled_words()] == ["wrk"]
    engine.check("lgo wrk")
    assert [entry.word for entry in engine.get_misspelled_words()] == ["lgo", "wrk"]


def test_empty_words_are_no_ops(engine: SpellChecker) -> None:
    engine.add_to_user_dictionary("")
    engine.add_to_ignore_list("")
    assert engine.stats()["user_words"] == 0
    assert engine.stats()["ignored_words"] == 0


def test_user_dictionary_persists_but_ignore_list_does_not(dictionary: Path, tmp_path: Path) -> None:
    user_path = tmp_path / "user.txt"
    with SpellChecker.create(dictionary, user_path) as engine:
        engine.add_to_user_dictionary("wrk")
        engine.add_to_ignore_list("lgo")
    assert user_path.read_text(encoding="utf-8") == "wrk\n"

    engine = SpellChecker.create(dictionary, user_path)
    engine.check("wrk lgo")
    assert [entry.word for entry in engine.get_misspelled_words()] == ["lgo"]


def test_close_without_changes_does_not_write(engine: SpellChecker, tmp_path: Path) -> None:
    engine.close()
    assert not (tmp_path / "user.txt").exists()


def test_save_user_dictionary_to_explicit_path(engine: SpellChecker, tmp_path: Path) -> None:
    engine.add_to_user_dictionary("Kubernetes")
    assert engine.save_user_dictionary(tmp_path / "export.txt")
    assert (tmp_path / "export.txt").read_text(encoding="utf-8") == "Kubernetes\n"


def test_save_user_dictionary_without_path(dictionary: Path, caplog: LogCaptureFixture) -> None:
    engine = SpellChecker.create(dictionary)
    engine.add_to_user_dictionary("wrk")
    assert not engine.save_user_dictionary()
    assert "no user dictionary path" in caplog.text


def test_failed_save_keeps_user_words(engine: SpellChecker, tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    engine.add_to_user_dictionary("wrk")
    assert not engine.save_user_dictionary(blocker / "user.txt")
    engine.check("wrk")
    assert engine.get_misspelled_words() == ()


def test_unreadable_user_dictionary_is_not_overwritten(
    dictionary: Path, tmp_path: Path, caplog: LogCaptureFixture
) -> None:
    user_path = tmp_path / "user.txt"
    user_path.write_bytes("café\nkubernetes\nterraform\n".encode("latin-1"))
    engine = SpellChecker.create(dictionary, user_path)
    assert len(engine.user) == 0
    engine.add_to_user_dictionary("wrk")
    assert not engine.save_user_dictionary()
    assert "could not be read, not overwriting it" in caplog.text
    engine.close()
    assert user_path.read_bytes() == "café\nkubernetes\nterraform\n".encode("latin-1")

    # an explicit destination is still written
    assert engine.save_user_dictionary(tmp_path / "export.txt")
    assert (tmp_path / "export.txt").read_text(encoding="utf-8") == "wrk\n"


def test_reloading_a_readable_user_dictionary_allows_saving(dictionary: Path, tmp_path: Path) -> None:
    bad_path = tmp_path / "bad.txt"
    bad_path.write_bytes(b"caf\xe9\n")
    engine = SpellChecker.create(dictionary, bad_path)
    assert not engine.save_user_dictionary()
    good_path = write_words(tmp_path / "user.txt", ["terraform"])
    assert engine.load_user_dictionary(good_path)
    engine.add_to_user_dictionary("wrk")
    assert engine.save_user_dictionary()
    assert good_path.read_text(encoding="utf-8") == "terraform\nwrk\n"


def test_missing_dictionary_disables_checking(tmp_path: Path, caplog: LogCaptureFixture) -> None:
    engine = SpellChecker.create(tmp_path / "missing.txt", tmp_path / "user.txt")
    assert not engine.enabled
    assert "spell checking disabled" in caplog.text
    engine.check("wrk lgo anything")
    assert engine.get_misspelled_words() == ()
    assert engine.get_suggestions("helo") == []
    assert engine.is_word_correct("wrk")


def test_oversized_dictionary_disables_checking(dictionary: Path, tmp_path: Path) -> None:
    engine = SpellChecker(SpellerSettings(max_dictionary_bytes=10))
    assert not engine.load_dictionary(dictionary)
    assert not engine.enabled


def test_reloading_a_dictionary_enables_checking(dictionary: Path, tmp_path: Path) -> None:
    engine = SpellChecker.create(tmp_path / "missing.txt")
    assert not engine.enabled
    assert engine.load_dictionary(dictionary)
    assert engine.enabled
    engine.check("wrk")
    assert len(engine.get_misspelled_words()) == 1


def test_no_dictionary_configured(caplog: LogCaptureFixture) -> None:
    engine = SpellChecker.create()
    assert not engine.enabled
    assert "no dictionary configured" in caplog.text


def test_load_user_dictionary(dictionary: Path, tmp_path: Path) -> None:
    engine = SpellChecker.create(dictionary)
    assert engine.load_user_dictionary(tmp_path / "missing.txt")
    assert engine.stats()["user_words"] == 0
    assert engine.load_user_dictionary(write_words(tmp_path / "user.txt", ["wrk", "lgo"]))
    assert engine.stats()["user_words"] == 2
    assert not engine.load_user_dictionary(tmp_path)
    assert engine.stats()["user_words"] == 0


def test_set_enabled(engine: SpellChecker) -> None:
    engine.check("wrk")
    engine.set_enabled(False)
    assert not engine.enabled
    assert engine.get_misspelled_words() == ()
    engine.check("wrk")
    assert engine.get_misspelled_words() == ()
    engine.set_enabled(True)
    engine.check("wrk")
    assert len(engine.get_misspelled_words()) == 1


def test_set_enabled_without_dictionary(caplog: LogCaptureFixture) -> None:
    engine = SpellChecker()
    engine.set_enabled(True)
    assert not engine.enabled
    assert "stays disabled" in caplog.text


def test_is_misspelled_at_position(engine: SpellChecker) -> None:
    engine.check("log wrk log lgo")
    entry = engine.is_misspelled_at_position(5)
    assert entry is not None and entry.word == "wrk"
    assert engine.is_misspelled_at_position(7) is None
    assert engine.is_misspelled_at_position(1) is None
    entry = engine.is_misspelled_at_position(12)
    assert entry is not None and entry.word == "lgo"


def test_is_misspelled_at_position_follows_latest_check(engine: SpellChecker) -> None:
    engine.check("wrk log")
    assert engine.is_misspelled_at_position(1) is not None
    engine.check("log wrk")
    assert engine.is_misspelled_at_position(1) is None
    entry = engine.is_misspelled_at_position(4)
    assert entry is not None and entry.word == "wrk"
    engine.set_enabled(False)
    assert engine.is_misspelled_at_position(4) is None


def test_typographic_apostrophe_matches_dictionary(tmp_path: Path) -> None:
    engine = SpellChecker.create(write_words(tmp_path / "dictionary.txt", ["don't", "work"]))
    engine.check("don’t work")
    assert engine.get_misspelled_words() == ()
    assert engine.is_word_correct("Don’t")
    assert engine.get_suggestions("don’") == ["don't"]


def test_get_suggestions(engine: SpellChecker) -> None:
    assert engine.get_suggestions("helo") == ["held", "hello", "help"]
    assert engine.get_suggestions("helo", limit=2) == ["held", "hello"]
    assert engine.get_suggestions("helo", limit=0) == []
    assert engine.get_suggestions("wrk") == ["work"]
    assert engine.get_suggestions("qqqqqqq") == []


def test_get_suggestions_is_stable(engine: SpellChecker) -> None:
    assert engine.get_suggestions("helo", 5) == engine.get_suggestions("helo", 5)


def test_get_suggestions_within_threshold(dictionary: Path) -> None:
    for max_distance in (0, 1, 2, 3):
        engine = SpellChecker.create(dictionary, settings=SpellerSettings(max_distance=max_distance))
        for suggestion in engine.get_suggestions("wrld", limit=10):
            assert edit_distance("wrld", suggestion.lower()) <= max_distance


def test_get_suggestions_for_correct_word(engine: SpellChecker) -> None:
    assert engine.get_suggestions("hello") == []
    engine.add_to_ignore_list("helo")
    assert engine.get_suggestions("helo") == []


def test_get_suggestions_casing(engine: SpellChecker) -> None:
    assert engine.get_suggestions("Helo") == ["Held", "Hello", "Help"]
    assert engine.get_suggestions("WRK") == ["WORK"]
    assert engine.get_suggestions("pariss") == ["Paris"]


def test_get_suggestions_include_user_words(engine: SpellChecker) -> None:
    engine.add_to_user_dictionary("Kubernetes")
    assert engine.get_suggestions("kubernets") == ["Kubernetes"]


def test_suggestions_can_be_turned_off(engine: SpellChecker) -> None:
    engine.set_suggestions_enabled(False)
    assert not engine.suggestions_enabled
    assert engine.get_suggestions("helo") == []


def test_suggestion_limit_from_settings(dictionary: Path) -> None:
    engine = SpellChecker.create(dictionary, settings=SpellerSettings(suggestion_limit=1))
    assert engine.get_suggestions("helo") == ["held"]


def test_engines_do_not_share_state(dictionary: Path) -> None:
    first = SpellChecker.create(dictionary)
    second = SpellChecker.create(dictionary)
    first.add_to_ignore_list("wrk")
    second.check("wrk")
    assert len(second.get_misspelled_words()) == 1


def test_stats(engine: SpellChecker, dictionary: Path) -> None:
    stats = engine.stats()
    assert stats["dictionary"] == str(dictionary)
    assert stats["dictionary_words"] == 7
    assert stats["enabled"] is True
    assert stats["suggestions_enabled"] is True
