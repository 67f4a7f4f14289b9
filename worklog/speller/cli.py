# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from . import argx
from .cliarg import arg
from .engine import SpellChecker
from .fetch import fetch_word_list
from .settings import SpellerSettings
from argparse import ArgumentParser
from typing import Any, Callable
from worklog.speller import envdefault

import sys

MISSPELLED_COLUMNS = ["word", "start", "end"]


def no_engine(fun: Callable) -> Callable:
    fun.no_engine = True  # type: ignore
    return fun


class SpellerCLI(argx.CommandLineTool):
    engine: SpellChecker | None = None
    settings: SpellerSettings

    def __init__(self) -> None:
        super().__init__("worklog-speller")

    def add_args(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "--dictionary",
            help="main word list, one word per line (default: %(default)r)",
            default=envdefault.WORKLOG_DICTIONARY,
        )
        parser.add_argument(
            "--user-dictionary",
            help="user word list, created when words are added (default: %(default)r)",
            default=envdefault.WORKLOG_USER_DICTIONARY,
        )

    def pre_run(self, func: Callable[[], int | None]) -> None:
        self.settings = SpellerSettings.from_mapping(self.config)
        max_distance = getattr(self.args, "max_distance", None)
        if max_distance is not None:
            self.settings = self.settings._replace(max_distance=max_distance)
        if getattr(func, "no_engine", False):
            return
        self.engine = SpellChecker.create(
            dictionary_path=self.args.dictionary,
            user_dictionary_path=self.args.user_dictionary,
            settings=self.settings,
        )

    def post_run(self) -> None:
        if self.engine is not None:
            self.engine.close()

    def _get_engine(self) -> SpellChecker:
        assert self.engine is not None
        return self.engine

    def _read_text(self) -> str:
        if self.args.text is not None:
            if self.args.file is not None:
                raise argx.UserError("FILE and --text can not be used at the same time")
            return self.args.text
        if self.args.file in (None, "-"):
            return sys.stdin.read()
        try:
            with open(self.args.file, encoding=self.settings.encoding) as fp:
                return fp.read()
        except (OSError, UnicodeDecodeError) as ex:
            raise argx.UserError(f"Failed to read {self.args.file!r}: {ex.__class__.__name__}: {ex}") from ex

    @arg.json
    @arg.suggest
    @arg.ignore
    @arg("--text", help="Text to check instead of reading FILE")
    @arg("file", nargs="?", help="File to check, '-' or nothing for stdin")
    def check(self) -> int | None:
        """Report misspelled words with their offsets"""
        engine = self._get_engine()
        if not engine.enabled:
            self.log.error("spell checking is disabled: no usable dictionary at %r", self.args.dictionary)
            return 1
        for word in self.args.ignore:
            engine.add_to_ignore_list(word)

        engine.check(self._read_text())
        result: list[dict[str, Any]] = []
        for entry in engine.get_misspelled_words():
            row: dict[str, Any] = {"word": entry.word, "start": entry.start, "end": entry.end}
            if self.args.suggest:
                row["suggestions"] = engine.get_suggestions(entry.word)
            result.append(row)

        layout: list[Any] = [MISSPELLED_COLUMNS]
        if self.args.suggest:
            layout.append("suggestions")
        self.print_response(result, json=self.args.json, table_layout=layout)
        return None

    @arg.json
    @arg.max_distance
    @arg.limit
    @arg.word
    def suggest(self) -> int | None:
        """Suggest corrections for a word"""
        engine = self._get_engine()
        if not engine.enabled:
            self.log.error("spell checking is disabled: no usable dictionary at %r", self.args.dictionary)
            return 1
        if engine.is_word_correct(self.args.word):
            self.log.info("%r is spelled correctly", self.args.word)
            return None

        suggestions = engine.get_suggestions(self.args.word, limit=self.args.limit)
        if not suggestions:
            self.log.info("no suggestions for %r", self.args.word)
        if self.args.json:
            self.print_response(suggestions, json=True)
        else:
            self.print_response([{"suggestion": suggestion} for suggestion in suggestions], json=False, header=False)
        return None

    @arg.words
    def word__add(self) -> int | None:
        """Add words to the user dictionary"""
        engine = self._get_engine()
        for word in self.args.words:
            engine.add_to_user_dictionary(word)
        if not engine.save_user_dictionary():
            return 1
        return None

    @arg.words
    def word__remove(self) -> int | None:
        """Remove words from the user dictionary"""
        engine = self._get_engine()
        for word in self.args.words:
            if word not in engine.user:
                self.log.warning("%r is not in the user dictionary", word)
            engine.remove_from_user_dictionary(word)
        if not engine.save_user_dictionary():
            return 1
        return None

    @arg.json
    def word__list(self) -> None:
        """List the words in the user dictionary"""
        words = self._get_engine().user.sorted_words()
        if self.args.json:
            self.print_response(words, json=True)
        else:
            self.print_response([{"word": word} for word in words], json=False, header=False)

    @arg.json
    def dictionary__info(self) -> None:
        """Show dictionary locations and sizes"""
        self.print_response(
            self._get_engine().stats(),
            json=self.args.json,
            single_item=True,
            table_layout=[["enabled", "dictionary_words", "user_words"], "dictionary", "user_dictionary"],
        )

    @no_engine
    @arg.timeout
    @arg("--output", help="Where to store the word list (default: --dictionary)")
    @arg("url", help="Word list URL, one word per line")
    def dictionary__fetch(self) -> None:
        """Download a word list to use as the main dictionary"""
        fetch_word_list(
            self.args.url,
            self.args.output or self.args.dictionary,
            settings=self.settings,
            timeout=self.args.timeout,
        )


def main(args: list[str] | None = None) -> None:
    SpellerCLI().main(args)


if __name__ == "__main__":
    main()
