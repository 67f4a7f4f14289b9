# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from .argx import arg


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise ValueError(value)
    return number


arg.json = arg("--json", help="Raw json output", action="store_true", default=False)
arg.words = arg("words", metavar="WORD", nargs="+", help="Word to modify")
arg.word = arg("word", help="Word to look up")
arg.limit = arg("--limit", type=non_negative_int, help="Maximum number of suggestions (default: from config)")
arg.max_distance = arg(
    "--max-distance",
    type=non_negative_int,
    help="Maximum edit distance of a suggestion (default: from config)",
)
arg.ignore = arg(
    "--ignore",
    metavar="WORD",
    action="append",
    default=[],
    help="Ignore a word for this run only",
)
arg.suggest = arg("--suggest", help="Include suggestions for each misspelled word", action="store_true", default=False)
arg.timeout = arg("--timeout", type=int, help="Give up the download after N seconds (default: no timeout)")
