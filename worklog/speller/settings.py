# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .errors import ConfigError
from typing import Any, Final, Mapping, NamedTuple

import codecs

MIB: Final = 1024 * 1024


class SpellerSettings(NamedTuple):
    # Candidates further than this many edits away are never suggested
    max_distance: int = 2
    suggestion_limit: int = 5
    # Size guard for word list files
    max_dictionary_bytes: int = 64 * MIB
    # Seconds of quiet time before a debounced check runs
    debounce_interval: float = 0.5
    encoding: str = "utf-8"

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> SpellerSettings:
        """Build settings from a config file mapping, ignoring unrelated keys"""
        defaults = cls()
        values: dict[str, Any] = {}
        for key in ("max_distance", "suggestion_limit", "max_dictionary_bytes"):
            if key in config:
                values[key] = _get_int(config, key, minimum=0)
        if "debounce_interval" in config:
            value = config["debounce_interval"]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                raise ConfigError(f"Invalid debounce_interval {value!r}: expected a non-negative number")
            values["debounce_interval"] = float(value)
        if "encoding" in config:
            encoding = config["encoding"]
            try:
                codecs.lookup(encoding)
            except (LookupError, TypeError) as ex:
                raise ConfigError(f"Unknown encoding {encoding!r}") from ex
            values["encoding"] = encoding
        return defaults._replace(**values)


def _get_int(config: Mapping[str, Any], key: str, minimum: int) -> int:
    value = config[key]
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ConfigError(f"Invalid {key} {value!r}: expected an integer >= {minimum}")
    return value
