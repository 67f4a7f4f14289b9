# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Download a word list to use as the main dictionary"""
from __future__ import annotations

from .errors import DictionaryLoadError, FetchError
from .session import get_requests_session
from .settings import SpellerSettings
from .wordset import WordSet
from os import PathLike
from requests import Session
from typing import BinaryIO

import logging
import os
import requests
import tempfile

CHUNK_SIZE = 64 * 1024

log = logging.getLogger("fetch")


def fetch_word_list(
    url: str,
    path: str | PathLike,
    *,
    session: Session | None = None,
    settings: SpellerSettings | None = None,
    timeout: int | None = None,
) -> int:
    """Download `url` to `path` and return the number of words it holds.

    The file at `path` is only replaced once the download has been read
    back successfully as a word list.
    """
    settings = settings or SpellerSettings()
    session = session or get_requests_session(timeout=timeout)
    target = os.fspath(path)
    target_dir = os.path.dirname(os.path.abspath(target))
    os.makedirs(target_dir, exist_ok=True)

    fd, temp_path = tempfile.mkstemp(dir=target_dir, prefix=".download-")
    try:
        with open(fd, "wb") as fp:
            _download(session, url, fp, settings.max_dictionary_bytes)
        try:
            words = WordSet.load(temp_path, encoding=settings.encoding, max_bytes=settings.max_dictionary_bytes)
        except DictionaryLoadError as ex:
            raise FetchError(f"Downloaded file from {url!r} is not a usable word list: {ex}") from ex
        os.replace(temp_path, target)
    except BaseException:
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise

    log.info("saved %d words from %r to %r", len(words), url, target)
    return len(words)


def _download(session: Session, url: str, fp: BinaryIO, max_bytes: int) -> None:
    log.debug("GET %s", url)
    try:
        with session.get(url, stream=True) as response:
            response.raise_for_status()
            received = 0
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                received += len(chunk)
                if received > max_bytes:
                    raise FetchError(f"Word list at {url!r} exceeds {max_bytes} bytes")
                fp.write(chunk)
    except requests.exceptions.HTTPError as ex:
        raise FetchError(f"Failed to download {url!r}: {ex}") from ex
