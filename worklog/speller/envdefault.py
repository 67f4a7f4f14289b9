# Copyright 2025, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
Configurable parameters via environment variables
"""

import os

USER_HOME = os.path.expanduser("~")

WORKLOG_CONFIG_DIR = os.environ.get("WORKLOG_CONFIG_DIR", os.path.join(USER_HOME, ".config", "worklog"))

WORKLOG_SPELLER_CONFIG = os.environ.get("WORKLOG_SPELLER_CONFIG", os.path.join(WORKLOG_CONFIG_DIR, "speller.json"))
WORKLOG_DICTIONARY = os.environ.get("WORKLOG_DICTIONARY", os.path.join(WORKLOG_CONFIG_DIR, "dictionary.txt"))
WORKLOG_USER_DICTIONARY = os.environ.get(
    "WORKLOG_USER_DICTIONARY", os.path.join(WORKLOG_CONFIG_DIR, "user_dictionary.txt")
)
