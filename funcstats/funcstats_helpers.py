"""
Helper utility functions for funcstats.

Text helpers shared by the calculators and file selection helpers
shared by the runner.
"""

import os
import re
from typing import Tuple

from .funcstats_constants import (
    GO_EXTENSION,
    TEST_FILE_SUFFIX,
    TODO_TAGS,
    VENDOR_DIR,
)


# Runs of letters; digits, underscores and punctuation separate words
_WORD_RE = re.compile(r'[^\W\d_]+')


def count_lines(text: str, *ignore_lines: str) -> int:
    """
    Count lines of text, skipping lines that consist only of an ignored string.

    Each line is stripped before comparison, so indentation never matters.

    Example:
        count_lines('a\\n\\n}\\n', '', '}') -> 1

    Args:
        text: Text to count
        *ignore_lines: Literal line contents that are not counted

    Returns:
        Number of counted lines
    """
    ignore = {line.strip() for line in ignore_lines}

    count = 0
    for line in text.split('\n'):
        if line.strip() in ignore:
            continue
        count += 1

    return count


def count_todos(*texts: str) -> Tuple[int, int]:
    """
    Count TODO-style tags (TODO, FIXME, HACK...) in the given texts.

    Returns:
        Tuple of (case_sensitive_count, case_insensitive_count)
    """
    case_sensitive = 0
    case_insensitive = 0
    for text in texts:
        for word in _WORD_RE.findall(text):
            if word in TODO_TAGS:
                case_sensitive += 1
            if word.upper() in TODO_TAGS:
                case_insensitive += 1
    return case_sensitive, case_insensitive


def is_dir(path: str) -> bool:
    return os.path.isdir(path)


def is_source_file(filename: str) -> bool:
    return filename.endswith(GO_EXTENSION)


def is_test_file(filename: str) -> bool:
    return filename.endswith(TEST_FILE_SUFFIX)


def is_vendor_dir(dirname: str) -> bool:
    return os.path.basename(os.path.normpath(dirname)) == VENDOR_DIR
