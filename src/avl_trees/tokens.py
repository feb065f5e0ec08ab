# -*- coding: utf-8 -*-
# ------------------------------------------------------------------------------
#
#   Copyright 2025 Jannik Hehemann
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.
#
# ------------------------------------------------------------------------------
"""Key validation and word tokenizers for interactive and bulk input"""

from itertools import groupby
from typing import Iterable, Iterator, Optional, TextIO, Union

def validate_key(key, op: str = "insert") -> str:
    """
    Reject keys that cannot be stored in a tree.

    Parameters:
        key: The candidate key.
        op (str): Name of the calling operation, used in error messages.

    Returns:
        str: The key unchanged.

    Raises:
        TypeError: If key is not a str.
        ValueError: If key is empty or contains non-printable characters.
    """
    if not isinstance(key, str):
        raise TypeError(f"{op}(): expected str, got {type(key).__name__}")
    if not key:
        raise ValueError(f"{op}(): key must be non-empty")
    if not key.isprintable():
        raise ValueError(f"{op}(): key must be printable text, got {key!r}")
    return key


def read_token(line: str) -> Optional[str]:
    """
    Return the first whitespace-delimited token of an input line.

    Leading whitespace is skipped and everything after the first token is
    discarded. Returns None for a blank line.
    """
    parts = line.split(None, 1)
    return parts[0] if parts else None


def iter_words(source: Union[TextIO, Iterable[str]]) -> Iterator[str]:
    """
    Yield every word of a text stream in order, case preserved.

    A word is a maximal run of characters for which str.isalpha() holds;
    every other character is a delimiter. Lines are scanned independently,
    so a word never spans a line break.
    """
    for line in source:
        for is_word, run in groupby(line, str.isalpha):
            if is_word:
                yield "".join(run)
