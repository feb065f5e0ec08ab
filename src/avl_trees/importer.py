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
"""Bulk import of words from text files"""

import logging
import os
from typing import Iterable, TextIO, Union

from avl_trees.base import AbstractMultisetDataStructure
from avl_trees.tokens import iter_words

logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False


def import_stream(source: Union[TextIO, Iterable[str]], tree: AbstractMultisetDataStructure) -> int:
    """
    Insert every word of `source` into `tree`.

    Returns:
        int: Number of words inserted, repeats included.
    """
    inserted = 0
    for word in iter_words(source):
        tree.insert(word)
        inserted += 1
        logger.debug("Adding: %s", word)
    return inserted


def import_file(
    path: Union[str, "os.PathLike[str]"],
    tree: AbstractMultisetDataStructure,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> int:
    """
    Insert every word of the file at `path` into `tree`.

    Undecodable bytes become U+FFFD under the default `errors="replace"`,
    which is not alphabetic and so separates words like any other delimiter.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: Only when `errors="strict"` and the file is not
            valid text in `encoding`.
    """
    with open(path, "r", encoding=encoding, errors=errors) as f:
        inserted = import_stream(f, tree)
    logger.debug("Successfully read %d words from %s", inserted, path)
    return inserted
