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
"""Data model and shared helpers for AVL word trees"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import NamedTuple, Optional, TypeVar, Generic


class AVLTreeError(Exception):
    """Base class for all errors raised by this package."""


class KeyNotFoundError(AVLTreeError, KeyError):
    """Raised when a key to delete is not present in the tree."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self):
        return f"{self.key!r} not found"


class ResourceExhaustedError(AVLTreeError, MemoryError):
    """Raised when a new node cannot be allocated."""


class DeleteMode(Enum):
    """
    How a matching node is treated when the delete descent reaches it.

    DECREMENT removes one occurrence and only excises the node when its count
    drops to zero. FORCE_REMOVE excises the node regardless of its count; it is
    used to remove a successor/predecessor whose data was already copied up.
    """
    DECREMENT = "decrement"
    FORCE_REMOVE = "force_remove"


class Promotion(Enum):
    """Which neighbour replaces a node with two children on removal."""
    RANDOM = "random"
    SUCCESSOR = "successor"
    PREDECESSOR = "predecessor"


class Node:
    """
    Represents one distinct key currently stored in an AVL tree.
    """
    __slots__ = ("key", "count", "left", "right", "height")  # Define slots for memory efficiency

    def __init__(self, key: str, count: int = 1):
        """
        Initialize a leaf node.

        Parameters:
            key (str): The node's key.
            count (int): Number of occurrences of the key, at least 1.
        """
        self.key = key
        self.count = count
        self.left: Optional["Node"] = None
        self.right: Optional["Node"] = None
        self.height = 1

    def update_height(self) -> int:
        """Recompute the cached height from the children and return it."""
        self.height = 1 + max(height(self.left), height(self.right))
        return self.height

    def short_key(self) -> str:
        """Create a short representation of the key for display purposes."""
        s = self.key
        return s if len(s) <= 10 else f"{s[:3]}...{s[-3:]}"

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        return f"{cls}(key={self.key!r}, count={self.count}, height={self.height})"

    def __str__(self):
        cls = self.__class__.__name__
        return f"{cls}(key={self.short_key()}, count={self.count})"


class SearchResult(NamedTuple):
    """
    A container for the result of a lookup in an AbstractMultisetDataStructure.

    Attributes:
        found_node (Optional[Node]):
            The node holding the searched key if found; otherwise, None.
    """
    found_node: Optional[Node]

    @property
    def found(self) -> bool:
        return self.found_node is not None

    @property
    def count(self) -> int:
        """Occurrences of the searched key, 0 when it is absent."""
        return self.found_node.count if self.found_node is not None else 0


class TraversalEntry(NamedTuple):
    """One visited node of a reverse in-order traversal."""
    key: str
    count: int
    depth: int


T = TypeVar("T", bound="AbstractMultisetDataStructure")

class AbstractMultisetDataStructure(ABC, Generic[T]):
    """
    Abstract base class for a multiset of text keys with occurrence counts.
    """

    @abstractmethod
    def insert(self, key: str) -> Node:
        """
        Insert one occurrence of a key.

        Parameters:
            key (str): The key to be inserted.

        Returns:
            Node: The node that now holds the key.
        """
        pass

    @abstractmethod
    def delete(self, key: str, missing_ok: bool = True) -> bool:
        """
        Delete one occurrence of a key.

        Parameters:
            key (str): The key to be deleted.
            missing_ok (bool): If False, raise KeyNotFoundError for an absent key.

        Returns:
            bool: True if an occurrence was removed, False if the key was absent.
        """
        pass

    @abstractmethod
    def search(self, key: str) -> SearchResult:
        """
        Look up a key.

        Parameters:
            key (str): The key to search for.

        Returns:
            SearchResult: Holds the matching node, or None if not found.
        """
        pass


def height(node: Optional[Node]) -> int:
    """Height of a subtree, 0 for an empty one."""
    return node.height if node is not None else 0


def balance_factor(node: Optional[Node]) -> int:
    """height(left) - height(right), 0 for an empty subtree."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def smallest_in(node: Node) -> Node:
    """Leftmost node of a non-empty subtree."""
    while node.left is not None:
        node = node.left
    return node


def largest_in(node: Node) -> Node:
    """Rightmost node of a non-empty subtree."""
    while node.right is not None:
        node = node.right
    return node
