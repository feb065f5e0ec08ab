"""Tests for AVL tree insert"""
# pylint: skip-file

import math
import unittest
from unittest.mock import patch

from avl_trees.base import ResourceExhaustedError
from tests.avl.base import TreeTestCase
from tests.utils import shape


class TestInsertSingle(TreeTestCase):
    def test_first_insert_creates_leaf_root(self):
        node = self.tree.insert("cat")
        self.assertIs(self.tree.root, node)
        self.assertEqual(node.key, "cat")
        self.assertEqual(node.count, 1)
        self.assertEqual(node.height, 1)
        self.assertIsNone(node.left)
        self.assertIsNone(node.right)
        self.expected_counts = {"cat": 1}

    def test_duplicate_insert_increments_count(self):
        first = self.tree.insert("cat")
        second = self.tree.insert("cat")
        self.assertIs(first, second)
        self.assertEqual(second.count, 2)
        third = self.tree.insert("cat")
        self.assertEqual(third.count, 3)
        self.assertEqual(len(self.tree), 1)
        self.assertEqual(self.tree.total_count(), 3)
        self.expected_counts = {"cat": 3}

    def test_duplicate_insert_keeps_shape(self):
        self.insert_all("b", "a", "c")
        before = shape(self.tree.root)
        self.insert_all("a", "c", "b", "a")
        self.assertEqual(shape(self.tree.root), before)
        self.expected_counts = {"a": 3, "b": 2, "c": 2}

    def test_keys_are_case_sensitive(self):
        self.insert_all("Cat", "cat", "CAT")
        self.assertEqual(list(self.tree), ["CAT", "Cat", "cat"])
        self.expected_node_count = 3


class TestInsertRotations(TreeTestCase):
    def test_right_right_single_left_rotation(self):
        self.insert_all("a", "b", "c")
        self.assertEqual(shape(self.tree.root), ("b", ("a", None, None), ("c", None, None)))
        self.assertEqual(self.tree.root.height, 2)
        self.expected_root_key = "b"

    def test_left_left_single_right_rotation(self):
        self.insert_all("c", "b", "a")
        self.assertEqual(shape(self.tree.root), ("b", ("a", None, None), ("c", None, None)))
        self.expected_root_key = "b"

    def test_left_right_double_rotation(self):
        self.insert_all("c", "a", "b")
        self.assertEqual(shape(self.tree.root), ("b", ("a", None, None), ("c", None, None)))

    def test_right_left_double_rotation(self):
        self.insert_all("a", "c", "b")
        self.assertEqual(shape(self.tree.root), ("b", ("a", None, None), ("c", None, None)))

    def test_rotation_below_root(self):
        self.insert_all("d", "b", "e", "a")
        # "0" lands below a and leaves b left-left heavy
        self.tree.insert("0")
        self.assertEqual(
            shape(self.tree.root),
            ("d", ("a", ("0", None, None), ("b", None, None)), ("e", None, None))
        )
        self.expected_node_count = 5


class TestInsertSequences(TreeTestCase):
    def test_ascending_insertions_stay_logarithmic(self):
        n = 1000
        for i in range(n):
            self.tree.insert(f"{i:04d}")
        self.assertEqual(len(self.tree), n)
        self.assertLessEqual(self.tree.get_height(), 1.44 * math.log2(n + 2))
        self.assertEqual(list(self.tree), [f"{i:04d}" for i in range(n)])

    def test_descending_insertions_stay_logarithmic(self):
        n = 1000
        for i in reversed(range(n)):
            self.tree.insert(f"{i:04d}")
        self.assertLessEqual(self.tree.get_height(), 1.44 * math.log2(n + 2))

    def test_perfect_tree_from_ascending_power_of_two(self):
        for i in range(15):
            self.tree.insert(f"{i:02d}")
        self.assertEqual(self.tree.get_height(), 4)
        self.expected_root_key = "07"


class TestInsertInvalid(TreeTestCase):
    def test_non_string_key(self):
        with self.assertRaises(TypeError):
            self.tree.insert(5)
        self.assertTrue(self.tree.is_empty())

    def test_empty_key(self):
        with self.assertRaises(ValueError):
            self.tree.insert("")
        self.assertTrue(self.tree.is_empty())

    def test_non_printable_key(self):
        with self.assertRaises(ValueError):
            self.tree.insert("a\nb")
        self.assertTrue(self.tree.is_empty())


class FailingNode:
    def __init__(self, key, count=1):
        raise MemoryError


class TestInsertResourceExhaustion(TreeTestCase):
    def test_allocation_failure_leaves_tree_unchanged(self):
        self.insert_all("d", "b", "f", "a")
        before = shape(self.tree.root)
        heights = [n.height for n in (self.tree.root, self.tree.root.left)]
        with patch.object(type(self.tree), "NodeClass", FailingNode):
            with self.assertRaises(ResourceExhaustedError) as ctx:
                self.tree.insert("0")
            self.assertIsInstance(ctx.exception, MemoryError)
            # repeats allocate nothing and still succeed
            self.tree.insert("a")
        self.assertEqual(shape(self.tree.root), before)
        self.assertEqual([n.height for n in (self.tree.root, self.tree.root.left)], heights)
        self.expected_counts = {"a": 2, "b": 1, "d": 1, "f": 1}


if __name__ == "__main__":
    unittest.main()
