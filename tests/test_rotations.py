"""Tests for AVL rotations, rebalancing and the height helpers"""
# pylint: skip-file

import unittest

from avl_trees.avl_tree_base import rebalance, rotate_left, rotate_right
from avl_trees.base import Node, balance_factor, height, largest_in, smallest_in
from tests.utils import make_node, shape


class TestHeightHelpers(unittest.TestCase):
    def test_height_of_empty_subtree(self):
        self.assertEqual(height(None), 0)
        self.assertEqual(balance_factor(None), 0)

    def test_new_node_is_leaf(self):
        node = Node("cat")
        self.assertEqual((node.count, node.height), (1, 1))
        self.assertEqual(balance_factor(node), 0)

    def test_update_height(self):
        node = make_node("b", make_node("a", make_node("0")), make_node("c"))
        self.assertEqual(node.height, 3)
        self.assertEqual(balance_factor(node), 1)

    def test_smallest_and_largest(self):
        node = make_node("d", make_node("b", make_node("a")), make_node("f", None, make_node("g")))
        self.assertEqual(smallest_in(node).key, "a")
        self.assertEqual(largest_in(node).key, "g")
        self.assertEqual(smallest_in(node.right).key, "f")


class TestRotations(unittest.TestCase):
    def test_rotate_left(self):
        t1, t2, t3 = make_node("a"), make_node("c"), make_node("e")
        x = make_node("b", t1, make_node("d", t2, t3))
        y = x.right
        new_root = rotate_left(x)
        self.assertIs(new_root, y)
        self.assertIs(y.left, x)
        self.assertIs(x.right, t2)
        self.assertIs(x.left, t1)
        self.assertIs(y.right, t3)
        self.assertEqual((x.height, y.height), (2, 3))

    def test_rotate_right(self):
        t1, t2, t3 = make_node("a"), make_node("c"), make_node("e")
        y = make_node("d", make_node("b", t1, t2), t3)
        x = y.left
        new_root = rotate_right(y)
        self.assertIs(new_root, x)
        self.assertIs(x.right, y)
        self.assertIs(y.left, t2)
        self.assertEqual((y.height, x.height), (2, 3))

    def test_rotations_preserve_order(self):
        root = make_node("b", make_node("a"), make_node("d", make_node("c"), make_node("e")))
        self.assertEqual(shape(rotate_right(rotate_left(root))),
                         ("b", ("a", None, None), ("d", ("c", None, None), ("e", None, None))))

    def test_rotate_without_child_raises(self):
        with self.assertRaises(ValueError):
            rotate_left(make_node("a", make_node("0")))
        with self.assertRaises(ValueError):
            rotate_right(make_node("a", None, make_node("b")))


class TestRebalance(unittest.TestCase):
    BALANCED = ("b", ("a", None, None), ("c", None, None))

    def test_balanced_node_untouched(self):
        node = make_node("b", make_node("a"))
        self.assertIs(rebalance(node), node)

    def test_left_left(self):
        z = make_node("c", make_node("b", make_node("a")))
        self.assertEqual(shape(rebalance(z)), self.BALANCED)

    def test_left_right(self):
        z = make_node("c", make_node("a", None, make_node("b")))
        self.assertEqual(shape(rebalance(z)), self.BALANCED)

    def test_right_right(self):
        z = make_node("a", None, make_node("b", None, make_node("c")))
        self.assertEqual(shape(rebalance(z)), self.BALANCED)

    def test_right_left(self):
        z = make_node("a", None, make_node("c", make_node("b")))
        self.assertEqual(shape(rebalance(z)), self.BALANCED)

    def test_left_child_balance_zero_rotates_once(self):
        z = make_node("d", make_node("b", make_node("a"), make_node("c")))
        new_root = rebalance(z)
        self.assertEqual(shape(new_root),
                         ("b", ("a", None, None), ("d", ("c", None, None), None)))
        self.assertEqual(new_root.height, 3)

    def test_right_child_balance_zero_rotates_once(self):
        z = make_node("a", None, make_node("c", make_node("b"), make_node("d")))
        self.assertEqual(shape(rebalance(z)),
                         ("c", ("a", None, ("b", None, None)), ("d", None, None)))


if __name__ == "__main__":
    unittest.main()
