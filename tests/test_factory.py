"""Tests for the AVL tree factory"""
# pylint: skip-file

import random
import unittest

from avl_trees.avl_tree_base import AVLTreeBase
from avl_trees.base import Promotion
from avl_trees.factory import create_avl_tree, make_avl_tree_class
from tests.utils import shape


class TestFactory(unittest.TestCase):
    def test_class_per_policy_is_cached(self):
        cls = make_avl_tree_class(Promotion.SUCCESSOR)
        self.assertIs(make_avl_tree_class(Promotion.SUCCESSOR), cls)
        self.assertIs(make_avl_tree_class("successor"), cls)
        self.assertTrue(issubclass(cls, AVLTreeBase))
        self.assertEqual(cls.__name__, "AVLTree_SUCCESSOR")
        self.assertIs(cls.PROMOTION, Promotion.SUCCESSOR)

    def test_policies_get_distinct_classes(self):
        classes = {make_avl_tree_class(p) for p in Promotion}
        self.assertEqual(len(classes), len(Promotion))

    def test_unknown_policy(self):
        with self.assertRaises(ValueError):
            make_avl_tree_class("sideways")

    def test_create_returns_empty_tree(self):
        tree = create_avl_tree()
        self.assertTrue(tree.is_empty())
        self.assertIs(tree.PROMOTION, Promotion.RANDOM)
        self.assertIsInstance(tree.rng, random.Random)

    def test_rng_takes_precedence_over_seed(self):
        rng = random.Random(7)
        tree = create_avl_tree(seed=1, rng=rng)
        self.assertIs(tree.rng, rng)

    def test_same_seed_same_shapes(self):
        keys = [f"w{i:03d}" for i in range(100)]

        def build(seed):
            tree = create_avl_tree(seed=seed)
            for key in keys:
                tree.insert(key)
            for key in keys[10:60]:
                tree.delete(key)
            return shape(tree.root)

        self.assertEqual(build(42), build(42))


if __name__ == "__main__":
    unittest.main()
