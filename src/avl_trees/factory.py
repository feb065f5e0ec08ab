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
"""Factory for the creation of AVL trees"""

from typing import Dict, Optional, Type, Union
import logging
import random

from avl_trees.avl_tree_base import AVLTreeBase
from avl_trees.base import Promotion

# Configure logging
logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    # Prevent propagation to the root logger to avoid duplicate logs
    logger.propagate = False

# Cache for previously created classes to avoid recreating them
_class_cache: Dict[Promotion, Type[AVLTreeBase]] = {}


def make_avl_tree_class(promotion: Union[Promotion, str] = Promotion.RANDOM) -> Type[AVLTreeBase]:
    """
    Factory function to generate an AVL tree class specialized for a
    two-child promotion policy.

    Returns:
        AVLTree_<POLICY> – subclass of AVLTreeBase with PROMOTION=promotion.

    Raises:
        ValueError: If promotion names no known policy.
    """
    promotion = Promotion(promotion)
    if promotion in _class_cache:
        logger.debug(f"Using cached class for promotion={promotion.value}")
        return _class_cache[promotion]

    logger.debug(f"Creating new class for promotion={promotion.value}")
    TreeClass = type(
        f"AVLTree_{promotion.name}",
        (AVLTreeBase,),
        {
            "PROMOTION": promotion,
            "__slots__": (),
        }
    )
    logger.debug(f"Created {TreeClass.__name__} with NodeClass={TreeClass.NodeClass.__name__}")

    _class_cache[promotion] = TreeClass
    return TreeClass


def create_avl_tree(
    promotion: Union[Promotion, str] = Promotion.RANDOM,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> AVLTreeBase:
    """
    Create a new empty AVL tree.

    Args:
        promotion: Policy for removing nodes with two children.
        seed: Seed for a fresh random.Random driving the RANDOM policy.
        rng: A ready-made random source; takes precedence over seed.

    Returns:
        A new empty tree
    """
    TreeClass = make_avl_tree_class(promotion)
    if rng is None:
        rng = random.Random(seed)
    tree = TreeClass(rng=rng)
    logger.debug(f"Created tree instance of type {type(tree).__name__}")
    return tree
