from __future__ import annotations

import logging
from typing import TypeVar

from .base import Tree, TreeNode, _height_of

T = TypeVar("T")

logger = logging.getLogger(__name__)


class AVLTree(Tree):
    """Height-balanced binary search tree.

    After every add or remove, each node's balance factor (left subtree
    height minus right subtree height) is in {-1, 0, 1}, which keeps the
    height of the tree within about 1.44 * log2(n).
    """

    def __init__(self):
        super().__init__(AVLNode)

    def _rotate_left(self, node: AVLNode[T]) -> AVLNode[T]:
        pivot: AVLNode[T] = node._right
        node._right = pivot._left
        pivot._left = node

        node._update()
        pivot._update()
        logger.debug("rotated left at %r (new subtree root %r)", node._value, pivot._value)
        return pivot

    def _rotate_right(self, node: AVLNode[T]) -> AVLNode[T]:
        pivot: AVLNode[T] = node._left
        node._left = pivot._right
        pivot._right = node

        node._update()
        pivot._update()
        logger.debug("rotated right at %r (new subtree root %r)", node._value, pivot._value)
        return pivot

    def _repair_insert(self, node: AVLNode[T], value: T) -> AVLNode[T]:
        node._update()

        # The new value sits in the heavy subtree, so its position relative
        # to the heavy child decides between a single and a double rotation.
        if node._balance > 1:
            if value > node._left._value:
                node._left = self._rotate_left(node._left)
            return self._rotate_right(node)

        if node._balance < -1:
            if value < node._right._value:
                node._right = self._rotate_right(node._right)
            return self._rotate_left(node)

        return node

    def _repair_remove(self, node: AVLNode[T]) -> AVLNode[T]:
        node._update()

        if node._balance > 1:
            if node._left._balance < 0:
                node._left = self._rotate_left(node._left)
            return self._rotate_right(node)

        if node._balance < -1:
            if node._right._balance > 0:
                node._right = self._rotate_right(node._right)
            return self._rotate_left(node)

        return node


class AVLNode(TreeNode):
    def __init__(self, value: T):
        super().__init__(value)
        self._balance: int = 0

    @property
    def balance_factor(self) -> int:
        """Height of the left subtree minus height of the right subtree."""
        return self._balance

    def _update(self):
        super()._update()
        self._balance = _height_of(self._left) - _height_of(self._right)

    def _print_node(self) -> str:
        return "{}: {:2d}".format(self._value, self._balance)
