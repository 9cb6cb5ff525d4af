from __future__ import annotations

import logging
from collections.abc import Collection
from typing import Callable, Generic, TypeVar, Optional, Iterator, List, Tuple, Type

from .iter import TreeWalk

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _height_of(node: Optional[TreeNode]) -> int:
    if node is None:
        return -1
    return node._height


class TreeNode(Generic[T]):
    def __init__(self, value: T):
        self._value: T = value
        self._left: Optional[TreeNode[T]] = None
        self._right: Optional[TreeNode[T]] = None
        self._height: int = 0

    @property
    def value(self) -> T:
        """The element stored in this node."""
        return self._value

    @property
    def left(self) -> Optional[TreeNode[T]]:
        return self._left

    @property
    def right(self) -> Optional[TreeNode[T]]:
        return self._right

    @property
    def height(self) -> int:
        """Number of edges on the longest path from this node down to a leaf.

        This is a cached value, refreshed whenever the subtree below this
        node changes shape.
        """
        return self._height

    def _update(self):
        self._height = 1 + max(_height_of(self._left), _height_of(self._right))

    def _leftmost(self) -> TreeNode[T]:
        node = self
        while node._left is not None:
            node = node._left
        return node

    def _rightmost(self) -> TreeNode[T]:
        node = self
        while node._right is not None:
            node = node._right
        return node

    # methods for subclasses to override:

    def _print_node(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return "{}({!r})".format(self.__class__.__name__, self._value)


# (parent, whether the path continues into its left child)
Path = List[Tuple[TreeNode, bool]]


class Tree(Generic[T], Collection):
    """Binary search tree over a totally ordered element type.

    The base tree does no balancing; subclasses override `_repair_insert`
    and `_repair_remove`, which run on every node along the modified path
    from the bottom up and return the (possibly new) root of that subtree.
    Duplicate elements are never stored. Nothing recurses per level, so an
    unbalanced tree of any depth stays usable.
    """

    def __init__(self, node_class: Type[TreeNode] = TreeNode):
        self._node_cls = node_class
        self._root: Optional[TreeNode[T]] = None
        self._len: int = 0
        self._mod_count: int = 0

    @property
    def root(self) -> Optional[TreeNode[T]]:
        """The root node, for inspection only. None if the tree is empty."""
        return self._root

    @staticmethod
    def _check_value(value: Optional[T], op: str):
        if value is None:
            raise ValueError("{}() requires a value, got None".format(op))

    def _find(self, value: T, path: Optional[Path] = None) -> Optional[TreeNode[T]]:
        node = self._root
        while node is not None:
            if value < node._value:
                if path is not None:
                    path.append((node, True))
                node = node._left
            elif value > node._value:
                if path is not None:
                    path.append((node, False))
                node = node._right
            else:
                return node
        return None

    def _unwind(
        self,
        path: Path,
        subtree: Optional[TreeNode[T]],
        repair: Callable[[TreeNode[T]], TreeNode[T]],
    ) -> Optional[TreeNode[T]]:
        while path:
            parent, is_left = path.pop()
            if is_left:
                parent._left = subtree
            else:
                parent._right = subtree
            subtree = repair(parent)
        return subtree

    def add(self, value: T):
        """Insert `value`. Inserting an element already present is a no-op.

        Raises ValueError if `value` is None.
        """
        self._check_value(value, "add")
        path: Path = []
        if self._find(value, path) is not None:
            return

        self._root = self._unwind(
            path,
            self._node_cls(value),
            lambda node: self._repair_insert(node, value),
        )
        self._len += 1
        self._mod_count += 1

    def remove(self, value: T) -> Optional[T]:
        """Remove the element equal to `value` and return the stored element.

        Returns None, leaving the tree untouched, if no such element exists.
        Raises ValueError if `value` is None.
        """
        self._check_value(value, "remove")
        path: Path = []
        node = self._find(value, path)
        if node is None:
            return None

        removed = node._value
        if node._left is not None and node._right is not None:
            # successor has no left child; its right child takes its slot
            path.append((node, False))
            successor = node._right
            while successor._left is not None:
                path.append((successor, True))
                successor = successor._left
            node._value = successor._value
            replacement = successor._right
        elif node._left is None:
            replacement = node._right
        else:
            replacement = node._left

        self._root = self._unwind(path, replacement, self._repair_remove)
        self._len -= 1
        self._mod_count += 1
        return removed

    def get(self, value: T) -> Optional[T]:
        """Return the stored element equal to `value`, or None if absent.

        Raises ValueError if `value` is None.
        """
        self._check_value(value, "get")
        node = self._find(value)
        return node._value if node is not None else None

    def contains(self, value: T) -> bool:
        self._check_value(value, "contains")
        return self._find(value) is not None

    def min(self) -> T:
        if self._root is None:
            raise IndexError("Tree is empty")
        return self._root._leftmost()._value

    def max(self) -> T:
        if self._root is None:
            raise IndexError("Tree is empty")
        return self._root._rightmost()._value

    def size(self) -> int:
        return self._len

    def is_empty(self) -> bool:
        return self._len == 0

    def clear(self):
        logger.debug("clearing %s with %d elements", type(self).__name__, self._len)
        self._root = None
        self._len = 0
        self._mod_count += 1

    def height(self) -> int:
        """Height of the root node, or -1 for an empty tree."""
        return _height_of(self._root)

    def walk(self, order: int = TreeWalk.INORDER) -> Iterator[T]:
        """Lazily yield the elements in the given `TreeWalk` order.

        Adding or removing elements while the walk is in progress makes the
        walk raise RuntimeError on its next step.
        """
        return TreeWalk(order, self._root, self)

    def preorder(self) -> List[T]:
        return list(self.walk(TreeWalk.PREORDER))

    def inorder(self) -> List[T]:
        return list(self.walk(TreeWalk.INORDER))

    def postorder(self) -> List[T]:
        return list(self.walk(TreeWalk.POSTORDER))

    def levelorder(self) -> List[T]:
        return list(self.walk(TreeWalk.LEVELORDER))

    def print(self) -> str:
        if self._root is None:
            return "<empty tree>"

        ret = ""
        stack: List[Tuple[TreeNode[T], int]] = []
        node: Optional[TreeNode[T]] = self._root
        level = 0
        while stack or node is not None:
            while node is not None:
                stack.append((node, level))
                node = node._left
                level += 1
            node, level = stack.pop()
            ret += ("    " * level) + node._print_node() + "\n"
            node = node._right
            level += 1

        return ret

    # methods for subclasses to override:

    def _repair_insert(self, node: TreeNode[T], value: T) -> TreeNode[T]:
        node._update()
        return node

    def _repair_remove(self, node: TreeNode[T]) -> TreeNode[T]:
        node._update()
        return node

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return self.walk(TreeWalk.INORDER)

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return "{}({!r})".format(type(self).__name__, self.inorder())
