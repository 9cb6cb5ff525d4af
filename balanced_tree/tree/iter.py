from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional, Tuple

from . import base


class TreeWalk(object):
    """Lazy traversal over the values of a tree.

    The walk holds its own explicit stack (or queue, for level order), so
    depth is never bounded by the interpreter's recursion limit. When the
    walk is bound to a tree, adding or removing an element while the walk
    is in progress makes the next step raise RuntimeError.
    """

    PREORDER = 0
    INORDER = 1
    POSTORDER = 2
    LEVELORDER = 3

    def __init__(
        self,
        mode: int,
        root: Optional[base.TreeNode],
        tree: Optional[base.Tree] = None,
    ):
        if mode not in (
            TreeWalk.PREORDER,
            TreeWalk.INORDER,
            TreeWalk.POSTORDER,
            TreeWalk.LEVELORDER,
        ):
            raise ValueError("Unknown traversal order: {}".format(mode))

        self._mode: int = mode
        self._tree: Optional[base.Tree] = tree
        self._mod_count: int = tree._mod_count if tree is not None else 0
        self._cur: Optional[base.TreeNode] = None
        self._stack: List[base.TreeNode] = []
        self._post_stack: List[Tuple[base.TreeNode, bool]] = []
        self._queue: Deque[base.TreeNode] = deque()

        if root is None:
            return

        if mode == TreeWalk.PREORDER:
            self._stack.append(root)
        elif mode == TreeWalk.INORDER:
            self._cur = root
        elif mode == TreeWalk.POSTORDER:
            self._post_stack.append((root, False))
        else:
            self._queue.append(root)

    def __iter__(self) -> TreeWalk:
        return self

    def __next__(self):
        if self._tree is not None and self._tree._mod_count != self._mod_count:
            raise RuntimeError("Tree changed during iteration")

        if self._mode == TreeWalk.PREORDER:
            return self._next_preorder().value
        elif self._mode == TreeWalk.INORDER:
            return self._next_inorder().value
        elif self._mode == TreeWalk.POSTORDER:
            return self._next_postorder().value
        else:
            return self._next_levelorder().value

    def _next_preorder(self) -> base.TreeNode:
        if not self._stack:
            raise StopIteration()

        node = self._stack.pop()
        # right goes in first so that left comes out first
        if node._right is not None:
            self._stack.append(node._right)
        if node._left is not None:
            self._stack.append(node._left)
        return node

    def _next_inorder(self) -> base.TreeNode:
        while self._cur is not None:
            self._stack.append(self._cur)
            self._cur = self._cur._left

        if not self._stack:
            raise StopIteration()

        node = self._stack.pop()
        self._cur = node._right
        return node

    def _next_postorder(self) -> base.TreeNode:
        while self._post_stack:
            node, children_done = self._post_stack.pop()
            if children_done:
                return node

            self._post_stack.append((node, True))
            if node._right is not None:
                self._post_stack.append((node._right, False))
            if node._left is not None:
                self._post_stack.append((node._left, False))

        raise StopIteration()

    def _next_levelorder(self) -> base.TreeNode:
        if not self._queue:
            raise StopIteration()

        node = self._queue.popleft()
        if node._left is not None:
            self._queue.append(node._left)
        if node._right is not None:
            self._queue.append(node._right)
        return node
