from . import tree

from .tree import AVLTree, AVLNode, Tree, TreeNode, TreeWalk

__all__ = [
    "AVLTree",
    "AVLNode",
    "Tree",
    "TreeNode",
    "TreeWalk",
]
