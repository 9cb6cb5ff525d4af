from .base import Tree, TreeNode
from .avl import AVLTree, AVLNode
from .iter import TreeWalk
