from .node import BSTreeNode
from .searchtree import SearchTree
from .general import reconstruct
