"""
Declarative CST transforms.

Describe edits as operations (remove, add siblings, replace) addressed by
node identity, then build one transform that applies them all in a single
traversal per tree.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .operations import (
    AddNodeOperation,
    OperationKind,
    RemoveNodeOperation,
    ReplaceNodeOperation,
    TransformOperation,
)
from .index import OperationIndex
from .traversal import (
    FLATTEN_MIN_VERSION,
    RootSpliceTraversal,
    StandardTraversal,
    TraversalAdapter,
    default_traversal,
    select_traversal,
)
from .rewriter import OperationRewriter
from .factory import PatchTransform, apply_operations, make_transform
from .finder import find_node, find_nodes

__all__ = [
    "OperationKind",
    "TransformOperation",
    "RemoveNodeOperation",
    "AddNodeOperation",
    "ReplaceNodeOperation",
    "OperationIndex",
    "FLATTEN_MIN_VERSION",
    "TraversalAdapter",
    "StandardTraversal",
    "RootSpliceTraversal",
    "default_traversal",
    "select_traversal",
    "OperationRewriter",
    "PatchTransform",
    "make_transform",
    "apply_operations",
    "find_node",
    "find_nodes",
]
