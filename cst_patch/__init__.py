"""
CST Patch

Declarative patching of LibCST trees: build edit operations (remove, insert
siblings, replace) against nodes of parsed modules and apply them all in a
single rewrite pass.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

__version__ = "1.0.0"
__author__ = "Vasiliy Zdanovskiy"
__email__ = "vasilyvz@gmail.com"

from .core import (
    AddNodeOperation,
    CSTPatchError,
    OperationKind,
    PatchTransform,
    RemoveNodeOperation,
    ReplaceNodeOperation,
    TransformConfig,
    TransformOperation,
    apply_operations,
    find_node,
    find_nodes,
    make_transform,
)

__all__ = [
    "OperationKind",
    "TransformOperation",
    "RemoveNodeOperation",
    "AddNodeOperation",
    "ReplaceNodeOperation",
    "PatchTransform",
    "make_transform",
    "apply_operations",
    "find_node",
    "find_nodes",
    "TransformConfig",
    "CSTPatchError",
]
