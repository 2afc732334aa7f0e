"""
Core functionality for CST patching.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .exceptions import (
    AmbiguousNodeError,
    ConfigError,
    CSTPatchError,
    NodeNotFoundError,
    RootRewriteError,
    UnsupportedOperationError,
    UnsupportedTraversalError,
)
from .config import TransformConfig, load_config, validate_config
from .transform import (
    AddNodeOperation,
    OperationKind,
    PatchTransform,
    RemoveNodeOperation,
    ReplaceNodeOperation,
    TransformOperation,
    apply_operations,
    find_node,
    find_nodes,
    make_transform,
)

__all__ = [
    "CSTPatchError",
    "UnsupportedOperationError",
    "UnsupportedTraversalError",
    "RootRewriteError",
    "NodeNotFoundError",
    "AmbiguousNodeError",
    "ConfigError",
    "TransformConfig",
    "load_config",
    "validate_config",
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
]
