"""
Transform factory - build a reusable tree transformer from operations.

This is the entry point used by callers: collect edit operations for one or
more modules, build a transform once, then run it over the modules.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import libcst as cst

from ..config import TransformConfig
from .index import OperationIndex
from .operations import TransformOperation
from .rewriter import OperationRewriter
from .traversal import TraversalAdapter


class PatchTransform:
    """
    Reusable transformer for a fixed set of operations.

    Calling the transform with a module returns the rewritten module. Modules
    no operation refers to are passed through unchanged.
    """

    def __init__(self, index: OperationIndex, traversal: TraversalAdapter) -> None:
        self.index = index
        self.traversal = traversal
        self._rewriter = OperationRewriter(index, traversal)

    @property
    def trees(self) -> List[cst.Module]:
        """Distinct trees referenced by the operations, first-seen order."""
        return list(self.index.trees)

    def __call__(self, tree: cst.Module) -> cst.CSTNode:
        return self._rewriter.rewrite(tree)

    def __repr__(self) -> str:
        return (
            f"PatchTransform(trees={len(self.index.trees)}, "
            f"operations={len(self.index)}, traversal={self.traversal.name})"
        )


def make_transform(
    operations: Iterable[TransformOperation],
    config: Optional[TransformConfig] = None,
) -> PatchTransform:
    """
    Build transform applying `operations`.

    Args:
        operations: Edit operations, in caller order
        config: Optional transform configuration (default: auto traversal)

    Returns:
        PatchTransform callable

    Raises:
        UnsupportedOperationError: If an operation has an unknown kind
        UnsupportedTraversalError: If no traversal adapter can be selected
    """
    config = config or TransformConfig()
    index = OperationIndex.build(operations)
    return PatchTransform(index, config.build_traversal())


def apply_operations(
    trees: Iterable[cst.Module],
    operations: Iterable[TransformOperation],
    config: Optional[TransformConfig] = None,
) -> List[cst.CSTNode]:
    """
    Apply operations to several trees with one transform.

    Args:
        trees: Modules to transform
        operations: Edit operations referring to any of the modules
        config: Optional transform configuration

    Returns:
        Transformed modules, in the order of `trees`
    """
    transform = make_transform(operations, config)
    return [transform(tree) for tree in trees]
