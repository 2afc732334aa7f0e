"""
Single-pass rewriter - apply indexed operations to a tree in one traversal.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from typing import List

import libcst as cst

from ..exceptions import RootRewriteError
from .index import OperationIndex
from .traversal import TraversalAdapter

logger = logging.getLogger(__name__)


class OperationRewriter:
    """
    Rewrite trees according to an operation index.

    Every node is checked against the index on the way down. A node touched
    by any operation is swapped for its replacement set and its subtree is
    not visited; all other nodes are descended into through the traversal
    adapter.
    """

    def __init__(self, index: OperationIndex, traversal: TraversalAdapter) -> None:
        self.index = index
        self.traversal = traversal

    def rewrite(self, tree: cst.Module) -> cst.CSTNode:
        """
        Rewrite one tree.

        Trees without operations are returned as-is without traversal.

        Args:
            tree: Module to rewrite

        Returns:
            Rewritten module, or `tree` itself if nothing changed. A replace
            operation on the root returns its replacement as is, which need
            not be a Module.

        Raises:
            RootRewriteError: If the root is replaced by more than one node
        """
        if not self.index.has_tree(tree):
            return tree

        logger.debug(
            "Rewriting tree %#x with %s traversal", id(tree), self.traversal.name
        )
        nodes = self._visit(tree, tree)
        if len(nodes) == 1:
            return nodes[0]
        if not nodes:
            # Same outcome as LibCST removing a Module.
            return tree.with_changes(body=(), header=(), footer=())
        raise RootRewriteError(
            f"Root of a tree cannot be replaced by {len(nodes)} nodes",
            details={"node_types": [type(n).__name__ for n in nodes]},
        )

    def _visit(self, tree: cst.Module, node: cst.CSTNode) -> List[cst.CSTNode]:
        modified = False
        nodes: List[cst.CSTNode] = [node]

        if self.index.is_removed(tree, node):
            nodes = []
            modified = True

        replace = self.index.replace_for(tree, node)
        if replace is not None:
            nodes = [replace.replacement]
            modified = True

        adds = self.index.adds_for(tree, node)
        if adds:
            nodes = (
                [op.before for op in adds if op.before is not None]
                + nodes
                + [op.after for op in adds if op.after is not None]
            )
            modified = True

        if modified:
            return nodes

        return [
            self.traversal.visit_each_child(
                node, lambda child: self._visit(tree, child)
            )
        ]
