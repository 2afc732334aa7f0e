"""
Traversal adapters - visit the direct children of a CST node.

An adapter applies a visitor to every direct child of a node and splices the
visitor's results back into the parent. The parent is rebuilt only when a
child actually changed, so untouched subtrees keep their identity.

Two adapters exist:

- StandardTraversal relies on LibCST's own child visiting and expresses
  multi-node results with ``FlattenSentinel``.
- RootSpliceTraversal serves LibCST releases older than 0.3.18, which have no
  ``FlattenSentinel``. It splices the sequences of the root ``Module`` by hand
  and rebuilds it with ``with_changes`` so module settings (encoding, indent,
  newline) are carried over. Below the root it behaves like StandardTraversal.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version as dist_version
from typing import Callable, Dict, List, Sequence, Union

import libcst as cst
from packaging.version import InvalidVersion, Version

from ..exceptions import UnsupportedTraversalError

logger = logging.getLogger(__name__)

# Visitor contract: take one node, return the nodes that take its place.
Visitor = Callable[[cst.CSTNode], Sequence[cst.CSTNode]]

FLATTEN_MIN_VERSION = "0.3.18"

_MODULE_SEQUENCES = ("header", "body", "footer")


def _is_unchanged(node: cst.CSTNode, result: Sequence[cst.CSTNode]) -> bool:
    return len(result) == 1 and result[0] is node


class _ChildTransformer(cst.CSTTransformer):
    """
    One-level transformer: hands each direct child of `parent` to `visitor`.

    Children are never descended into here; the visitor decides whether to
    recurse.
    """

    def __init__(
        self,
        parent: cst.CSTNode,
        visitor: Visitor,
        to_leave_result: Callable[[List[cst.CSTNode]], object],
    ) -> None:
        super().__init__()
        self._parent = parent
        self._visitor = visitor
        self._to_leave_result = to_leave_result
        self.changed = False

    def on_visit(self, node: cst.CSTNode) -> bool:
        return node is self._parent

    def on_leave(self, original_node: cst.CSTNode, updated_node: cst.CSTNode):
        if original_node is self._parent:
            return updated_node if self.changed else original_node

        result = list(self._visitor(original_node))
        if _is_unchanged(original_node, result):
            return original_node
        self.changed = True
        return self._to_leave_result(result)


class TraversalAdapter(ABC):
    """Visit direct children of a node and rebuild it if any child changed."""

    name: str = ""

    @abstractmethod
    def visit_each_child(self, node: cst.CSTNode, visitor: Visitor) -> cst.CSTNode:
        """
        Apply `visitor` to each direct child of `node`.

        Args:
            node: Parent node
            visitor: Callable returning replacement nodes for a child

        Returns:
            `node` itself if no child changed, otherwise a rebuilt node
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class StandardTraversal(TraversalAdapter):
    """Child traversal through LibCST's visitor machinery."""

    name = "standard"

    def visit_each_child(self, node: cst.CSTNode, visitor: Visitor) -> cst.CSTNode:
        return node.visit(_ChildTransformer(node, visitor, self._leave_result))

    @staticmethod
    def _leave_result(
        nodes: List[cst.CSTNode],
    ) -> Union[cst.CSTNode, cst.RemovalSentinel, "cst.FlattenSentinel"]:
        if not nodes:
            return cst.RemovalSentinel.REMOVE
        if len(nodes) == 1:
            return nodes[0]
        return cst.FlattenSentinel(nodes)


class RootSpliceTraversal(TraversalAdapter):
    """
    Child traversal for LibCST releases without ``FlattenSentinel``.

    Root module sequences are spliced directly, so statements can be removed
    or surrounded by siblings at module level. Below the root children go
    through the standard path; expanding a nested child into several nodes
    needs ``FlattenSentinel`` and raises only where LibCST lacks it.
    """

    name = "root_splice"

    def visit_each_child(self, node: cst.CSTNode, visitor: Visitor) -> cst.CSTNode:
        if isinstance(node, cst.Module):
            return self._visit_module(node, visitor)
        return node.visit(_ChildTransformer(node, visitor, self._leave_result))

    @staticmethod
    def _visit_module(module: cst.Module, visitor: Visitor) -> cst.Module:
        changes: Dict[str, tuple] = {}
        for fieldname in _MODULE_SEQUENCES:
            spliced: List[cst.CSTNode] = []
            changed = False
            for child in getattr(module, fieldname):
                result = list(visitor(child))
                if not _is_unchanged(child, result):
                    changed = True
                spliced.extend(result)
            if changed:
                changes[fieldname] = tuple(spliced)

        if not changes:
            return module
        return module.with_changes(**changes)

    @staticmethod
    def _leave_result(nodes: List[cst.CSTNode]):
        if len(nodes) < 2 or hasattr(cst, "FlattenSentinel"):
            return StandardTraversal._leave_result(nodes)
        raise UnsupportedTraversalError(
            f"Cannot expand a nested node into {len(nodes)} nodes without "
            f"FlattenSentinel (LibCST >= {FLATTEN_MIN_VERSION})",
            details={"node_types": [type(n).__name__ for n in nodes]},
        )


def select_traversal(libcst_version: str) -> TraversalAdapter:
    """
    Pick traversal adapter for a LibCST version.

    Args:
        libcst_version: LibCST version string (e.g. "1.1.0")

    Returns:
        StandardTraversal for versions >= FLATTEN_MIN_VERSION,
        RootSpliceTraversal otherwise

    Raises:
        UnsupportedTraversalError: If the version string cannot be parsed
    """
    try:
        parsed = Version(libcst_version)
    except (InvalidVersion, TypeError) as e:
        raise UnsupportedTraversalError(
            f"Cannot determine traversal for LibCST version {libcst_version!r}",
            version=libcst_version,
        ) from e

    if parsed >= Version(FLATTEN_MIN_VERSION):
        return StandardTraversal()
    return RootSpliceTraversal()


def installed_libcst_version() -> str:
    """Return version of the installed libcst distribution."""
    try:
        return dist_version("libcst")
    except PackageNotFoundError as e:
        raise UnsupportedTraversalError(
            "libcst distribution metadata not found"
        ) from e


@lru_cache(maxsize=None)
def default_traversal() -> TraversalAdapter:
    """
    Traversal adapter for the installed LibCST.

    Probed once per process; later calls return the same adapter.
    """
    found = installed_libcst_version()
    adapter = select_traversal(found)
    logger.debug("Selected %s traversal for libcst %s", adapter.name, found)
    return adapter
