"""
Node finder - locate nodes in a tree to use as operation targets.

Operations address nodes by identity, so targets must be taken from the tree
that is going to be transformed.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from typing import Callable, List, Optional, Type, Union

import libcst as cst

from ..exceptions import AmbiguousNodeError, NodeNotFoundError

NodeType = Union[str, Type[cst.CSTNode]]


def _type_matches(node: cst.CSTNode, node_type: Optional[NodeType]) -> bool:
    if node_type is None:
        return True
    if isinstance(node_type, str):
        return type(node).__name__ == node_type
    return isinstance(node, node_type)


def _name_matches(node: cst.CSTNode, name: Optional[str]) -> bool:
    if name is None:
        return True
    node_name = getattr(node, "name", None)
    return isinstance(node_name, cst.Name) and node_name.value == name


class _NodeCollector(cst.CSTVisitor):
    """Collect nodes passing all filters, in pre-order."""

    def __init__(
        self,
        node_type: Optional[NodeType],
        name: Optional[str],
        predicate: Optional[Callable[[cst.CSTNode], bool]],
    ) -> None:
        super().__init__()
        self._node_type = node_type
        self._name = name
        self._predicate = predicate
        self.found: List[cst.CSTNode] = []

    def on_visit(self, node: cst.CSTNode) -> bool:
        if (
            _type_matches(node, self._node_type)
            and _name_matches(node, self._name)
            and (self._predicate is None or self._predicate(node))
        ):
            self.found.append(node)
        return True


def find_nodes(
    tree: cst.CSTNode,
    node_type: Optional[NodeType] = None,
    name: Optional[str] = None,
    predicate: Optional[Callable[[cst.CSTNode], bool]] = None,
) -> List[cst.CSTNode]:
    """
    Find nodes in tree.

    All given filters must match. With no filters every node is returned.

    Args:
        tree: Tree (or subtree) to search
        node_type: LibCST node class or class name (e.g. "FunctionDef")
        name: Value of the node's `name` Name (functions, classes, ...)
        predicate: Extra filter called with each node

    Returns:
        Matching nodes in pre-order
    """
    collector = _NodeCollector(node_type, name, predicate)
    tree.visit(collector)
    return collector.found


def find_node(
    tree: cst.CSTNode,
    node_type: Optional[NodeType] = None,
    name: Optional[str] = None,
    predicate: Optional[Callable[[cst.CSTNode], bool]] = None,
) -> cst.CSTNode:
    """
    Find exactly one node in tree.

    Raises:
        NodeNotFoundError: If nothing matches
        AmbiguousNodeError: If more than one node matches
    """
    found = find_nodes(tree, node_type=node_type, name=name, predicate=predicate)
    filters = {"node_type": str(node_type), "name": name}
    if not found:
        raise NodeNotFoundError(f"No node matches {filters}", details=filters)
    if len(found) > 1:
        raise AmbiguousNodeError(
            f"{len(found)} nodes match {filters}", count=len(found), details=filters
        )
    return found[0]
