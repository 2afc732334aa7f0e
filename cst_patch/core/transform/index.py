"""
Operation index - group edit operations by tree and kind.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set, Tuple

import libcst as cst

from ..exceptions import UnsupportedOperationError
from .operations import (
    AddNodeOperation,
    OperationKind,
    RemoveNodeOperation,
    ReplaceNodeOperation,
    TransformOperation,
)

logger = logging.getLogger(__name__)

# (id(tree), id(node))
_NodeKey = Tuple[int, int]


def _key(tree: cst.CSTNode, node: cst.CSTNode) -> _NodeKey:
    return (id(tree), id(node))


@dataclass
class OperationIndex:
    """
    Operations partitioned by kind, plus the distinct trees they reference.

    Partitions keep the input order. Lookups are keyed by tree and node
    identity; the index keeps every operation alive, so the ids it holds
    cannot be reused while it exists.
    """

    trees: List[cst.Module] = field(default_factory=list)
    removes: List[RemoveNodeOperation] = field(default_factory=list)
    adds: List[AddNodeOperation] = field(default_factory=list)
    replaces: List[ReplaceNodeOperation] = field(default_factory=list)
    _tree_ids: Set[int] = field(default_factory=set, init=False, repr=False)
    _removed: Set[_NodeKey] = field(default_factory=set, init=False, repr=False)
    _replacements: Dict[_NodeKey, ReplaceNodeOperation] = field(
        default_factory=dict, init=False, repr=False
    )
    _additions: Dict[_NodeKey, List[AddNodeOperation]] = field(
        default_factory=dict, init=False, repr=False
    )

    @classmethod
    def build(cls, operations: Iterable[TransformOperation]) -> OperationIndex:
        """
        Build index from a flat list of operations.

        Args:
            operations: Operations in caller order (duplicates allowed)

        Returns:
            OperationIndex

        Raises:
            UnsupportedOperationError: If an operation has an unknown kind
        """
        operations = list(operations)
        index = cls()
        for op in operations:
            index._add(op)
        logger.debug(
            "Indexed %d operations over %d trees "
            "(remove=%d, add=%d, replace=%d)",
            len(operations),
            len(index.trees),
            len(index.removes),
            len(index.adds),
            len(index.replaces),
        )
        return index

    def _add(self, op: TransformOperation) -> None:
        kind = getattr(op, "kind", None)
        if kind == OperationKind.REMOVE:
            self.removes.append(op)
            self._removed.add(_key(op.tree, op.target))
        elif kind == OperationKind.REPLACE:
            self.replaces.append(op)
            # First replace wins; later ones on the same node are ignored.
            self._replacements.setdefault(_key(op.tree, op.target), op)
        elif kind == OperationKind.ADD:
            self.adds.append(op)
            self._additions.setdefault(_key(op.tree, op.target), []).append(op)
        else:
            raise UnsupportedOperationError(
                f"Unsupported operation kind: {kind!r}",
                kind=kind,
                details={"operation": type(op).__name__},
            )

        if id(op.tree) not in self._tree_ids:
            self._tree_ids.add(id(op.tree))
            self.trees.append(op.tree)

    def has_tree(self, tree: cst.CSTNode) -> bool:
        """Return True if any operation targets `tree`."""
        return id(tree) in self._tree_ids

    def is_removed(self, tree: cst.CSTNode, node: cst.CSTNode) -> bool:
        """Return True if a remove operation targets `node`."""
        return _key(tree, node) in self._removed

    def replace_for(
        self, tree: cst.CSTNode, node: cst.CSTNode
    ) -> Optional[ReplaceNodeOperation]:
        """Return the first replace operation on `node`, or None."""
        return self._replacements.get(_key(tree, node))

    def adds_for(
        self, tree: cst.CSTNode, node: cst.CSTNode
    ) -> List[AddNodeOperation]:
        """Return all add operations on `node` in input order."""
        return self._additions.get(_key(tree, node), [])

    def __len__(self) -> int:
        return len(self.removes) + len(self.adds) + len(self.replaces)
