"""
Edit operations for declarative CST patching.

Each operation names the tree it applies to and the target node inside it.
Nodes are addressed by identity: the target must be the very node object
obtained from the tree, not a structurally equal copy.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional

import libcst as cst


class OperationKind(str, Enum):
    """Kind of edit operation."""

    REMOVE = "remove"
    ADD = "add"
    REPLACE = "replace"


@dataclass(frozen=True, eq=False)
class TransformOperation:
    """
    Base class for edit operations.

    Operations are immutable and compare by identity. No validation is done
    at construction time; a target that is not part of `tree` is simply never
    matched while the tree is rewritten.
    """

    kind: ClassVar[OperationKind]

    tree: cst.Module
    target: cst.CSTNode


@dataclass(frozen=True, eq=False)
class RemoveNodeOperation(TransformOperation):
    """Delete `target` from its parent's children."""

    kind: ClassVar[OperationKind] = OperationKind.REMOVE


@dataclass(frozen=True, eq=False)
class AddNodeOperation(TransformOperation):
    """
    Insert siblings around `target`.

    `before` goes immediately in front of the target and `after` right behind
    it. Both are optional; the target itself stays in place.
    """

    kind: ClassVar[OperationKind] = OperationKind.ADD

    before: Optional[cst.CSTNode] = None
    after: Optional[cst.CSTNode] = None


@dataclass(frozen=True, eq=False)
class ReplaceNodeOperation(TransformOperation):
    """Substitute `replacement` for `target`."""

    kind: ClassVar[OperationKind] = OperationKind.REPLACE

    replacement: cst.CSTNode
