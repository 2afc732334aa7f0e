"""
Tests for edit operation models.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from dataclasses import FrozenInstanceError

import pytest

from cst_patch.core.transform import (
    AddNodeOperation,
    OperationKind,
    RemoveNodeOperation,
    ReplaceNodeOperation,
)


def test_kinds(module) -> None:
    node = module.body[0]

    assert RemoveNodeOperation(module, node).kind is OperationKind.REMOVE
    assert AddNodeOperation(module, node).kind is OperationKind.ADD
    assert ReplaceNodeOperation(module, node, node).kind is OperationKind.REPLACE
    assert OperationKind.REPLACE.value == "replace"


def test_add_siblings_default_to_none(module) -> None:
    op = AddNodeOperation(module, module.body[0])

    assert op.before is None
    assert op.after is None
    assert op.tree is module


def test_operations_are_immutable(module) -> None:
    op = ReplaceNodeOperation(module, module.body[0], module.body[1])

    with pytest.raises(FrozenInstanceError):
        op.replacement = module.body[2]


def test_operations_compare_by_identity(module) -> None:
    a = RemoveNodeOperation(module, module.body[0])
    b = RemoveNodeOperation(module, module.body[0])

    assert a == a
    assert a != b
    assert len({a, b}) == 2


def test_construction_does_not_validate(module) -> None:
    op = AddNodeOperation(module, "not a node", before=None, after=42)

    assert op.target == "not a node"
    assert op.after == 42
