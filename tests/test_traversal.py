"""
Tests for traversal adapters and their version-based selection.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import libcst as cst
import pytest

from cst_patch.core.exceptions import UnsupportedTraversalError
from cst_patch.core.transform import (
    AddNodeOperation,
    RemoveNodeOperation,
    ReplaceNodeOperation,
    find_node,
    make_transform,
)
from cst_patch.core.transform.traversal import (
    FLATTEN_MIN_VERSION,
    RootSpliceTraversal,
    StandardTraversal,
    default_traversal,
    installed_libcst_version,
    select_traversal,
)


def _keep(node):
    return [node]


@pytest.mark.parametrize("adapter", [StandardTraversal(), RootSpliceTraversal()])
def test_unchanged_children_keep_parent_identity(module, adapter) -> None:
    assert adapter.visit_each_child(module, _keep) is module
    second = find_node(module, "FunctionDef", name="second")
    assert adapter.visit_each_child(second, _keep) is second


@pytest.mark.parametrize("adapter", [StandardTraversal(), RootSpliceTraversal()])
def test_children_are_spliced(module, adapter) -> None:
    extra = cst.parse_statement("y = 1\n")

    def visitor(node):
        if isinstance(node, cst.FunctionDef):
            return [node, extra]
        return [node]

    result = adapter.visit_each_child(module, visitor)

    assert result is not module
    assert len(result.body) == len(module.body) + 3
    assert result.body[2] is extra


def test_visitor_only_sees_direct_children(module) -> None:
    seen = []

    def visitor(node):
        seen.append(node)
        return [node]

    StandardTraversal().visit_each_child(module, visitor)

    assert seen == list(module.header) + list(module.body) + list(module.footer)


def test_root_splice_keeps_module_settings() -> None:
    tree = cst.parse_module("# header\nx = 1\ny = 2\n")
    assert len(tree.header) == 1

    result = RootSpliceTraversal().visit_each_child(
        tree, lambda node: [] if node is tree.body[0] else [node]
    )

    assert result.code == "# header\ny = 2\n"
    assert result.default_indent == tree.default_indent
    assert result.encoding == tree.encoding


def test_root_splice_expands_nested_node(module, root_splice_config) -> None:
    second = find_node(module, "FunctionDef", name="second")
    inner = second.body.body[0]
    transform = make_transform(
        [AddNodeOperation(module, inner, after=cst.parse_statement("y = 3\n"))],
        root_splice_config,
    )

    result = transform(module)

    assert "def second():\n    x = 2\n    y = 3\n    return x\n" in result.code


def test_root_splice_nested_expansion_needs_flatten_sentinel(
    module, root_splice_config, monkeypatch
) -> None:
    second = find_node(module, "FunctionDef", name="second")
    inner = second.body.body[0]
    transform = make_transform(
        [AddNodeOperation(module, inner, after=cst.parse_statement("y = 3\n"))],
        root_splice_config,
    )
    monkeypatch.delattr(cst, "FlattenSentinel")

    with pytest.raises(UnsupportedTraversalError) as exc_info:
        transform(module)
    assert exc_info.value.code == "UNSUPPORTED_TRAVERSAL"


def test_root_splice_allows_nested_single_node_changes(
    module, root_splice_config
) -> None:
    second = find_node(module, "FunctionDef", name="second")
    ops = [
        RemoveNodeOperation(module, second.body.body[0]),
        ReplaceNodeOperation(
            module, second.body.body[1], cst.parse_statement("return 0\n")
        ),
    ]

    result = make_transform(ops, root_splice_config)(module)

    assert "def second():\n    return 0\n" in result.code


@pytest.mark.parametrize(
    "version,expected",
    [
        ("1.1.0", StandardTraversal),
        (FLATTEN_MIN_VERSION, StandardTraversal),
        ("1.0.0rc1", StandardTraversal),
        ("0.3.17", RootSpliceTraversal),
        ("0.3.4", RootSpliceTraversal),
    ],
)
def test_select_traversal(version, expected) -> None:
    assert isinstance(select_traversal(version), expected)


@pytest.mark.parametrize("version", ["", "not-a-version", None])
def test_select_traversal_rejects_bad_version(version) -> None:
    with pytest.raises(UnsupportedTraversalError) as exc_info:
        select_traversal(version)
    assert exc_info.value.version == version


def test_default_traversal_is_selected_once() -> None:
    adapter = default_traversal()

    assert default_traversal() is adapter
    assert type(adapter) is type(select_traversal(installed_libcst_version()))
