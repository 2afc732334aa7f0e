"""
Pytest fixtures for CST patch tests.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import libcst as cst
import pytest

from cst_patch.core.config import TransformConfig

SAMPLE_SOURCE = '''import os


def first():
    return 1


def second():
    x = 2
    return x


def third():
    return 3
'''


@pytest.fixture
def source() -> str:
    """Source of a small module with three functions."""
    return SAMPLE_SOURCE


@pytest.fixture
def module(source) -> cst.Module:
    """Parsed sample module."""
    return cst.parse_module(source)


@pytest.fixture
def standard_config() -> TransformConfig:
    """Config forcing LibCST child traversal."""
    return TransformConfig(traversal="standard")


@pytest.fixture
def root_splice_config() -> TransformConfig:
    """Config forcing module-level splicing traversal."""
    return TransformConfig(traversal="root_splice")


@pytest.fixture(params=["standard", "root_splice"])
def config(request) -> TransformConfig:
    """Both traversal adapters, for behavior that must not depend on them."""
    return TransformConfig(traversal=request.param)

