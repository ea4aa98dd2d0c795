"""Testing utilities for treego.

This module provides test fixtures and helpers for projects that use
treego, without exposing internal implementation details.
"""

from .fixtures import (
    SAMPLE_FILES,
    TreeTestHelper,
    create_sample_tree,
    make_dir,
    make_file,
)

__all__ = [
    'SAMPLE_FILES',
    'TreeTestHelper',
    'create_sample_tree',
    'make_dir',
    'make_file',
]
