"""Shared pytest configuration and fixtures for the treego test suite."""

import pytest

from treego.testing import create_sample_tree, make_dir, make_file


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: wide-tree stress tests (deselect with -m 'not slow')")


@pytest.fixture
def sample_tree(tmp_path):
    """On-disk sample layout (see treego.testing.fixtures.SAMPLE_FILES).

    Returns the root directory as a string.
    """
    root = tmp_path / "root"
    root.mkdir()
    return str(create_sample_tree(root))


@pytest.fixture
def memory_tree():
    """In-memory tree with hand-picked paths.

    Structure:
        root
        ├── file1.txt
        ├── file2.go
        ├── dir1
        │   └── file3.txt
        └── dir2
    """
    return make_dir(
        "root",
        make_file("file1.txt", path="/r/file1.txt"),
        make_file("file2.go", path="/r/file2.go"),
        make_dir("dir1", make_file("file3.txt", path="/r/dir1/file3.txt"), path="/r/dir1"),
        make_dir("dir2", path="/r/dir2"),
        path="/r",
    )


@pytest.fixture
def deep_chain():
    """3000 nested directories ending in leaf.txt, deeper than the recursion limit."""
    node = make_file("leaf.txt", path="/deep/leaf.txt")
    for i in range(3000):
        node = make_dir(f"d{i}", node)
    return node
