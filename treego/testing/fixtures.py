"""Test fixtures for treego consumers.

These helpers lay out a known directory structure on disk, build trees in
memory without touching the filesystem, and inspect a built tree without
reaching into its internals.
"""

import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..core import TreeNode

# Layout used throughout the test suite:
#
#   root/
#   ├── dir1/
#   │   ├── file3.txt
#   │   └── subdir1/
#   │       └── file4.go
#   ├── dir2/
#   │   └── file5.txt
#   ├── file1.txt
#   └── file2.go
SAMPLE_FILES = (
    "file1.txt",
    "file2.go",
    "dir1/file3.txt",
    "dir1/subdir1/file4.go",
    "dir2/file5.txt",
)


def create_sample_tree(root: Path, files: Iterable[str] = SAMPLE_FILES) -> Path:
    """Create files (and their parent directories) below ``root``.

    Args:
        root: Existing directory to populate
        files: Relative file paths, '/'-separated

    Returns:
        The root path, for chaining
    """
    root = Path(root)
    for relative in files:
        target = root.joinpath(*relative.split("/"))
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("test content")
    return root


def make_file(name: str, path: Optional[str] = None) -> TreeNode:
    """Build a file node in memory."""
    return TreeNode(name=name, path=path or name, is_directory=False)


def make_dir(name: str, *children: TreeNode, path: Optional[str] = None) -> TreeNode:
    """Build a directory node in memory.

    Children keep the order they are given in. Paths default to the name,
    so pass ``path`` when a test cares about full paths.
    """
    return TreeNode(name=name, path=path or name, is_directory=True, children=tuple(children))


class TreeTestHelper:
    """Read-only inspection of a built tree for assertions.

    Example:
        root = build_tree(tmp_path)
        helper = TreeTestHelper(root)
        assert helper.find("file4.go").is_directory is False
        assert helper.child_names() == ["dir1", "dir2", "file1.txt", "file2.go"]
    """

    def __init__(self, root: TreeNode):
        self._root = root

    def find(self, name: str) -> Optional[TreeNode]:
        """First node named ``name`` in depth-first pre-order, or None."""
        for node in self._root.walk():
            if node.name == name:
                return node
        return None

    def child_names(self, node: Optional[TreeNode] = None) -> List[str]:
        """Names of the immediate children, in tree order."""
        node = node or self._root
        return [child.name for child in node.children]

    def all_paths(self) -> List[str]:
        """Every node path in depth-first pre-order."""
        return [node.path for node in self._root.walk()]

    def relative_paths(self) -> List[str]:
        """Every descendant path relative to the root, '/'-separated and sorted."""
        base = self._root.path
        return sorted(
            os.path.relpath(node.path, base).replace(os.sep, "/")
            for node in self._root.walk()
            if node is not self._root
        )

    def get_summary(self) -> Dict[str, int]:
        """Node counts for quick assertions."""
        nodes = list(self._root.walk())
        return {
            'total_nodes': len(nodes),
            'directories': sum(1 for n in nodes if n.is_directory),
            'files': sum(1 for n in nodes if not n.is_directory),
        }
