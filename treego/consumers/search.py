"""Depth-first substring search over a built tree."""

import sys
from typing import Optional, TextIO

from ..core import TreeNode


def search_tree(node: TreeNode, query: str, file: Optional[TextIO] = None) -> None:
    """Write the path of every node whose name contains ``query``.

    Matching is case-insensitive and covers files and directories alike.
    Output is one path per line in depth-first pre-order; every child is
    visited whether or not its parent matched. An empty query matches every
    node.

    Args:
        node: Root of the tree to search (must not be None)
        query: Substring to look for
        file: Output stream (defaults to sys.stdout)
    """
    if file is None:
        file = sys.stdout
    needle = query.lower()
    for current in node.walk():
        if needle in current.name.lower():
            print(current.path, file=file)
