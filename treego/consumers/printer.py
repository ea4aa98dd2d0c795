"""Filtered, indented tree rendering.

Renders the children of a node with box-drawing connectors::

    ├── dir1
    │   └── file3.txt
    └── file1.txt

Two filters apply to every child: ``dirs_only`` drops non-directories, and
a regex keeps entries whose name matches. A directory whose own name does
not match is still shown when one of its immediate children matches. The
lookahead is one level only, so a match deeper down does not pull in its
distant ancestors.
"""

import re
import sys
from typing import Optional, TextIO, Union

from ..core import TreeNode

BRANCH_MIDDLE = "├── "
BRANCH_LAST = "└── "
INDENT_OPEN = "│   "
INDENT_CLOSED = "    "


def print_tree(
    node: TreeNode,
    prefix: str = "",
    regex: Optional[Union[re.Pattern, str]] = None,
    dirs_only: bool = False,
    file: Optional[TextIO] = None,
) -> None:
    """Write the visible descendants of ``node``, one line each.

    The node itself is never printed; callers print the root's name first
    if they want it.

    Args:
        node: Node whose children are rendered (must not be None)
        prefix: String put in front of every line at this level
        regex: Optional name filter, compiled or as a pattern string
        dirs_only: Only show directories
        file: Output stream (defaults to sys.stdout)

    Raises:
        re.error: If ``regex`` is a string that does not compile
    """
    if isinstance(regex, str):
        regex = re.compile(regex)
    if file is None:
        file = sys.stdout
    _print_children(node, prefix, regex, dirs_only, file)


def _is_visible(child: TreeNode, regex: Optional[re.Pattern], dirs_only: bool) -> bool:
    if dirs_only and not child.is_directory:
        return False
    if regex is None or regex.search(child.name):
        return True
    if not child.is_directory:
        return False
    return any(regex.search(grand.name) for grand in child.children)


def _print_children(
    node: TreeNode,
    prefix: str,
    regex: Optional[re.Pattern],
    dirs_only: bool,
    file: TextIO,
) -> None:
    # Explicit stack of (children iterator, last index, prefix) so depth is
    # not limited by the interpreter's recursion limit.
    stack = [(enumerate(node.children), len(node.children) - 1, prefix)]
    while stack:
        children, last_index, prefix = stack[-1]
        for i, child in children:
            if not _is_visible(child, regex, dirs_only):
                continue

            # Position in the unfiltered sibling list decides the connector, so
            # a hidden last sibling leaves the visible ones with "├── ".
            if i == last_index:
                branch, next_prefix = BRANCH_LAST, prefix + INDENT_CLOSED
            else:
                branch, next_prefix = BRANCH_MIDDLE, prefix + INDENT_OPEN

            print(prefix + branch + child.name, file=file)
            if child.is_directory:
                stack.append((enumerate(child.children), len(child.children) - 1, next_prefix))
                break
        else:
            stack.pop()
