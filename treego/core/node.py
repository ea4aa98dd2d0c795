"""Tree node for treego.

The TreeNode is intentionally kept simple - it's a data container. The
builder is its only writer, and only while constructing it; once a node is
handed back to its parent it never changes.
"""

from dataclasses import dataclass, field
from typing import Iterator, Tuple


@dataclass(frozen=True)
class TreeNode:
    """One filesystem entry that was visited during a build.

    Attributes:
        name: Base name of the entry
        path: Path the entry was built from (root as given, children joined)
        is_directory: True if the stat reported a directory at build time
        children: Child nodes in listing order, failed children omitted
    """

    name: str
    path: str
    is_directory: bool = False
    children: Tuple["TreeNode", ...] = field(default_factory=tuple)

    def is_leaf(self) -> bool:
        """Check if this node has no children.

        Empty directories and directories whose children all failed are
        leaves too.
        """
        return not self.children

    def walk(self) -> Iterator["TreeNode"]:
        """Yield this node and every descendant in depth-first pre-order.

        Uses an explicit stack, so arbitrarily deep trees are fine.
        """
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __repr__(self) -> str:
        kind = "dir" if self.is_directory else "file"
        return f"TreeNode({self.path!r}, {kind}, children={len(self.children)})"
