"""Read-only consumers of a built tree.

Both walk the tree sequentially and write their results to a text stream.
Neither touches the filesystem or the cancellation signal.
"""

from .search import search_tree
from .printer import print_tree

__all__ = [
    'search_tree',
    'print_tree',
]
