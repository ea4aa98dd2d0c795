"""Core data types for treego.

These have no I/O of their own and are shared by the builder and the
consumers.
"""

from .node import TreeNode
from .cancellation import CancellationSignal

__all__ = [
    'TreeNode',
    'CancellationSignal',
]
