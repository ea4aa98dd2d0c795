"""High-level synchronous API for treego.

This module provides simple, functional interfaces for callers that are not
running an event loop. Building still happens concurrently; the call just
blocks until the whole tree has been joined.
"""

import asyncio
import os
from typing import Optional, Union

from .config import BuildConfig
from .core import CancellationSignal, TreeNode
from .aio.api import build_tree_async
from .aio.error_policies import BuildErrorPolicy
from .consumers import search_tree, print_tree


def build_tree(
    path: Union[str, os.PathLike],
    *,
    config: Optional[BuildConfig] = None,
    max_concurrent: Optional[int] = None,
    follow_symlinks: bool = True,
    sort_entries: bool = False,
    policy: Optional[BuildErrorPolicy] = None,
    signal: Optional[CancellationSignal] = None,
) -> Optional[TreeNode]:
    """Build an in-memory tree of a filesystem subtree.

    Runs :func:`treego.aio.build_tree_async` in a fresh event loop, so it
    must not be called from inside a running loop.

    Args:
        path: Root path to build from
        config: Complete build configuration; overrides the keyword options
        max_concurrent: Cap on in-flight filesystem calls (None = unbounded)
        follow_symlinks: Whether stat follows symbolic links
        sort_entries: Sort directory entries by name instead of listing order
        policy: Error policy (defaults to fail-fast)
        signal: Optional cancellation signal to share with the caller

    Returns:
        Root TreeNode, or None if the build failed

    Example:
        >>> root = build_tree('.')
        >>> if root is not None:
        ...     search_tree(root, 'readme')
    """
    return asyncio.run(build_tree_async(
        path,
        config=config,
        max_concurrent=max_concurrent,
        follow_symlinks=follow_symlinks,
        sort_entries=sort_entries,
        policy=policy,
        signal=signal,
    ))


__all__ = [
    'build_tree',
    'search_tree',
    'print_tree',
]
