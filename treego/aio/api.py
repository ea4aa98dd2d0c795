"""High-level async API for treego.

This module provides a one-call entry point for building a tree without
constructing a builder, config and policy by hand.
"""

import os
from typing import Optional, Union

from ..config import BuildConfig
from ..core import CancellationSignal, TreeNode
from .builder import AsyncTreeBuilder
from .error_policies import BuildErrorPolicy


async def build_tree_async(
    path: Union[str, os.PathLike],
    *,
    config: Optional[BuildConfig] = None,
    max_concurrent: Optional[int] = None,
    follow_symlinks: bool = True,
    sort_entries: bool = False,
    policy: Optional[BuildErrorPolicy] = None,
    signal: Optional[CancellationSignal] = None,
) -> Optional[TreeNode]:
    """Build an in-memory tree of a filesystem subtree asynchronously.

    Args:
        path: Root path to build from
        config: Complete build configuration; overrides the keyword options
        max_concurrent: Cap on in-flight filesystem calls (None = unbounded)
        follow_symlinks: Whether stat follows symbolic links
        sort_entries: Sort directory entries by name instead of listing order
        policy: Error policy (defaults to fail-fast)
        signal: Optional cancellation signal to share with the caller

    Returns:
        Root TreeNode, or None if any stat or listing failed under a
        fail-fast policy

    Example:
        >>> root = await build_tree_async('/path', max_concurrent=32)
        >>> if root is not None:
        ...     print(len(root.children))
    """
    if config is None:
        config = BuildConfig(
            max_concurrent=max_concurrent,
            follow_symlinks=follow_symlinks,
            sort_entries=sort_entries,
        )
    builder = AsyncTreeBuilder(config, policy)
    return await builder.build(path, signal)
