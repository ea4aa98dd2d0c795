"""Async filesystem tree builder.

Walks a directory subtree with one asyncio task per directory entry at every
level and assembles an immutable TreeNode tree. Blocking stat and listing
calls run on worker threads through asyncio.to_thread, so sibling branches
make progress in parallel.

Any stat or listing failure is handed to the build's error policy. With the
default FailFastPolicy the failure trips the build's cancellation signal,
every other branch stops at its next check, and the whole build returns None.
"""

import asyncio
import logging
import os
import stat as stat_module  # To avoid name collision with stat results
from typing import Optional, Union

from ..config import BuildConfig
from ..core import CancellationSignal, TreeNode
from .error_policies import BuildErrorPolicy, FailFastPolicy

logger = logging.getLogger(__name__)

# Anything os.stat/os.listdir reject: OSError for the filesystem, ValueError
# for paths with embedded NUL bytes.
_FS_ERRORS = (OSError, ValueError)

# Returned by _run_io when the signal tripped before the call could start.
_CANCELLED = object()


def base_name(path: str) -> str:
    """Get the display name for a path.

    Trailing separators are ignored and nothing else is normalized, so
    ``foo/..`` is named ``..``. A path with no base name (such as the
    filesystem root) is its own name.
    """
    separators = os.sep + (os.altsep or "")
    return os.path.basename(path.rstrip(separators)) or path


class AsyncTreeBuilder:
    """Concurrent, abortable filesystem tree builder.

    Example:
        >>> builder = AsyncTreeBuilder(BuildConfig(max_concurrent=64))
        >>> root = await builder.build('/some/dir')
        >>> if root is None:
        ...     print("build failed")
    """

    def __init__(
        self,
        config: Optional[BuildConfig] = None,
        policy: Optional[BuildErrorPolicy] = None,
    ):
        """Initialize the builder.

        Args:
            config: Build configuration (defaults to unbounded fan-out)
            policy: Error policy (defaults to FailFastPolicy)
        """
        self.config = config or BuildConfig()
        self.policy = policy or FailFastPolicy()

    async def build(
        self,
        path: Union[str, os.PathLike],
        signal: Optional[CancellationSignal] = None,
    ) -> Optional[TreeNode]:
        """Build the tree rooted at ``path``.

        Each call uses a fresh cancellation signal unless one is passed in.
        The result is all-or-nothing: if the signal is tripped by the time
        every branch has joined, None is returned instead of a partial tree.

        Args:
            path: Root path; it does not need to exist
            signal: Optional signal to share with the caller

        Returns:
            Root TreeNode, or None if the build failed
        """
        # The config is a mutable dataclass; re-check it in case it changed
        # after construction.
        self.config.validate()
        if signal is None:
            signal = CancellationSignal()
        path = os.fspath(path)

        limiter = None
        if self.config.is_bounded:
            limiter = asyncio.Semaphore(self.config.max_concurrent)

        logger.debug("Building tree for %s (max_concurrent=%s)", path, self.config.max_concurrent)
        root = await self._build_node(path, signal, limiter)

        if signal.is_tripped():
            logger.debug("Build of %s aborted: %s", path, signal.reason)
            return None
        return root

    async def _build_node(
        self,
        path: str,
        signal: CancellationSignal,
        limiter: Optional[asyncio.Semaphore],
    ) -> Optional[TreeNode]:
        if signal.is_tripped():
            return None

        stat_func = os.stat if self.config.follow_symlinks else os.lstat
        try:
            st = await self._run_io(stat_func, path, signal, limiter)
        except _FS_ERRORS as e:
            await self.policy.handle(e, 'stat', path, signal)
            return None
        if st is _CANCELLED:
            return None

        name = base_name(path)
        if not stat_module.S_ISDIR(st.st_mode):
            return TreeNode(name=name, path=path, is_directory=False)

        try:
            entries = await self._run_io(os.listdir, path, signal, limiter)
        except _FS_ERRORS as e:
            await self.policy.handle(e, 'listdir', path, signal)
            return None
        if entries is _CANCELLED:
            return None

        if self.config.sort_entries:
            entries = sorted(entries)

        # One task per entry; gather preserves entry order in its results.
        results = await asyncio.gather(*(
            self._build_node(os.path.join(path, entry), signal, limiter)
            for entry in entries
        ))

        children = tuple(child for child in results if child is not None)
        return TreeNode(name=name, path=path, is_directory=True, children=children)

    @staticmethod
    async def _run_io(
        func,
        path: str,
        signal: CancellationSignal,
        limiter: Optional[asyncio.Semaphore],
    ):
        """Run one blocking filesystem call on a worker thread.

        The signal is checked on the worker thread right before the call, so
        a branch that spent time waiting on the limiter or the thread pool
        does no I/O once the build has been aborted; _CANCELLED is returned
        instead.

        The limiter is held only around the call itself, never across the
        recursion, so a bounded build cannot deadlock on its own children.
        """
        def call():
            if signal.is_tripped():
                return _CANCELLED
            return func(path)

        if limiter is None:
            return await asyncio.to_thread(call)
        async with limiter:
            return await asyncio.to_thread(call)

    def __repr__(self) -> str:
        return f"AsyncTreeBuilder({self.config!r}, policy={self.policy.__class__.__name__})"
