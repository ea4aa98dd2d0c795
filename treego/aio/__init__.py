"""Asynchronous tree building for treego.

This package contains the asyncio builder, its error policies and the
one-call async API.
"""

from .builder import AsyncTreeBuilder
from .error_policies import (
    BuildError,
    BuildErrorPolicy,
    FailFastPolicy,
    CollectErrorsPolicy,
    ContinueOnErrorsPolicy,
)
from .api import build_tree_async

__all__ = [
    # Builder
    'AsyncTreeBuilder',
    # Error policies
    'BuildError',
    'BuildErrorPolicy',
    'FailFastPolicy',
    'CollectErrorsPolicy',
    'ContinueOnErrorsPolicy',
    # High-level API
    'build_tree_async',
]
