"""treego - concurrent filesystem tree builder, search and printer.

treego walks a directory subtree in parallel, materializes it as an
immutable in-memory tree, and offers two read-only queries over it:

Build:
    from treego import build_tree          # blocking
    from treego.aio import build_tree_async

Query:
    search_tree(root, "query")             # matching paths, one per line
    print_tree(root, "", regex, dirs_only)  # indented tree with connectors

A single stat or listing failure anywhere aborts the whole build, and the
build returns None instead of a partial tree.
"""

__version__ = "1.0.0"

from .config import BuildConfig
from .core import TreeNode, CancellationSignal
from .aio import (
    AsyncTreeBuilder,
    BuildError,
    BuildErrorPolicy,
    FailFastPolicy,
    CollectErrorsPolicy,
    ContinueOnErrorsPolicy,
    build_tree_async,
)
from .api import build_tree, search_tree, print_tree

__all__ = [
    "__version__",
    # Data model
    "TreeNode",
    "CancellationSignal",
    "BuildConfig",
    # Building
    "AsyncTreeBuilder",
    "build_tree",
    "build_tree_async",
    # Error policies
    "BuildError",
    "BuildErrorPolicy",
    "FailFastPolicy",
    "CollectErrorsPolicy",
    "ContinueOnErrorsPolicy",
    # Consumers
    "search_tree",
    "print_tree",
]
