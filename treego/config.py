"""Configuration system for treego.

This module defines how callers tune a tree build: how wide the concurrent
fan-out may grow, whether symbolic links are followed, and in which order
directory entries are visited.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class BuildConfig:
    """Configuration for a single tree build."""

    max_concurrent: Optional[int] = None  # None means unbounded fan-out
    follow_symlinks: bool = True          # stat() through links like the reference tool
    sort_entries: bool = False            # keep listing order unless asked

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Check the configuration for impossible values.

        Raises:
            ValueError: If max_concurrent is set below 1
        """
        if self.max_concurrent is not None and self.max_concurrent < 1:
            raise ValueError(
                f"max_concurrent must be at least 1 or None, got {self.max_concurrent}"
            )

    @property
    def is_bounded(self) -> bool:
        """Whether filesystem calls are capped by a semaphore."""
        return self.max_concurrent is not None
