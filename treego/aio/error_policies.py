"""
Error handling policies for treego builds.

This module decides what a filesystem failure during a build means through
the Policy pattern. The builder itself never raises for a stat or listing
error: it hands the error to the policy and drops the failing branch.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from ..core.cancellation import CancellationSignal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildError:
    """Record of one filesystem failure seen during a build."""

    path: str
    operation: str  # 'stat' or 'listdir'
    error_type: str
    error_message: str

    @classmethod
    def from_exception(cls, error: Exception, operation: str, path: str) -> "BuildError":
        return cls(
            path=path,
            operation=operation,
            error_type=type(error).__name__,
            error_message=str(error),
        )


class BuildErrorPolicy(ABC):
    """
    Base class for build error policies.

    Subclasses implement different consequences for a failed stat or
    directory listing. Whatever the policy does, the failing branch itself
    is omitted from its parent's children.
    """

    @abstractmethod
    async def handle(
        self,
        error: Exception,
        operation: str,
        path: str,
        signal: CancellationSignal,
    ) -> None:
        """
        Handle an error raised by a filesystem call.

        Args:
            error: The exception that was raised
            operation: Name of the failing call ('stat' or 'listdir')
            path: Path the call was made on
            signal: Cancellation signal of the build in progress
        """
        pass


class FailFastPolicy(BuildErrorPolicy):
    """
    Policy that aborts the entire build on the first error.

    This is the default behavior - any single stat or listing failure
    anywhere in the tree trips the cancellation signal and the whole build
    collapses to no result.
    """

    async def handle(self, error, operation, path, signal):
        """Trip the signal with the error as reason."""
        signal.trip(error)


class CollectErrorsPolicy(BuildErrorPolicy):
    """
    Fail-fast policy that also keeps a record of what went wrong.

    Several branches may fail around the same time before they observe the
    trip, so more than one error can be collected for a single build.
    """

    def __init__(self):
        self.errors: List[BuildError] = []

    async def handle(self, error, operation, path, signal):
        """Record the error, then trip the signal."""
        self.errors.append(BuildError.from_exception(error, operation, path))
        signal.trip(error)

    @property
    def first_error(self):
        return self.errors[0] if self.errors else None


class ContinueOnErrorsPolicy(BuildErrorPolicy):
    """
    Policy that skips the failing branch and keeps building.

    Opt-in only: the signal is never tripped, so the result is a tree with
    the unreadable entries missing rather than no tree at all.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, log a warning for every skipped path
        """
        self.errors: List[BuildError] = []
        self.skipped_paths: List[str] = []
        self.verbose = verbose

    async def handle(self, error, operation, path, signal):
        """Record the error and return without tripping."""
        self.errors.append(BuildError.from_exception(error, operation, path))
        self.skipped_paths.append(path)

        if self.verbose:
            if isinstance(error, PermissionError):
                logger.warning("Skipping inaccessible path '%s': %s", path, error)
            else:
                logger.warning("Error in %s for '%s': %s", operation, path, error)

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'permission_errors': sum(1 for e in self.errors if e.error_type == 'PermissionError'),
            'skipped_paths': len(self.skipped_paths),
            'errors': list(self.errors),
        }
