"""One-shot cancellation signal shared by every branch of a build.

A build creates one signal and passes it down to every branch it spawns.
The signal moves from "open" to "tripped" at most once and never back.
"""

import logging
import threading
from typing import Optional

logger = logging.getLogger(__name__)


class CancellationSignal:
    """Thread-safe, idempotent "stop all traversal" flag.

    Branches poll ``is_tripped()`` before doing any filesystem work. Any
    branch (or thread) may call ``trip()``; however many callers race, the
    state changes exactly once and the first caller's reason is kept.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._tripped = False
        self._reason: Optional[BaseException] = None

    def trip(self, reason: Optional[BaseException] = None) -> None:
        """Move the signal to the tripped state.

        Args:
            reason: Optional exception that caused the abort; only the
                first caller's reason is retained
        """
        # Lock-free fast path once tripped.
        if self._tripped:
            return
        with self._lock:
            if self._tripped:
                return
            self._reason = reason
            self._tripped = True
        logger.debug("Cancellation signal tripped: %s", reason)

    def is_tripped(self) -> bool:
        """Non-blocking poll of the current state."""
        return self._tripped

    @property
    def reason(self) -> Optional[BaseException]:
        """The error that tripped the signal, if one was given."""
        return self._reason

    def __repr__(self) -> str:
        state = "tripped" if self._tripped else "open"
        return f"CancellationSignal({state})"
