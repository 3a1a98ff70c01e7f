from __future__ import annotations

import threading
from typing import Optional

from .._exceptions import OperationCancelledError


class CancellationToken:
    """Signal used to ask a running operation to stop.

    Cancellation is cooperative: the operation must check the token at its loop
    boundaries and stop by itself once cancellation was requested.
    Nothing forces it to stop.

    The token is thread-safe, it can be cancelled from one thread and observed from
    another one.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation.

        Calling this method more than once has no further effect.
        """

        self._event.set()

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()

    def raise_if_cancellation_requested(self) -> None:
        """Raise if cancellation was requested.

        Raises:
            OperationCancelledError: If :meth:`cancel` was called.
        """

        if self._event.is_set():
            raise OperationCancelledError("Operation was cancelled")

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until cancellation is requested or the timeout elapses.

        This can be used by blocking operations in place of :func:`time.sleep` to
        be woken up as soon as they are cancelled.

        Returns:
            True if cancellation was requested, False if the timeout elapsed first.
        """

        return self._event.wait(timeout)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"cancellation_requested={self.is_cancellation_requested})"
        )
