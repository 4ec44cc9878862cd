"""
Single-flight form submission.

A form's submit action is wrapped so a second submission while the
first is still running is rejected without sending anything, e.g. a
double-clicked "Save" creates one contact, not two.
"""

import threading
from typing import Any, Callable, Generic, TypeVar

from .results import ErrorKind, Failure, Result

T = TypeVar("T")

DUPLICATE_SUBMISSION_MESSAGE = "A submission is already in progress."


class SubmissionGuard(Generic[T]):
    """Runs at most one call of ``action`` at a time."""

    def __init__(self, action: Callable[..., Result[T]]):
        self._action = action
        self._lock = threading.Lock()

    @property
    def in_flight(self) -> bool:
        """Whether a submission is running (disable the submit control)."""
        return self._lock.locked()

    def submit(self, *args: Any, **kwargs: Any) -> Result[T]:
        if not self._lock.acquire(blocking=False):
            return Failure(ErrorKind.BUSY, DUPLICATE_SUBMISSION_MESSAGE)
        try:
            return self._action(*args, **kwargs)
        finally:
            self._lock.release()
