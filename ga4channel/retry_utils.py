"""Retry helper (exponential backoff) for fetching remote datasets.
"""

from __future__ import annotations

import time
from typing import Callable, Optional, TypeVar

T = TypeVar("T")


def expo_retry(
    func: Callable[[], T],
    *,
    max_retries: int = 2,
    backoff_factor: float = 1.0,
    exceptions: tuple[type[BaseException], ...] = (Exception,),
    is_retryable: Optional[Callable[[BaseException], bool]] = None,
    on_retry: Optional[Callable[[int, int, float, BaseException], None]] = None,
    sleep: Callable[[float], None] = time.sleep,
    max_wait: Optional[float] = None,
) -> T:
    """Call func, retrying on failure with exponential backoff.

    Args:
        func: Zero-arg callable to execute.
        max_retries: Total number of attempts (>= 1). 2 means one retry.
        backoff_factor: Wait = backoff_factor * (2 ** attempt_index).
        exceptions: Exception types that may be retried.
        is_retryable: Optional predicate to veto a retry for a caught exception.
        on_retry: Called before sleeping with
            (attempt_no, max_retries, wait_seconds, exception).
            attempt_no is 1-based and refers to the attempt that just failed.
        sleep: Sleep function (injectable for tests).
        max_wait: Cap on a single wait (seconds). None means no cap.

    Returns:
        func() return value.

    Raises:
        The last exception once attempts are exhausted or it is not retryable.
    """
    try:
        max_retries = int(max_retries)
    except (TypeError, ValueError) as exc:
        raise ValueError("max_retries must be an int") from exc
    if max_retries < 1:
        raise ValueError("max_retries must be >= 1")
    if backoff_factor < 0:
        raise ValueError("backoff_factor must be >= 0")

    for attempt_index in range(max_retries):
        try:
            return func()
        except exceptions as exc:
            if is_retryable is not None and not is_retryable(exc):
                raise
            attempt_no = attempt_index + 1
            if attempt_no >= max_retries:
                raise
            wait = backoff_factor * (2**attempt_index)
            if max_wait is not None:
                wait = min(wait, max_wait)
            if on_retry is not None:
                on_retry(attempt_no, max_retries, wait, exc)
            sleep(wait)

    raise RuntimeError("expo_retry reached an unexpected state")
