"""
Task Dispatcher
===============

Bounded worker pool that runs service operations off the caller's thread.
A dispatcher is created by the DI container, injected into the service and
shut down together with it.
"""
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

ResultType = TypeVar("ResultType")


class TaskDispatcher:
    """Fixed-size thread pool handle."""

    def __init__(self, max_workers: int, thread_name_prefix: str = "device-worker") -> None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {max_workers}")
        self._max_workers = max_workers
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix=thread_name_prefix,
        )
        self._closed = False

    @property
    def max_workers(self) -> int:
        return self._max_workers

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, fn: Callable[..., ResultType], *args: Any, **kwargs: Any) -> "Future[ResultType]":
        """
        Schedule `fn` on the pool.

        Exceptions raised by `fn` are re-raised from `Future.result()`.

        Raises:
            RuntimeError: If the dispatcher has been shut down
        """
        return self._executor.submit(fn, *args, **kwargs)

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting work and, by default, wait for running tasks."""
        if self._closed:
            return
        self._closed = True
        self._executor.shutdown(wait=wait)
        logger.info("Task dispatcher with %d workers shut down", self._max_workers)
