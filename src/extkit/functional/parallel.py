"""Thread-pool helpers for running a callable over every element.

Two execution models are provided:

    - **Fire-and-forget** (:func:`parallel_loop`, :func:`parallel_map`): one
      task per element is submitted and the call returns straight away with a
      :class:`BatchHandle`. Nothing is known to have finished at that point.
      Waiting is opt-in through the handle, and results are only read back
      from the per-task futures, so no partially filled list is ever exposed.
    - **Blocking** (:func:`concurrent_loop`, :func:`concurrent_map`): one unit
      of work per index is dispatched and the call returns only after all of
      them have finished. Each worker writes into its own slot of a pre-sized
      output buffer, so results come back in input order.

In both models an exception raised by the callable is re-raised unchanged in
the caller, for the lowest failing index.

Example:
    >>> concurrent_map([1, 2, 3, 4, 5], lambda x: x * x)
    [1, 4, 9, 16, 25]
    >>> handle = parallel_map(["a", "b"], str.upper)
    >>> handle.results()
    ['A', 'B']
"""

from concurrent.futures import Executor, Future, ThreadPoolExecutor, wait
from typing import Callable, Generic, List, Optional, Sequence

from extkit.core.config import settings
from extkit.core.types import R, T, Transform
from extkit.logger.logger import get_logger

logger = get_logger(__name__)

__all__ = [
    "BatchHandle",
    "parallel_loop",
    "parallel_map",
    "concurrent_loop",
    "concurrent_map",
]


class BatchHandle(Generic[R]):
    """Handle over a batch of submitted tasks, one future per input element."""

    def __init__(self, futures: List["Future[R]"]) -> None:
        self._futures = futures

    def __len__(self) -> int:
        return len(self._futures)

    @property
    def futures(self) -> List["Future[R]"]:
        """Per-element futures, in input order."""
        return list(self._futures)

    def done(self) -> bool:
        """``True`` once every task has finished or been cancelled."""
        return all(future.done() for future in self._futures)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until every task finishes.

        Args:
            timeout: Maximum number of seconds to wait. ``None`` waits forever.

        Returns:
            ``True`` if the whole batch finished within ``timeout``.
        """
        _, not_done = wait(self._futures, timeout=timeout)
        return not not_done

    def results(self, timeout: Optional[float] = None) -> List[R]:
        """Wait for the batch and return results in input order.

        Args:
            timeout: Maximum number of seconds to wait per task.

        Returns:
            One result per input element.

        Raises:
            Exception: Whatever the first failing task (by index) raised.
            concurrent.futures.TimeoutError: If a task is not done in time.
            concurrent.futures.CancelledError: If a task was cancelled.
        """
        return [future.result(timeout=timeout) for future in self._futures]

    def cancel(self) -> int:
        """Cancel tasks that have not started yet.

        Returns:
            Number of tasks that were cancelled.
        """
        return sum(1 for future in self._futures if future.cancel())


def _submit_all(
    items: Sequence[T], func: Transform[T, R], executor: Optional[Executor]
) -> BatchHandle[R]:
    owns_executor = executor is None
    if executor is None:
        executor = ThreadPoolExecutor(
            max_workers=settings.MAX_WORKERS, thread_name_prefix="extkit-parallel"
        )

    futures = [executor.submit(func, element) for element in items]
    logger.debug(f"Submitted {len(futures)} tasks without waiting")

    if owns_executor:
        # Submitted tasks keep running; the pool just stops accepting new work
        executor.shutdown(wait=False)

    return BatchHandle(futures)


def parallel_loop(
    items: Sequence[T],
    body: Callable[[T], None],
    executor: Optional[Executor] = None,
) -> BatchHandle[None]:
    """Run ``body`` on every element in a thread pool without waiting.

    The call returns before the work is known to be complete. Use the returned
    handle to wait or to surface failures.

    Args:
        items: Elements to process.
        body: Side-effecting callable applied to each element.
        executor: Pool to submit to. A fresh pool is created when ``None``;
            a caller-supplied pool is left running.

    Returns:
        A :class:`BatchHandle` over the submitted tasks.
    """
    return _submit_all(items, body, executor)


def parallel_map(
    items: Sequence[T],
    transform: Transform[T, R],
    executor: Optional[Executor] = None,
) -> BatchHandle[R]:
    """Apply ``transform`` to every element in a thread pool without waiting.

    Unlike a plain list filled from worker threads, the results are only
    available through :meth:`BatchHandle.results`, which waits for the batch
    and keeps input order.

    Args:
        items: Elements to transform.
        transform: Callable applied to each element.
        executor: Pool to submit to. A fresh pool is created when ``None``.

    Returns:
        A :class:`BatchHandle` whose results line up with ``items``.
    """
    return _submit_all(items, transform, executor)


def concurrent_loop(
    items: Sequence[T],
    body: Callable[[T], None],
    max_workers: Optional[int] = None,
) -> None:
    """Run ``body`` on every element concurrently and wait for all of them.

    Args:
        items: Elements to process.
        body: Side-effecting callable applied to each element.
        max_workers: Pool size. Defaults to ``settings.MAX_WORKERS``.

    Raises:
        Exception: Whatever ``body`` raised for the lowest failing index.
    """
    concurrent_map(items, body, max_workers=max_workers)


def concurrent_map(
    items: Sequence[T],
    transform: Transform[T, R],
    max_workers: Optional[int] = None,
) -> List[R]:
    """Apply ``transform`` to every element concurrently and wait for all of them.

    Args:
        items: Elements to transform.
        transform: Callable applied to each element.
        max_workers: Pool size. Defaults to ``settings.MAX_WORKERS``.

    Returns:
        Results in the same order as ``items``.

    Raises:
        Exception: Whatever ``transform`` raised for the lowest failing index.
        ValueError: If ``max_workers`` is less than 1.
    """
    count = len(items)
    if count == 0:
        return []

    # One slot per index, each written by exactly one worker
    buffer: List[Optional[R]] = [None] * count

    def run(index: int) -> None:
        buffer[index] = transform(items[index])

    with ThreadPoolExecutor(
        max_workers=settings.MAX_WORKERS if max_workers is None else max_workers,
        thread_name_prefix="extkit-concurrent",
    ) as pool:
        futures = [pool.submit(run, index) for index in range(count)]
        logger.debug(f"Dispatched {count} units of work")

    for future in futures:
        future.result()

    return buffer  # type: ignore[return-value]
