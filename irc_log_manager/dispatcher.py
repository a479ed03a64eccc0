"""
Parallel per-channel work distribution.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterable, List, Optional, TypeVar

from .logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def dispatch(
    items: Iterable[T],
    task: Callable[[T], R],
    max_workers: Optional[int] = None,
) -> List[R]:
    """
    Run ``task`` on every item in a thread pool and gather the results.

    Results are returned in the order of ``items`` no matter which task
    finishes first. The first failure observed from any task is re-raised:
    tasks that have not started yet are cancelled, running ones finish and
    their results are discarded.

    Args:
        items: Work items, one task each.
        task: Callable run in a worker thread; must not share mutable state.
        max_workers: Pool size (None uses the executor default).

    Returns:
        One result per item.
    """
    items = list(items)
    if not items:
        return []

    results: List[Optional[R]] = [None] * len(items)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(task, item): index for index, item in enumerate(items)}
        for future in as_completed(futures):
            error = future.exception()
            if error is not None:
                cancelled = sum(1 for pending in futures if pending.cancel())
                logger.debug("Task failed, cancelled %d pending tasks", cancelled)
                raise error
            results[futures[future]] = future.result()

    return results
