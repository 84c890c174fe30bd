"""
Concurrent fetch of independent named queries.

Detail, delete and update pages need several independent reads at once (an
author and that author's books, a book and the lists that populate its
form). ``fetch_all`` starts every query as its own task and joins them:

- on success it returns a bundle mapping each name to its query's result,
  only once every query has completed;
- on failure it raises the first exception to complete, unchanged,
  cancels the queries still running and never returns a partial bundle.

Nothing is retried. Completion order between queries is not observable
through the bundle, so callers must not depend on it.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Mapping

logger = logging.getLogger(__name__)

Query = Callable[[], Awaitable[Any]]


async def fetch_all(queries: Mapping[str, Query]) -> Dict[str, Any]:
    """Run the named zero-argument queries concurrently.

    Args:
        queries: Mapping from result name to a zero-argument callable
            returning an awaitable. No query may depend on another's result.

    Returns:
        Mapping from the same names to each query's result

    Raises:
        Exception: The first query failure, by completion order
    """
    tasks: Dict[str, "asyncio.Future[Any]"] = {}
    try:
        for name, query in queries.items():
            tasks[name] = asyncio.ensure_future(query())
    except BaseException:
        for task in tasks.values():
            task.cancel()
        raise

    if not tasks:
        return {}

    logger.debug("Aggregate fetch started", extra={"queries": list(tasks)})

    done, pending = await _wait_first_exception(tasks)

    failures = [
        task.exception()
        for task in done
        if not task.cancelled() and task.exception() is not None
    ]
    if failures:
        for task in pending:
            task.cancel()
        error = failures[0]
        logger.debug(
            "Aggregate fetch failed",
            extra={
                "queries": list(tasks),
                "error_type": type(error).__name__,
                "cancelled_count": len(pending),
            },
        )
        raise error

    return {name: task.result() for name, task in tasks.items()}


async def _wait_first_exception(
    tasks: Dict[str, "asyncio.Future[Any]"],
) -> Any:
    try:
        return await asyncio.wait(
            tasks.values(), return_when=asyncio.FIRST_EXCEPTION
        )
    except BaseException:
        # Caller was cancelled: take the children down with it
        for task in tasks.values():
            task.cancel()
        raise
