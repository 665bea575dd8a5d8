"""
Thread pool wrapper for batch element conversion.

Converting one element never touches state shared with another, so a
batch can be split into contiguous chunks and converted on separate
threads. Output order always matches input order.

Usage:
    from osm_geojson.services.utils.parallel import parallel_map

    features = parallel_map(convert, elements, workers=4)
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional, Sequence, TypeVar

from osm_geojson.config.limits import CONVERT_WORKERS, PARALLEL_MIN_BATCH

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def parallel_map(
    func: Callable[[T], R],
    items: Sequence[T],
    workers: Optional[int] = None,
    min_batch: int = PARALLEL_MIN_BATCH,
) -> list[R]:
    """
    Apply ``func`` to every item, chunked across worker threads.

    Args:
        func: Function applied to each item; must not share mutable state
        items: Input sequence
        workers: Number of threads (default: CONVERT_WORKERS)
        min_batch: Batches shorter than this run on the calling thread

    Returns:
        Results in input order. An exception raised by ``func``
        propagates to the caller.
    """
    if workers is None:
        workers = CONVERT_WORKERS

    # For small batches or a single worker, just map directly
    if workers <= 1 or not items or len(items) < min_batch:
        return [func(item) for item in items]

    chunk_size = -(-len(items) // workers)
    chunks = [items[i:i + chunk_size] for i in range(0, len(items), chunk_size)]

    def _process_chunk(chunk: Sequence[T]) -> list[R]:
        return [func(item) for item in chunk]

    logger.debug(f"Mapping {len(items)} items over {len(chunks)} chunks ({workers} workers)")

    results: list[R] = []
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(_process_chunk, chunk) for chunk in chunks]
        for future in futures:
            results.extend(future.result())

    return results
