"""Multi-process salt search.

The salt range is split into contiguous chunks that worker processes scan
independently. Results are collected in chunk order, so the first chunk
reporting a match holds the globally smallest salt and the outcome equals
the sequential scan. Once a match is found the queued chunks are cancelled
and the call returns after the chunks already running have finished.
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from typing import Optional

from airlock_miner.core.exceptions import SaltSpaceExhausted
from airlock_miner.core.types import DeploymentParameters, MiningResult
from airlock_miner.miner.address_miner import AddressMiner, scan_range

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 10_000


def chunk_ranges(limit: int, chunk_size: int) -> list[tuple[int, int]]:
    if chunk_size <= 0:
        raise ValueError(f"Chunk size must be positive, got {chunk_size}")
    return [(start, min(start + chunk_size, limit)) for start in range(0, limit, chunk_size)]


def mine_parallel(
    miner: AddressMiner,
    params: DeploymentParameters,
    workers: Optional[int] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> MiningResult:
    """Same contract as :meth:`AddressMiner.mine`, spread over processes."""
    job = miner.prepare(params)
    ranges = chunk_ranges(job.limit, chunk_size)
    logger.debug("Mining %d chunks of %d salts on %s workers", len(ranges), chunk_size, workers or "all")

    pool = ProcessPoolExecutor(max_workers=workers)
    try:
        futures = [pool.submit(scan_range, job, start, stop) for start, stop in ranges]
        for future in futures:
            candidate = future.result()
            if candidate is not None:
                return miner.to_result(job, candidate)
    finally:
        pool.shutdown(wait=True, cancel_futures=True)

    raise SaltSpaceExhausted(job.limit)
