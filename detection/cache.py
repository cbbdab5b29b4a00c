"""
Content-addressed analysis cache with single-flight computation.

Concurrent requests for the same content hash share one in-flight task, so
the heuristic engine and the model run at most once per hash in this
process. Across processes the UNIQUE(content_hash) constraint decides the
winner and every loser gets the winner's row back.
"""

import asyncio
from typing import Awaitable, Callable, Dict, Tuple

from common.logging.logger import get_logger
from common.models import AnalysisRecord
from common.repositories import AnalysisRepository

logger = get_logger("cache")

ComputeFn = Callable[[], Awaitable[AnalysisRecord]]


class AnalysisCache:

    def __init__(self, repository: AnalysisRepository):
        self.repository = repository
        self._inflight: Dict[str, "asyncio.Future[Tuple[AnalysisRecord, bool]]"] = {}

    @property
    def inflight_count(self) -> int:
        return len(self._inflight)

    async def get_or_compute(
        self,
        content_hash: str,
        compute_fn: ComputeFn,
    ) -> Tuple[AnalysisRecord, bool]:
        """
        Return (record, cached) for *content_hash*.

        cached is True when the record already existed or another caller
        computed it. compute_fn runs only when no stored row exists and no
        other task is computing the same hash.
        """
        task = self._inflight.get(content_hash)
        if task is not None:
            logger.debug(f"Joining in-flight analysis for {content_hash[:12]}")
            record, _ = await asyncio.shield(task)
            return record, True

        # No await between the lookup above and this registration
        task = asyncio.ensure_future(self._load_or_compute(content_hash, compute_fn))
        self._inflight[content_hash] = task
        task.add_done_callback(lambda t: self._release(content_hash, t))
        return await asyncio.shield(task)

    def _release(self, content_hash: str, task: asyncio.Future) -> None:
        if self._inflight.get(content_hash) is task:
            del self._inflight[content_hash]
        if not task.cancelled() and task.exception() is not None:
            logger.error(f"Analysis for {content_hash[:12]} failed: {task.exception()}")

    async def _load_or_compute(
        self,
        content_hash: str,
        compute_fn: ComputeFn,
    ) -> Tuple[AnalysisRecord, bool]:
        existing = await asyncio.to_thread(self.repository.find_by_hash, content_hash)
        if existing is not None:
            logger.info(f"Cache hit for {content_hash[:12]}")
            return existing, True

        record = await compute_fn()
        stored = await asyncio.to_thread(self.repository.insert_if_absent, record)
        # Another process may have committed first
        return stored, stored.id != record.id
