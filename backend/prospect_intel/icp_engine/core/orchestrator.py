"""
Batch orchestrator - runs intelligence generation over many people.

Pipeline per chunk: generate (concurrently) → settle → count
"""
from collections import Counter
from typing import List, Optional, Sequence
import asyncio
import logging
import time

from prospect_intel.config import settings
from prospect_intel.schemas import (
    BatchResult,
    BatchError,
    BatchSummary,
    IntelligenceProfile,
)
from prospect_intel.icp_engine.scorers import round_half_up
from prospect_intel.icp_engine.core.intelligence_service import IntelligenceService


logger = logging.getLogger(__name__)


# Upper bound on concurrent fusions, whatever the caller asks for
MAX_CONCURRENT_FUSIONS = 3

HIGH_VALUE_THRESHOLD = 70
EXPERTISE_AREA_THRESHOLD = 60

# Declaration order breaks ties when ranking areas
EXPERTISE_AREAS = [
    ("talent management", "talent_management"),
    ("people development", "people_development"),
    ("hr technology", "hr_technology"),
    ("leadership", "leadership"),
]


def summarize(results: Sequence[IntelligenceProfile]) -> BatchSummary:
    """
    Batch summary over successful results; zero-valued when there are none.
    """
    if not results:
        return BatchSummary()

    high_value = sum(
        1 for r in results if r.unified_scores.overall_expertise > HIGH_VALUE_THRESHOLD
    )
    average = round_half_up(
        sum(r.unified_scores.overall_expertise for r in results) / len(results)
    )

    area_counts = [
        (name, sum(1 for r in results if getattr(r.unified_scores, field) > EXPERTISE_AREA_THRESHOLD))
        for name, field in EXPERTISE_AREAS
    ]
    # sorted() is stable, so equal counts keep declaration order
    ranked = sorted(area_counts, key=lambda a: -a[1])

    quality = Counter(r.intelligence_assessment.data_quality.value for r in results)

    return BatchSummary(
        high_value_prospects=high_value,
        average_expertise_score=average,
        top_expertise_areas=[name for name, _ in ranked[:3]],
        data_quality_distribution={
            "high": quality.get("high", 0),
            "medium": quality.get("medium", 0),
            "low": quality.get("low", 0),
        },
    )


class BatchOrchestrator:
    """
    Process a list of person ids through the intelligence service.

    Ids are split into chunks of at most MAX_CONCURRENT_FUSIONS. Chunks run
    one after another; members of a chunk run concurrently. A failing id is
    recorded in errors and never aborts the batch.
    """

    def __init__(self, service: IntelligenceService):
        """
        Args:
            service: Per-person intelligence generator
        """
        self.service = service

    def chunk_size(self, max_concurrency: Optional[int]) -> int:
        requested = max_concurrency if max_concurrency is not None else settings.BATCH_MAX_CONCURRENCY
        return max(1, min(requested, MAX_CONCURRENT_FUSIONS))

    async def process_batch(
        self,
        person_ids: Sequence[str],
        max_concurrency: Optional[int] = None,
    ) -> BatchResult:
        """
        Generate intelligence profiles for every id.

        Args:
            person_ids: People to process
            max_concurrency: Requested parallelism (capped at 3)

        Returns:
            BatchResult with results, per-id errors and summary
        """
        ids: List[str] = list(person_ids)
        size = self.chunk_size(max_concurrency)
        batch = BatchResult(request_id=f"batch-{int(time.time() * 1000)}", total=len(ids))

        logger.info(f"Starting {batch.request_id}: {len(ids)} people, concurrency {size}")

        for i in range(0, len(ids), size):
            chunk = ids[i:i + size]
            batch.in_progress += len(chunk)

            chunk_results = await asyncio.gather(
                *(self.service.generate_profile(person_id) for person_id in chunk),
                return_exceptions=True,
            )

            for person_id, result in zip(chunk, chunk_results):
                batch.in_progress -= 1
                if isinstance(result, BaseException) and not isinstance(result, Exception):
                    raise result
                if isinstance(result, Exception):
                    batch.failed += 1
                    reason = str(result) or result.__class__.__name__
                    batch.errors.append(BatchError(person_id=person_id, error=reason))
                    logger.error(f"{batch.request_id}: {person_id} failed: {reason}")
                else:
                    batch.completed += 1
                    batch.results.append(result)

            logger.info(
                f"{batch.request_id}: {batch.completed + batch.failed}/{batch.total} settled"
            )

        batch.summary = summarize(batch.results)

        logger.info(
            f"Finished {batch.request_id}: {batch.completed} completed, {batch.failed} failed"
        )
        return batch
