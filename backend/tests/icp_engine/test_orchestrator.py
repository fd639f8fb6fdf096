# tests/icp_engine/test_orchestrator.py
"""
Tests for batch orchestration

Coverage:
- Concurrency cap and chunking
- Failure isolation
- Counters and request ids
- Batch summary

Run with: pytest tests/icp_engine/test_orchestrator.py -v
"""

import asyncio
from unittest.mock import AsyncMock, Mock

import pytest

from prospect_intel.schemas import DataQuality
from prospect_intel.icp_engine.core.orchestrator import (
    BatchOrchestrator,
    MAX_CONCURRENT_FUSIONS,
    summarize,
)


class TrackingService:
    """Service double that records how many generations overlap."""

    def __init__(self, build, failing=()):
        self.build = build
        self.failing = set(failing)
        self.active = 0
        self.peak = 0
        self.calls = []

    async def generate_profile(self, person_id):
        self.calls.append(person_id)
        self.active += 1
        self.peak = max(self.peak, self.active)
        try:
            await asyncio.sleep(0.01)
            if person_id in self.failing:
                raise RuntimeError(f"boom: {person_id}")
            return self.build(person_id=person_id)
        finally:
            self.active -= 1


@pytest.fixture
def tracking_service(make_intelligence_profile):
    def _make(failing=()):
        return TrackingService(make_intelligence_profile, failing)
    return _make


# ============================================================================
# TEST: Concurrency
# ============================================================================

class TestConcurrency:
    """Test the hard concurrency cap"""

    @pytest.mark.asyncio
    async def test_cap_overrides_request(self, tracking_service):
        service = tracking_service()
        batch = await BatchOrchestrator(service).process_batch(
            [f"p-{i}" for i in range(7)], max_concurrency=10
        )

        assert service.peak == MAX_CONCURRENT_FUSIONS
        assert batch.completed == 7
        assert [r.person_id for r in batch.results] == [f"p-{i}" for i in range(7)]

    @pytest.mark.asyncio
    async def test_sequential_when_requested(self, tracking_service):
        service = tracking_service()
        await BatchOrchestrator(service).process_batch(["a", "b", "c"], max_concurrency=1)
        assert service.peak == 1

    @pytest.mark.parametrize("requested,expected", [
        (None, 3),
        (0, 1),
        (2, 2),
        (50, 3),
    ])
    def test_chunk_size(self, requested, expected):
        assert BatchOrchestrator(Mock()).chunk_size(requested) == expected


# ============================================================================
# TEST: Failures
# ============================================================================

class TestFailureIsolation:
    """Test that one failing id never aborts the batch"""

    @pytest.mark.asyncio
    async def test_failure_recorded(self, tracking_service):
        service = tracking_service(failing={"p-1"})
        batch = await BatchOrchestrator(service).process_batch(["p-0", "p-1", "p-2", "p-3"])

        assert batch.total == 4
        assert batch.completed == 3
        assert batch.failed == 1
        assert batch.in_progress == 0
        assert batch.errors[0].person_id == "p-1"
        assert "boom" in batch.errors[0].error
        assert service.calls == ["p-0", "p-1", "p-2", "p-3"]

    @pytest.mark.asyncio
    async def test_empty_message_uses_class_name(self):
        service = Mock()
        service.generate_profile = AsyncMock(side_effect=KeyError())
        batch = await BatchOrchestrator(service).process_batch(["x"])
        assert batch.errors[0].error == "KeyError"

    @pytest.mark.asyncio
    async def test_all_failed(self):
        service = Mock()
        service.generate_profile = AsyncMock(side_effect=RuntimeError("down"))
        batch = await BatchOrchestrator(service).process_batch(["a", "b"])

        assert batch.failed == 2
        assert batch.results == []
        assert batch.summary.average_expertise_score == 0


# ============================================================================
# TEST: Batch Result
# ============================================================================

class TestBatchResult:
    """Test counters, ids and summary"""

    @pytest.mark.asyncio
    async def test_empty_batch(self, tracking_service):
        batch = await BatchOrchestrator(tracking_service()).process_batch([])

        assert batch.total == 0
        assert batch.completed == 0
        assert batch.summary.high_value_prospects == 0
        assert batch.summary.top_expertise_areas == []
        assert batch.summary.data_quality_distribution == {"high": 0, "medium": 0, "low": 0}

    @pytest.mark.asyncio
    async def test_request_id(self, tracking_service):
        batch = await BatchOrchestrator(tracking_service()).process_batch(["a"])
        assert batch.request_id.startswith("batch-")


class TestSummary:
    """Test summary arithmetic"""

    def test_summary(self, make_intelligence_profile):
        results = [
            make_intelligence_profile(person_id="a", overall=80, quality=DataQuality.HIGH,
                                      talent_management=90, leadership=70),
            make_intelligence_profile(person_id="b", overall=60, quality=DataQuality.LOW,
                                      leadership=65),
            make_intelligence_profile(person_id="c", overall=72, quality=DataQuality.HIGH,
                                      hr_technology=61),
        ]

        summary = summarize(results)

        assert summary.high_value_prospects == 2
        assert summary.average_expertise_score == 71
        assert summary.top_expertise_areas == ["leadership", "talent management", "hr technology"]
        assert summary.data_quality_distribution == {"high": 2, "medium": 0, "low": 1}

    def test_average_rounds_half_up(self, make_intelligence_profile):
        results = [
            make_intelligence_profile(person_id="a", overall=70),
            make_intelligence_profile(person_id="b", overall=71),
        ]
        assert summarize(results).average_expertise_score == 71

    def test_threshold_is_strict(self, make_intelligence_profile):
        summary = summarize([make_intelligence_profile(overall=70, talent_management=60, leadership=61)])
        assert summary.high_value_prospects == 0
        assert summary.top_expertise_areas == ["leadership", "talent management", "people development"]

    def test_top_areas_without_qualifying_results(self, make_intelligence_profile):
        summary = summarize([make_intelligence_profile(overall=50)])
        assert summary.top_expertise_areas == [
            "talent management", "people development", "hr technology",
        ]

    def test_top_areas_ranked_by_count(self, make_intelligence_profile):
        results = [
            make_intelligence_profile(person_id="a", leadership=90, hr_technology=70),
            make_intelligence_profile(person_id="b", leadership=61),
        ]
        assert summarize(results).top_expertise_areas == [
            "leadership", "hr technology", "talent management",
        ]
