"""
Intelligence service: acquire both sources for one person, then fuse.
"""
from datetime import datetime, timezone
from typing import Optional
import asyncio
import logging

from prospect_intel.schemas import IntelligenceProfile
from prospect_intel.icp_engine.adapters.base import SourceFetcher
from prospect_intel.icp_engine.exceptions import ProfileNotFoundError
from prospect_intel.icp_engine.core.fusion_engine import FusionEngine, fusion_engine


logger = logging.getLogger(__name__)


class IntelligenceService:
    """
    Generate a fused intelligence profile for one person.

    Lookup errors (SourceLookupError, ProfileNotFoundError) propagate to the
    caller; the batch orchestrator is the layer that records them.
    """

    def __init__(self, fetcher: SourceFetcher, engine: Optional[FusionEngine] = None):
        """
        Args:
            fetcher: Source of profiles, web research and LinkedIn analysis
            engine: Fusion engine (shared module instance by default)
        """
        self.fetcher = fetcher
        self.engine = engine or fusion_engine

    async def generate_profile(self, person_id: str) -> IntelligenceProfile:
        """
        Fetch the profile, run web research and LinkedIn analysis
        concurrently, then fuse.

        Raises:
            ProfileNotFoundError: If the person does not exist
            SourceLookupError: If either source lookup fails
        """
        started_at = datetime.now(timezone.utc)
        logger.info(f"Generating intelligence profile for {person_id}")

        profile = await self.fetcher.fetch_profile(person_id)
        if profile is None:
            raise ProfileNotFoundError(person_id)

        lookups = [
            asyncio.ensure_future(self.fetcher.fetch_web_research(profile)),
            asyncio.ensure_future(self.fetcher.fetch_linkedin_analysis(profile)),
        ]
        try:
            web, linkedin = await asyncio.gather(*lookups)
        except Exception:
            # First failure wins; stop the lookup still in flight
            for task in lookups:
                task.cancel()
            raise

        return self.engine.fuse(web, linkedin, profile, started_at=started_at)
