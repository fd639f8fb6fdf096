"""
Base fetcher interface for intelligence sources.
All fetchers must implement this interface.
"""
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Dict, List, Optional, TypeVar
import asyncio
import logging

from prospect_intel.config import settings
from prospect_intel.schemas import ProfileInput, WebResearchResult, LinkedInAnalysis
from prospect_intel.icp_engine.exceptions import SourceLookupError


logger = logging.getLogger(__name__)

T = TypeVar("T")


class SourceFetcher(ABC):
    """
    Abstract base class for profile, web-research and LinkedIn sources.

    Subclasses implement the underscored lookups; the public methods add the
    timeout and turn every failure into a SourceLookupError.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Args:
            config: Fetcher config (records, timeouts, etc.)
        """
        self.config = config or {}
        self.source_type = self.__class__.__name__
        self.timeout = self.config.get("lookup_timeout", settings.SOURCE_LOOKUP_TIMEOUT_SECONDS)

    @abstractmethod
    async def fetch_profile(self, person_id: str) -> Optional[ProfileInput]:
        """
        Look up a profile by id.

        Returns:
            ProfileInput, or None when no such person exists
        """
        pass

    @abstractmethod
    async def _research_web(self, profile: ProfileInput) -> WebResearchResult:
        pass

    @abstractmethod
    async def _analyze_linkedin(self, profile: ProfileInput) -> LinkedInAnalysis:
        pass

    async def _guarded(self, source: str, lookup: Awaitable[T]) -> T:
        """
        Await a lookup with the configured timeout.

        Raises:
            SourceLookupError: On timeout or any failure inside the lookup
        """
        try:
            if self.timeout:
                return await asyncio.wait_for(lookup, timeout=self.timeout)
            return await lookup
        except SourceLookupError:
            raise
        except asyncio.TimeoutError as e:
            logger.warning(f"{self.source_type} {source} lookup timed out after {self.timeout}s")
            raise SourceLookupError(source, f"timed out after {self.timeout}s") from e
        except Exception as e:
            logger.error(f"{self.source_type} {source} lookup failed: {e}")
            raise SourceLookupError(source, str(e)) from e

    async def fetch_web_research(self, profile: ProfileInput) -> WebResearchResult:
        return await self._guarded("web_research", self._research_web(profile))

    async def fetch_linkedin_analysis(self, profile: ProfileInput) -> LinkedInAnalysis:
        return await self._guarded("linkedin", self._analyze_linkedin(profile))

    def validate_config(self) -> List[str]:
        """
        Validate configuration, return list of errors.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []
        if self.timeout is not None and self.timeout < 0:
            errors.append("lookup_timeout must not be negative")
        return errors
