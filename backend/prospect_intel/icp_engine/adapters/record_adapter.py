"""
Record-backed fetcher: serves pre-fetched rows from memory.
"""
from typing import Any, Dict, List, Optional
import logging

from prospect_intel.schemas import ProfileInput, WebResearchResult, LinkedInAnalysis
from prospect_intel.icp_engine.adapters.base import SourceFetcher
from prospect_intel.icp_engine.core.field_mapper import (
    to_profile,
    to_post,
    to_linkedin_article,
    to_web_article,
)
from prospect_intel.icp_engine.core.web_research import WebResearchAnalyzer, is_article_url
from prospect_intel.icp_engine.core.content_analyzer import linkedin_analyzer


logger = logging.getLogger(__name__)


class RecordSourceFetcher(SourceFetcher):
    """
    Serve profiles and content from stored rows.

    Config format:
    {
        "connections": [{"id": "c1", "full_name": "...", ...}],
        "posts": [{"id": "p1", "connection_id": "c1", "post_text": "...", ...}],
        "linkedin_articles": {"c1": [{"id": "a1", "title": "...", "content": "..."}]},
        "web_articles": {"c1": [{"title": "...", "url": "...", "content": "..."}]},
        "filter_article_urls": false,   # drop web rows whose URL doesn't look like an article
        "max_articles": 20,
        "lookup_timeout": 30
    }
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        self.connections = {
            str(row.get("id")): row for row in self.config.get("connections", [])
        }
        self.posts: Dict[str, List[Dict[str, Any]]] = {}
        for row in self.config.get("posts", []):
            self.posts.setdefault(str(row.get("connection_id")), []).append(row)
        self.linkedin_articles = self.config.get("linkedin_articles", {})
        self.web_articles = self.config.get("web_articles", {})
        self.web_analyzer = WebResearchAnalyzer(self.config.get("max_articles"))

    async def fetch_profile(self, person_id: str) -> Optional[ProfileInput]:
        row = self.connections.get(str(person_id))
        if row is None:
            return None
        return to_profile(row)

    async def _research_web(self, profile: ProfileInput) -> WebResearchResult:
        rows = self.web_articles.get(profile.person_id, [])
        if self.config.get("filter_article_urls", False):
            rows = [r for r in rows if is_article_url(r.get("url", ""))]
        return self.web_analyzer.analyze(profile, [to_web_article(r) for r in rows])

    async def _analyze_linkedin(self, profile: ProfileInput) -> LinkedInAnalysis:
        items = [to_post(r) for r in self.posts.get(profile.person_id, [])]
        items += [to_linkedin_article(r) for r in self.linkedin_articles.get(profile.person_id, [])]
        return linkedin_analyzer.analyze(profile, items)

    def validate_config(self) -> List[str]:
        errors = super().validate_config()
        for row in self.config.get("connections", []):
            if not row.get("id"):
                errors.append("Connection row without id")
        return errors
