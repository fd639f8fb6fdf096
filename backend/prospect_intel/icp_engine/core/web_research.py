"""
Web research analyzer.

Works on articles that were already fetched by a source adapter: ranks them
by topic relevance, extracts authority signals and scores the four
expertise areas. No network access happens here.
"""
from typing import Dict, List, Optional, Sequence
import logging

from prospect_intel.config import settings
from prospect_intel.schemas import (
    ProfileInput,
    WebArticle,
    Signal,
    DataQuality,
    WebResearchResult,
)
from prospect_intel.icp_engine.scorers import clamp
from prospect_intel.icp_engine.core import keywords as kw
from prospect_intel.icp_engine.core.category_scorer import raw_content_category
from prospect_intel.icp_engine.core.signal_extractor import extract_web_signals


logger = logging.getLogger(__name__)

# Points per keyword occurrence in article bodies
OCCURRENCE_POINTS = 5
# Share of each signal's confidence added to every expertise area
SIGNAL_BOOST = 0.1


def generate_search_queries(profile: ProfileInput) -> List[str]:
    """Search queries a fetcher can run for this person, one per focus area."""
    name = profile.name
    company = profile.current_company
    title = profile.title or profile.headline

    return [
        f'"{name}" {company} talent management OR talent acquisition OR succession planning',
        f'"{name}" {company} people development OR leadership development OR employee development',
        f'"{name}" {company} HR technology OR HRIS OR people analytics OR workforce analytics',
        f'"{name}" {company} articles OR blog posts OR conference OR speaking',
        f'"{name}" {title} human resources OR talent OR people operations',
    ]


def is_article_url(url: str) -> bool:
    return any(pattern.search(url or "") for pattern in kw.ARTICLE_URL_PATTERNS)


def calculate_content_relevance(content: str) -> int:
    """Topic keyword occurrences per thousand words, capped at 100."""
    if not content or not content.strip():
        return 0

    words = len(content.split())
    matches = raw_content_category(content, kw.TOPIC_KEYWORDS, points=1, count_occurrences=True)
    return clamp(matches / words * 1000)


class WebResearchAnalyzer:
    """Score pre-fetched web articles about a person."""

    def __init__(self, max_articles: Optional[int] = None):
        """
        Args:
            max_articles: Articles kept after ranking (default from settings)
        """
        self.max_articles = max_articles or settings.WEB_RESEARCH_MAX_ARTICLES

    def select_articles(self, articles: Sequence[WebArticle]) -> List[WebArticle]:
        """
        Drop duplicate URLs, compute relevance and keep the most relevant.
        """
        seen = set()
        ranked = []
        for article in articles:
            if article.url and article.url in seen:
                continue
            seen.add(article.url)
            ranked.append(article.model_copy(update={
                "relevance_score": calculate_content_relevance(article.content),
            }))

        ranked.sort(key=lambda a: -a.relevance_score)
        return ranked[:self.max_articles]

    def extract_signals(self, articles: Sequence[WebArticle]) -> List[Signal]:
        signals = []
        for article in articles:
            signals.extend(extract_web_signals(article.content))
        return signals

    def calculate_scores(self, signals: Sequence[Signal],
                         articles: Sequence[WebArticle]) -> Dict[str, int]:
        """
        5 points per keyword occurrence per article, plus a tenth of every
        signal's confidence on each area. Overall is the mean of the four.
        """
        totals = {area: 0.0 for area in kw.EXPERTISE_AREAS}

        for article in articles:
            for area, keywords in kw.EXPERTISE_AREAS.items():
                totals[area] += raw_content_category(
                    article.content, keywords, points=OCCURRENCE_POINTS, count_occurrences=True
                )

        boost = sum(signal.confidence * SIGNAL_BOOST for signal in signals)
        scores = {area: clamp(total + boost) for area, total in totals.items()}
        scores["overall"] = clamp(sum(scores[a] for a in kw.EXPERTISE_AREAS) / len(kw.EXPERTISE_AREAS))
        return scores

    def assess_research_quality(self, articles: Sequence[WebArticle],
                                signals: Sequence[Signal]) -> DataQuality:
        high_quality_articles = sum(1 for a in articles if a.relevance_score > 70)
        strong_signals = sum(1 for s in signals if s.confidence > 80)

        if high_quality_articles >= 3 and strong_signals >= 2:
            return DataQuality.HIGH
        if high_quality_articles >= 1 or strong_signals >= 1:
            return DataQuality.MEDIUM
        return DataQuality.LOW

    def analyze(self, profile: ProfileInput, articles: Sequence[WebArticle]) -> WebResearchResult:
        """
        Build a WebResearchResult from articles found for a person.

        Args:
            profile: The person researched
            articles: Fetched articles (may be empty)

        Returns:
            WebResearchResult; no articles yields zero scores, not an error
        """
        selected = self.select_articles(articles)
        signals = self.extract_signals(selected)
        scores = self.calculate_scores(signals, selected)

        if not selected:
            logger.warning(f"No web articles for {profile.person_id}")
        else:
            logger.info(
                f"Web research for {profile.person_id}: "
                f"{len(selected)} articles, {len(signals)} signals"
            )

        return WebResearchResult(
            person_id=profile.person_id,
            person_name=profile.name,
            search_query=" | ".join(generate_search_queries(profile)),
            articles_found=selected,
            expertise_signals=signals,
            talent_management_score=scores["talent_management"],
            people_development_score=scores["people_development"],
            hr_technology_score=scores["hr_technology"],
            leadership_score=scores["leadership"],
            overall_relevance_score=scores["overall"],
            research_quality=self.assess_research_quality(selected, signals),
        )


web_research_analyzer = WebResearchAnalyzer()
