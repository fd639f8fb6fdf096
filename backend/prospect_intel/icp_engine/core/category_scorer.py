"""
Category scorer.

Turns profile fields and content into 0-100 category scores using the
registered scorer strategies. Pattern tables use max semantics: the best
matching entry wins, matches never accumulate.
"""
from typing import Dict, List, Sequence
import logging

from prospect_intel.schemas import ProfileInput, ContentItem, ContentType
from prospect_intel.icp_engine.scorers import get_scorer, clamp
from prospect_intel.icp_engine.core import keywords as kw


logger = logging.getLogger(__name__)


# Per-item damping when summing content into expertise areas
CONTENT_TYPE_WEIGHTS = {
    ContentType.POST: 0.3,
    ContentType.ARTICLE: 1.0,
}

TENURE_BANDS = {
    "bands": [
        {"max": 6, "score": 100},
        {"max": 12, "score": 90},
        {"max": 24, "score": 80},
    ],
    "above": 50,
    "unknown": 60,
}


def score_content_category(text: str, keywords: Sequence[str], points: int = 10,
                           count_occurrences: bool = False) -> int:
    """Points per matched keyword, clamped to 100."""
    scorer = get_scorer("keyword", {
        "keywords": list(keywords),
        "points": points,
        "count_occurrences": count_occurrences,
    })
    return scorer.calculate_score(text)


def raw_content_category(text: str, keywords: Sequence[str], points: int = 10,
                         count_occurrences: bool = False) -> int:
    """Unclamped points, for sums across several items."""
    scorer = get_scorer("keyword", {
        "keywords": list(keywords),
        "count_occurrences": count_occurrences,
    })
    return scorer.count_matches(text) * points


def score_topic_relevance(text: str) -> int:
    """+10 per HR topic keyword present, capped at 100."""
    return score_content_category(text, kw.TOPIC_KEYWORDS)


def score_expertise_areas(items: Sequence[ContentItem]) -> Dict[str, int]:
    """
    Sum per-item category scores across content.

    Articles count in full, posts at 0.3. Each area is rounded and clamped
    to [0, 100]; overall is the mean of the four areas.
    """
    totals = {area: 0.0 for area in kw.EXPERTISE_AREAS}

    for item in items:
        weight = CONTENT_TYPE_WEIGHTS.get(item.content_type, 1.0)
        text = f"{item.title} {item.text}" if item.content_type == ContentType.ARTICLE else item.text
        for area, keywords in kw.EXPERTISE_AREAS.items():
            totals[area] += raw_content_category(text, keywords) * weight

    scores = {area: clamp(total) for area, total in totals.items()}
    scores["overall"] = clamp(sum(scores[a] for a in kw.EXPERTISE_AREAS) / len(kw.EXPERTISE_AREAS))
    return scores


def detect_red_flags(text: str) -> List[str]:
    """Names of red-flag categories present in the text; each counted once."""
    scorer = get_scorer("pattern", {"entries": kw.RED_FLAG_PATTERNS})
    return scorer.matches(text)


class CategoryScorer:
    """
    Profile dimension scorers for both scoring profiles.

    Scorers are built once from the constant tables and are safe to share.
    """

    def __init__(self):
        # Standard profile
        self.standard_role = get_scorer("pattern", {
            "entries": kw.STANDARD_ROLE_PATTERNS,
            "exclude": kw.ROLE_EXCLUDE_KEYWORDS,
            "default": 20,
        })
        self.standard_company_size = get_scorer("pattern", {
            "entries": kw.STANDARD_COMPANY_SIZE_PATTERNS,
            "default": 85,
        })
        self.standard_industry = get_scorer("pattern", {
            "entries": kw.STANDARD_INDUSTRY_PATTERNS,
            "default": 40,
        })
        self.tenure = get_scorer("range", TENURE_BANDS)
        self.standard_leadership = get_scorer("keyword", {
            "keywords": kw.STANDARD_LEADERSHIP_KEYWORDS,
            "ladder": [
                {"threshold": 4, "score": 100},
                {"threshold": 3, "score": 85},
                {"threshold": 2, "score": 70},
                {"threshold": 1, "score": 55},
            ],
            "default": 30,
        })
        self.creator_reach = get_scorer("threshold", {
            "ladder": [{"threshold": 5000, "score": 90}, {"threshold": 1000, "score": 85}],
            "default": 0,
        })
        self.follower_reach = get_scorer("threshold", {
            "ladder": [{"threshold": 2000, "score": 75}, {"threshold": 500, "score": 65}],
            "default": 50,
        })

        # Enhanced profile
        self.role = get_scorer("pattern", {
            "entries": kw.ROLE_PATTERNS,
            "exclude": kw.ROLE_EXCLUDE_KEYWORDS,
            "default": 0,
        })
        self.industry = get_scorer("pattern", {"entries": kw.INDUSTRY_PATTERNS, "default": 0})
        self.company_size = get_scorer("pattern", {"entries": kw.COMPANY_SIZE_PATTERNS, "default": 70})
        self.transition = get_scorer("pattern", {"entries": kw.TRANSITION_PATTERNS, "default": 50})
        self.leadership_relevance = get_scorer("pattern", {
            "entries": kw.LEADERSHIP_RELEVANCE_PATTERNS,
            "default": 30,
        })

    # ------------------------------------------------------------------
    # Standard profile dimensions
    # ------------------------------------------------------------------

    def score_role(self, profile: ProfileInput) -> int:
        return self.standard_role.calculate_score(f"{profile.headline} {profile.title}")

    def score_company_size(self, profile: ProfileInput) -> int:
        return self.standard_company_size.calculate_score(
            f"{profile.current_company} {profile.headline}"
        )

    def score_industry(self, profile: ProfileInput) -> int:
        return self.standard_industry.calculate_score(
            f"{profile.current_company} {profile.headline} {profile.about}"
        )

    def score_tenure(self, profile: ProfileInput) -> int:
        return self.tenure.calculate_score(profile.tenure_months)

    def score_career_transition(self, profile: ProfileInput) -> int:
        """
        95 for explicit transition phrases, 85 when the current role is
        under a year old, 60 otherwise.
        """
        text = f"{profile.headline} {profile.about}".lower()
        if any(k in text for k in kw.STANDARD_TRANSITION_KEYWORDS):
            return 95
        if profile.tenure_months is not None and profile.tenure_months <= 12:
            return 85
        return 60

    def score_leadership(self, profile: ProfileInput) -> int:
        return self.standard_leadership.calculate_score(f"{profile.headline} {profile.about}")

    def score_engagement(self, profile: ProfileInput) -> int:
        if profile.is_influencer:
            return 95
        if profile.is_creator:
            creator_score = self.creator_reach.calculate_score(profile.follower_count)
            if creator_score:
                return creator_score
        return self.follower_reach.calculate_score(profile.follower_count)

    def standard_breakdown(self, profile: ProfileInput) -> Dict[str, int]:
        return {
            "role_match": self.score_role(profile),
            "company_size": self.score_company_size(profile),
            "industry": self.score_industry(profile),
            "tenure": self.score_tenure(profile),
            "career_transition": self.score_career_transition(profile),
            "leadership": self.score_leadership(profile),
            "engagement": self.score_engagement(profile),
        }

    # ------------------------------------------------------------------
    # Enhanced profile dimensions
    # ------------------------------------------------------------------

    def score_profile_quality(self, profile: ProfileInput) -> int:
        score = 50
        if profile.profile_picture_url:
            score += 20
        if len(profile.headline) > 50:
            score += 15
        if "/in/" in profile.linkedin_url:
            score += 15
        return clamp(score)

    def enhanced_breakdown(self, profile: ProfileInput) -> Dict[str, int]:
        text = profile.full_text
        return {
            "role_match": self.role.calculate_score(text),
            "industry": self.industry.calculate_score(text),
            "company_size": self.company_size.calculate_score(text),
            "career_transition": self.transition.calculate_score(text),
            "leadership": self.leadership_relevance.calculate_score(text),
            "profile_quality": self.score_profile_quality(profile),
        }

    def enhanced_signals(self, profile: ProfileInput) -> List[str]:
        """Human-readable signals behind the enhanced breakdown."""
        text = profile.full_text
        signals = []

        role = self.role.best_match(text)
        if role and not self.role.is_excluded(text):
            signals.append(f"{role.upper()} role identified")

        industries = self.industry.matches(text)
        if industries:
            signals.append(f"Target industry: {', '.join(industries)}")

        sizes = self.company_size.matches(text)
        if sizes:
            signals.append(f"Company size: {', '.join(sizes)}")

        transitions = self.transition.matches(text)
        if transitions:
            signals.append(f"Career transition: {', '.join(transitions)}")

        relevance = self.leadership_relevance.best_match(text)
        if relevance in ("high", "medium"):
            signals.append(f"Self-leadership relevance: {relevance}")

        if profile.profile_picture_url:
            signals.append("Professional profile picture")
        if len(profile.headline) > 50:
            signals.append("Detailed headline")
        if "/in/" in profile.linkedin_url:
            signals.append("Professional LinkedIn profile")

        return signals


category_scorer = CategoryScorer()
