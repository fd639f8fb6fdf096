"""
Scoring engine for ICP fit.

Combines category scores into a weighted total, applies red-flag penalties,
assigns a category tier and produces tags and reasoning. Two named scoring
profiles exist; callers choose one explicitly.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union
import logging
import re

from prospect_intel.config import settings
from prospect_intel.schemas import (
    ProfileInput,
    ICPScore,
    ICPCategory,
    ValueTier,
    DataQuality,
    ProspectProfile,
    VALUE_TIERS,
)
from prospect_intel.icp_engine.scorers import clamp, round_half_up
from prospect_intel.icp_engine.core.category_scorer import (
    CategoryScorer,
    category_scorer,
    detect_red_flags,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoringProfile:
    """
    Weight table and tier rules for one way of scoring a profile.

    tiers: (min_score, min_confidence, category), checked top-down.
    """
    name: str
    weights: Dict[str, float]
    tiers: Tuple[Tuple[int, int, ICPCategory], ...]
    red_flag_penalty: int = 0
    confidence_aware: bool = False


STANDARD_PROFILE = ScoringProfile(
    name="standard",
    weights={
        "role_match": 0.25,
        "company_size": 0.15,
        "industry": 0.10,
        "tenure": 0.15,
        "career_transition": 0.15,
        "leadership": 0.10,
        "engagement": 0.10,
    },
    tiers=(
        (80, 0, ICPCategory.HOT_LEAD),
        (60, 0, ICPCategory.WARM_LEAD),
        (40, 0, ICPCategory.COLD_LEAD),
    ),
)

ENHANCED_PROFILE = ScoringProfile(
    name="enhanced",
    weights={
        "role_match": 0.35,
        "industry": 0.20,
        "company_size": 0.15,
        "career_transition": 0.15,
        "leadership": 0.10,
        "profile_quality": 0.05,
    },
    tiers=(
        (75, 70, ICPCategory.HOT_LEAD),
        (60, 60, ICPCategory.WARM_LEAD),
        (40, 50, ICPCategory.COLD_LEAD),
    ),
    red_flag_penalty=25,
    confidence_aware=True,
)

SCORING_PROFILES = {
    STANDARD_PROFILE.name: STANDARD_PROFILE,
    ENHANCED_PROFILE.name: ENHANCED_PROFILE,
}

# CRM role buckets for prospect lists
ROLE_CATEGORIES = {
    ValueTier.HIGH_VALUE: "Exec Sponsor",
    ValueTier.MEDIUM_VALUE: "Champion",
    ValueTier.LOW_VALUE: "Buyer",
    ValueTier.NOT_QUALIFIED: "Other",
}

STANDARD_ROLE_TAGS = [
    (("ceo", "chief executive"), "CEO"),
    (("founder",), "Founder"),
    (("president",), "President"),
    (("vp", "vice president"), "VP"),
]

ENHANCED_HEADLINE_TAGS = [
    (("ceo", "chief executive"), "CEO"),
    (("founder",), "Founder"),
    (("president",), "President"),
    (("vp", "vice president"), "VP"),
    (("director",), "Director"),
    (("technology", "software", "saas"), "Technology"),
    (("consulting",), "Consulting"),
    (("financial", "fintech"), "Financial Services"),
]

HEADLINE_COMPANY_PATTERNS = [
    re.compile(r"(?:at|@)\s+([^|•\n]+)", re.IGNORECASE),
    re.compile(r"CEO of (.+?)(?:\s*[|•]|$)", re.IGNORECASE),
    re.compile(r"Founder of (.+?)(?:\s*[|•]|$)", re.IGNORECASE),
    re.compile(r"(\w+(?:\s+\w+)*)\s*(?:CEO|Founder|CTO|VP|President)", re.IGNORECASE),
]

HEADLINE_ROLE_PATTERNS = [
    re.compile(r"^([^|•@]+?)(?:\s+at\s+|\s+@\s+)", re.IGNORECASE),
    re.compile(r"(CEO|CTO|CFO|VP|President|Founder|Co-Founder|Director|Manager)", re.IGNORECASE),
]


def get_scoring_profile(name: Union[str, ScoringProfile, None] = None) -> ScoringProfile:
    """
    Resolve a scoring profile by name (default from settings).

    Raises:
        ValueError: If the name is not a registered profile
    """
    if isinstance(name, ScoringProfile):
        return name

    key = (name or settings.DEFAULT_SCORING_PROFILE).lower()
    profile = SCORING_PROFILES.get(key)
    if not profile:
        raise ValueError(
            f"Unknown scoring profile: {key}. "
            f"Available: {list(SCORING_PROFILES.keys())}"
        )
    return profile


def extract_company_from_headline(headline: str) -> str:
    for pattern in HEADLINE_COMPANY_PATTERNS:
        match = pattern.search(headline or "")
        if match:
            return match.group(1).strip()
    return "Unknown"


def extract_role_from_headline(headline: str) -> str:
    for pattern in HEADLINE_ROLE_PATTERNS:
        match = pattern.search(headline or "")
        if match:
            return match.group(1).strip()
    return "Unknown"


def describe_tenure(tenure_months: Optional[int]) -> str:
    if tenure_months is None:
        return "Unknown"
    if tenure_months < 12:
        return f"{tenure_months} months"
    years = tenure_months // 12
    return f"{years} year{'s' if years != 1 else ''}"


class ScoringEngine:
    """
    Calculate ICP fit scores for profiles.

    Stateless apart from the chosen scoring profile and the shared category
    scorer; one engine can score any number of profiles.
    """

    def __init__(self, profile: Union[str, ScoringProfile, None] = None,
                 scorer: Optional[CategoryScorer] = None):
        """
        Args:
            profile: Scoring profile name or instance (standard, enhanced)
            scorer: Category scorer, shared module instance by default
        """
        self.profile = get_scoring_profile(profile)
        self.scorer = scorer or category_scorer

    # ------------------------------------------------------------------
    # Aggregation
    # ------------------------------------------------------------------

    def weighted_total(self, breakdown: Dict[str, int], red_flag_count: int = 0) -> int:
        """
        clamp(round(sum(weight * score)) - penalty * red_flag_count).

        Dimensions missing from the breakdown count as 0.
        """
        raw = sum(
            weight * breakdown.get(dimension, 0)
            for dimension, weight in self.profile.weights.items()
        )
        penalty = self.profile.red_flag_penalty * red_flag_count
        return clamp(round_half_up(raw) - penalty)

    def categorize(self, total_score: int, confidence: Optional[int] = None) -> ICPCategory:
        """Step function over the profile's tiers, top-down."""
        conf = 100 if confidence is None else confidence
        for min_score, min_confidence, category in self.profile.tiers:
            if total_score >= min_score and conf >= min_confidence:
                return category
        return ICPCategory.NOT_ICP

    def aggregate(
        self,
        breakdown: Dict[str, int],
        headline: str = "",
        signals: Optional[List[str]] = None,
        red_flags: Optional[List[str]] = None,
        confidence: Optional[int] = None,
    ) -> ICPScore:
        """
        Combine a category breakdown into an ICPScore.

        Args:
            breakdown: Dimension -> 0-100 score
            headline: Profile headline (drives role and industry tags)
            signals: Human-readable signals (enhanced profile)
            red_flags: Red-flag category names (enhanced profile)
            confidence: 0-100 confidence (enhanced profile)

        Returns:
            ICPScore with total, category, tags and reasoning
        """
        signals = signals or []
        red_flags = red_flags or []
        breakdown = {k: clamp(v) for k, v in breakdown.items()}

        total = self.weighted_total(breakdown, len(red_flags))
        category = self.categorize(total, confidence if self.profile.confidence_aware else None)

        if self.profile.confidence_aware:
            tags = self._enhanced_tags(headline, signals, total)
            reasoning = self._enhanced_reasoning(signals, red_flags, total)
        else:
            tags = self._standard_tags(headline, breakdown)
            reasoning = self._standard_reasoning(headline, breakdown)

        return ICPScore(
            total_score=total,
            category=category,
            breakdown=breakdown,
            tags=tags,
            reasoning=reasoning,
            scoring_profile=self.profile.name,
            confidence=confidence if self.profile.confidence_aware else None,
            signals=signals,
            red_flags=red_flags,
        )

    # ------------------------------------------------------------------
    # Full scoring
    # ------------------------------------------------------------------

    def score_profile(self, profile: ProfileInput) -> ICPScore:
        """
        Score a profile end to end with the engine's scoring profile.
        """
        if not self.profile.confidence_aware:
            result = self.aggregate(self.scorer.standard_breakdown(profile), headline=profile.headline)
            logger.debug(f"Scored {profile.person_id}: {result.total_score} ({result.category.value})")
            return result

        breakdown = self.scorer.enhanced_breakdown(profile)
        signals = self.scorer.enhanced_signals(profile)
        red_flags = detect_red_flags(profile.full_text)
        confidence = self.calculate_confidence(profile, signals, red_flags)

        result = self.aggregate(
            breakdown,
            headline=profile.headline,
            signals=signals,
            red_flags=red_flags,
            confidence=confidence,
        )
        result.data_quality = self.assess_data_quality(profile, signals)

        if red_flags:
            logger.info(f"Red flags for {profile.person_id}: {', '.join(red_flags)}")
        logger.debug(f"Scored {profile.person_id}: {result.total_score} ({result.category.value})")
        return result

    def build_prospect(self, profile: ProfileInput) -> ProspectProfile:
        """Score a profile and wrap it as a prospect record."""
        icp_score = self.score_profile(profile)
        return ProspectProfile(
            person_id=profile.person_id,
            name=profile.name,
            headline=profile.headline,
            company=profile.current_company or extract_company_from_headline(profile.headline),
            role=profile.title or extract_role_from_headline(profile.headline),
            role_category=ROLE_CATEGORIES[VALUE_TIERS[icp_score.category]],
            tenure=describe_tenure(profile.tenure_months),
            linkedin_url=profile.linkedin_url,
            icp_score=icp_score,
        )

    def calculate_confidence(self, profile: ProfileInput, signals: List[str],
                             red_flags: List[str]) -> int:
        confidence = 80
        if len(profile.headline) < 20:
            confidence -= 20
        confidence -= 15 * len(red_flags)
        if len(signals) > 3:
            confidence += 10
        return clamp(confidence)

    def assess_data_quality(self, profile: ProfileInput, signals: List[str]) -> DataQuality:
        points = 0
        if len(profile.headline) > 50:
            points += 3
        if profile.profile_picture_url:
            points += 2
        if len(signals) >= 3:
            points += 2
        if "/in/" in profile.linkedin_url:
            points += 1

        if points >= 6:
            return DataQuality.HIGH
        if points >= 3:
            return DataQuality.MEDIUM
        return DataQuality.LOW

    # ------------------------------------------------------------------
    # Tags and reasoning
    # ------------------------------------------------------------------

    def _standard_tags(self, headline: str, breakdown: Dict[str, int]) -> List[str]:
        tags = []
        text = headline.lower()

        if breakdown.get("role_match", 0) >= 90:
            tags.extend(tag for keys, tag in STANDARD_ROLE_TAGS if any(k in text for k in keys))

        size = breakdown.get("company_size", 0)
        if size >= 90:
            tags.append("Enterprise")
        elif size >= 80:
            tags.append("Mid-Market")
        else:
            tags.append("SMB")

        if any(k in text for k in ("technology", "software", "saas")):
            tags.append("Technology")
        if breakdown.get("career_transition", 0) >= 80:
            tags.append("Recent Transition")
        if breakdown.get("leadership", 0) >= 80:
            tags.append("Experienced Leader")
        if breakdown.get("engagement", 0) >= 80:
            tags.append("LinkedIn Active")

        return tags

    def _standard_reasoning(self, headline: str, breakdown: Dict[str, int]) -> List[str]:
        reasoning = []
        if breakdown.get("role_match", 0) >= 80:
            reasoning.append(f"Strong role match: {headline}")
        if breakdown.get("career_transition", 0) >= 80:
            reasoning.append("Shows recent career transition signals")
        if breakdown.get("leadership", 0) >= 70:
            reasoning.append("Strong leadership indicators in profile")
        if breakdown.get("engagement", 0) >= 80:
            reasoning.append("Active LinkedIn presence")
        return reasoning

    def _enhanced_tags(self, headline: str, signals: List[str], total: int) -> List[str]:
        tags = []
        text = headline.lower()

        for keys, tag in ENHANCED_HEADLINE_TAGS:
            if any(k in text for k in keys):
                tags.append(tag)

        lowered = [s.lower() for s in signals]
        if any("transition" in s for s in lowered):
            tags.append("Career Transition")
        if any("leadership" in s for s in lowered):
            tags.append("Leadership Focus")
        if total >= 80:
            tags.append("High Priority")
        if any("enterprise" in s for s in lowered):
            tags.append("Enterprise")

        return tags

    def _enhanced_reasoning(self, signals: List[str], red_flags: List[str], total: int) -> List[str]:
        reasoning = []
        if signals:
            reasoning.append(f"Strong profile indicators: {', '.join(signals[:3])}")

        if total >= 80:
            reasoning.append("Excellent fit for self-leadership coaching")
        elif total >= 60:
            reasoning.append("Good potential for leadership development")
        elif total >= 40:
            reasoning.append("May benefit from targeted outreach")

        if red_flags:
            reasoning.append(f"Caution: {', '.join(red_flags)}")
        return reasoning
