"""
Cross-source fusion engine.

Merges a web research result and a LinkedIn analysis into one intelligence
profile: unified scores, data quality, confidence, claim verification,
red flags, strengths, recommendations and a verification status.

Every rule below is independent: all triggering red flags, strengths and
recommendations are emitted, in the order listed.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple
import logging

from prospect_intel.schemas import (
    ProfileInput,
    WebResearchResult,
    LinkedInAnalysis,
    DataQuality,
    UnifiedScores,
    ExpertiseVerification,
    IntelligenceAssessment,
    IntelligenceProfile,
    VerificationStatus,
    SignalType,
)
from prospect_intel.icp_engine.scorers import clamp, round_half_up
from prospect_intel.icp_engine.core.content_analyzer import linkedin_analyzer


logger = logging.getLogger(__name__)


WEB_WEIGHT = 0.6
LINKEDIN_WEIGHT = 0.4


@dataclass(frozen=True)
class ClaimRule:
    """An expertise claim checked against both sources."""
    claim: str
    axis: str
    keywords: Tuple[str, ...]


CLAIM_RULES = [
    ClaimRule("Talent Management Expertise", "talent_management", ("talent",)),
    ClaimRule("People Development Expertise", "people_development", ("development", "coaching")),
    ClaimRule("HR Technology Expertise", "hr_technology",
              ("hr technology", "hris", "people analytics", "workforce analytics", "hr tech")),
]

WEB_AXES = {
    "talent_management": "talent_management_score",
    "people_development": "people_development_score",
    "hr_technology": "hr_technology_score",
    "leadership": "leadership_score",
    "overall_expertise": "overall_relevance_score",
}

CLAIM_THRESHOLD = 50
VERIFIED_CLAIM_CONFIDENCE = 70
EVIDENCE_SNIPPET_LENGTH = 100
MAX_LINKEDIN_EVIDENCE = 3


class FusionEngine:
    """
    Fuse web research and LinkedIn analysis for one person.

    Stateless; one engine can fuse any number of profiles concurrently.
    """

    def __init__(self, cross_validation_bonus: int = 10):
        """
        Args:
            cross_validation_bonus: Confidence added when both sources
                independently rate the person above 60 overall
        """
        self.cross_validation_bonus = cross_validation_bonus

    # ------------------------------------------------------------------
    # Scores
    # ------------------------------------------------------------------

    def unify_scores(self, web: WebResearchResult, linkedin: LinkedInAnalysis) -> UnifiedScores:
        """0.6 web + 0.4 LinkedIn on shared axes; authority axes pass through."""
        expertise = linkedin.expertise_scores
        authority = linkedin.authority_assessment

        blended = {
            axis: clamp(
                getattr(web, web_field) * WEB_WEIGHT + getattr(expertise, axis) * LINKEDIN_WEIGHT
            )
            for axis, web_field in WEB_AXES.items()
        }
        return UnifiedScores(
            **blended,
            practical_experience=authority.practical_experience,
            thought_leadership=authority.thought_leadership,
            industry_recognition=authority.industry_recognition,
        )

    def assess_data_quality(self, web: WebResearchResult, linkedin: LinkedInAnalysis) -> DataQuality:
        points = 0
        if len(web.articles_found) >= 5:
            points += 25
        if len(web.expertise_signals) >= 3:
            points += 25
        if web.research_quality == DataQuality.HIGH:
            points += 15
        if len(linkedin.articles) >= 2:
            points += 20
        if len(linkedin.posts) >= 10:
            points += 15

        if points >= 70:
            return DataQuality.HIGH
        if points >= 40:
            return DataQuality.MEDIUM
        return DataQuality.LOW

    def calculate_confidence(self, web: WebResearchResult, linkedin: LinkedInAnalysis,
                             data_quality: DataQuality) -> int:
        confidence = 50.0

        if data_quality == DataQuality.HIGH:
            confidence += 25
        elif data_quality == DataQuality.MEDIUM:
            confidence += 15

        strong_signals = sum(1 for s in web.expertise_signals if s.confidence > 80)
        confidence += min(15, strong_signals * 3)

        confidence += linkedin.authority_assessment.confidence_level * 0.2

        # Cross-validation: both sources agree independently
        if web.overall_relevance_score > 60 and linkedin.expertise_scores.overall_expertise > 60:
            confidence += self.cross_validation_bonus

        return clamp(confidence)

    # ------------------------------------------------------------------
    # Claims
    # ------------------------------------------------------------------

    def _web_evidence(self, web: WebResearchResult, keywords: Sequence[str]) -> List[str]:
        evidence = []
        for signal in web.expertise_signals:
            haystack = f"{signal.display_name} {signal.context}".lower()
            if any(k in haystack for k in keywords):
                evidence.append(signal.context or signal.display_name)
        return evidence

    def _linkedin_evidence(self, linkedin: LinkedInAnalysis, keywords: Sequence[str]) -> List[str]:
        evidence = []
        for post in linkedin.posts:
            if any(k in post.content.lower() for k in keywords):
                evidence.append(post.content[:EVIDENCE_SNIPPET_LENGTH] + "...")
            if len(evidence) >= MAX_LINKEDIN_EVIDENCE:
                break
        return evidence

    def verify_claims(self, web: WebResearchResult, linkedin: LinkedInAnalysis) -> List[ExpertiseVerification]:
        """
        Check each expertise claim that either source scores above 50.

        confidence = min(60, 20 per web item) + min(40, 10 per LinkedIn item)
        """
        verifications = []
        for rule in CLAIM_RULES:
            web_score = getattr(web, WEB_AXES[rule.axis])
            linkedin_score = getattr(linkedin.expertise_scores, rule.axis)
            if web_score <= CLAIM_THRESHOLD and linkedin_score <= CLAIM_THRESHOLD:
                continue

            web_evidence = self._web_evidence(web, rule.keywords)
            linkedin_evidence = self._linkedin_evidence(linkedin, rule.keywords)
            confidence = clamp(
                min(60, len(web_evidence) * 20) + min(40, len(linkedin_evidence) * 10)
            )
            verifications.append(ExpertiseVerification(
                claim=rule.claim,
                web_evidence=web_evidence,
                linkedin_evidence=linkedin_evidence,
                confidence=confidence,
                verified=confidence > VERIFIED_CLAIM_CONFIDENCE,
            ))
        return verifications

    # ------------------------------------------------------------------
    # Narrative
    # ------------------------------------------------------------------

    def identify_red_flags(self, web: WebResearchResult, linkedin: LinkedInAnalysis) -> List[str]:
        red_flags = []

        if not web.articles_found:
            red_flags.append("No external articles or thought leadership found")

        if linkedin.authority_assessment.content_consistency < 50:
            red_flags.append("Inconsistent LinkedIn content focus")

        if linkedin.expertise_scores.overall_expertise > 80 and len(web.expertise_signals) < 2:
            red_flags.append("Strong expertise claims with limited supporting evidence")

        total_posts = len(linkedin.posts)
        original_posts = sum(1 for p in linkedin.posts if p.original_thinking)
        if total_posts > 5 and original_posts / total_posts < 0.3:
            red_flags.append("Mostly shares others' content rather than original insights")

        return red_flags

    def identify_strengths(self, web: WebResearchResult, linkedin: LinkedInAnalysis,
                           scores: UnifiedScores) -> List[str]:
        strengths = []

        if scores.overall_expertise > 80:
            strengths.append("Strong overall expertise in talent management space")
        if len(web.articles_found) >= 3:
            strengths.append("Published thought leadership content externally")
        if scores.practical_experience > 80:
            strengths.append("Demonstrates hands-on practical experience")
        if linkedin.authority_assessment.content_consistency > 80:
            strengths.append("Consistent focus on relevant topics")
        if scores.industry_recognition > 70:
            strengths.append("High engagement and industry recognition")

        speaking = [
            s for s in web.expertise_signals
            if s.type == SignalType.SPEAKING
            or any(k in f"{s.display_name} {s.text}".lower() for k in ("spoke", "keynote"))
        ]
        if speaking:
            strengths.append("Conference speaker and industry presenter")

        return strengths

    def generate_recommendations(self, linkedin: LinkedInAnalysis, scores: UnifiedScores) -> List[str]:
        recommendations = []

        if scores.overall_expertise > 70:
            recommendations.append("High-value prospect - prioritize for outreach")
        if scores.talent_management > 80:
            recommendations.append("Excellent for talent management solutions discussions")
        if scores.people_development > 80:
            recommendations.append("Strong candidate for people development initiatives")
        if scores.hr_technology > 80:
            recommendations.append("Good fit for HR technology conversations")

        if linkedin.authority_assessment.thought_leadership > 70:
            recommendations.append("Engage through thought leadership content and industry insights")

        practical_posts = [p for p in linkedin.posts if p.practical_value > 70]
        if len(practical_posts) > 3:
            recommendations.append("Values practical, actionable insights - focus on ROI and implementation")

        topics = linkedin_analyzer.top_topics(linkedin.expertise_scores)
        if topics:
            recommendations.append(f"Most engaged with: {', '.join(topics)} - tailor content accordingly")

        return recommendations

    def determine_verification_status(
        self,
        verifications: Sequence[ExpertiseVerification],
        confidence: int,
        red_flags: Sequence[str],
    ) -> VerificationStatus:
        """
        verified: confidence > 80, >= 70% claims verified, no red flags
        likely:   confidence > 60, >= 50% claims verified, at most 1 red flag
        With no claims the verified-ratio condition holds.
        """
        verified_claims = sum(1 for v in verifications if v.verified)
        total_claims = len(verifications)

        if (confidence > 80 and verified_claims >= total_claims * 0.7
                and len(red_flags) == 0):
            return VerificationStatus.VERIFIED

        if (confidence > 60 and verified_claims >= total_claims * 0.5
                and len(red_flags) <= 1):
            return VerificationStatus.LIKELY

        return VerificationStatus.UNVERIFIED

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def assess(self, web: WebResearchResult, linkedin: LinkedInAnalysis,
               scores: Optional[UnifiedScores] = None) -> IntelligenceAssessment:
        scores = scores or self.unify_scores(web, linkedin)
        data_quality = self.assess_data_quality(web, linkedin)
        confidence = self.calculate_confidence(web, linkedin, data_quality)
        verifications = self.verify_claims(web, linkedin)
        red_flags = self.identify_red_flags(web, linkedin)

        return IntelligenceAssessment(
            data_quality=data_quality,
            confidence_level=confidence,
            expertise_verification=verifications,
            red_flags=red_flags,
            strengths=self.identify_strengths(web, linkedin, scores),
            recommendations=self.generate_recommendations(linkedin, scores),
            verification_status=self.determine_verification_status(verifications, confidence, red_flags),
        )

    def fuse(
        self,
        web: WebResearchResult,
        linkedin: LinkedInAnalysis,
        profile: ProfileInput,
        started_at: Optional[datetime] = None,
    ) -> IntelligenceProfile:
        """
        Fuse both source results into an IntelligenceProfile.

        Args:
            web: Web research result for the person
            linkedin: LinkedIn analysis for the person
            profile: The person's profile
            started_at: When research began (duration is measured from here)

        Returns:
            IntelligenceProfile
        """
        started_at = started_at or datetime.now(timezone.utc)
        scores = self.unify_scores(web, linkedin)
        assessment = self.assess(web, linkedin, scores)
        finished_at = datetime.now(timezone.utc)

        logger.info(
            f"Fused {profile.person_id}: overall {scores.overall_expertise}, "
            f"confidence {assessment.confidence_level}, {assessment.verification_status.value}"
        )

        return IntelligenceProfile(
            person_id=profile.person_id,
            person_name=profile.name,
            linkedin_url=profile.linkedin_url,
            web_research=web,
            linkedin_analysis=linkedin,
            unified_scores=scores,
            intelligence_assessment=assessment,
            researched_at=started_at,
            last_updated_at=finished_at,
            research_duration_ms=round_half_up((finished_at - started_at).total_seconds() * 1000),
        )


fusion_engine = FusionEngine()
