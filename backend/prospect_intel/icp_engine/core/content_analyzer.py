"""
LinkedIn content analyzer.

Scores a person's own posts and articles for topic relevance, authority
signals and practical value, then rolls them up into expertise scores and
an authority assessment.
"""
from typing import List, Sequence
import logging
import re

from prospect_intel.schemas import (
    ProfileInput,
    ContentItem,
    ContentType,
    SignalType,
    PostAnalysis,
    ArticleAnalysis,
    ExpertiseScores,
    AuthorityAssessment,
    ActivityPatterns,
    ProfileAnalysis,
    LinkedInAnalysis,
)
from prospect_intel.icp_engine.scorers import clamp, round_half_up
from prospect_intel.icp_engine.core import keywords as kw
from prospect_intel.icp_engine.core.category_scorer import (
    score_topic_relevance,
    score_expertise_areas,
)
from prospect_intel.icp_engine.core.signal_extractor import (
    extract_authority_signals,
    detect_original_thinking,
    classify_content,
    assess_practical_value,
    assess_expertise_level,
    extract_real_examples,
    extract_metrics,
    extract_frameworks,
    extract_tools,
    find_keywords,
)


logger = logging.getLogger(__name__)

# Content above this relevance counts as on-topic
RELEVANT_CONTENT_THRESHOLD = 70
TOPIC_THRESHOLD = 60

TOPIC_NAMES = {
    "talent_management": "talent management",
    "people_development": "people development",
    "hr_technology": "HR technology",
    "leadership": "leadership",
}


class LinkedInContentAnalyzer:
    """Analyze a person's LinkedIn posts and articles."""

    def analyze_post(self, item: ContentItem) -> PostAnalysis:
        content = item.text
        return PostAnalysis(
            post_id=item.item_id,
            content=content,
            engagement=item.reactions,
            published_at=item.published_at,
            topic_relevance=score_topic_relevance(content),
            expertise_signals=extract_authority_signals(content),
            content_type=classify_content(content),
            original_thinking=detect_original_thinking(content),
            practical_value=assess_practical_value(content),
        )

    def analyze_article(self, item: ContentItem) -> ArticleAnalysis:
        content = item.text
        return ArticleAnalysis(
            article_id=item.item_id,
            title=item.title,
            content=content,
            published_at=item.published_at,
            topic_relevance=score_topic_relevance(content),
            authority_signals=extract_authority_signals(content),
            expertise_level=assess_expertise_level(content),
            original_insight=detect_original_thinking(content),
            real_examples=extract_real_examples(content),
            specific_metrics=extract_metrics(content),
            frameworks_mentioned=extract_frameworks(content),
            tools_mentioned=extract_tools(content),
        )

    def calculate_expertise_scores(self, items: Sequence[ContentItem]) -> ExpertiseScores:
        """Articles count in full, posts at 0.3; see score_expertise_areas."""
        scores = score_expertise_areas(items)
        return ExpertiseScores(
            talent_management=scores["talent_management"],
            people_development=scores["people_development"],
            hr_technology=scores["hr_technology"],
            leadership=scores["leadership"],
            overall_expertise=scores["overall"],
        )

    def assess_authority(
        self,
        articles: List[ArticleAnalysis],
        posts: List[PostAnalysis],
    ) -> AuthorityAssessment:
        """
        Authority from consistency, hands-on signals, recognition and
        original thinking.

        - consistency: share of content above the relevance threshold
        - practical experience: 15 per experience/results signal
        - industry recognition: average post engagement / 10, +20 per speaking signal
        - thought leadership: 10 per original post, +5 per framework named in articles
        """
        total_content = len(articles) + len(posts)
        relevant = (
            sum(1 for a in articles if a.topic_relevance > RELEVANT_CONTENT_THRESHOLD)
            + sum(1 for p in posts if p.topic_relevance > RELEVANT_CONTENT_THRESHOLD)
        )
        content_consistency = clamp(relevant / total_content * 100) if total_content else 0

        all_signals = [s for a in articles for s in a.authority_signals]
        all_signals += [s for p in posts for s in p.expertise_signals]

        experience_signals = [
            s for s in all_signals if s.type in (SignalType.EXPERIENCE, SignalType.RESULTS)
        ]
        practical_experience = clamp(len(experience_signals) * 15)

        avg_engagement = sum(p.engagement for p in posts) / len(posts) if posts else 0
        speaking_signals = sum(1 for s in all_signals if s.type == SignalType.SPEAKING)
        industry_recognition = clamp(round_half_up(avg_engagement / 10) + speaking_signals * 20)

        original_posts = sum(1 for p in posts if p.original_thinking)
        framework_mentions = sum(len(a.frameworks_mentioned) for a in articles)
        thought_leadership = clamp(original_posts * 10 + framework_mentions * 5)

        overall_authority = clamp(
            (content_consistency + practical_experience + industry_recognition + thought_leadership) / 4
        )

        confidence = 50
        if total_content >= 10:
            confidence += 20
        if len(all_signals) >= 5:
            confidence += 20
        if len(articles) >= 3:
            confidence += 10

        return AuthorityAssessment(
            practical_experience=practical_experience,
            thought_leadership=thought_leadership,
            industry_recognition=industry_recognition,
            content_consistency=content_consistency,
            overall_authority=overall_authority,
            confidence_level=clamp(confidence),
        )

    def analyze_activity(self, posts: List[PostAnalysis], article_count: int,
                         expertise: ExpertiseScores) -> ActivityPatterns:
        original = sum(1 for p in posts if p.original_thinking)
        return ActivityPatterns(
            total_posts=len(posts),
            total_articles=article_count,
            original_posts=original,
            original_vs_curated=original / len(posts) if posts else 0.0,
            average_engagement=sum(p.engagement for p in posts) / len(posts) if posts else 0.0,
            most_engaged_topics=self.top_topics(expertise),
        )

    def top_topics(self, expertise: ExpertiseScores, limit: int = 3) -> List[str]:
        """Areas scoring above 60, highest first; ties keep declaration order."""
        scored = [
            (getattr(expertise, area), name)
            for area, name in TOPIC_NAMES.items()
            if getattr(expertise, area) > TOPIC_THRESHOLD
        ]
        scored.sort(key=lambda pair: -pair[0])
        return [name for _, name in scored[:limit]]

    def analyze_profile(self, profile: ProfileInput) -> ProfileAnalysis:
        """Career signals from headline and title only."""
        text = f"{profile.headline} {profile.title}".lower()

        has_hr_role = any(term in text for term in kw.HR_ROLE_TERMS)
        has_senior_role = any(term in text for term in kw.SENIOR_TERMS)
        if has_hr_role and has_senior_role:
            progression = 90
        elif has_hr_role:
            progression = 70
        else:
            progression = 30

        focus_areas = []
        for needle, area in (
            ("talent", "talent management"),
            ("performance", "performance management"),
            ("development", "people development"),
            ("leadership", "leadership development"),
            ("analytics", "people analytics"),
        ):
            if needle in text:
                focus_areas.append(area)

        years = re.search(r"(\d+)\+?\s*years?", text)
        if years:
            years_in_hr = int(years.group(1))
        elif "senior" in text or "director" in text:
            years_in_hr = 8
        elif "manager" in text or "lead" in text:
            years_in_hr = 5
        else:
            years_in_hr = 3

        return ProfileAnalysis(
            hr_role_progression=progression,
            talent_focus_areas=focus_areas,
            years_in_hr=years_in_hr,
            relevant_skills=find_keywords(text, kw.HR_SKILLS),
            certifications=find_keywords(text, kw.HR_CERTIFICATIONS),
        )

    def analyze(self, profile: ProfileInput, items: Sequence[ContentItem]) -> LinkedInAnalysis:
        """
        Analyze all of a person's LinkedIn content.

        Args:
            profile: The person
            items: Their posts and articles (may be empty)

        Returns:
            LinkedInAnalysis; no content yields zero scores, not an error
        """
        post_items = [i for i in items if i.content_type == ContentType.POST]
        article_items = [i for i in items if i.content_type == ContentType.ARTICLE]

        posts = [self.analyze_post(i) for i in post_items]
        articles = [self.analyze_article(i) for i in article_items]
        expertise = self.calculate_expertise_scores(items)

        if not items:
            logger.warning(f"No LinkedIn content for {profile.person_id}")

        return LinkedInAnalysis(
            person_id=profile.person_id,
            person_name=profile.name,
            linkedin_url=profile.linkedin_url,
            posts=posts,
            articles=articles,
            profile_analysis=self.analyze_profile(profile),
            activity_patterns=self.analyze_activity(posts, len(articles), expertise),
            expertise_scores=expertise,
            authority_assessment=self.assess_authority(articles, posts),
        )


linkedin_analyzer = LinkedInContentAnalyzer()
