# tests/icp_engine/test_content_analyzer.py
"""
Tests for LinkedIn content analysis

Coverage:
- Post and article analysis
- Expertise and authority roll-ups
- Profile career signals
- Topic ranking

Run with: pytest tests/icp_engine/test_content_analyzer.py -v
"""

import pytest

from prospect_intel.schemas import (
    ExpertiseScores,
    PostAnalysis,
    PostContentType,
    Signal,
    SignalType,
)
from prospect_intel.icp_engine.core.content_analyzer import linkedin_analyzer


# ============================================================================
# TEST: Items
# ============================================================================

class TestItemAnalysis:
    """Test single post and article analysis"""

    def test_post(self, make_post):
        post = linkedin_analyzer.analyze_post(make_post(
            "In my opinion, coaching and mentoring beat training.",
            reactions=42,
        ))

        assert post.engagement == 42
        assert post.topic_relevance == 30
        assert post.original_thinking is True
        assert post.content_type == PostContentType.OPINION

    def test_article(self, make_article):
        article = linkedin_analyzer.analyze_article(make_article(
            "A case study: we rolled out Lattice, reduced churn by 20% and saw a 15% increase in retention.",
            title="Fixing reviews",
        ))

        assert article.title == "Fixing reviews"
        assert article.tools_mentioned == ["Lattice"]
        assert article.specific_metrics == ["15% increase"]
        assert [s.type for s in article.authority_signals] == [SignalType.RESULTS, SignalType.CASE_STUDY]


# ============================================================================
# TEST: Roll-ups
# ============================================================================

class TestRollups:
    """Test expertise and authority aggregation"""

    def test_no_content(self, make_profile):
        analysis = linkedin_analyzer.analyze(make_profile(), [])

        assert analysis.expertise_scores == ExpertiseScores()
        assert analysis.authority_assessment.confidence_level == 50
        assert analysis.authority_assessment.content_consistency == 0
        assert analysis.activity_patterns.total_posts == 0
        assert analysis.activity_patterns.original_vs_curated == 0.0

    def test_authority_from_posts(self):
        speaking = Signal(type=SignalType.SPEAKING, text="keynote", confidence=85)
        experience = Signal(type=SignalType.EXPERIENCE, text="I led", confidence=85)
        posts = [
            PostAnalysis(post_id="1", content="", engagement=300, topic_relevance=80,
                         expertise_signals=[speaking, experience], original_thinking=True),
            PostAnalysis(post_id="2", content="", engagement=100, topic_relevance=10),
        ]

        authority = linkedin_analyzer.assess_authority([], posts)

        assert authority.content_consistency == 50
        assert authority.practical_experience == 15
        assert authority.industry_recognition == 40
        assert authority.thought_leadership == 10
        assert authority.overall_authority == 29
        assert authority.confidence_level == 50

    def test_analyze_splits_posts_and_articles(self, make_profile, make_post, make_article):
        items = [make_post("coaching"), make_article("succession planning")]
        analysis = linkedin_analyzer.analyze(make_profile(username="alex"), items)

        assert len(analysis.posts) == 1
        assert len(analysis.articles) == 1
        assert analysis.activity_patterns.total_articles == 1
        assert analysis.linkedin_url == "https://linkedin.com/in/alex"


class TestTopTopics:
    """Test topic ranking"""

    def test_sorted_by_score(self):
        expertise = ExpertiseScores(
            talent_management=65,
            people_development=90,
            hr_technology=61,
            leadership=80,
        )
        assert linkedin_analyzer.top_topics(expertise) == [
            "people development", "leadership", "talent management",
        ]

    def test_threshold_is_strict(self):
        expertise = ExpertiseScores(talent_management=60, leadership=61)
        assert linkedin_analyzer.top_topics(expertise) == ["leadership"]

    def test_ties_keep_declaration_order(self):
        expertise = ExpertiseScores(hr_technology=70, talent_management=70)
        assert linkedin_analyzer.top_topics(expertise) == ["talent management", "HR technology"]


# ============================================================================
# TEST: Profile
# ============================================================================

class TestProfileAnalysis:
    """Test career signals from headline and title"""

    def test_senior_hr_profile(self, make_profile):
        analysis = linkedin_analyzer.analyze_profile(
            make_profile(headline="Senior HR Director | 15+ years | SHRM-SCP")
        )
        assert analysis.hr_role_progression == 90
        assert analysis.years_in_hr == 15
        assert analysis.certifications == ["SHRM-SCP"]

    @pytest.mark.parametrize("headline,progression,years", [
        ("Talent Partner", 70, 3),
        ("Engineering Manager", 30, 5),
        ("Senior People Partner", 90, 8),
    ])
    def test_progression_and_years(self, make_profile, headline, progression, years):
        analysis = linkedin_analyzer.analyze_profile(make_profile(headline=headline))
        assert analysis.hr_role_progression == progression
        assert analysis.years_in_hr == years

    def test_focus_areas(self, make_profile):
        analysis = linkedin_analyzer.analyze_profile(
            make_profile(headline="Talent and performance analytics")
        )
        assert analysis.talent_focus_areas == [
            "talent management", "performance management", "people analytics",
        ]
