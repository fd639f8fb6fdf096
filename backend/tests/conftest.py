# tests/conftest.py

import pytest

from prospect_intel.schemas import (
    ProfileInput,
    ContentItem,
    ContentType,
    Signal,
    SignalType,
    DataQuality,
    WebResearchResult,
    LinkedInAnalysis,
    PostAnalysis,
    ExpertiseScores,
    AuthorityAssessment,
    UnifiedScores,
    IntelligenceAssessment,
    IntelligenceProfile,
    VerificationStatus,
)


# ============================================================================
# PROFILES & CONTENT
# ============================================================================

@pytest.fixture
def make_profile():
    """Factory for ProfileInput with neutral defaults"""
    def _make(**overrides):
        data = {
            "person_id": "p-1",
            "name": "Alex Morgan",
            "headline": "",
        }
        data.update(overrides)
        return ProfileInput(**data)
    return _make


@pytest.fixture
def ceo_profile(make_profile):
    """Tech CEO three months into the role"""
    return make_profile(
        headline="CEO at Acme Software, 12 years in talent management",
        tenure_months=3,
    )


@pytest.fixture
def make_post():
    def _make(text, item_id="post-1", reactions=0):
        return ContentItem(item_id=item_id, text=text, content_type=ContentType.POST, reactions=reactions)
    return _make


@pytest.fixture
def make_article():
    def _make(text, item_id="article-1", title=""):
        return ContentItem(item_id=item_id, text=text, title=title, content_type=ContentType.ARTICLE)
    return _make


# ============================================================================
# SOURCE RESULTS
# ============================================================================

@pytest.fixture
def make_signal():
    def _make(context="", confidence=90, signal_type=SignalType.EXPERIENCE, label="Personal Experience"):
        return Signal(type=signal_type, text=label, confidence=confidence, context=context, label=label)
    return _make


@pytest.fixture
def make_web_result():
    """Factory for WebResearchResult; scores default to 0"""
    def _make(**overrides):
        data = {"person_id": "p-1", "person_name": "Alex Morgan"}
        data.update(overrides)
        return WebResearchResult(**data)
    return _make


@pytest.fixture
def make_linkedin():
    """Factory for LinkedInAnalysis with expertise/authority shortcuts"""
    def _make(expertise=None, authority=None, posts=None, **overrides):
        data = {
            "person_id": "p-1",
            "person_name": "Alex Morgan",
            "expertise_scores": ExpertiseScores(**(expertise or {})),
            "authority_assessment": AuthorityAssessment(**(authority or {})),
            "posts": posts or [],
        }
        data.update(overrides)
        return LinkedInAnalysis(**data)
    return _make


@pytest.fixture
def make_post_analysis():
    def _make(content="", original_thinking=False, practical_value=0, post_id="post-1"):
        return PostAnalysis(
            post_id=post_id,
            content=content,
            original_thinking=original_thinking,
            practical_value=practical_value,
        )
    return _make


@pytest.fixture
def make_intelligence_profile(make_web_result, make_linkedin):
    """Minimal fused profile with chosen unified scores and data quality"""
    def _make(person_id="p-1", overall=50, quality=DataQuality.LOW, **axes):
        scores = {
            "talent_management": 0,
            "people_development": 0,
            "hr_technology": 0,
            "leadership": 0,
            "overall_expertise": overall,
            "practical_experience": 0,
            "thought_leadership": 0,
            "industry_recognition": 0,
        }
        scores.update(axes)
        return IntelligenceProfile(
            person_id=person_id,
            web_research=make_web_result(person_id=person_id),
            linkedin_analysis=make_linkedin(person_id=person_id),
            unified_scores=UnifiedScores(**scores),
            intelligence_assessment=IntelligenceAssessment(
                data_quality=quality,
                confidence_level=50,
                verification_status=VerificationStatus.UNVERIFIED,
            ),
        )
    return _make


# ============================================================================
# STORED ROWS
# ============================================================================

@pytest.fixture
def connection_rows():
    return [
        {
            "id": "c-1",
            "full_name": "Jordan Rivera",
            "headline": "VP People at Globex | Talent management & leadership development",
            "title": "VP People",
            "current_company": "Globex",
            "about": "Building people analytics and coaching programs.",
            "username": "jordanrivera",
            "profile_picture_url": "https://cdn.example.com/jordan.jpg",
            "follower_count": "2400",
            "connection_count": 500,
            "start_date": "2023-02-01",
            "is_creator": True,
            "is_influencer": False,
        },
        {
            "id": "c-2",
            "full_name": "Sam Chen",
            "headline": "Operations Manager",
            "follower_count": None,
        },
    ]


@pytest.fixture
def post_rows():
    return [
        {
            "id": "post-1",
            "connection_id": "c-1",
            "post_text": "In my opinion, succession planning is the most neglected part of talent management.",
            "posted_date": "2024-05-01",
            "total_reactions": 120,
            "comments_count": 14,
            "reposts": 3,
            "media_type": "image",
        },
        {
            "id": "post-2",
            "connection_id": "c-1",
            "post_text": "How to run coaching sessions: tips from our leadership development program.",
            "posted_date": "2024-05-08",
            "total_reactions": 80,
            "comments_count": 6,
            "reposts": 1,
            "media_type": "document",
        },
    ]


@pytest.fixture
def web_article_rows():
    return {
        "c-1": [
            {
                "title": "Globex rethinks talent management",
                "url": "https://hrexecutive.com/article/globex-talent",
                "content": (
                    "In my experience, talent management only works when succession planning "
                    "is owned by the business. Our team achieved a 30% reduction in regretted attrition."
                ),
                "source": "HR Executive",
            },
        ],
    }
