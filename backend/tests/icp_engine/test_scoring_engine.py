# tests/icp_engine/test_scoring_engine.py
"""
Tests for ICP score aggregation

Coverage:
- Scoring profile registry and weights
- Weighted totals, penalties and tiers
- Tags and reasoning
- Enhanced profile confidence and data quality
- Prospect records

Run with: pytest tests/icp_engine/test_scoring_engine.py -v
"""

import pytest

from prospect_intel.schemas import ICPCategory, ValueTier, DataQuality
from prospect_intel.icp_engine.core.scoring_engine import (
    ScoringEngine,
    SCORING_PROFILES,
    STANDARD_PROFILE,
    ENHANCED_PROFILE,
    get_scoring_profile,
    extract_company_from_headline,
    extract_role_from_headline,
    describe_tenure,
)


@pytest.fixture
def standard_engine():
    return ScoringEngine("standard")


@pytest.fixture
def enhanced_engine():
    return ScoringEngine("enhanced")


@pytest.fixture
def founder_profile(make_profile):
    return make_profile(
        person_id="dana",
        name="Dana Lee",
        headline="Founder & CEO | SaaS startup scaling leadership development programs",
        username="danalee",
        profile_picture_url="https://cdn.example.com/dana.jpg",
    )


# ============================================================================
# TEST: Profiles
# ============================================================================

class TestScoringProfiles:
    """Test profile registry"""

    @pytest.mark.parametrize("name", list(SCORING_PROFILES))
    def test_weights_sum_to_one(self, name):
        assert sum(SCORING_PROFILES[name].weights.values()) == pytest.approx(1.0)

    def test_lookup_is_case_insensitive(self):
        assert get_scoring_profile("Enhanced") is ENHANCED_PROFILE

    def test_default_from_settings(self):
        assert get_scoring_profile() is STANDARD_PROFILE

    def test_unknown_profile_raises(self):
        with pytest.raises(ValueError) as exc:
            ScoringEngine("aggressive")
        assert "Unknown scoring profile: aggressive" in str(exc.value)


# ============================================================================
# TEST: Aggregation
# ============================================================================

class TestAggregation:
    """Test weighted totals and categories"""

    def test_standard_example(self, standard_engine, ceo_profile):
        result = standard_engine.score_profile(ceo_profile)

        assert result.total_score == 84
        assert result.category == ICPCategory.HOT_LEAD
        assert result.tags == ["CEO", "Mid-Market", "Technology", "Recent Transition"]
        assert result.reasoning == [
            "Strong role match: CEO at Acme Software, 12 years in talent management",
            "Shows recent career transition signals",
        ]
        assert result.scoring_profile == "standard"
        assert result.confidence is None

    def test_missing_dimensions_count_as_zero(self, standard_engine):
        assert standard_engine.weighted_total({"role_match": 100}) == 25

    def test_red_flag_penalty(self, enhanced_engine):
        breakdown = {dimension: 75 for dimension in ENHANCED_PROFILE.weights}
        result = enhanced_engine.aggregate(breakdown, red_flags=["retired"], confidence=80)

        assert result.total_score == 50
        assert result.category == ICPCategory.COLD_LEAD
        assert "Caution: retired" in result.reasoning

    def test_penalty_floor_is_zero(self, enhanced_engine):
        assert enhanced_engine.weighted_total({"role_match": 40}, red_flag_count=3) == 0

    def test_confidence_gates_tier(self, enhanced_engine):
        assert enhanced_engine.categorize(80, 65) == ICPCategory.WARM_LEAD
        assert enhanced_engine.categorize(80, 75) == ICPCategory.HOT_LEAD
        assert enhanced_engine.categorize(80, 40) == ICPCategory.NOT_ICP

    @pytest.mark.parametrize("total,expected", [
        (80, ICPCategory.HOT_LEAD),
        (79, ICPCategory.WARM_LEAD),
        (60, ICPCategory.WARM_LEAD),
        (40, ICPCategory.COLD_LEAD),
        (39, ICPCategory.NOT_ICP),
    ])
    def test_standard_tiers(self, standard_engine, total, expected):
        assert standard_engine.categorize(total) == expected

    def test_breakdown_values_clamped(self, standard_engine):
        result = standard_engine.aggregate({"role_match": 140, "tenure": -10})
        assert result.breakdown == {"role_match": 100, "tenure": 0}


# ============================================================================
# TEST: Enhanced Profile
# ============================================================================

class TestEnhancedScoring:
    """Test confidence-aware scoring end to end"""

    def test_founder(self, enhanced_engine, founder_profile):
        result = enhanced_engine.score_profile(founder_profile)

        assert result.total_score == 90
        assert result.category == ICPCategory.HOT_LEAD
        assert result.confidence == 90
        assert result.data_quality == DataQuality.HIGH
        assert result.red_flags == []
        assert result.tags == ["CEO", "Founder", "Technology", "Leadership Focus", "High Priority"]
        assert result.reasoning[1] == "Excellent fit for self-leadership coaching"

    def test_short_headline_lowers_confidence(self, enhanced_engine, make_profile):
        profile = make_profile(headline="CEO")
        signals = []
        assert enhanced_engine.calculate_confidence(profile, signals, []) == 60
        assert enhanced_engine.calculate_confidence(profile, signals, ["retired"]) == 45

    def test_red_flags_veto_role(self, enhanced_engine, make_profile):
        result = enhanced_engine.score_profile(make_profile(headline="Retired CEO, open to work"))

        assert result.breakdown["role_match"] == 0
        assert result.red_flags == ["retired", "seeking"]
        assert result.category == ICPCategory.NOT_ICP


# ============================================================================
# TEST: Tags
# ============================================================================

class TestTags:
    """Test headline-driven tag sets"""

    def test_standard_spelled_out_titles(self, standard_engine):
        result = standard_engine.aggregate(
            {"role_match": 100, "company_size": 85},
            headline="Chief Executive Officer, Vice President of Sales at Acme Software",
        )
        assert result.tags == ["CEO", "President", "VP", "Mid-Market", "Technology"]

    def test_standard_role_tags_need_strong_match(self, standard_engine):
        result = standard_engine.aggregate(
            {"role_match": 85, "company_size": 95},
            headline="CEO at a SaaS startup",
        )
        assert result.tags == ["Enterprise", "Technology"]

    def test_enhanced_industry_keywords(self, enhanced_engine):
        result = enhanced_engine.aggregate({}, headline="Chief Executive at a biotech fintech firm")
        assert result.tags == ["CEO", "Financial Services"]

    def test_enhanced_banking_is_not_financial(self, enhanced_engine):
        result = enhanced_engine.aggregate({}, headline="Director, SaaS consulting | Banking")
        assert result.tags == ["Director", "Technology", "Consulting"]


# ============================================================================
# TEST: Prospect Records
# ============================================================================

class TestProspects:
    """Test prospect normalization"""

    def test_build_prospect_from_headline(self, standard_engine, make_profile):
        prospect = standard_engine.build_prospect(
            make_profile(headline="VP Sales at Globex Corp", tenure_months=30)
        )
        assert prospect.company == "Globex Corp"
        assert prospect.role == "VP Sales"
        assert prospect.tenure == "2 years"

    def test_explicit_fields_win(self, standard_engine, make_profile):
        prospect = standard_engine.build_prospect(make_profile(
            headline="VP Sales at Globex Corp",
            title="Chief Revenue Officer",
            current_company="Globex",
        ))
        assert prospect.company == "Globex"
        assert prospect.role == "Chief Revenue Officer"

    def test_role_category_follows_tier(self, standard_engine, ceo_profile):
        prospect = standard_engine.build_prospect(ceo_profile)
        assert prospect.icp_score.value_tier == ValueTier.HIGH_VALUE
        assert prospect.role_category == "Exec Sponsor"

    def test_headline_helpers(self):
        assert extract_company_from_headline("Founder of Brightpath | Speaker") == "Brightpath"
        assert extract_company_from_headline("") == "Unknown"
        assert extract_role_from_headline("Director") == "Director"
        assert extract_role_from_headline("Gardener") == "Unknown"

    @pytest.mark.parametrize("months,expected", [
        (None, "Unknown"),
        (5, "5 months"),
        (12, "1 year"),
        (40, "3 years"),
    ])
    def test_describe_tenure(self, months, expected):
        assert describe_tenure(months) == expected
