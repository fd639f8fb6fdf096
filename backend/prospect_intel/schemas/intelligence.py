"""Source analyses, fused intelligence profiles and batch results."""

from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from datetime import datetime, timezone
from enum import Enum

from prospect_intel.schemas.profile import WebArticle
from prospect_intel.schemas.scoring import Signal, DataQuality


Score = int  # 0-100, clamped


class PostContentType(str, Enum):
    THOUGHT_LEADERSHIP = "thought_leadership"
    PERSONAL = "personal"
    NEWS_SHARE = "news_share"
    OPINION = "opinion"
    HOW_TO = "how_to"
    CASE_STUDY = "case_study"


class ExpertiseLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"


class VerificationStatus(str, Enum):
    VERIFIED = "verified"
    LIKELY = "likely"
    UNVERIFIED = "unverified"


# Web research
class WebResearchResult(BaseModel):
    """Expertise evidence gathered from web articles about a person."""
    person_id: str
    person_name: str = ""
    search_query: str = ""
    articles_found: List[WebArticle] = Field(default_factory=list)
    expertise_signals: List[Signal] = Field(default_factory=list)
    talent_management_score: Score = Field(default=0, ge=0, le=100)
    people_development_score: Score = Field(default=0, ge=0, le=100)
    hr_technology_score: Score = Field(default=0, ge=0, le=100)
    leadership_score: Score = Field(default=0, ge=0, le=100)
    overall_relevance_score: Score = Field(default=0, ge=0, le=100)
    research_quality: DataQuality = DataQuality.LOW
    researched_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# LinkedIn content analysis
class PostAnalysis(BaseModel):
    post_id: str
    content: str
    engagement: int = 0
    published_at: Optional[str] = None
    topic_relevance: Score = 0
    expertise_signals: List[Signal] = Field(default_factory=list)
    content_type: PostContentType = PostContentType.PERSONAL
    original_thinking: bool = False
    practical_value: Score = 0


class ArticleAnalysis(BaseModel):
    article_id: str
    title: str = ""
    content: str = ""
    published_at: Optional[str] = None
    topic_relevance: Score = 0
    authority_signals: List[Signal] = Field(default_factory=list)
    expertise_level: ExpertiseLevel = ExpertiseLevel.BEGINNER
    original_insight: bool = False
    real_examples: List[str] = Field(default_factory=list)
    specific_metrics: List[str] = Field(default_factory=list)
    frameworks_mentioned: List[str] = Field(default_factory=list)
    tools_mentioned: List[str] = Field(default_factory=list)


class ExpertiseScores(BaseModel):
    talent_management: Score = Field(default=0, ge=0, le=100)
    people_development: Score = Field(default=0, ge=0, le=100)
    hr_technology: Score = Field(default=0, ge=0, le=100)
    leadership: Score = Field(default=0, ge=0, le=100)
    overall_expertise: Score = Field(default=0, ge=0, le=100)


class AuthorityAssessment(BaseModel):
    practical_experience: Score = Field(default=0, ge=0, le=100)
    thought_leadership: Score = Field(default=0, ge=0, le=100)
    industry_recognition: Score = Field(default=0, ge=0, le=100)
    content_consistency: Score = Field(default=0, ge=0, le=100)
    overall_authority: Score = Field(default=0, ge=0, le=100)
    confidence_level: Score = Field(default=0, ge=0, le=100)


class ActivityPatterns(BaseModel):
    total_posts: int = 0
    total_articles: int = 0
    original_posts: int = 0
    original_vs_curated: float = 0.0
    average_engagement: float = 0.0
    most_engaged_topics: List[str] = Field(default_factory=list)


class ProfileAnalysis(BaseModel):
    hr_role_progression: Score = 0
    talent_focus_areas: List[str] = Field(default_factory=list)
    years_in_hr: int = 0
    relevant_skills: List[str] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)


class LinkedInAnalysis(BaseModel):
    """Expertise evidence gathered from a person's own LinkedIn content."""
    person_id: str
    person_name: str = ""
    linkedin_url: str = ""
    posts: List[PostAnalysis] = Field(default_factory=list)
    articles: List[ArticleAnalysis] = Field(default_factory=list)
    profile_analysis: ProfileAnalysis = Field(default_factory=ProfileAnalysis)
    activity_patterns: ActivityPatterns = Field(default_factory=ActivityPatterns)
    expertise_scores: ExpertiseScores = Field(default_factory=ExpertiseScores)
    authority_assessment: AuthorityAssessment = Field(default_factory=AuthorityAssessment)
    analyzed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# Fusion
class UnifiedScores(BaseModel):
    talent_management: Score = Field(..., ge=0, le=100)
    people_development: Score = Field(..., ge=0, le=100)
    hr_technology: Score = Field(..., ge=0, le=100)
    leadership: Score = Field(..., ge=0, le=100)
    overall_expertise: Score = Field(..., ge=0, le=100)
    practical_experience: Score = Field(..., ge=0, le=100)
    thought_leadership: Score = Field(..., ge=0, le=100)
    industry_recognition: Score = Field(..., ge=0, le=100)


class ExpertiseVerification(BaseModel):
    claim: str
    web_evidence: List[str] = Field(default_factory=list)
    linkedin_evidence: List[str] = Field(default_factory=list)
    confidence: Score = Field(..., ge=0, le=100)
    verified: bool


class IntelligenceAssessment(BaseModel):
    data_quality: DataQuality
    confidence_level: Score = Field(..., ge=0, le=100)
    expertise_verification: List[ExpertiseVerification] = Field(default_factory=list)
    red_flags: List[str] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    verification_status: VerificationStatus


class IntelligenceProfile(BaseModel):
    """Fused view of one person across web research and LinkedIn content."""
    person_id: str
    person_name: str = ""
    linkedin_url: str = ""
    web_research: WebResearchResult
    linkedin_analysis: LinkedInAnalysis
    unified_scores: UnifiedScores
    intelligence_assessment: IntelligenceAssessment
    researched_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    last_updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    research_duration_ms: int = 0


# Batch
class BatchError(BaseModel):
    person_id: str
    error: str


class BatchSummary(BaseModel):
    high_value_prospects: int = 0
    average_expertise_score: int = 0
    top_expertise_areas: List[str] = Field(default_factory=list)
    data_quality_distribution: Dict[str, int] = Field(
        default_factory=lambda: {"high": 0, "medium": 0, "low": 0}
    )


class BatchResult(BaseModel):
    request_id: str
    total: int
    completed: int = 0
    failed: int = 0
    in_progress: int = 0
    results: List[IntelligenceProfile] = Field(default_factory=list)
    errors: List[BatchError] = Field(default_factory=list)
    summary: BatchSummary = Field(default_factory=BatchSummary)
