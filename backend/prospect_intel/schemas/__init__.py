"""Pydantic schemas for profiles, scores and intelligence results."""

from prospect_intel.schemas.profile import (
    ContentType,
    ProfileInput,
    ContentItem,
    WebArticle,
)
from prospect_intel.schemas.scoring import (
    SignalType,
    SignalSource,
    ICPCategory,
    ValueTier,
    DataQuality,
    Signal,
    ICPScore,
    ProspectProfile,
    VALUE_TIERS,
)
from prospect_intel.schemas.intelligence import (
    PostContentType,
    ExpertiseLevel,
    VerificationStatus,
    WebResearchResult,
    PostAnalysis,
    ArticleAnalysis,
    ExpertiseScores,
    AuthorityAssessment,
    ActivityPatterns,
    ProfileAnalysis,
    LinkedInAnalysis,
    UnifiedScores,
    ExpertiseVerification,
    IntelligenceAssessment,
    IntelligenceProfile,
    BatchError,
    BatchSummary,
    BatchResult,
)
