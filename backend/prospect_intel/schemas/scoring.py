"""Signals and ICP score results."""

from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from enum import Enum


class SignalType(str, Enum):
    EXPERIENCE = "experience"
    RESULTS = "results"
    METHODOLOGY = "methodology"
    CASE_STUDY = "case_study"
    SPEAKING = "speaking"
    TEACHING = "teaching"


class SignalSource(str, Enum):
    CONTENT = "content"
    TITLE = "title"
    METADATA = "metadata"


class ICPCategory(str, Enum):
    HOT_LEAD = "Hot Lead"
    WARM_LEAD = "Warm Lead"
    COLD_LEAD = "Cold Lead"
    NOT_ICP = "Not ICP"


class ValueTier(str, Enum):
    """Prospect-list labels for the same four tiers."""
    HIGH_VALUE = "High Value"
    MEDIUM_VALUE = "Medium Value"
    LOW_VALUE = "Low Value"
    NOT_QUALIFIED = "Not Qualified"


class DataQuality(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Signal(BaseModel):
    """Authority evidence found in free text."""
    type: SignalType
    text: str
    confidence: int = Field(..., ge=0, le=100)
    context: str = ""
    label: Optional[str] = None
    source: SignalSource = SignalSource.CONTENT

    @property
    def display_name(self) -> str:
        return self.label or self.type.value


class ICPScore(BaseModel):
    """Single-source ICP score for one profile."""
    total_score: int = Field(..., ge=0, le=100)
    category: ICPCategory
    breakdown: Dict[str, int]
    tags: List[str] = Field(default_factory=list)
    reasoning: List[str] = Field(default_factory=list)
    scoring_profile: str = "standard"

    # Filled by confidence-aware profiles only
    confidence: Optional[int] = Field(default=None, ge=0, le=100)
    data_quality: Optional[DataQuality] = None
    signals: List[str] = Field(default_factory=list)
    red_flags: List[str] = Field(default_factory=list)

    @property
    def value_tier(self) -> ValueTier:
        return VALUE_TIERS[self.category]


class ProspectProfile(BaseModel):
    """Normalized prospect record built from a profile and its ICP score."""
    person_id: str
    name: str
    headline: str
    company: str
    role: str
    role_category: str
    tenure: str
    linkedin_url: str
    icp_score: ICPScore


VALUE_TIERS = {
    ICPCategory.HOT_LEAD: ValueTier.HIGH_VALUE,
    ICPCategory.WARM_LEAD: ValueTier.MEDIUM_VALUE,
    ICPCategory.COLD_LEAD: ValueTier.LOW_VALUE,
    ICPCategory.NOT_ICP: ValueTier.NOT_QUALIFIED,
}
