"""Input records: profiles, content items and web articles."""

from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from enum import Enum


class ContentType(str, Enum):
    POST = "post"
    ARTICLE = "article"


class ProfileInput(BaseModel):
    """Read-only view of a LinkedIn connection."""
    person_id: str
    name: str = ""
    headline: str = ""
    title: str = ""
    current_company: str = ""
    about: str = ""
    username: Optional[str] = None
    profile_url: Optional[str] = None
    profile_picture_url: Optional[str] = None
    follower_count: int = Field(default=0, ge=0)
    connection_count: int = Field(default=0, ge=0)
    tenure_months: Optional[int] = Field(default=None, ge=0)
    is_creator: bool = False
    is_influencer: bool = False

    model_config = ConfigDict(frozen=True)

    @field_validator('name', 'headline', 'title', 'current_company', 'about', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v

    @property
    def full_text(self) -> str:
        """Headline and name, lowercased."""
        return f"{self.headline} {self.name}".lower()

    @property
    def linkedin_url(self) -> str:
        if self.profile_url:
            return self.profile_url
        if self.username:
            return f"https://linkedin.com/in/{self.username}"
        return ""


class ContentItem(BaseModel):
    """A LinkedIn post or long-form article."""
    item_id: str
    text: str = ""
    content_type: ContentType = ContentType.POST
    title: str = ""
    url: Optional[str] = None
    published_at: Optional[str] = None
    reactions: int = Field(default=0, ge=0)
    comments: int = Field(default=0, ge=0)
    shares: int = Field(default=0, ge=0)
    is_document: bool = False

    model_config = ConfigDict(frozen=True)

    @field_validator('text', 'title', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v

    @property
    def engagement(self) -> int:
        return self.reactions + self.comments + self.shares


class WebArticle(BaseModel):
    """Pre-fetched web search hit about a person."""
    title: str = ""
    url: str = ""
    content: str = ""
    published_date: Optional[str] = None
    source: str = ""
    relevance_score: int = Field(default=0, ge=0, le=100)

    model_config = ConfigDict(frozen=True)
