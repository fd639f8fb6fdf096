"""Application configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    
    # Scoring
    DEFAULT_SCORING_PROFILE: str = "standard"  # standard | enhanced
    
    # Batch Processing Configuration
    BATCH_MAX_CONCURRENCY: int = 3  # hard-capped at 3 by the orchestrator
    
    # Source lookups
    SOURCE_LOOKUP_TIMEOUT_SECONDS: float = 30.0
    WEB_RESEARCH_MAX_ARTICLES: int = 20
    
    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
