"""Configuration management for CommentInsight."""

from dataclasses import dataclass
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

from .constants import AnalysisConstants, WorkerConstants
from .errors import ConfigurationError


class Settings(BaseSettings):
    """Application settings."""

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Analysis defaults
    max_comments: int = Field(AnalysisConstants.DEFAULT_MAX_COMMENTS, description="Comments analyzed per batch")
    min_keyword_length: int = Field(AnalysisConstants.DEFAULT_MIN_KEYWORD_LENGTH, description="Shortest keyword kept")
    top_keywords_count: int = Field(AnalysisConstants.DEFAULT_TOP_KEYWORDS_COUNT, description="Keywords returned")
    sentiment_threshold: float = Field(AnalysisConstants.DEFAULT_SENTIMENT_THRESHOLD, description="Reserved sentiment threshold")
    enable_insight_detection: bool = Field(True, description="Run insight detection")

    # Worker settings
    worker_timeout: float = Field(WorkerConstants.DEFAULT_TIMEOUT, description="Seconds allowed for one analysis")
    max_retries: int = Field(WorkerConstants.DEFAULT_MAX_RETRIES, description="Retries after a worker failure")
    retry_delay: float = Field(1.0, description="Base retry delay in seconds")
    retry_backoff: float = Field(2.0, description="Retry backoff multiplier")

    model_config = SettingsConfigDict(
        env_prefix="COMMENTINSIGHT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Global settings instance
settings = Settings()


@dataclass(frozen=True)
class AnalysisConfig:
    """Per-call analysis options.

    ``sentiment_threshold`` is validated and carried through but does not
    change the fixed sentiment cutoffs (see ``AnalysisConstants.SENTIMENT_CUTOFF``).
    """
    max_comments: int = AnalysisConstants.DEFAULT_MAX_COMMENTS
    min_keyword_length: int = AnalysisConstants.DEFAULT_MIN_KEYWORD_LENGTH
    top_keywords_count: int = AnalysisConstants.DEFAULT_TOP_KEYWORDS_COUNT
    sentiment_threshold: float = AnalysisConstants.DEFAULT_SENTIMENT_THRESHOLD
    enable_insight_detection: bool = True

    @classmethod
    def from_settings(cls, source: Optional[Settings] = None, **overrides) -> "AnalysisConfig":
        """Build a config from settings, letting explicit keyword arguments win."""
        source = source or settings
        values = {
            "max_comments": source.max_comments,
            "min_keyword_length": source.min_keyword_length,
            "top_keywords_count": source.top_keywords_count,
            "sentiment_threshold": source.sentiment_threshold,
            "enable_insight_detection": source.enable_insight_detection,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def validate(self) -> "AnalysisConfig":
        """Raise ConfigurationError if any field is out of range. Returns self."""
        for name in ("max_comments", "min_keyword_length", "top_keywords_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")

        if self.max_comments < 0:
            raise ConfigurationError(f"max_comments must be >= 0, got {self.max_comments}")
        if self.min_keyword_length < 1:
            raise ConfigurationError(f"min_keyword_length must be >= 1, got {self.min_keyword_length}")
        if self.top_keywords_count < 0:
            raise ConfigurationError(f"top_keywords_count must be >= 0, got {self.top_keywords_count}")

        if isinstance(self.sentiment_threshold, bool) or not isinstance(self.sentiment_threshold, (int, float)):
            raise ConfigurationError(f"sentiment_threshold must be a number, got {self.sentiment_threshold!r}")
        if not 0.0 <= self.sentiment_threshold <= 1.0:
            raise ConfigurationError(f"sentiment_threshold must be within [0, 1], got {self.sentiment_threshold}")

        if not isinstance(self.enable_insight_detection, bool):
            raise ConfigurationError(
                f"enable_insight_detection must be a bool, got {self.enable_insight_detection!r}"
            )
        return self
