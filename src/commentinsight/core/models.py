"""Data models for CommentInsight."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Dict, Any

from .errors import MalformedCommentError

__all__ = [
    "SentimentLabel",
    "InsightType",
    "RelationType",
    "AnalysisStage",
    "Comment",
    "AnnotatedComment",
    "SentimentScore",
    "KeywordCount",
    "SentimentResult",
    "Insight",
    "InsightRelation",
    "InsightFilter",
    "ProgressEvent",
    "AnalysisResult",
]


class SentimentLabel(str, Enum):
    """Polarity of a comment or keyword."""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class InsightType(str, Enum):
    """Category of a detected insight."""
    PAIN_POINT = "pain_point"
    FEATURE_REQUEST = "feature_request"
    PRAISE = "praise"
    QUESTION = "question"


class RelationType(str, Enum):
    """How two insights relate in the insight graph."""
    SIMILAR = "similar"
    OPPOSITE = "opposite"
    RELATED = "related"


class AnalysisStage(str, Enum):
    """Pipeline milestones, in execution order."""
    NORMALIZE = "normalize"
    KEYWORDS = "keywords"
    SENTIMENT = "sentiment"
    INSIGHTS = "insights"


@dataclass(frozen=True)
class Comment:
    """A single comment as delivered by the retrieval layer."""
    id: str
    body: str
    author: str
    score: int
    created_at: float
    parent_id: str

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Comment":
        """Build a comment from a raw record. Reddit's ``created_utc`` is accepted."""
        if not isinstance(raw, dict):
            raise MalformedCommentError(f"Comment record must be a dict, got {type(raw).__name__}")
        if raw.get("id") is None or "body" not in raw:
            raise MalformedCommentError(f"Comment record is missing 'id' or 'body': {sorted(raw)}")
        if not isinstance(raw["body"], str):
            raise MalformedCommentError(f"Comment {raw['id']} has a non-string body")

        created_at = raw.get("created_at", raw.get("created_utc", 0))
        try:
            score = int(raw.get("score", 0) or 0)
            created_at = float(created_at or 0)
        except (TypeError, ValueError) as e:
            raise MalformedCommentError(f"Comment {raw['id']} has a non-numeric score or timestamp: {e}") from e

        return cls(
            id=str(raw["id"]),
            body=raw["body"],
            author=str(raw.get("author", "")),
            score=score,
            created_at=created_at,
            parent_id=str(raw.get("parent_id", "")),
        )


@dataclass(frozen=True)
class AnnotatedComment(Comment):
    """A comment with its sentiment and up to five filtered keywords."""
    sentiment: SentimentLabel = SentimentLabel.NEUTRAL
    sentiment_score: float = 0.0
    keywords: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SentimentScore:
    """Result of scoring one piece of text."""
    sentiment: SentimentLabel
    score: float


@dataclass(frozen=True)
class KeywordCount:
    """A frequent term across the batch."""
    word: str
    count: int
    sentiment: SentimentLabel


@dataclass(frozen=True)
class SentimentResult:
    """Sentiment distribution over the analyzed comments."""
    positive: int = 0
    negative: int = 0
    neutral: int = 0
    positive_percentage: int = 0
    negative_percentage: int = 0
    neutral_percentage: int = 0

    @property
    def total(self) -> int:
        return self.positive + self.negative + self.neutral


@dataclass(frozen=True)
class Insight:
    """An evidence-backed finding derived from a group of comments."""
    id: str
    type: InsightType
    title: str
    description: str
    confidence: float
    related_comments: Tuple[str, ...]
    keyword: Optional[str]
    count: int


@dataclass(frozen=True)
class InsightRelation:
    """Heuristic link between two insights, used for graph views."""
    source: str
    target: str
    type: RelationType
    strength: float


@dataclass(frozen=True)
class InsightFilter:
    """Criteria for narrowing an insight list. Unset fields match everything."""
    types: Optional[Tuple[InsightType, ...]] = None
    min_confidence: Optional[float] = None
    max_confidence: Optional[float] = None
    keywords: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class ProgressEvent:
    """Emitted once when a pipeline stage completes."""
    stage: AnalysisStage
    completed: int
    total: int
    message: str

    @property
    def percent(self) -> int:
        return round(self.completed / self.total * 100) if self.total else 100


@dataclass(frozen=True)
class AnalysisResult:
    """Terminal output of one analyze call."""
    keywords: Tuple[KeywordCount, ...] = ()
    sentiment: SentimentResult = field(default_factory=SentimentResult)
    insights: Tuple[Insight, ...] = ()
    comments: Tuple[AnnotatedComment, ...] = ()

    @classmethod
    def empty(cls) -> "AnalysisResult":
        """Result for a batch with no comments."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.comments

