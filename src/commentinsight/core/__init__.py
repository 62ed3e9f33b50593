"""Core modules for CommentInsight."""

from .models import *
from .config import settings, AnalysisConfig
from .errors import *
from .text import normalize, tokenize, remove_stop_words
from .sentiment import score_sentiment, summarize_sentiment
from .keywords import extract_keywords
from .insights import classify_comment, detect_insights, relate_insights, filter_insights, sort_insights
from .pipeline import analyze

__all__ = [
    "settings",
    "AnalysisConfig",
    "Comment",
    "AnnotatedComment",
    "KeywordCount",
    "SentimentResult",
    "Insight",
    "AnalysisResult",
    "normalize",
    "tokenize",
    "remove_stop_words",
    "score_sentiment",
    "summarize_sentiment",
    "extract_keywords",
    "classify_comment",
    "detect_insights",
    "relate_insights",
    "filter_insights",
    "sort_insights",
    "analyze",
]
