"""Analysis orchestrator: runs every stage over one batch of comments."""

import logging
import threading
from typing import Callable, Optional, Sequence

from .config import AnalysisConfig
from .constants import AnalysisConstants
from .errors import AnalysisCancelledError, MalformedCommentError
from .insights import detect_insights
from .keywords import extract_keywords
from .models import (
    AnalysisResult,
    AnalysisStage,
    AnnotatedComment,
    Comment,
    ProgressEvent,
)
from .sentiment import score_sentiment, summarize_sentiment
from .text import tokenize, remove_stop_words

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[ProgressEvent], None]

_STAGE_MESSAGES = {
    AnalysisStage.NORMALIZE: "Comments normalized and scored",
    AnalysisStage.KEYWORDS: "Keyword extraction complete",
    AnalysisStage.SENTIMENT: "Sentiment distribution complete",
    AnalysisStage.INSIGHTS: "Insight detection complete",
}
_STAGES = list(AnalysisStage)


def _emit(on_progress: Optional[ProgressCallback], stage: AnalysisStage) -> None:
    if on_progress is None:
        return
    on_progress(ProgressEvent(
        stage=stage,
        completed=_STAGES.index(stage) + 1,
        total=len(_STAGES),
        message=_STAGE_MESSAGES[stage],
    ))


def _check_comments(comments: Sequence[Comment]) -> None:
    for comment in comments:
        if not isinstance(comment, Comment):
            raise MalformedCommentError(f"Expected Comment, got {type(comment).__name__}")
        if not isinstance(comment.body, str):
            raise MalformedCommentError(f"Comment {comment.id} has a non-string body")


def annotate_comment(comment: Comment, config: AnalysisConfig) -> AnnotatedComment:
    """Attach sentiment and the first few filtered tokens to a comment."""
    sentiment = score_sentiment(comment.body)
    keywords = remove_stop_words(tokenize(comment.body), config.min_keyword_length)
    return AnnotatedComment(
        id=comment.id,
        body=comment.body,
        author=comment.author,
        score=comment.score,
        created_at=comment.created_at,
        parent_id=comment.parent_id,
        sentiment=sentiment.sentiment,
        sentiment_score=sentiment.score,
        keywords=tuple(keywords[:AnalysisConstants.MAX_COMMENT_KEYWORDS]),
    )


def analyze(
    comments: Sequence[Comment],
    config: Optional[AnalysisConfig] = None,
    on_progress: Optional[ProgressCallback] = None,
    cancel_event: Optional[threading.Event] = None,
) -> AnalysisResult:
    """Analyze a batch of comments.

    Stages run strictly in order: per-comment annotation, keyword extraction,
    sentiment distribution, insight detection. ``on_progress`` receives one
    event as each stage completes. If ``cancel_event`` is set before insight
    detection starts, ``AnalysisCancelledError`` is raised and nothing is
    returned.

    Raises:
        ConfigurationError: config is out of range.
        MalformedCommentError: an input record is not a well-formed Comment.
    """
    config = (config or AnalysisConfig()).validate()
    if comments is None:
        raise MalformedCommentError("comments must be a sequence, got None")
    _check_comments(comments)

    if not comments:
        logger.info("No comments to analyze")
        for stage in _STAGES:
            _emit(on_progress, stage)
        return AnalysisResult.empty()

    limited = list(comments[:config.max_comments])
    logger.info(f"Analyzing {len(limited)} of {len(comments)} comments")

    annotated = tuple(annotate_comment(c, config) for c in limited)
    _emit(on_progress, AnalysisStage.NORMALIZE)

    keywords = extract_keywords(limited, config)
    _emit(on_progress, AnalysisStage.KEYWORDS)

    sentiment = summarize_sentiment(annotated)
    _emit(on_progress, AnalysisStage.SENTIMENT)

    if cancel_event is not None and cancel_event.is_set():
        logger.info("Analysis cancelled before insight detection")
        raise AnalysisCancelledError("Analysis cancelled before insight detection")

    insights = detect_insights(annotated, keywords, config)
    _emit(on_progress, AnalysisStage.INSIGHTS)

    logger.info(f"Analysis complete: {len(keywords)} keywords, {len(insights)} insights")
    return AnalysisResult(
        keywords=tuple(keywords),
        sentiment=sentiment,
        insights=tuple(insights),
        comments=annotated,
    )
