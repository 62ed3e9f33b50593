"""Lexicon-based sentiment scoring."""

import logging
import math
from typing import Iterable

from .constants import AnalysisConstants
from .lexicon import POSITIVE_WORDS, NEGATIVE_WORDS
from .models import SentimentLabel, SentimentScore, SentimentResult, AnnotatedComment
from .text import tokenize

logger = logging.getLogger(__name__)


def label_for_score(score: float, cutoff: float = AnalysisConstants.SENTIMENT_CUTOFF) -> SentimentLabel:
    """Map a score in [-1, 1] to a sentiment label."""
    if score > cutoff:
        return SentimentLabel.POSITIVE
    if score < -cutoff:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL


def word_sentiment(word: str) -> SentimentLabel:
    """Sentiment of a single normalized word by lexicon membership."""
    if word in POSITIVE_WORDS:
        return SentimentLabel.POSITIVE
    if word in NEGATIVE_WORDS:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL


def score_sentiment(text: str) -> SentimentScore:
    """Score text as (positive hits - negative hits) / (all hits).

    Every lexicon hit counts once; there is no negation or intensifier handling.
    """
    tokens = tokenize(text)
    pos = sum(1 for t in tokens if t in POSITIVE_WORDS)
    neg = sum(1 for t in tokens if t in NEGATIVE_WORDS)

    if pos + neg == 0:
        return SentimentScore(SentimentLabel.NEUTRAL, 0.0)

    score = (pos - neg) / (pos + neg)
    return SentimentScore(label_for_score(score), score)


def _percentage(part: int, total: int) -> int:
    # Round half up so 12.5% reads as 13%.
    return int(math.floor(part * 100 / total + 0.5))


def summarize_sentiment(comments: Iterable[AnnotatedComment]) -> SentimentResult:
    """Count sentiment labels and convert to integer percentages.

    Percentages are rounded independently and may not add up to exactly 100.
    """
    counts = {label: 0 for label in SentimentLabel}
    for comment in comments:
        counts[comment.sentiment] += 1

    total = sum(counts.values())
    if total == 0:
        return SentimentResult()

    result = SentimentResult(
        positive=counts[SentimentLabel.POSITIVE],
        negative=counts[SentimentLabel.NEGATIVE],
        neutral=counts[SentimentLabel.NEUTRAL],
        positive_percentage=_percentage(counts[SentimentLabel.POSITIVE], total),
        negative_percentage=_percentage(counts[SentimentLabel.NEGATIVE], total),
        neutral_percentage=_percentage(counts[SentimentLabel.NEUTRAL], total),
    )
    logger.debug(f"Sentiment distribution: {result.positive} pos / {result.negative} neg / {result.neutral} neu")
    return result
