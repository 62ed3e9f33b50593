"""Insight detection: classify comments, group them, and rank the groups."""

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .config import AnalysisConfig
from .constants import AnalysisConstants, InsightTextConstants
from .lexicon import (
    PAIN_POINT_PHRASES,
    FEATURE_REQUEST_PHRASES,
    QUESTION_PHRASES,
    contains_phrase,
)
from .models import (
    AnnotatedComment,
    Insight,
    InsightFilter,
    InsightRelation,
    InsightType,
    KeywordCount,
    RelationType,
    SentimentLabel,
)
from .sentiment import score_sentiment
from .text import tokenize

logger = logging.getLogger(__name__)


def classify_comment(text: str) -> Optional[InsightType]:
    """Return the insight type of a comment, or None.

    Checked in priority order, first match wins: pain point (indicator plus
    negative sentiment), feature request, question, praise (strongly positive).
    """
    sentiment = score_sentiment(text)

    if contains_phrase(text, PAIN_POINT_PHRASES) and sentiment.sentiment == SentimentLabel.NEGATIVE:
        return InsightType.PAIN_POINT
    if contains_phrase(text, FEATURE_REQUEST_PHRASES):
        return InsightType.FEATURE_REQUEST
    if contains_phrase(text, QUESTION_PHRASES):
        return InsightType.QUESTION
    if sentiment.sentiment == SentimentLabel.POSITIVE and sentiment.score > AnalysisConstants.PRAISE_MIN_SCORE:
        return InsightType.PRAISE
    return None


@dataclass
class _InsightGroup:
    type: InsightType
    keyword: Optional[str]
    count: int = 0
    comment_ids: List[str] = field(default_factory=list)

    def add(self, comment_id: str) -> None:
        self.count += 1
        if len(self.comment_ids) < AnalysisConstants.MAX_EXAMPLE_COMMENTS:
            self.comment_ids.append(comment_id)


def _matching_keyword(text: str, keywords: Sequence[KeywordCount]) -> Optional[str]:
    tokens = set(tokenize(text))
    for keyword in keywords:
        if keyword.word in tokens:
            return keyword.word
    return None


def _build_insight(insight_id: str, group: _InsightGroup) -> Insight:
    label = InsightTextConstants.TITLES[group.type.value]
    title = f"{label}: {group.keyword}" if group.keyword else label
    description = InsightTextConstants.DESCRIPTIONS[group.type.value].format(count=group.count)
    confidence = min(group.count / AnalysisConstants.CONFIDENCE_SATURATION, 1.0)

    return Insight(
        id=insight_id,
        type=group.type,
        title=title,
        description=description,
        confidence=confidence,
        related_comments=tuple(group.comment_ids),
        keyword=group.keyword,
        count=group.count,
    )


def detect_insights(
    comments: Sequence[AnnotatedComment],
    keywords: Sequence[KeywordCount],
    config: AnalysisConfig,
) -> List[Insight]:
    """Group classified comments by (type, keyword) and turn supported groups into insights."""
    if not config.enable_insight_detection:
        return []

    groups: "OrderedDict[Tuple[InsightType, str], _InsightGroup]" = OrderedDict()
    for comment in comments:
        insight_type = classify_comment(comment.body)
        if insight_type is None:
            continue

        keyword = _matching_keyword(comment.body, keywords)
        key = (insight_type, keyword or AnalysisConstants.GENERAL_GROUP)
        if key not in groups:
            groups[key] = _InsightGroup(type=insight_type, keyword=keyword)
        groups[key].add(comment.id)

    insights = []
    for group in groups.values():
        if group.count < AnalysisConstants.MIN_INSIGHT_SUPPORT:
            continue
        insights.append(_build_insight(f"insight_{len(insights) + 1}", group))

    # sorted() is stable, so equal confidences keep discovery order
    ranked = sorted(insights, key=lambda i: -i.confidence)[:AnalysisConstants.MAX_INSIGHTS]
    logger.debug(f"Detected {len(ranked)} insights from {len(groups)} candidate groups")
    return ranked


def relate_insights(insights: Sequence[Insight]) -> List[InsightRelation]:
    """Link insight pairs with a cheap similarity heuristic for graph views.

    Same type adds 0.5 (similar), pain point vs praise adds 0.3 (opposite),
    a shared keyword adds 0.5 and confidences within 0.2 add 0.2.
    """
    relations = []
    opposite = {InsightType.PAIN_POINT, InsightType.PRAISE}

    for i, first in enumerate(insights):
        for second in insights[i + 1:]:
            similarity = 0.0
            relation_type = RelationType.RELATED

            if first.type == second.type:
                similarity += AnalysisConstants.SAME_TYPE_WEIGHT
                relation_type = RelationType.SIMILAR
            elif {first.type, second.type} == opposite:
                similarity += AnalysisConstants.OPPOSITE_TYPE_WEIGHT
                relation_type = RelationType.OPPOSITE

            if first.keyword and first.keyword == second.keyword:
                similarity += AnalysisConstants.SAME_KEYWORD_WEIGHT

            if abs(first.confidence - second.confidence) < AnalysisConstants.CLOSE_CONFIDENCE_DELTA:
                similarity += AnalysisConstants.CLOSE_CONFIDENCE_WEIGHT

            if similarity > AnalysisConstants.MIN_RELATION_STRENGTH:
                relations.append(InsightRelation(
                    source=first.id,
                    target=second.id,
                    type=relation_type,
                    strength=min(similarity, 1.0),
                ))

    return relations


def filter_insights(insights: Sequence[Insight], insight_filter: InsightFilter) -> List[Insight]:
    """Keep insights matching every criterion set on the filter."""
    def matches(insight: Insight) -> bool:
        if insight_filter.types is not None and insight.type not in insight_filter.types:
            return False
        if insight_filter.min_confidence is not None and insight.confidence < insight_filter.min_confidence:
            return False
        if insight_filter.max_confidence is not None and insight.confidence > insight_filter.max_confidence:
            return False
        if insight_filter.keywords is not None and insight.keyword not in insight_filter.keywords:
            return False
        return True

    return [insight for insight in insights if matches(insight)]


def sort_insights(insights: Sequence[Insight], by: str = "confidence", descending: bool = True) -> List[Insight]:
    """Stable sort on ``confidence`` or ``count``."""
    if by not in ("confidence", "count"):
        raise ValueError(f"Cannot sort insights by {by!r}")
    return sorted(insights, key=lambda insight: getattr(insight, by), reverse=descending)
