"""Tests for insight classification, grouping and ranking."""

import pytest

from commentinsight.core.config import AnalysisConfig
from commentinsight.core.insights import (
    classify_comment,
    detect_insights,
    filter_insights,
    relate_insights,
    sort_insights,
)
from commentinsight.core.keywords import extract_keywords
from commentinsight.core.models import (
    Insight,
    InsightFilter,
    InsightType,
    KeywordCount,
    RelationType,
    SentimentLabel,
)
from commentinsight.core.pipeline import annotate_comment

from conftest import make_comment

NATO = [
    "alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf", "hotel",
    "india", "juliet", "kilo", "lima", "mike", "november", "oscar", "papa",
    "quebec", "romeo", "sierra", "tango", "uniform", "victor", "whiskey",
    "xray", "yankee",
]


def _annotate(comments, config=None):
    config = config or AnalysisConfig()
    return [annotate_comment(c, config) for c in comments]


def _run(bodies, config=None):
    config = config or AnalysisConfig()
    comments = [make_comment(f"c{i}", body) for i, body in enumerate(bodies, 1)]
    keywords = extract_keywords(comments, config)
    return detect_insights(_annotate(comments, config), keywords, config)


class TestClassifyComment:
    """Test per-comment classification priority."""

    def test_pain_point_needs_indicator_and_negative_sentiment(self):
        assert classify_comment("The app keeps crashing, this bug is terrible") == InsightType.PAIN_POINT

    def test_pain_indicator_with_positive_sentiment_is_not_pain(self):
        assert classify_comment("No problem, it works great and is reliable") is None

    def test_feature_request(self):
        assert classify_comment("Would be nice to have dark mode") == InsightType.FEATURE_REQUEST

    def test_feature_request_beats_question(self):
        assert classify_comment("Could you add an export option?") == InsightType.FEATURE_REQUEST

    def test_pain_point_beats_feature_request(self):
        assert classify_comment("I wish it would not crash, this bug is awful") == InsightType.PAIN_POINT

    def test_question(self):
        assert classify_comment("How do I configure the proxy?") == InsightType.QUESTION

    def test_praise(self):
        assert classify_comment("This tool is amazing and helpful") == InsightType.PRAISE

    def test_mild_positive_is_not_praise(self):
        # great vs slow -> score 0.0
        assert classify_comment("great tool but slow") is None
        # good, good vs slow -> score 1/3, positive but below the praise bar
        assert classify_comment("good and good but slow") is None

    def test_plain_comment(self):
        assert classify_comment("I updated yesterday") is None


class TestDetectInsights:
    """Test grouping, support floor and ranking."""

    def test_single_pain_point_is_suppressed(self):
        insights = _run([
            "The export bug is terrible",
            "Meeting notes from yesterday",
        ])
        assert not [i for i in insights if i.type == InsightType.PAIN_POINT]

    def test_two_pain_points_on_same_keyword(self):
        insights = _run([
            "The export bug is terrible",
            "Another export bug, awful",
            "Meeting notes from yesterday",
        ])
        assert len(insights) == 1
        insight = insights[0]
        assert insight.type == InsightType.PAIN_POINT
        assert insight.keyword == "bug"  # ties with "export" break alphabetically
        assert insight.title == "用户痛点: bug"
        assert insight.description == "发现 2 条评论提到相关问题或困难"
        assert insight.count == 2
        assert insight.confidence == pytest.approx(0.2)
        assert insight.related_comments == ("c1", "c2")
        assert insight.id == "insight_1"

    def test_confidence_saturates_and_examples_capped(self):
        insights = _run(["Crash on startup is awful"] * 12)
        assert len(insights) == 1
        insight = insights[0]
        assert insight.count == 12
        assert insight.confidence == 1.0
        assert insight.related_comments == ("c1", "c2", "c3", "c4", "c5")

    def test_general_group_without_keyword(self):
        comments = [make_comment(f"c{i}", "Would be nice to have dark mode") for i in range(3)]
        insights = detect_insights(_annotate(comments), [], AnalysisConfig())
        assert len(insights) == 1
        assert insights[0].keyword is None
        assert insights[0].title == "功能需求"
        assert insights[0].description == "有 3 位用户请求此功能"

    def test_first_keyword_in_list_order_wins(self):
        comments = [make_comment(f"c{i}", "How do I configure alpha with bravo?") for i in range(2)]
        keywords = [
            KeywordCount("bravo", 2, SentimentLabel.NEUTRAL),
            KeywordCount("alpha", 2, SentimentLabel.NEUTRAL),
        ]
        insights = detect_insights(_annotate(comments), keywords, AnalysisConfig())
        assert [i.keyword for i in insights] == ["bravo"]
        assert insights[0].title == "常见问题: bravo"

    def test_disabled(self):
        comments = [make_comment(f"c{i}", "This bug is terrible") for i in range(5)]
        config = AnalysisConfig(enable_insight_detection=False)
        keywords = extract_keywords(comments, config)
        assert detect_insights(_annotate(comments, config), keywords, config) == []

    def test_ranked_by_confidence(self):
        bodies = (
            ["How do I configure alpha?"] * 2
            + ["How do I configure bravo?"] * 5
            + ["How do I configure charlie?"] * 3
        )
        comments = [make_comment(f"c{i}", body) for i, body in enumerate(bodies)]
        keywords = [KeywordCount(w, 1, SentimentLabel.NEUTRAL) for w in ("alpha", "bravo", "charlie")]
        insights = detect_insights(_annotate(comments), keywords, AnalysisConfig())

        assert [i.keyword for i in insights] == ["bravo", "charlie", "alpha"]
        assert [i.id for i in insights] == ["insight_2", "insight_3", "insight_1"]
        assert [i.confidence for i in insights] == pytest.approx([0.5, 0.3, 0.2])

    def test_capped_at_twenty(self):
        bodies = []
        for word in NATO:
            bodies += [f"How do I configure {word}?"] * 2
        comments = [make_comment(f"c{i}", body) for i, body in enumerate(bodies)]
        keywords = [KeywordCount(w, 2, SentimentLabel.NEUTRAL) for w in NATO]

        insights = detect_insights(_annotate(comments), keywords, AnalysisConfig())
        assert len(insights) == 20
        # equal confidence keeps discovery order
        assert [i.keyword for i in insights] == NATO[:20]
        assert all(i.count >= 2 for i in insights)


def _insight(insight_id, insight_type, keyword, confidence, count=2):
    return Insight(
        id=insight_id,
        type=insight_type,
        title=insight_id,
        description="",
        confidence=confidence,
        related_comments=(),
        keyword=keyword,
        count=count,
    )


class TestRelateInsights:
    """Test the insight graph heuristic."""

    def test_relations(self):
        a = _insight("a", InsightType.PAIN_POINT, "bug", 0.2)
        b = _insight("b", InsightType.PAIN_POINT, "bug", 0.3)
        c = _insight("c", InsightType.PRAISE, "ui", 0.9)
        d = _insight("d", InsightType.QUESTION, "bug", 0.25)

        relations = relate_insights([a, b, c, d])
        pairs = [(r.source, r.target, r.type) for r in relations]
        assert pairs == [
            ("a", "b", RelationType.SIMILAR),
            ("a", "d", RelationType.RELATED),
            ("b", "d", RelationType.RELATED),
        ]
        assert relations[0].strength == 1.0
        assert relations[1].strength == pytest.approx(0.7)

    def test_opposite(self):
        pain = _insight("p", InsightType.PAIN_POINT, "sync", 0.4)
        praise = _insight("q", InsightType.PRAISE, "sync", 0.5)
        relations = relate_insights([pain, praise])
        assert len(relations) == 1
        assert relations[0].type == RelationType.OPPOSITE
        assert relations[0].strength == pytest.approx(1.0)

    def test_opposite_alone_is_too_weak(self):
        pain = _insight("p", InsightType.PAIN_POINT, "sync", 0.1)
        praise = _insight("q", InsightType.PRAISE, "ui", 0.9)
        assert relate_insights([pain, praise]) == []

    def test_empty(self):
        assert relate_insights([]) == []


class TestFilterAndSort:
    """Test insight filtering and sorting."""

    def setup_method(self):
        self.insights = [
            _insight("a", InsightType.PAIN_POINT, "bug", 0.2, count=2),
            _insight("b", InsightType.PRAISE, "ui", 0.9, count=9),
            _insight("c", InsightType.QUESTION, None, 0.5, count=5),
        ]

    def test_filter_by_type(self):
        result = filter_insights(self.insights, InsightFilter(types=(InsightType.PRAISE, InsightType.QUESTION)))
        assert [i.id for i in result] == ["b", "c"]

    def test_filter_by_confidence_range(self):
        result = filter_insights(self.insights, InsightFilter(min_confidence=0.3, max_confidence=0.6))
        assert [i.id for i in result] == ["c"]

    def test_filter_by_keyword(self):
        result = filter_insights(self.insights, InsightFilter(keywords=("bug",)))
        assert [i.id for i in result] == ["a"]

    def test_empty_filter_keeps_everything(self):
        assert filter_insights(self.insights, InsightFilter()) == self.insights

    def test_sort(self):
        assert [i.id for i in sort_insights(self.insights)] == ["b", "c", "a"]
        assert [i.id for i in sort_insights(self.insights, by="count", descending=False)] == ["a", "c", "b"]

    def test_sort_rejects_unknown_field(self):
        with pytest.raises(ValueError):
            sort_insights(self.insights, by="title")
