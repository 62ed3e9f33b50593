"""Basic usage examples for CommentInsight."""

import threading

from commentinsight import AnalysisConfig, AnalysisRunner, analyze
from commentinsight.core.insights import filter_insights, relate_insights
from commentinsight.core.models import Comment, InsightFilter, InsightType

COMMENTS = [
    {"id": "1", "body": "The sync bug is terrible, my notes keep disappearing", "author": "a", "score": 12},
    {"id": "2", "body": "Another sync bug today, awful", "author": "b", "score": 4},
    {"id": "3", "body": "Would be nice to have an offline mode", "author": "c", "score": 9},
    {"id": "4", "body": "Would love an offline mode for flights", "author": "d", "score": 3},
    {"id": "5", "body": "The new editor is amazing and fast", "author": "e", "score": 20},
    {"id": "6", "body": "Love the editor, great update", "author": "f", "score": 8},
    {"id": "7", "body": "How do I export my notes?", "author": "g", "score": 1},
]


def example_direct():
    """Example: analyze a batch on the calling thread."""
    print("🔍 Analyzing comments directly")
    comments = [Comment.from_dict(record) for record in COMMENTS]

    result = analyze(comments, AnalysisConfig(top_keywords_count=10))

    s = result.sentiment
    print(f"📊 Sentiment: {s.positive_percentage}% positive, {s.negative_percentage}% negative, "
          f"{s.neutral_percentage}% neutral")
    print(f"🏷️  Keywords: {', '.join(f'{k.word}({k.count})' for k in result.keywords)}")
    for insight in result.insights:
        print(f"  💡 {insight.title}: {insight.description} (confidence {insight.confidence:.1f})")

    for relation in relate_insights(result.insights):
        print(f"  🔗 {relation.source} -> {relation.target}: {relation.type.value} ({relation.strength:.1f})")

    pain_points = filter_insights(result.insights, InsightFilter(types=(InsightType.PAIN_POINT,)))
    print(f"🚨 {len(pain_points)} pain point group(s)")


def example_worker():
    """Example: analyze on a worker thread with a timeout and progress updates."""
    print("\n🔍 Analyzing comments on a worker")
    comments = [Comment.from_dict(record) for record in COMMENTS]
    cancel = threading.Event()

    runner = AnalysisRunner(timeout=10.0, max_retries=1)
    result = runner.run(
        comments,
        AnalysisConfig(),
        on_progress=lambda event: print(f"  ⏳ {event.percent}% {event.message}"),
        cancel_event=cancel,
    )
    print(f"✅ {len(result.insights)} insight(s) from {len(result.comments)} comments")


if __name__ == "__main__":
    example_direct()
    example_worker()
