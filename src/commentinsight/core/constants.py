"""Constants and configuration values for CommentInsight."""

# Analysis Constants
class AnalysisConstants:
    """Constants related to the comment analysis pipeline."""

    # Default AnalysisConfig values
    DEFAULT_MAX_COMMENTS = 500
    DEFAULT_MIN_KEYWORD_LENGTH = 3
    DEFAULT_TOP_KEYWORDS_COUNT = 30
    DEFAULT_SENTIMENT_THRESHOLD = 0.3

    # Sentiment scoring
    SENTIMENT_CUTOFF = 0.2  # |score| above this is positive/negative
    PRAISE_MIN_SCORE = 0.5  # score needed for a comment to count as praise

    # Per-comment annotation
    MAX_COMMENT_KEYWORDS = 5  # filtered tokens kept on each annotated comment

    # Insight detection
    MIN_INSIGHT_SUPPORT = 2  # groups smaller than this are dropped
    MAX_EXAMPLE_COMMENTS = 5  # comment ids stored per insight
    CONFIDENCE_SATURATION = 10  # supporting comments for confidence 1.0
    MAX_INSIGHTS = 20  # insights kept after ranking
    GENERAL_GROUP = "general"  # group key for comments with no keyword match

    # Insight relations
    SAME_TYPE_WEIGHT = 0.5
    OPPOSITE_TYPE_WEIGHT = 0.3
    SAME_KEYWORD_WEIGHT = 0.5
    CLOSE_CONFIDENCE_WEIGHT = 0.2
    CLOSE_CONFIDENCE_DELTA = 0.2
    MIN_RELATION_STRENGTH = 0.3

# Insight Text Constants
class InsightTextConstants:
    """Localized titles and description templates, keyed by insight type value."""

    TITLES = {
        "pain_point": "用户痛点",
        "feature_request": "功能需求",
        "praise": "用户赞美",
        "question": "常见问题",
    }

    DESCRIPTIONS = {
        "pain_point": "发现 {count} 条评论提到相关问题或困难",
        "feature_request": "有 {count} 位用户请求此功能",
        "praise": "{count} 位用户对此表示赞赏",
        "question": "{count} 位用户询问相关问题",
    }

# Worker Constants
class WorkerConstants:
    """Constants for running analysis off the caller's thread."""

    DEFAULT_TIMEOUT = 30.0  # seconds for one analyze call
    DEFAULT_MAX_RETRIES = 2  # extra attempts after the first
    POLL_INTERVAL = 0.05  # seconds between cancellation checks
    RETRY_MAX_WAIT = 10.0  # cap on backoff between attempts

# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    EXPORT_VERSION = "1.0.0"
    KEYWORDS_CSV = "keywords.csv"
    COMMENTS_CSV = "comments.csv"
    INSIGHTS_CSV = "insights.csv"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
