"""Data preparation for export."""

import datetime
import json
from dataclasses import asdict
from enum import Enum
from pathlib import Path
from typing import Dict, Any, List

import pandas as pd

from ..core.constants import FileConstants
from ..core.errors import MalformedCommentError
from ..core.models import AnalysisResult, Comment


def load_comments(filename: str) -> List[Comment]:
    """Load a JSON list of comment records, or a ``{"comments": [...]}`` object."""
    with open(filename, 'r', encoding='utf-8') as f:
        raw = json.load(f)

    if isinstance(raw, dict):
        raw = raw.get("comments")
    if not isinstance(raw, list):
        raise MalformedCommentError(f"{filename} does not contain a list of comments")
    return [Comment.from_dict(record) for record in raw]


def _plain(value: Any) -> Any:
    """Convert enums and tuples inside asdict() output to JSON-friendly values."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def prepare_export(result: AnalysisResult) -> Dict[str, Any]:
    """Prepare an analysis result for JSON export."""
    data = _plain(asdict(result))
    data["summary"] = {
        "total_comments": len(result.comments),
        "keyword_count": len(result.keywords),
        "insight_count": len(result.insights),
    }
    data["metadata"] = {
        "export_timestamp": None,  # Will be set by export_to_json
        "version": FileConstants.EXPORT_VERSION,
    }
    return data


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    data.setdefault("metadata", {})["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def export_to_csv(result: AnalysisResult, directory: str) -> List[Path]:
    """Write keywords, comments and insights as CSV files. Returns the paths written."""
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    data = _plain(asdict(result))

    keywords = pd.DataFrame(data["keywords"], columns=["word", "count", "sentiment"])

    comments = pd.DataFrame(data["comments"], columns=[
        "id", "author", "score", "created_at", "parent_id",
        "sentiment", "sentiment_score", "keywords", "body",
    ])
    comments["keywords"] = comments["keywords"].apply(lambda words: " ".join(words))

    insights = pd.DataFrame(data["insights"], columns=[
        "id", "type", "title", "description", "confidence", "count", "keyword", "related_comments",
    ])
    insights["related_comments"] = insights["related_comments"].apply(lambda ids: " ".join(ids))

    written = []
    for frame, name in (
        (keywords, FileConstants.KEYWORDS_CSV),
        (comments, FileConstants.COMMENTS_CSV),
        (insights, FileConstants.INSIGHTS_CSV),
    ):
        path = out_dir / name
        frame.to_csv(path, index=False, encoding="utf-8")
        written.append(path)
    return written
