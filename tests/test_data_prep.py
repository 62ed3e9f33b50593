"""Tests for loading comments and exporting results."""

import json

import pandas as pd
import pytest

from commentinsight.core.config import AnalysisConfig
from commentinsight.core.errors import MalformedCommentError
from commentinsight.core.pipeline import analyze
from commentinsight.utils.data_prep import (
    export_to_csv,
    export_to_json,
    load_comments,
    prepare_export,
)


@pytest.fixture
def result(sample_comments):
    return analyze(sample_comments, AnalysisConfig())


def test_prepare_export_is_json_ready(result):
    data = prepare_export(result)
    json.dumps(data)

    assert data["summary"] == {"total_comments": 8, "keyword_count": len(result.keywords), "insight_count": 3}
    assert data["metadata"]["export_timestamp"] is None
    assert data["insights"][0]["type"] == "pain_point"
    assert data["insights"][0]["related_comments"] == ["c1", "c2"]
    assert data["comments"][0]["sentiment"] == "negative"
    assert data["sentiment"]["positive_percentage"] == 50


def test_export_to_json(tmp_path, result):
    out = tmp_path / "result.json"
    export_to_json(prepare_export(result), str(out))

    saved = json.loads(out.read_text(encoding="utf-8"))
    assert saved["metadata"]["export_timestamp"]
    assert saved["insights"][0]["title"] == "用户痛点: bug"


def test_export_to_csv(tmp_path, result):
    paths = export_to_csv(result, str(tmp_path / "csv"))
    assert [p.name for p in paths] == ["keywords.csv", "comments.csv", "insights.csv"]

    keywords = pd.read_csv(paths[0])
    assert list(keywords.columns) == ["word", "count", "sentiment"]
    assert keywords.iloc[0]["word"] == "bug"

    comments = pd.read_csv(paths[1])
    assert len(comments) == 8
    assert comments.iloc[0]["keywords"] == "export bug terrible keeps failing"

    insights = pd.read_csv(paths[2])
    assert list(insights["type"]) == ["pain_point", "feature_request", "praise"]
    assert insights.iloc[0]["related_comments"] == "c1 c2"


def test_export_empty_result_to_csv(tmp_path):
    paths = export_to_csv(analyze([]), str(tmp_path))
    assert all(p.exists() for p in paths)


def test_load_comments_list(tmp_path):
    path = tmp_path / "comments.json"
    path.write_text(json.dumps([
        {"id": "a", "body": "Great tool", "author": "x", "score": 3, "created_utc": 1700000000},
        {"id": 7, "body": "Slow sync"},
    ]), encoding="utf-8")

    comments = load_comments(str(path))
    assert [c.id for c in comments] == ["a", "7"]
    assert comments[0].created_at == 1700000000.0
    assert comments[1].author == ""
    assert comments[1].score == 0


def test_load_comments_wrapped(tmp_path):
    path = tmp_path / "comments.json"
    path.write_text(json.dumps({"comments": [{"id": "a", "body": "hi"}]}), encoding="utf-8")
    assert len(load_comments(str(path))) == 1


@pytest.mark.parametrize("payload", [
    {"items": []},
    "just text",
    [{"id": "a"}],
    [{"id": "a", "body": 5}],
    ["not a record"],
    [{"id": None, "body": "hi"}],
    [{"id": "a", "body": "hi", "score": "lots"}],
    [{"id": "a", "body": "hi", "created_utc": "yesterday"}],
    [{"id": "a", "body": "hi", "score": [1]}],
])
def test_load_comments_rejects_malformed(tmp_path, payload):
    path = tmp_path / "comments.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(MalformedCommentError):
        load_comments(str(path))
