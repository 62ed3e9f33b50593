"""Shared fixtures for CommentInsight tests."""

import pytest

from commentinsight.core.models import Comment


def make_comment(comment_id, body, author="user", score=1, created_at=1700000000.0, parent_id="t3_post"):
    return Comment(
        id=comment_id,
        body=body,
        author=author,
        score=score,
        created_at=created_at,
        parent_id=parent_id,
    )


@pytest.fixture
def sample_comments():
    """A small mixed batch: pain points, a feature request, praise and a question."""
    bodies = [
        "The export bug is terrible, it keeps failing",
        "Another export bug, awful experience",
        "Would be nice to have dark mode",
        "Would be nice to have dark mode on mobile too",
        "This editor is amazing and helpful",
        "I love this editor, great work",
        "How do I change the theme?",
        "Meeting notes from yesterday",
    ]
    return [make_comment(f"c{i}", body) for i, body in enumerate(bodies, 1)]
