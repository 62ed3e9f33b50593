"""Frequency-ranked keyword extraction."""

import logging
from collections import Counter
from typing import List, Sequence

from .config import AnalysisConfig
from .models import Comment, KeywordCount
from .sentiment import word_sentiment
from .text import tokenize, remove_stop_words

logger = logging.getLogger(__name__)


def extract_keywords(comments: Sequence[Comment], config: AnalysisConfig) -> List[KeywordCount]:
    """Count filtered tokens across all comment bodies and return the top N.

    Sorted by count descending; ties are broken alphabetically so the list is
    reproducible. Each word's sentiment comes straight from the lexicons.
    """
    counts = Counter()
    for comment in comments:
        counts.update(remove_stop_words(tokenize(comment.body), config.min_keyword_length))

    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    keywords = [
        KeywordCount(word=word, count=count, sentiment=word_sentiment(word))
        for word, count in ranked[:config.top_keywords_count]
    ]

    logger.debug(f"Extracted {len(keywords)} keywords from {len(counts)} distinct terms")
    return keywords
