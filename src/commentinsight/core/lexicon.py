"""Fixed English lexicons used for keyword filtering, sentiment and insight detection.

Word sets are matched against normalized tokens. Phrase sets are matched as
substrings of the raw lower-cased comment text, so they may contain
apostrophes, spaces and punctuation.
"""

STOP_WORDS = frozenset({
    # articles, pronouns, determiners
    "the", "a", "an", "i", "me", "my", "we", "us", "our", "you", "your",
    "he", "him", "his", "she", "her", "it", "its", "they", "them", "their",
    "this", "that", "these", "those", "there", "here", "what", "which", "who",
    "some", "any", "all", "other", "one", "most",
    # auxiliaries
    "be", "is", "am", "are", "was", "were", "been", "being", "have", "has",
    "had", "do", "does", "did", "will", "would", "could", "should", "can",
    "may",
    # prepositions and conjunctions
    "to", "of", "and", "or", "but", "in", "on", "at", "by", "for", "with",
    "from", "as", "into", "over", "about", "after", "up", "out", "than",
    "then", "so", "if", "because", "when", "how", "not", "no",
    # common verbs and adverbs
    "get", "go", "make", "take", "see", "say", "know", "use", "like", "just",
    "now", "also", "even", "only", "back", "very", "really",
    # contractions after normalization
    "im", "ive", "thats", "dont", "youre",
})

POSITIVE_WORDS = frozenset({
    "good", "great", "amazing", "awesome", "excellent", "best", "better",
    "perfect", "wonderful", "fantastic", "brilliant", "helpful", "thanks",
    "appreciate", "nice", "love", "loved", "enjoy", "impressed", "recommend",
    "useful", "easy", "fast", "reliable", "solid", "smooth", "clean", "happy",
    "worth", "fun", "glad",
})

NEGATIVE_WORDS = frozenset({
    "bad", "terrible", "awful", "horrible", "worst", "worse", "hate", "poor",
    "disappointing", "disappointed", "frustrating", "annoying", "useless",
    "broken", "bug", "bugs", "issue", "issues", "problem", "problems",
    "error", "errors", "fail", "failed", "crash", "crashes", "slow",
    "difficult", "confusing", "waste", "sucks", "missing", "stuck",
})

PAIN_POINT_PHRASES = frozenset({
    "problem", "issue", "bug", "error", "fail", "broken", "crash",
    "frustrating", "annoying", "difficult", "impossible", "can't", "cannot",
    "doesn't", "won't", "missing", "stuck",
})

FEATURE_REQUEST_PHRASES = frozenset({
    "feature", "please add", "wish", "hope", "would love", "would be nice",
    "would be great", "suggestion", "request", "could you", "should have",
    "needs", "looking for", "want",
})

QUESTION_PHRASES = frozenset({
    "?", "how do", "how to", "how can", "what is", "why does", "why is",
    "is there", "does anyone", "can someone", "anyone know", "question",
})


def contains_phrase(text: str, phrases: frozenset) -> bool:
    """Return True if the lower-cased text contains any phrase as a substring."""
    lowered = text.lower()
    return any(phrase in lowered for phrase in phrases)
