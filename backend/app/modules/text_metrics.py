# app/modules/text_metrics.py
import re
import logging
from collections import Counter
from typing import List

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

READING_WORDS_PER_MINUTE = 200
REPEATED_WORD_LIMIT = 5

# the browser regex \s set, not str.isspace()
_WS = r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"
_WHITESPACE = re.compile(_WS + "+")
_EDGE_WHITESPACE = re.compile(r"\A" + _WS + "+|" + _WS + r"+\Z")
_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_PARAGRAPH_SPLIT = re.compile(r"\n" + _WS + r"*\n")
# everything except ascii letters, digits, apostrophe and hyphen
_NON_WORD_CHARS = re.compile(r"[^a-z0-9'-]")


class TextMetrics(BaseModel):
    """Descriptive metrics for a single text sample."""

    model_config = ConfigDict(frozen=True)

    characters: int = 0
    words: int = 0
    sentences: int = 0
    paragraphs: int = 0
    average_word_length: float = 0.0
    reading_time_minutes: float = 0.0
    repeated_words: List[str] = []


def trim(raw: str) -> str:
    return _EDGE_WHITESPACE.sub("", raw or "")


def split_words(text: str) -> List[str]:
    """Split on whitespace runs, dropping empty edge pieces."""
    return [w for w in _WHITESPACE.split(text or "") if w]


def normalize_word(word: str) -> str:
    """Lowercase a raw word and strip everything but [a-z0-9'-]."""
    return _NON_WORD_CHARS.sub("", word.lower())


def count_words(words: List[str]) -> Counter:
    """
    Tally normalized words in first-seen order.
    Words that normalize to an empty string are skipped.
    """
    counts = Counter()
    for word in words:
        key = normalize_word(word)
        if not key:
            continue
        counts[key] += 1
    return counts


def top_repeated(counts: Counter, limit: int = REPEATED_WORD_LIMIT) -> List[str]:
    # most_common keeps first-encountered order for equal counts
    repeated = [word for word, count in counts.most_common() if count > 1]
    return repeated[:limit]


def compute_metrics(
    raw: str,
    words_per_minute: int = READING_WORDS_PER_MINUTE,
    repeated_limit: int = REPEATED_WORD_LIMIT,
) -> TextMetrics:
    """
    Computes the metrics record for one sample:
      - characters (trimmed length)
      - words / sentences / paragraphs
      - average_word_length
      - reading_time_minutes
      - repeated_words (top normalized words seen more than once)
    Never raises; empty or blank input yields a zeroed record.
    """
    text = trim(raw)
    if not text:
        return TextMetrics()

    words = split_words(text)
    sentences = [s for s in _SENTENCE_SPLIT.split(text) if s]
    paragraphs = [p for p in _PARAGRAPH_SPLIT.split(text) if p]

    counts = count_words(words)
    average = sum(len(w) for w in words) / len(words)

    metrics = TextMetrics(
        characters=len(text),
        words=len(words),
        sentences=len(sentences),
        paragraphs=len(paragraphs),
        average_word_length=average,
        reading_time_minutes=len(words) / max(1, words_per_minute),
        repeated_words=top_repeated(counts, repeated_limit),
    )
    logger.debug("metrics: %d words, %d sentences", metrics.words, metrics.sentences)
    return metrics
