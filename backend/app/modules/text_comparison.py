# app/modules/text_comparison.py
import logging
from typing import List, Set

from pydantic import BaseModel, ConfigDict

from app.modules.text_metrics import (
    TextMetrics,
    compute_metrics,
    normalize_word,
    split_words,
)

logger = logging.getLogger(__name__)

DEFAULT_PRIMARY = (
    "Testing requires setting expectations and measuring real outcomes. "
    "Paste your text here to explore quick insights."
)
DEFAULT_SECONDARY = (
    "Testing is about defining expectations and validating reality. "
    "Drop an alternative cut here to compare."
)


class ComparisonMetrics(BaseModel):
    """Pairwise comparison of a primary (baseline) and secondary sample."""

    model_config = ConfigDict(frozen=True)

    word_delta: int = 0
    character_delta: int = 0
    similarity: float = 0.0


def overlap_tokens(raw: str) -> List[str]:
    """
    Tokenize a raw sample for overlap scoring.
    Separate from the metrics tally: lowercased, whitespace split,
    normalized, empty tokens dropped.
    """
    if not raw:
        return []
    tokens = (normalize_word(t) for t in split_words(raw.lower()))
    return [t for t in tokens if t]


def shared_tokens(primary_words: List[str], secondary_words: List[str]) -> Set[str]:
    primary_set = set(primary_words)
    return {w for w in secondary_words if w in primary_set}


def overlap_coefficient(shared: int, total_words: int) -> float:
    """
    Dice-style overlap: 2 * |A & B| / (|A| + |B|).
    The workbench labels this "Jaccard Similarity", but it is not
    |A & B| / |A | B|.
    """
    return (shared * 2) / max(1, total_words)


def compare_metrics(
    primary: str,
    secondary: str,
    primary_metrics: TextMetrics,
    secondary_metrics: TextMetrics,
) -> ComparisonMetrics:
    """
    Builds the comparison from metrics already computed for both samples.
    The raw texts are only used for the overlap tokenization pass.
    """
    total_words = primary_metrics.words + secondary_metrics.words

    shared = shared_tokens(overlap_tokens(primary), overlap_tokens(secondary))
    similarity = overlap_coefficient(len(shared), total_words)
    logger.debug("comparison: %d shared tokens over %d words", len(shared), total_words)

    return ComparisonMetrics(
        word_delta=secondary_metrics.words - primary_metrics.words,
        character_delta=secondary_metrics.characters - primary_metrics.characters,
        similarity=similarity,
    )


def compute_comparison(primary: str, secondary: str, **metrics_kwargs) -> ComparisonMetrics:
    """
    Compares two samples:
      - word_delta: secondary words - primary words
      - character_delta: secondary characters - primary characters
      - similarity: overlap of distinct normalized tokens
    Extra keyword arguments go to compute_metrics for both samples.
    Never raises; two empty samples score 0.
    """
    return compare_metrics(
        primary,
        secondary,
        compute_metrics(primary, **metrics_kwargs),
        compute_metrics(secondary, **metrics_kwargs),
    )
