"""
Display formatting for workbench records.
Produces the strings rendered on the metric and comparison cards.
"""

from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Dict

from app.modules.text_metrics import TextMetrics
from app.modules.text_comparison import ComparisonMetrics


UNDER_ONE_MINUTE = "under 1 min"

METRIC_LABELS = {
    "characters": "Characters",
    "words": "Words",
    "sentences": "Sentences",
    "paragraphs": "Paragraphs",
    "average_word_length": "Average Word Length",
    "reading_time": "Reading Time",
}

COMPARISON_LABELS = {
    "word_delta": "Word Delta",
    "character_delta": "Character Delta",
    "similarity": "Jaccard Similarity",
}


def to_fixed(value: float, digits: int = 1) -> str:
    """
    Fixed-point string with half-up rounding on the exact binary value.

    Args:
        value: Number to format.
        digits: Decimal places to keep.

    Returns:
        The formatted string, e.g. to_fixed(2.25) -> "2.3".
    """
    return str(_quantize(value, digits))


def _quantize(value: float, digits: int) -> Decimal:
    exact = Decimal(value)
    # precision must cover every integer digit plus the kept decimals
    context = Context(prec=max(28, exact.adjusted() + digits + 2))
    quantum = Decimal(1).scaleb(-digits)
    return exact.quantize(quantum, rounding=ROUND_HALF_UP, context=context)


def round_half_up(value: float) -> int:
    return int(_quantize(value, 0))


def format_minutes(minutes: float) -> str:
    """Human reading time: "under 1 min", "N sec" below a minute, else "N.N min"."""
    if minutes == 0:
        return UNDER_ONE_MINUTE

    if minutes < 1:
        return f"{max(1, round_half_up(minutes * 60))} sec"

    return f"{to_fixed(minutes)} min"


def format_average(value: float) -> str:
    return to_fixed(value)


def format_delta(value: int) -> str:
    """Signed delta, zero shown as "+0"."""
    return f"+{value}" if value >= 0 else str(value)


def format_percent(ratio: float) -> str:
    return f"{to_fixed(ratio * 100)}%"


def delta_tone(value: int) -> str:
    if value > 0:
        return "positive"
    if value < 0:
        return "negative"
    return ""


def render_metrics(metrics: TextMetrics) -> Dict:
    """Labelled display values for a metrics card."""
    return {
        "values": {
            "characters": str(metrics.characters),
            "words": str(metrics.words),
            "sentences": str(metrics.sentences),
            "paragraphs": str(metrics.paragraphs),
            "average_word_length": format_average(metrics.average_word_length),
            "reading_time": format_minutes(metrics.reading_time_minutes),
        },
        "labels": METRIC_LABELS,
        "repeated_words": list(metrics.repeated_words),
    }


def render_comparison(comparison: ComparisonMetrics) -> Dict:
    """Labelled display values for the comparison card."""
    return {
        "values": {
            "word_delta": format_delta(comparison.word_delta),
            "character_delta": format_delta(comparison.character_delta),
            "similarity": format_percent(comparison.similarity),
        },
        "tones": {
            "word_delta": delta_tone(comparison.word_delta),
            "character_delta": delta_tone(comparison.character_delta),
        },
        "labels": COMPARISON_LABELS,
    }
