import pytest

from app.modules.text_comparison import ComparisonMetrics
from app.modules.text_metrics import compute_metrics
from app.utils.formatters import (
    delta_tone,
    format_average,
    format_delta,
    format_minutes,
    format_percent,
    render_comparison,
    render_metrics,
    to_fixed,
)


@pytest.mark.parametrize(
    "minutes, expected",
    [
        (0, "under 1 min"),
        (0.5, "30 sec"),
        (2.25, "2.3 min"),
        (0.005, "1 sec"),
        (0.0001, "1 sec"),
        (1 / 200, "1 sec"),
        (0.99, "59 sec"),
        (1, "1.0 min"),
        (1.5, "1.5 min"),
    ],
)
def test_format_minutes(minutes, expected):
    assert format_minutes(minutes) == expected


def test_to_fixed_rounds_half_up():
    assert to_fixed(2.25) == "2.3"
    assert to_fixed(0.05) == "0.1"
    assert to_fixed(0) == "0.0"
    assert to_fixed(3.14159, 2) == "3.14"


def test_format_average():
    assert format_average(4.25) == "4.3"
    assert format_average(0) == "0.0"


def test_format_delta_sign():
    assert format_delta(3) == "+3"
    assert format_delta(0) == "+0"
    assert format_delta(-4) == "-4"


def test_format_percent():
    assert format_percent(0.5) == "50.0%"
    assert format_percent(1) == "100.0%"
    assert format_percent(10 / 31) == "32.3%"


def test_delta_tone():
    assert delta_tone(2) == "positive"
    assert delta_tone(-1) == "negative"
    assert delta_tone(0) == ""


def test_render_metrics_card():
    card = render_metrics(compute_metrics("Hello world. Hello again!"))
    assert card["values"] == {
        "characters": "25",
        "words": "4",
        "sentences": "2",
        "paragraphs": "1",
        "average_word_length": "5.5",
        "reading_time": "1 sec",
    }
    assert card["labels"]["average_word_length"] == "Average Word Length"
    assert card["repeated_words"] == ["hello"]


def test_render_comparison_card():
    card = render_comparison(
        ComparisonMetrics(word_delta=-2, character_delta=7, similarity=0.25)
    )
    assert card["values"] == {
        "word_delta": "-2",
        "character_delta": "+7",
        "similarity": "25.0%",
    }
    assert card["tones"] == {"word_delta": "negative", "character_delta": "positive"}
    assert card["labels"]["similarity"] == "Jaccard Similarity"


def test_to_fixed_handles_values_beyond_default_precision():
    assert to_fixed(2.0 ** 100) == "1267650600228229401496703205376.0"
    assert format_minutes(1e27).endswith(".0 min")
