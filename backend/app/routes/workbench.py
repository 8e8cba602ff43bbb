"""
Workbench API Route
GET  /api/workbench/defaults — Default primary/secondary samples.
POST /api/workbench/metrics — Metrics for a single sample.
POST /api/workbench/compare — Metrics for both samples plus their comparison.
"""

import logging

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from app.core.config import get_settings
from app.core.rate_limit import limiter
from app.modules.text_metrics import compute_metrics
from app.modules.text_comparison import (
    DEFAULT_PRIMARY,
    DEFAULT_SECONDARY,
    compare_metrics,
)
from app.utils.formatters import render_metrics, render_comparison

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/workbench")

settings = get_settings()


class MetricsRequest(BaseModel):
    text: str = ""


class CompareRequest(BaseModel):
    primary: str = ""
    secondary: str = ""


def _check_length(name: str, text: str):
    if len(text) > settings.max_text_length:
        raise HTTPException(
            status_code=400,
            detail=f"{name} text too long (max {settings.max_text_length} chars)",
        )


def _metrics_for(text: str):
    return compute_metrics(
        text,
        words_per_minute=settings.reading_words_per_minute,
        repeated_limit=settings.repeated_word_limit,
    )


@router.get("/defaults")
async def defaults():
    """Sample texts the workbench starts with."""
    return {"primary": DEFAULT_PRIMARY, "secondary": DEFAULT_SECONDARY}


@router.post("/metrics")
@limiter.limit(settings.rate_limit)
async def metrics_endpoint(request: Request, body: MetricsRequest):
    """Metrics record and rendered card values for one sample."""
    _check_length("Sample", body.text)

    metrics = _metrics_for(body.text)
    logger.info("Metrics computed: words=%d chars=%d", metrics.words, metrics.characters)
    return {
        "metrics": metrics.model_dump(),
        "display": render_metrics(metrics),
    }


@router.post("/compare")
@limiter.limit(settings.rate_limit)
async def compare_endpoint(request: Request, body: CompareRequest):
    """
    Full workbench evaluation: both metrics cards plus the comparison card.
    Each sample is measured once with the configured constants and the
    comparison is built from those same records.
    """
    _check_length("Primary", body.primary)
    _check_length("Secondary", body.secondary)

    primary = _metrics_for(body.primary)
    secondary = _metrics_for(body.secondary)
    comparison = compare_metrics(body.primary, body.secondary, primary, secondary)
    logger.info(
        "Comparison computed: word_delta=%d similarity=%.3f",
        comparison.word_delta,
        comparison.similarity,
    )

    return {
        "primary": {"metrics": primary.model_dump(), "display": render_metrics(primary)},
        "secondary": {"metrics": secondary.model_dump(), "display": render_metrics(secondary)},
        "comparison": {
            "metrics": comparison.model_dump(),
            "display": render_comparison(comparison),
        },
    }
