"""GET /api/finance/apr-estimate/{creditScore} - Quick APR lookup by credit score"""

import math
from fastapi import APIRouter, HTTPException

from talktotoyota_finance.api.v1.schemas import AprEstimateResponse
from talktotoyota_finance.domain.credit import is_valid_credit_score, resolve_credit_tier
from talktotoyota_finance.infrastructure.observability.metrics import apr_lookup_counter, validation_failure_counter

router = APIRouter()


@router.get("/apr-estimate/{credit_score}", response_model=AprEstimateResponse)
def get_apr_estimate(credit_score: str):
    """
    Estimate APR and tier from a credit score alone.

    Uses the same tier table as the full financing calculation.
    """
    try:
        score = float(credit_score)
    except ValueError:
        score = math.nan

    if math.isnan(score):
        validation_failure_counter.labels(reason="credit_score").inc()
        raise HTTPException(status_code=400, detail="Credit score must be a number")

    if not is_valid_credit_score(score):
        validation_failure_counter.labels(reason="credit_score").inc()
        raise HTTPException(status_code=400, detail="Credit score must be between 300 and 850")

    tier = resolve_credit_tier(score)
    apr_lookup_counter.labels(tier=tier.label).inc()

    return AprEstimateResponse(
        credit_score=int(score) if score.is_integer() else score,
        apr=tier.apr,
        tier=tier.label,
    )
