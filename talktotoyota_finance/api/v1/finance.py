"""POST /api/finance/calculate - Financing quote endpoint"""

import time
import logging
from fastapi import APIRouter, HTTPException, Request

from talktotoyota_finance.api.v1.schemas import FinanceCalculateRequest, FinanceResultSchema
from talktotoyota_finance.api.dependencies import get_request_id
from talktotoyota_finance.config import settings
from talktotoyota_finance.domain.models import FinanceRequest
from talktotoyota_finance.domain.financing import calculate_financing
from talktotoyota_finance.domain.credit import resolve_credit_tier
from talktotoyota_finance.domain.exceptions import FinanceValidationError
from talktotoyota_finance.infrastructure.observability.metrics import record_quote, validation_failure_counter
from talktotoyota_finance.infrastructure.observability.logging import log_quote

MISSING_FIELDS_MESSAGE = "Missing required fields: vehiclePrice, creditScore, downPayment, loanTermMonths"

router = APIRouter()


@router.post("/calculate", response_model=FinanceResultSchema, response_model_exclude_none=True)
def calculate(request_body: FinanceCalculateRequest, request: Request):
    """
    Price a vehicle loan and propose alternative structures.

    Flow:
    1. Check required fields (downPayment may be 0, the others may not)
    2. Apply trade-in and sales tax defaults
    3. Run the financing engine
    4. Record metrics and logs
    5. Return the quote with the current selection first
    """
    start_time = time.time()
    request_id = get_request_id(request)

    if (
        not request_body.vehicle_price
        or not request_body.credit_score
        or request_body.down_payment is None
        or not request_body.loan_term_months
    ):
        validation_failure_counter.labels(reason="missing_fields").inc()
        raise HTTPException(status_code=400, detail=MISSING_FIELDS_MESSAGE)

    finance_request = FinanceRequest(
        vehicle_price=request_body.vehicle_price,
        credit_score=request_body.credit_score,
        down_payment=request_body.down_payment,
        loan_term_months=request_body.loan_term_months,
        trade_in_value=request_body.trade_in_value if request_body.trade_in_value is not None else 0.0,
        sales_tax_rate=(
            request_body.sales_tax_rate
            if request_body.sales_tax_rate is not None
            else settings.default_sales_tax_rate
        ),
    )

    try:
        result = calculate_financing(finance_request)

    except FinanceValidationError as e:
        validation_failure_counter.labels(reason=e.reason).inc()
        logging.warning(f"Finance validation failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        logging.error(f"Finance calculation error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Failed to calculate financing")

    tier = resolve_credit_tier(finance_request.credit_score)
    duration_ms = (time.time() - start_time) * 1000
    record_quote(tier.label, result.alternatives)
    log_quote(
        request_id,
        tier.label,
        result.apr,
        finance_request.loan_term_months,
        result.monthly_payment,
        len(result.alternatives),
        duration_ms,
    )

    return FinanceResultSchema.model_validate(result)
