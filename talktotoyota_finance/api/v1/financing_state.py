"""POST /api/finance/quote-from-state - Quote from conversation-collected financing details"""

import logging
from fastapi import APIRouter, HTTPException, Request

from talktotoyota_finance.api.v1.schemas import (
    FinanceResultSchema,
    FinancingStateSchema,
    QuoteFromStateRequest,
    QuoteFromStateResponse,
)
from talktotoyota_finance.api.dependencies import get_request_id
from talktotoyota_finance.domain.collection import FinancingState, quote_from_state
from talktotoyota_finance.domain.credit import resolve_credit_tier
from talktotoyota_finance.domain.exceptions import FinanceValidationError, IncompleteFinancingStateError
from talktotoyota_finance.infrastructure.observability.metrics import record_quote, validation_failure_counter

router = APIRouter()


@router.post("/quote-from-state", response_model=QuoteFromStateResponse)
def create_quote_from_state(request_body: QuoteFromStateRequest, request: Request):
    """
    Run the financing engine on the checklist a sales conversation built up.

    Returns:
        The updated checklist (defaults applied, marked complete once quoted)
        and the quote, or null results while required fields are missing
    """
    request_id = get_request_id(request)
    state = FinancingState.from_dict(request_body.financing_state.model_dump())

    try:
        state, result = quote_from_state(state, request_body.vehicle_price)

    except IncompleteFinancingStateError as e:
        logging.info(f"Financing checklist incomplete: {e}", extra={"request_id": request_id})
        return QuoteFromStateResponse(
            financing_state=FinancingStateSchema.model_validate(state),
            financing_results=None,
        )

    except FinanceValidationError as e:
        validation_failure_counter.labels(reason=e.reason).inc()
        logging.warning(f"Finance validation failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    record_quote(resolve_credit_tier(state.credit_score).label, result.alternatives)

    return QuoteFromStateResponse(
        financing_state=FinancingStateSchema.model_validate(state),
        financing_results=FinanceResultSchema.model_validate(result),
    )
