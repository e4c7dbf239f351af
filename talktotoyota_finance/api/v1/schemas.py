"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional

from talktotoyota_finance.domain.models import AlternativeType


class CamelModel(BaseModel):
    """Accepts and emits the camelCase keys the web client uses"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class FinanceCalculateRequest(CamelModel):
    """Request body for POST /api/finance/calculate"""

    vehicle_price: Optional[float] = Field(None, description="Cash price before tax and fees")
    credit_score: Optional[int] = Field(None, description="Credit score, 300-850")
    down_payment: Optional[float] = Field(None, description="Cash down payment")
    loan_term_months: Optional[int] = Field(None, description="Loan term in months")
    trade_in_value: Optional[float] = Field(None, description="Trade-in credit, defaults to 0")
    sales_tax_rate: Optional[float] = Field(None, description="Sales tax as a fraction, 0.08 == 8%")


class AlternativeSchema(CamelModel):
    """Single loan structure in a quote"""

    description: str
    monthly_payment: int
    loan_term_months: Optional[int] = None
    down_payment: Optional[float] = None
    savings: int
    total_cost_change: int
    amount_financed: int
    total_cost: int
    apr: float
    type: AlternativeType


class FinanceResultSchema(CamelModel):
    """Response for POST /api/finance/calculate"""

    monthly_payment: int
    apr: float
    total_interest: int
    total_cost: int
    amount_financed: int
    recommendation: str
    alternatives: List[AlternativeSchema]


class AprEstimateResponse(CamelModel):
    """Response for GET /api/finance/apr-estimate/{creditScore}"""

    credit_score: int | float
    apr: float
    tier: str


class FinancingStateSchema(CamelModel):
    """Financing checklist progress, sales tax in whole-number percent"""

    credit_score: Optional[int] = None
    down_payment: Optional[float] = None
    loan_term_months: Optional[int] = None
    trade_in_value: Optional[float] = None
    sales_tax_rate: Optional[float] = None
    is_complete: bool = False


class QuoteFromStateRequest(CamelModel):
    """Request body for POST /api/finance/quote-from-state"""

    vehicle_price: float = Field(..., description="Price of the vehicle under discussion")
    financing_state: FinancingStateSchema = Field(default_factory=FinancingStateSchema)


class QuoteFromStateResponse(CamelModel):
    """Response for POST /api/finance/quote-from-state"""

    financing_state: FinancingStateSchema
    financing_results: Optional[FinanceResultSchema] = None
