"""Financing details collected over a sales conversation"""

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Optional, Tuple
from talktotoyota_finance.domain.models import FinanceRequest, FinanceResult
from talktotoyota_finance.domain.exceptions import IncompleteFinancingStateError
from talktotoyota_finance.domain.financing import calculate_financing

DEFAULT_TRADE_IN_VALUE = 0.0
DEFAULT_SALES_TAX_PERCENT = 8.0

# Chat payloads arrive in camelCase
_FIELD_ALIASES = {
    "creditScore": "credit_score",
    "downPayment": "down_payment",
    "loanTermMonths": "loan_term_months",
    "tradeInValue": "trade_in_value",
    "salesTaxRate": "sales_tax_rate",
    "isComplete": "is_complete",
}


@dataclass(frozen=True)
class FinancingState:
    """
    Progress of the financing checklist.

    The caller owns this value and passes it back on every turn. Sales tax
    is kept as a whole-number percent (8 == 8%) because that is how
    customers state it.
    """

    credit_score: Optional[int] = None
    down_payment: Optional[float] = None
    loan_term_months: Optional[int] = None
    trade_in_value: Optional[float] = None
    sales_tax_rate: Optional[float] = None
    is_complete: bool = False

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "FinancingState":
        return cls().merge(data or {})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def merge(self, extracted: Mapping[str, Any]) -> "FinancingState":
        """Overlay newly extracted fields; nulls and unknown keys are ignored"""
        updates = {}
        for key, value in extracted.items():
            name = _FIELD_ALIASES.get(key, key)
            if name in _FIELD_ALIASES.values() and value is not None:
                updates[name] = value
        return replace(self, **updates)

    def has_required_fields(self) -> bool:
        """Credit score, down payment (zero counts) and loan term are known"""
        return bool(self.credit_score and self.down_payment is not None and self.loan_term_months)

    def with_defaults(self) -> "FinancingState":
        """Fill optional trade-in and sales tax once the required fields are in"""
        if not self.has_required_fields():
            return self
        return replace(
            self,
            trade_in_value=DEFAULT_TRADE_IN_VALUE if self.trade_in_value is None else self.trade_in_value,
            sales_tax_rate=DEFAULT_SALES_TAX_PERCENT if self.sales_tax_rate is None else self.sales_tax_rate,
        )

    def to_request(self, vehicle_price: float) -> FinanceRequest:
        """Build an engine request, converting the tax percent to a fraction"""
        if not self.has_required_fields():
            raise IncompleteFinancingStateError(
                "Credit score, down payment and loan term are required before calculating financing"
            )
        return FinanceRequest(
            vehicle_price=vehicle_price,
            credit_score=int(self.credit_score),
            down_payment=float(self.down_payment),
            loan_term_months=int(self.loan_term_months),
            trade_in_value=float(DEFAULT_TRADE_IN_VALUE if self.trade_in_value is None else self.trade_in_value),
            sales_tax_rate=float(DEFAULT_SALES_TAX_PERCENT if self.sales_tax_rate is None else self.sales_tax_rate) / 100,
        )


def quote_from_state(state: FinancingState, vehicle_price: float) -> Tuple[FinancingState, FinanceResult]:
    """
    Run the financing engine for a completed checklist.

    Returns the defaulted state marked complete, with the quote.

    Raises:
        IncompleteFinancingStateError: required fields still missing
        FinanceValidationError: engine rejected the collected values
    """
    state = state.with_defaults()
    result = calculate_financing(state.to_request(vehicle_price))
    return replace(state, is_complete=True), result
