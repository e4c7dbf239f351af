"""Financing engine - validates a request and assembles the full quote"""

from talktotoyota_finance.domain.models import Alternative, AlternativeType, FinanceRequest, FinanceResult
from talktotoyota_finance.domain.exceptions import (
    CreditScoreOutOfRangeError,
    FinancingExceedsPriceError,
    InvalidLoanTermError,
    InvalidVehiclePriceError,
    NegativeDownPaymentError,
)
from talktotoyota_finance.domain.credit import is_valid_credit_score, resolve_apr
from talktotoyota_finance.domain.amortization import calculate_amount_financed, calculate_monthly_payment
from talktotoyota_finance.domain.alternatives import generate_alternatives
from talktotoyota_finance.domain.recommendation import synthesize_recommendation
from talktotoyota_finance.utils.currency import round_currency


def validate_request(request: FinanceRequest) -> None:
    """Reject out-of-domain inputs before any calculation runs"""
    if request.vehicle_price <= 0:
        raise InvalidVehiclePriceError("Vehicle price must be greater than 0")
    if not is_valid_credit_score(request.credit_score):
        raise CreditScoreOutOfRangeError("Credit score must be between 300 and 850")
    if request.down_payment < 0:
        raise NegativeDownPaymentError("Down payment cannot be negative")
    if request.loan_term_months <= 0:
        raise InvalidLoanTermError("Loan term must be greater than 0")


def calculate_financing(request: FinanceRequest) -> FinanceResult:
    """
    Main entry point: price a loan and propose alternatives.

    Flow:
    1. Validate inputs
    2. Resolve APR from the credit tier
    3. Compute amount financed (rejects if nothing is left to finance)
    4. Amortize at the requested term
    5. Build the current selection, then the generated alternatives
    6. Summarize everything into a recommendation

    Raises:
        FinanceValidationError: subclass naming the rejected input
    """
    validate_request(request)

    apr = resolve_apr(request.credit_score)

    amount_financed = calculate_amount_financed(
        request.vehicle_price,
        request.down_payment,
        request.trade_in_value,
        request.sales_tax_rate,
    )
    if amount_financed <= 0:
        raise FinancingExceedsPriceError("Down payment and trade-in exceed vehicle price")

    monthly_payment = calculate_monthly_payment(amount_financed, apr, request.loan_term_months)
    total_cost = monthly_payment * request.loan_term_months
    total_interest = total_cost - amount_financed

    current_selection = Alternative(
        description=f"{request.loan_term_months}-month plan (current selection)",
        monthly_payment=round_currency(monthly_payment),
        loan_term_months=request.loan_term_months,
        down_payment=request.down_payment,
        savings=0,
        total_cost_change=0,
        amount_financed=round_currency(amount_financed),
        total_cost=round_currency(total_cost),
        apr=apr,
        type=AlternativeType.BASE,
    )

    alternatives = [current_selection] + generate_alternatives(request, monthly_payment, apr)

    return FinanceResult(
        monthly_payment=round_currency(monthly_payment),
        apr=apr,
        total_interest=round_currency(total_interest),
        total_cost=round_currency(total_cost),
        amount_financed=round_currency(amount_financed),
        recommendation=synthesize_recommendation(request.credit_score, alternatives),
        alternatives=alternatives,
    )
