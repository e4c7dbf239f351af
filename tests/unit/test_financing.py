"""Unit tests for the financing engine entry point"""

import pytest
from dataclasses import replace
from talktotoyota_finance.domain.models import AlternativeType, FinanceRequest
from talktotoyota_finance.domain.financing import calculate_financing
from talktotoyota_finance.domain.amortization import calculate_monthly_payment
from talktotoyota_finance.utils.currency import round_currency
from talktotoyota_finance.domain.exceptions import (
    CreditScoreOutOfRangeError,
    FinanceValidationError,
    FinancingExceedsPriceError,
    InvalidLoanTermError,
    InvalidVehiclePriceError,
    NegativeDownPaymentError,
)


def test_calculate_financing_typical_quote(typical_request):
    """Test $30k at 720 credit, $3k down, 60 months"""
    result = calculate_financing(typical_request)

    payment = calculate_monthly_payment(29960, 6.2, 60)

    assert result.apr == 6.2
    assert result.amount_financed == 29960
    assert result.monthly_payment == round_currency(payment)
    assert 580 <= result.monthly_payment <= 585
    assert result.total_cost == round_currency(payment * 60)
    assert abs(result.total_interest - (payment * 60 - 29960)) <= 1
    assert result.total_interest > 0

    assert [alt.type for alt in result.alternatives] == [
        AlternativeType.BASE,
        AlternativeType.LONGER_TERM,
        AlternativeType.HIGHER_DOWN,
        AlternativeType.SHORTER_TERM,
    ]


def test_current_selection_comes_first(typical_request):
    result = calculate_financing(typical_request)
    base = result.alternatives[0]

    assert base.description == "60-month plan (current selection)"
    assert base.monthly_payment == result.monthly_payment
    assert base.loan_term_months == 60
    assert base.down_payment == 3000
    assert base.savings == 0
    assert base.total_cost_change == 0
    assert base.amount_financed == result.amount_financed
    assert base.total_cost == result.total_cost
    assert base.apr == result.apr


def test_recommendation_lists_every_alternative(typical_request):
    result = calculate_financing(typical_request)
    lines = result.recommendation.split("\n")

    assert lines[0] == "Good credit score! You're getting a competitive rate. Here are your options:"
    assert lines[2] == f"1. 60-month plan (current selection): ${result.monthly_payment}/month"
    assert lines[3].startswith("2. 72-month plan: $")
    assert lines[4].startswith("3. 60-month plan with $6,000 down (+$3,000): $")
    assert lines[5].startswith("4. 48-month plan (pay off faster): $")


def test_calculate_financing_is_deterministic(typical_request):
    assert calculate_financing(typical_request) == calculate_financing(typical_request)


def test_trade_in_reduces_amount_financed(typical_request):
    with_trade = calculate_financing(replace(typical_request, trade_in_value=5000))
    # (30000 - 3000 - 5000) * 1.08 + 800
    assert with_trade.amount_financed == 24560


def test_default_tax_and_trade_in():
    request = FinanceRequest(vehicle_price=30000, credit_score=720, down_payment=3000, loan_term_months=60)
    assert calculate_financing(request).amount_financed == 29960


@pytest.mark.parametrize("score,apr", [(750, 5.0), (749, 6.2), (300, 17.0), (850, 5.0)])
def test_credit_score_boundaries(typical_request, score, apr):
    assert calculate_financing(replace(typical_request, credit_score=score)).apr == apr


@pytest.mark.parametrize("score", [299, 851, 0])
def test_credit_score_out_of_range(typical_request, score):
    with pytest.raises(CreditScoreOutOfRangeError, match="between 300 and 850"):
        calculate_financing(replace(typical_request, credit_score=score))


@pytest.mark.parametrize(
    "changes,error",
    [
        ({"vehicle_price": 0}, InvalidVehiclePriceError),
        ({"vehicle_price": -100}, InvalidVehiclePriceError),
        ({"down_payment": -1}, NegativeDownPaymentError),
        ({"loan_term_months": 0}, InvalidLoanTermError),
        ({"loan_term_months": -12}, InvalidLoanTermError),
    ],
)
def test_invalid_inputs_rejected(typical_request, changes, error):
    with pytest.raises(error):
        calculate_financing(replace(typical_request, **changes))


def test_validation_order_price_first(typical_request):
    """Test the first failing rule is the one reported"""
    with pytest.raises(InvalidVehiclePriceError, match="Vehicle price must be greater than 0"):
        calculate_financing(replace(typical_request, vehicle_price=0, credit_score=100, down_payment=-5))


def test_down_payment_and_trade_in_exceed_price():
    """Test nothing left to finance even after tax and fees"""
    request = FinanceRequest(
        vehicle_price=10000,
        credit_score=700,
        down_payment=9000,
        loan_term_months=60,
        trade_in_value=5000,
    )
    with pytest.raises(FinancingExceedsPriceError, match="Down payment and trade-in exceed vehicle price"):
        calculate_financing(request)


def test_fees_keep_small_overpayment_financeable():
    """Test a slightly negative base is still financed once fees are added"""
    request = FinanceRequest(
        vehicle_price=10000,
        credit_score=700,
        down_payment=10000,
        loan_term_months=36,
        trade_in_value=500,
    )
    # -500 * 1.08 + 800
    assert calculate_financing(request).amount_financed == 260


def test_validation_errors_share_base_class(typical_request):
    with pytest.raises(FinanceValidationError):
        calculate_financing(replace(typical_request, loan_term_months=0))


def test_seventy_two_month_quote_has_no_longer_term(typical_request):
    result = calculate_financing(replace(typical_request, loan_term_months=72))
    types = [alt.type for alt in result.alternatives]
    assert AlternativeType.LONGER_TERM not in types
    assert types[0] == AlternativeType.BASE
