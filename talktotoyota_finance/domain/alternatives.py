"""Alternative loan structures offered next to the customer's own selection"""

from typing import List, Optional
from talktotoyota_finance.domain.models import Alternative, AlternativeType, FinanceRequest
from talktotoyota_finance.domain.amortization import calculate_amount_financed, calculate_monthly_payment
from talktotoyota_finance.utils.currency import format_amount, round_currency

MAX_TERM_MONTHS = 72
MIN_TERM_MONTHS = 36
MAX_ALTERNATIVES = 3

# Down payment targets as a share of vehicle price
DOWN_PAYMENT_TARGETS = (0.10, 0.20)
MAX_DOWN_PAYMENT_SHARE = 0.5
MIN_ADDITIONAL_DOWN = 500

# Shorter terms are only pitched below this monthly increase
SHORTER_TERM_MAX_INCREASE = 150


def next_longer_term(term_months: int) -> int:
    if term_months == 36:
        return 48
    if term_months == 48:
        return 60
    return 72


def next_shorter_term(term_months: int) -> int:
    if term_months == 72:
        return 60
    if term_months == 60:
        return 48
    return 36


def suggest_down_payment(vehicle_price: float, down_payment: float) -> Optional[int]:
    """
    Next down payment milestone for the customer.

    Below 10% of price we target 10%, below 20% we target 20%, beyond
    that nothing is suggested. The target is capped at half the price,
    raised to at least $500 over the current amount and rounded to the
    nearest $100.
    """
    if vehicle_price <= 0:
        return None

    current_share = down_payment / vehicle_price
    target_share = next((t for t in DOWN_PAYMENT_TARGETS if current_share < t), None)
    if target_share is None:
        return None

    suggested = min(vehicle_price * target_share, vehicle_price * MAX_DOWN_PAYMENT_SHARE)
    suggested = max(suggested, down_payment + MIN_ADDITIONAL_DOWN)
    return round_currency(suggested / 100) * 100


def generate_alternatives(
    request: FinanceRequest,
    current_monthly_payment: float,
    apr: float,
) -> List[Alternative]:
    """
    Propose up to three alternatives to the requested loan.

    Policies, evaluated independently and returned in this order:
    1. Longer term (one rung up, unless already at 72 months)
    2. Higher down payment (next 10%/20% milestone, only when it lowers
       the payment or the term is already 36 months or less)
    3. Shorter term (one rung down, unless already at 36 months, and only
       when the payment rises by less than $150)

    Savings and total cost changes are measured against the current
    selection.
    """
    term = request.loan_term_months
    amount_financed = calculate_amount_financed(
        request.vehicle_price,
        request.down_payment,
        request.trade_in_value,
        request.sales_tax_rate,
    )
    base_total_cost = current_monthly_payment * term

    alternatives: List[Alternative] = []

    if term < MAX_TERM_MONTHS:
        longer_term = next_longer_term(term)
        payment = calculate_monthly_payment(amount_financed, apr, longer_term)
        total_cost = payment * longer_term
        alternatives.append(
            Alternative(
                description=f"{longer_term}-month plan",
                monthly_payment=round_currency(payment),
                loan_term_months=longer_term,
                savings=round_currency(current_monthly_payment - payment),
                total_cost_change=round_currency(total_cost - base_total_cost),
                amount_financed=round_currency(amount_financed),
                total_cost=round_currency(total_cost),
                apr=apr,
                type=AlternativeType.LONGER_TERM,
            )
        )

    suggested_down = suggest_down_payment(request.vehicle_price, request.down_payment)
    if suggested_down is not None:
        additional_down = suggested_down - request.down_payment

        if additional_down >= MIN_ADDITIONAL_DOWN:
            higher_down_financed = calculate_amount_financed(
                request.vehicle_price,
                suggested_down,
                request.trade_in_value,
                request.sales_tax_rate,
            )
            payment = calculate_monthly_payment(higher_down_financed, apr, term)
            total_cost = payment * term

            # Terms of 36 months or less keep the option without payment relief
            if payment < current_monthly_payment or term <= MIN_TERM_MONTHS:
                alternatives.append(
                    Alternative(
                        description=(
                            f"{term}-month plan with ${format_amount(suggested_down)} down "
                            f"(+${format_amount(additional_down)})"
                        ),
                        monthly_payment=round_currency(payment),
                        down_payment=suggested_down,
                        savings=round_currency(current_monthly_payment - payment),
                        total_cost_change=round_currency(total_cost - base_total_cost),
                        amount_financed=round_currency(higher_down_financed),
                        total_cost=round_currency(total_cost),
                        apr=apr,
                        type=AlternativeType.HIGHER_DOWN,
                    )
                )

    if term > MIN_TERM_MONTHS:
        shorter_term = next_shorter_term(term)
        payment = calculate_monthly_payment(amount_financed, apr, shorter_term)
        increase = payment - current_monthly_payment

        if increase < SHORTER_TERM_MAX_INCREASE:
            total_cost = payment * shorter_term
            alternatives.append(
                Alternative(
                    description=f"{shorter_term}-month plan (pay off faster)",
                    monthly_payment=round_currency(payment),
                    loan_term_months=shorter_term,
                    savings=-round_currency(increase),
                    total_cost_change=round_currency(total_cost - base_total_cost),
                    amount_financed=round_currency(amount_financed),
                    total_cost=round_currency(total_cost),
                    apr=apr,
                    type=AlternativeType.SHORTER_TERM,
                )
            )

    return alternatives[:MAX_ALTERNATIVES]
