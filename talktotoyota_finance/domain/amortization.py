"""Amount financed and fixed-rate amortization"""

from talktotoyota_finance.utils.currency import round_cents

# Flat doc/registration fee added to every loan
DEALER_FEES = 800


def calculate_amount_financed(
    vehicle_price: float,
    down_payment: float,
    trade_in_value: float,
    sales_tax_rate: float,
) -> float:
    """
    Principal actually borrowed.

    Sales tax applies to the price left after down payment and trade-in,
    then the flat dealer fee is added on top. A non-positive result is
    returned as-is for the caller to reject.
    """
    taxable = vehicle_price - down_payment - trade_in_value
    sales_tax = taxable * sales_tax_rate
    return taxable + sales_tax + DEALER_FEES


def calculate_monthly_payment(principal: float, annual_rate: float, term_months: int) -> float:
    """
    Fixed monthly payment for a fully amortizing loan.

    Formula: M = P * [r(1+r)^n] / [(1+r)^n - 1], r = annual_rate / 100 / 12

    A zero rate falls back to straight division (unrounded); otherwise
    the payment is rounded to cents.
    """
    monthly_rate = annual_rate / 100 / 12

    if monthly_rate == 0:
        return principal / term_months

    factor = (1 + monthly_rate) ** term_months
    payment = principal * monthly_rate * factor / (factor - 1)

    return round_cents(payment)
