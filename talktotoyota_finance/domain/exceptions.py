"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class FinanceValidationError(DomainException):
    """Financing inputs rejected before a quote could be produced"""

    reason = "invalid_input"


class InvalidVehiclePriceError(FinanceValidationError):
    """Vehicle price is zero or negative"""

    reason = "vehicle_price"


class CreditScoreOutOfRangeError(FinanceValidationError):
    """Credit score falls outside 300-850"""

    reason = "credit_score"


class NegativeDownPaymentError(FinanceValidationError):
    """Down payment is negative"""

    reason = "down_payment"


class InvalidLoanTermError(FinanceValidationError):
    """Loan term is zero or negative"""

    reason = "loan_term"


class FinancingExceedsPriceError(FinanceValidationError):
    """Down payment and trade-in leave nothing to finance"""

    reason = "amount_financed"


class IncompleteFinancingStateError(DomainException):
    """Conversation has not collected every required financing field yet"""

    pass
