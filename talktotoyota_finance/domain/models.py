"""Domain models - pure Python dataclasses representing financing entities"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


@dataclass(frozen=True)
class FinanceRequest:
    """Loan parameters for a single quote"""

    vehicle_price: float
    credit_score: int
    down_payment: float
    loan_term_months: int
    trade_in_value: float = 0.0
    sales_tax_rate: float = 0.08  # fraction: 0.08 == 8%


class AlternativeType(str, Enum):
    """Which policy produced an alternative"""

    BASE = "base"
    LONGER_TERM = "longer-term"
    HIGHER_DOWN = "higher-down"
    SHORTER_TERM = "shorter-term"


@dataclass
class Alternative:
    """One loan structure offered to the customer"""

    description: str
    monthly_payment: int
    type: AlternativeType
    savings: int  # monthly delta vs base, positive = cheaper per month
    total_cost_change: int  # total delta vs base, negative = cheaper overall
    amount_financed: int
    total_cost: int
    apr: float
    loan_term_months: Optional[int] = None
    down_payment: Optional[float] = None


@dataclass
class FinanceResult:
    """Output of a financing calculation"""

    monthly_payment: int
    apr: float
    total_interest: int
    total_cost: int
    amount_financed: int
    recommendation: str
    alternatives: List[Alternative] = field(default_factory=list)


@dataclass(frozen=True)
class CreditTier:
    """Credit score band with its APR and opening sentence"""

    min_score: int
    apr: float
    label: str
    greeting: str
