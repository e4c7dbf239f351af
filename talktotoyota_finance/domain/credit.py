"""Credit tier table - maps a credit score to an APR and tier label"""

from typing import Tuple
from talktotoyota_finance.domain.models import CreditTier

MIN_CREDIT_SCORE = 300
MAX_CREDIT_SCORE = 850

# Ordered highest band first; lower bounds are inclusive
CREDIT_TIERS: Tuple[CreditTier, ...] = (
    CreditTier(750, 5.0, "Excellent", "Excellent credit! You've qualified for our best rate. "),
    CreditTier(700, 6.2, "Good", "Good credit score! You're getting a competitive rate. "),
    CreditTier(650, 9.0, "Fair", "Fair credit - we can work with that! "),
    CreditTier(600, 13.5, "Poor", "We can help you get financed! "),
    CreditTier(MIN_CREDIT_SCORE, 17.0, "Bad", "Let's find a plan that works for you. "),
)


def is_valid_credit_score(credit_score: float) -> bool:
    """Credit scores are accepted on the inclusive range 300-850"""
    return MIN_CREDIT_SCORE <= credit_score <= MAX_CREDIT_SCORE


def resolve_credit_tier(credit_score: float) -> CreditTier:
    """
    Map a credit score to its tier.

    Score bands:
    - 750+:    5.0% APR  (Excellent)
    - 700-749: 6.2% APR  (Good)
    - 650-699: 9.0% APR  (Fair)
    - 600-649: 13.5% APR (Poor)
    - <600:    17.0% APR (Bad)

    Total over any number; range checks belong to the caller.
    """
    for tier in CREDIT_TIERS[:-1]:
        if credit_score >= tier.min_score:
            return tier
    return CREDIT_TIERS[-1]


def resolve_apr(credit_score: float) -> float:
    """APR percentage for a credit score"""
    return resolve_credit_tier(credit_score).apr
