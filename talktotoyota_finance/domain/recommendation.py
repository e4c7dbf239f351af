"""Human-readable financing recommendation"""

from typing import List
from talktotoyota_finance.domain.credit import resolve_credit_tier
from talktotoyota_finance.domain.models import Alternative


def _describe_changes(alternative: Alternative) -> str:
    """Parenthetical such as " (saves $40/month, adds $900/total)", or empty"""
    parts = []

    if alternative.savings > 0:
        parts.append(f"saves ${alternative.savings}/month")
    elif alternative.savings < 0:
        parts.append(f"+${abs(alternative.savings)}/month")

    if alternative.total_cost_change > 0:
        parts.append(f"adds ${alternative.total_cost_change}/total")
    elif alternative.total_cost_change < 0:
        parts.append(f"saves ${abs(alternative.total_cost_change)}/total")

    if not parts:
        return ""
    return f" ({', '.join(parts)})"


def synthesize_recommendation(credit_score: float, alternatives: List[Alternative]) -> str:
    """
    Opening line keyed to the credit tier, followed by a numbered list of
    the alternatives with their monthly payment and deltas.

    Downstream chat rendering matches on these phrases, so the wording is
    part of the contract.
    """
    recommendation = resolve_credit_tier(credit_score).greeting

    if alternatives:
        recommendation += "Here are your options:\n\n"
        for index, alternative in enumerate(alternatives, start=1):
            recommendation += (
                f"{index}. {alternative.description}: "
                f"${alternative.monthly_payment}/month{_describe_changes(alternative)}\n"
            )

    return recommendation.strip()
