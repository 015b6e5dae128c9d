"""Credit Modifier and Credit Score Rules.

Credit score formula: (credit_modifier / amount) * period / 10.
A (amount, period) pair is approvable when the score reaches the policy's
minimum credit score (0.1 by default).
"""

from decimal import Decimal

from ...core.constants import CreditModifiers
from .policy import PolicyConstants


def get_credit_modifier(segment: int, policy: PolicyConstants) -> int:
    """Return the credit modifier for a personal code segment.

    Lower segments indicate debt; higher segments belong to better scoring
    tiers.
    """
    modifier = policy.credit_segments[0].modifier
    for band in policy.credit_segments:
        if band.lower_bound > segment:
            break
        modifier = band.modifier
    return modifier


def credit_score(credit_modifier: int, amount: int, period: int) -> Decimal:
    """Compute the credit score for a candidate loan.

    Evaluated as a single Decimal division so that exact threshold hits
    (e.g. 300 * 12 / (3600 * 10) == 0.1) are not lost to rounding.
    """
    return Decimal(credit_modifier * period) / (Decimal(amount) * CreditModifiers.SCORE_DIVISOR)


def is_approvable(
    credit_modifier: int,
    amount: int,
    period: int,
    policy: PolicyConstants
) -> bool:
    return credit_score(credit_modifier, amount, period) >= policy.minimum_credit_score
