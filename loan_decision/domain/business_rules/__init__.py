"""Business Rules - Domain Layer.

Loan policy, age eligibility and credit modifier rules.
"""

from .age_policy import check_age, max_eligible_age, resolve_country
from .credit_modifier import credit_score, get_credit_modifier, is_approvable
from .policy import (
    CountryLifeExpectancy,
    CreditSegment,
    PolicyConstants,
    default_policy,
)

__all__ = [
    "CountryLifeExpectancy",
    "CreditSegment",
    "PolicyConstants",
    "default_policy",
    "check_age",
    "max_eligible_age",
    "resolve_country",
    "credit_score",
    "get_credit_modifier",
    "is_approvable",
]
