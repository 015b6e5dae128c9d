"""Age Eligibility Rules.

The applicant must be at least the minimum age, and must not be expected to
outlive their country's life expectancy before the longest possible loan
term completes.
"""

from datetime import date

from ...core.constants import ErrorMessages
from ..decision import DecisionError, DecisionErrorKind
from ..validators.personal_code import PersonalCode
from .policy import CountryLifeExpectancy, PolicyConstants


def resolve_country(segment: int, policy: PolicyConstants) -> CountryLifeExpectancy:
    """Select the country band containing ``segment``.

    Args:
        segment: Last four digits of the personal code (0-9999)
        policy: Loan policy

    Returns:
        The last band whose lower bound is not above the segment
    """
    resolved = policy.life_expectancies[0]
    for band in policy.life_expectancies:
        if band.lower_bound > segment:
            break
        resolved = band
    return resolved


def max_eligible_age(country: CountryLifeExpectancy, policy: PolicyConstants) -> int:
    return country.life_expectancy - policy.maximum_loan_period_years


def check_age(
    personal_code: PersonalCode,
    policy: PolicyConstants,
    today: date
) -> DecisionError | None:
    """Check the applicant's age against the policy.

    Args:
        personal_code: Validated personal code
        policy: Loan policy
        today: Date the decision is made on

    Returns:
        DecisionError of kind INVALID_AGE, or None when the age is eligible
    """
    age = personal_code.age_on(today)

    if age < policy.minimum_age:
        return DecisionError(
            kind=DecisionErrorKind.INVALID_AGE,
            message=ErrorMessages.UNDER_MINIMUM_AGE
        )

    country = resolve_country(personal_code.segment, policy)
    if age > max_eligible_age(country, policy):
        return DecisionError(
            kind=DecisionErrorKind.INVALID_AGE,
            message=ErrorMessages.EXCEEDS_MAXIMUM_AGE
        )

    return None
