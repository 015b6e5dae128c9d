"""Loan Policy Configuration.

Immutable policy values used by the decision engine. A policy is built once,
explicitly, and passed to the engine; nothing here reads process-wide state.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ...core.constants import (
    AgeLimits,
    CountryCode,
    CreditModifiers,
    LoanLimits,
    PersonalCodeFormat,
)


class CreditSegment(BaseModel):
    """Credit modifier for segments starting at ``lower_bound`` (inclusive)."""
    model_config = ConfigDict(frozen=True)

    lower_bound: int = Field(..., ge=0, le=PersonalCodeFormat.MAX_SEGMENT)
    modifier: int = Field(..., ge=0)


class CountryLifeExpectancy(BaseModel):
    """Country of residence for segments starting at ``lower_bound`` (inclusive)."""
    model_config = ConfigDict(frozen=True)

    lower_bound: int = Field(..., ge=0, le=PersonalCodeFormat.MAX_SEGMENT)
    country_code: str
    country_name: str
    life_expectancy: int = Field(..., gt=0)


def _check_bands(bands, name: str) -> None:
    if not bands:
        raise ValueError(f"{name} must contain at least one band")
    if bands[0].lower_bound != 0:
        raise ValueError(f"{name} must start at segment 0")
    bounds = [band.lower_bound for band in bands]
    if any(lower >= upper for lower, upper in zip(bounds, bounds[1:])):
        raise ValueError(f"{name} lower bounds must be strictly ascending")


class PolicyConstants(BaseModel):
    """Loan policy: amount/period limits, age limits and segment tables.

    Validated on construction; instances are frozen.
    """
    model_config = ConfigDict(frozen=True)

    minimum_loan_amount: int = Field(default=LoanLimits.MINIMUM_LOAN_AMOUNT, gt=0)
    maximum_loan_amount: int = Field(default=LoanLimits.MAXIMUM_LOAN_AMOUNT, gt=0)
    loan_amount_step: int = Field(default=LoanLimits.LOAN_AMOUNT_STEP, gt=0)

    minimum_loan_period: int = Field(default=LoanLimits.MINIMUM_LOAN_PERIOD, gt=0)
    maximum_loan_period: int = Field(default=LoanLimits.MAXIMUM_LOAN_PERIOD, gt=0)
    loan_period_step: int = Field(default=LoanLimits.LOAN_PERIOD_STEP, gt=0)

    minimum_age: int = Field(default=AgeLimits.MINIMUM_AGE, ge=0)
    minimum_credit_score: Decimal = Field(default=CreditModifiers.MINIMUM_CREDIT_SCORE, gt=0)
    no_credit_modifier: int = CreditModifiers.NO_CREDIT_MODIFIER

    credit_segments: tuple[CreditSegment, ...] = (
        CreditSegment(
            lower_bound=CreditModifiers.DEBT_SEGMENT_START,
            modifier=CreditModifiers.NO_CREDIT_MODIFIER,
        ),
        CreditSegment(
            lower_bound=CreditModifiers.SEGMENT_1_START,
            modifier=CreditModifiers.SEGMENT_1_CREDIT_MODIFIER,
        ),
        CreditSegment(
            lower_bound=CreditModifiers.SEGMENT_2_START,
            modifier=CreditModifiers.SEGMENT_2_CREDIT_MODIFIER,
        ),
        CreditSegment(
            lower_bound=CreditModifiers.SEGMENT_3_START,
            modifier=CreditModifiers.SEGMENT_3_CREDIT_MODIFIER,
        ),
    )

    life_expectancies: tuple[CountryLifeExpectancy, ...] = (
        CountryLifeExpectancy(
            lower_bound=AgeLimits.ESTONIA_SEGMENT_START,
            country_code=CountryCode.ESTONIA,
            country_name=CountryCode.COUNTRY_NAMES[CountryCode.ESTONIA],
            life_expectancy=AgeLimits.LIFETIME_ESTONIA,
        ),
        CountryLifeExpectancy(
            lower_bound=AgeLimits.LATVIA_SEGMENT_START,
            country_code=CountryCode.LATVIA,
            country_name=CountryCode.COUNTRY_NAMES[CountryCode.LATVIA],
            life_expectancy=AgeLimits.LIFETIME_LATVIA,
        ),
        CountryLifeExpectancy(
            lower_bound=AgeLimits.LITHUANIA_SEGMENT_START,
            country_code=CountryCode.LITHUANIA,
            country_name=CountryCode.COUNTRY_NAMES[CountryCode.LITHUANIA],
            life_expectancy=AgeLimits.LIFETIME_LITHUANIA,
        ),
    )

    @model_validator(mode='after')
    def validate_ranges(self):
        """Validate limit ranges and segment tables."""
        if self.minimum_loan_amount > self.maximum_loan_amount:
            raise ValueError(
                f"minimum_loan_amount ({self.minimum_loan_amount}) exceeds "
                f"maximum_loan_amount ({self.maximum_loan_amount})"
            )
        if self.minimum_loan_period > self.maximum_loan_period:
            raise ValueError(
                f"minimum_loan_period ({self.minimum_loan_period}) exceeds "
                f"maximum_loan_period ({self.maximum_loan_period})"
            )

        _check_bands(self.credit_segments, "credit_segments")
        _check_bands(self.life_expectancies, "life_expectancies")

        no_credit_bands = [
            band for band in self.credit_segments
            if band.modifier == self.no_credit_modifier
        ]
        if no_credit_bands and no_credit_bands != [self.credit_segments[0]]:
            raise ValueError("Only the first credit segment may carry the no-credit modifier")

        return self

    @property
    def maximum_loan_period_years(self) -> int:
        return self.maximum_loan_period // LoanLimits.MONTHS_PER_YEAR


def default_policy() -> PolicyConstants:
    """Build the standard lending policy."""
    return PolicyConstants()
