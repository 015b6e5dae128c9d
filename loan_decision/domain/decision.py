"""Decision outcome value objects.

A decision is returned by value: either an approved (amount, period) pair or a
tagged error. Validation failures are never raised as exceptions.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator


class DecisionErrorKind(str, Enum):
    """Closed error taxonomy, in the order checks are applied."""
    INVALID_PERSONAL_CODE = "INVALID_PERSONAL_CODE"
    INVALID_AGE = "INVALID_AGE"
    INVALID_LOAN_AMOUNT = "INVALID_LOAN_AMOUNT"
    INVALID_LOAN_PERIOD = "INVALID_LOAN_PERIOD"
    NO_VALID_LOAN = "NO_VALID_LOAN"
    UNEXPECTED = "UNEXPECTED"


class DecisionError(BaseModel):
    """Reason a loan request was rejected."""
    model_config = ConfigDict(frozen=True)

    kind: DecisionErrorKind
    message: str


class Decision(BaseModel):
    """Outcome of a loan decision.

    Exactly one of (loan_amount, loan_period) or error is populated.
    """
    model_config = ConfigDict(frozen=True)

    loan_amount: int | None = None
    loan_period: int | None = None
    error: DecisionError | None = None

    @model_validator(mode='after')
    def check_exclusive(self):
        has_offer = self.loan_amount is not None or self.loan_period is not None
        if self.error is not None and has_offer:
            raise ValueError("A decision cannot carry both an offer and an error")
        if self.error is None and (self.loan_amount is None or self.loan_period is None):
            raise ValueError("An approved decision requires both loan_amount and loan_period")
        return self

    @classmethod
    def approved(cls, loan_amount: int, loan_period: int) -> "Decision":
        return cls(loan_amount=loan_amount, loan_period=loan_period)

    @classmethod
    def rejected(cls, kind: DecisionErrorKind, message: str) -> "Decision":
        return cls(error=DecisionError(kind=kind, message=message))

    @property
    def is_approved(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> str | None:
        return self.error.message if self.error else None
