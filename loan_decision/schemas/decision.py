"""Pydantic Schemas for API Request/Response Validation.

These schemas handle validation and serialization for the decision endpoint.
JSON field names are camelCase; Python attributes are snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field


class DecisionRequest(BaseModel):
    """Loan decision request."""
    model_config = ConfigDict(populate_by_name=True)

    personal_code: str = Field(..., alias='personalCode')
    loan_amount: int = Field(..., alias='loanAmount')
    loan_period: int = Field(..., alias='loanPeriod', description="Loan period in months")


class DecisionResponse(BaseModel):
    """Loan decision response.

    Either loanAmount and loanPeriod are set, or errorMessage is.
    """
    model_config = ConfigDict(populate_by_name=True)

    loan_amount: int | None = Field(None, alias='loanAmount')
    loan_period: int | None = Field(None, alias='loanPeriod')
    error_message: str | None = Field(None, alias='errorMessage')
