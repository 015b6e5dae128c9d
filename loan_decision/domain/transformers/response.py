from fastapi import status
from fastapi.responses import JSONResponse

from ...core.constants import ErrorMessages
from ...schemas.decision import DecisionResponse
from ..decision import Decision, DecisionErrorKind

ERROR_STATUS_CODES: dict[DecisionErrorKind, int] = {
    DecisionErrorKind.INVALID_PERSONAL_CODE: status.HTTP_400_BAD_REQUEST,
    DecisionErrorKind.INVALID_AGE: status.HTTP_400_BAD_REQUEST,
    DecisionErrorKind.INVALID_LOAN_AMOUNT: status.HTTP_400_BAD_REQUEST,
    DecisionErrorKind.INVALID_LOAN_PERIOD: status.HTTP_400_BAD_REQUEST,
    DecisionErrorKind.NO_VALID_LOAN: status.HTTP_404_NOT_FOUND,
    DecisionErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def decision_status_code(decision: Decision) -> int:
    """Map a decision to its HTTP status code."""
    if decision.is_approved:
        return status.HTTP_200_OK
    return ERROR_STATUS_CODES[decision.error.kind]


def decision_to_response(decision: Decision) -> DecisionResponse:
    """Convert a Decision to the API response schema."""
    if decision.is_approved:
        return DecisionResponse(
            loan_amount=decision.loan_amount,
            loan_period=decision.loan_period,
        )
    return error_response(decision.error_message)


def error_response(message: str) -> DecisionResponse:
    return DecisionResponse(error_message=message)


def decision_json_response(decision: Decision) -> JSONResponse:
    """Render a decision with its status code and camelCase body."""
    return JSONResponse(
        status_code=decision_status_code(decision),
        content=decision_to_response(decision).model_dump(by_alias=True)
    )


def unexpected_error_response() -> JSONResponse:
    """500 response with the generic message; details belong in the logs."""
    return decision_json_response(
        Decision.rejected(DecisionErrorKind.UNEXPECTED, ErrorMessages.UNEXPECTED_ERROR)
    )
