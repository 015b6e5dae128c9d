"""Loan Decision Endpoints.

RESTful API endpoint for loan decisions.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ....core.logging import get_logger
from ....domain.transformers import decision_json_response, unexpected_error_response
from ....schemas.decision import DecisionRequest, DecisionResponse
from ....services.decision_engine import DecisionEngine, get_decision_engine

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/decision",
    response_model=DecisionResponse,
    summary="Request a loan decision",
    responses={
        200: {"model": DecisionResponse, "description": "Loan approved"},
        400: {"model": DecisionResponse, "description": "Invalid personal code, age, amount or period"},
        404: {"model": DecisionResponse, "description": "No valid loan found"},
        500: {"model": DecisionResponse, "description": "Unexpected error"},
    },
    openapi_extra={
        "examples": {
            "approved": {
                "summary": "Approvable request",
                "value": {
                    "personalCode": "49002018004",
                    "loanAmount": 4000,
                    "loanPeriod": 12
                }
            }
        }
    }
)
def request_decision(
    request: DecisionRequest,
    engine: DecisionEngine = Depends(get_decision_engine)
) -> JSONResponse:
    """Calculate the best loan offer for the applicant.

    Returns the approved amount and period, or an error message. Unexpected
    failures return a generic message; details are only logged.
    """
    try:
        decision = engine.calculate_approved_loan(
            request.personal_code,
            request.loan_amount,
            request.loan_period
        )
    except Exception as e:
        logger.error(
            "Loan decision failed",
            extra={
                'request': request.model_dump(),
                'error': str(e),
                'error_type': type(e).__name__
            },
            exc_info=True
        )
        return unexpected_error_response()

    return decision_json_response(decision)
