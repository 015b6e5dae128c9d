from .response import (
    decision_json_response,
    decision_status_code,
    decision_to_response,
    error_response,
    unexpected_error_response,
)

__all__ = [
    "decision_json_response",
    "decision_status_code",
    "decision_to_response",
    "error_response",
    "unexpected_error_response",
]
