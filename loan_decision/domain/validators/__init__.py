from .personal_code import (
    PersonalCode,
    ValidationResult,
    calculate_check_digit,
    parse_personal_code,
    validate_personal_code,
)

__all__ = [
    "PersonalCode",
    "ValidationResult",
    "calculate_check_digit",
    "parse_personal_code",
    "validate_personal_code",
]
