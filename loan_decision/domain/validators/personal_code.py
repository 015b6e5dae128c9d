"""Estonian Personal Code (isikukood) Validation and Parsing.

Format: 11 digits, GYYMMDDSSSC
- G: century/gender indicator (1-6)
- YYMMDD: birth date
- SSS: serial number
- C: check digit

Algorithm:
- Multiply the first 10 digits by weights 1, 2, 3, 4, 5, 6, 7, 8, 9, 1
- Take the sum modulo 11; if the remainder is below 10 it is the check digit
- Otherwise repeat with weights 3, 4, 5, 6, 7, 8, 9, 1, 2, 3
- If the remainder is 10 again, the check digit is 0

Only two century bands are distinguished: indicators 3 and 4 are born in the
1900s, every other indicator in the 2000s.
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict

from ...core.constants import PersonalCodeFormat


class ValidationResult(BaseModel):
    """Result of validation operations."""
    is_valid: bool
    errors: list[str] = []
    metadata: dict[str, Any] = {}


class PersonalCode(BaseModel):
    """A validated personal code and the fields derived from it."""
    model_config = ConfigDict(frozen=True)

    code: str
    birth_date: date
    segment: int

    def age_on(self, today: date) -> int:
        """Age in whole years on ``today``.

        Compares day-of-year rather than (month, day), so the result can be
        one year low around 29 February in leap years.
        """
        age = today.year - self.birth_date.year
        if today.timetuple().tm_yday < self.birth_date.timetuple().tm_yday:
            age -= 1
        return age


def calculate_check_digit(digits: str) -> int:
    """Compute the check digit for the first 10 digits of a personal code.

    Examples:
        >>> calculate_check_digit("4900201096")
        5
    """
    values = [int(digit) for digit in digits[:10]]

    for weights in (PersonalCodeFormat.FIRST_WEIGHTS, PersonalCodeFormat.SECOND_WEIGHTS):
        remainder = sum(value * weight for value, weight in zip(values, weights)) \
            % PersonalCodeFormat.CHECKSUM_MODULUS
        if remainder < 10:
            return remainder

    return 0


def extract_birth_date(code: str) -> date:
    """Decode the birth date embedded in a personal code.

    Raises:
        ValueError: If the digits do not form a real calendar date
    """
    if code[0] in PersonalCodeFormat.CENTURY_1900_INDICATORS:
        century = PersonalCodeFormat.CENTURY_1900_PREFIX
    else:
        century = PersonalCodeFormat.CENTURY_2000_PREFIX

    year = int(century + code[1:3])
    month = int(code[3:5])
    day = int(code[5:7])

    return date(year, month, day)


def extract_segment(code: str) -> int:
    """Return the last four digits of the code as an integer."""
    return int(code[-PersonalCodeFormat.SEGMENT_LENGTH:])


def validate_personal_code(document: str) -> ValidationResult:
    """Validate an Estonian personal code.

    Checks length, digits, century indicator, check digit and birth date.
    The code is taken as given; surrounding whitespace makes it invalid.

    Args:
        document: The personal code

    Returns:
        ValidationResult with validation status and any errors
    """
    errors = []

    document = document or ""

    if len(document) != PersonalCodeFormat.LENGTH:
        errors.append(
            f"Personal code must be exactly {PersonalCodeFormat.LENGTH} digits long "
            f"(received {len(document)})"
        )
        return ValidationResult(is_valid=False, errors=errors)

    if not (document.isascii() and document.isdigit()):
        errors.append("Personal code must contain only digits")
        return ValidationResult(is_valid=False, errors=errors)

    if document[0] not in PersonalCodeFormat.VALID_CENTURY_INDICATORS:
        errors.append(f"Invalid century indicator '{document[0]}'")
        return ValidationResult(is_valid=False, errors=errors)

    checksum_digit = int(document[10])
    calculated_checksum = calculate_check_digit(document)
    if checksum_digit != calculated_checksum:
        errors.append(
            f"Personal code checksum invalid. Expected {calculated_checksum}, got {checksum_digit}"
        )
        return ValidationResult(is_valid=False, errors=errors)

    try:
        birth_date = extract_birth_date(document)
    except ValueError as e:
        errors.append(f"Invalid birth date in personal code: {e!s}")
        return ValidationResult(is_valid=False, errors=errors)

    return ValidationResult(
        is_valid=True,
        metadata={
            'birth_date': birth_date,
            'segment': extract_segment(document),
            'checksum_digit': checksum_digit,
        }
    )


def parse_personal_code(document: str) -> PersonalCode:
    """Validate and decode a personal code.

    Raises:
        ValueError: If the code is not valid
    """
    result = validate_personal_code(document)
    if not result.is_valid:
        raise ValueError("; ".join(result.errors))

    return PersonalCode(
        code=document,
        birth_date=result.metadata['birth_date'],
        segment=result.metadata['segment'],
    )
