"""Application Constants.

Centralized constants used throughout the application.
This file contains all hardcoded values that should be maintained in one place.
"""

from decimal import Decimal

# ============================================================================
# LOAN LIMIT CONSTANTS
# ============================================================================

class LoanLimits:
    """Allowed loan amount and period ranges."""
    MINIMUM_LOAN_AMOUNT = 2000
    MAXIMUM_LOAN_AMOUNT = 10000
    LOAN_AMOUNT_STEP = 100  # Amount search granularity

    MINIMUM_LOAN_PERIOD = 12  # Months
    MAXIMUM_LOAN_PERIOD = 60  # Months
    LOAN_PERIOD_STEP = 1

    MONTHS_PER_YEAR = 12


# ============================================================================
# CREDIT SCORING CONSTANTS
# ============================================================================

class CreditModifiers:
    """Credit modifiers by segment of the personal code.

    Segment bands are keyed by their inclusive lower bound.
    """
    NO_CREDIT_MODIFIER = 0  # Applicant has debt
    SEGMENT_1_CREDIT_MODIFIER = 100
    SEGMENT_2_CREDIT_MODIFIER = 300
    SEGMENT_3_CREDIT_MODIFIER = 1000

    DEBT_SEGMENT_START = 0
    SEGMENT_1_START = 2500
    SEGMENT_2_START = 5000
    SEGMENT_3_START = 7500

    MINIMUM_CREDIT_SCORE = Decimal("0.1")
    SCORE_DIVISOR = 10


# ============================================================================
# AGE LIMIT CONSTANTS
# ============================================================================

class AgeLimits:
    """Age-related constants for the Baltic countries."""
    LIFETIME_ESTONIA = 79
    LIFETIME_LATVIA = 75
    LIFETIME_LITHUANIA = 76
    MINIMUM_AGE = 18

    ESTONIA_SEGMENT_START = 0
    LATVIA_SEGMENT_START = 3333
    LITHUANIA_SEGMENT_START = 6666


# ============================================================================
# COUNTRY CODE CONSTANTS
# ============================================================================

class CountryCode:
    """Supported country codes (ISO 3166-1 alpha-2)."""
    ESTONIA = "EE"
    LATVIA = "LV"
    LITHUANIA = "LT"

    SUPPORTED_COUNTRIES = [
        ESTONIA,
        LATVIA,
        LITHUANIA,
    ]

    COUNTRY_NAMES: dict[str, str] = {
        ESTONIA: "Estonia",
        LATVIA: "Latvia",
        LITHUANIA: "Lithuania",
    }


# ============================================================================
# PERSONAL CODE CONSTANTS
# ============================================================================

class PersonalCodeFormat:
    """Estonian personal identification code (isikukood) layout."""
    LENGTH = 11
    VALID_CENTURY_INDICATORS = "123456"
    CENTURY_1900_INDICATORS = ("3", "4")
    CENTURY_1900_PREFIX = "19"
    CENTURY_2000_PREFIX = "20"
    SEGMENT_LENGTH = 4
    MAX_SEGMENT = 9999

    FIRST_WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
    SECOND_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)
    CHECKSUM_MODULUS = 11


# ============================================================================
# SECURITY & MASKING CONSTANTS
# ============================================================================

class Security:
    """Security-related constants."""
    # Document masking
    DOCUMENT_MASK_CHAR = "*"
    DOCUMENT_VISIBLE_CHARS = 4  # Show last 4 characters
    DOCUMENT_MASK_FULL = "****"  # When document is too short


# ============================================================================
# ERROR MESSAGES
# ============================================================================

class ErrorMessages:
    """Standard error messages."""
    INVALID_PERSONAL_CODE = "Invalid personal ID code!"
    UNDER_MINIMUM_AGE = "Applicant is under the minimum age."
    EXCEEDS_MAXIMUM_AGE = "Applicant exceeds maximum eligible age."
    INVALID_LOAN_AMOUNT = "Invalid loan amount!"
    INVALID_LOAN_PERIOD = "Invalid loan period!"
    NO_VALID_LOAN = "No valid loan found!"
    UNEXPECTED_ERROR = "An unexpected error occurred"
    INVALID_REQUEST = "Invalid request!"


# ============================================================================
# HTTP HEADERS
# ============================================================================

class HttpHeaders:
    """Custom HTTP header names."""
    REQUEST_ID = "X-Request-ID"
    PROCESS_TIME = "X-Process-Time"


class HttpStatusCodes:
    """HTTP status codes used outside FastAPI's status module."""
    INTERNAL_SERVER_ERROR = 500


# ============================================================================
# API ENDPOINTS
# ============================================================================

class ApiEndpoints:
    """Non-versioned API endpoint paths."""
    ROOT = "/"
    HEALTH = "/health"
    DOCS = "/docs"
    REDOC = "/redoc"
    OPENAPI = "/openapi.json"


class Metrics:
    """Prometheus metrics constants."""
    ENDPOINT_PATH = "/metrics"
