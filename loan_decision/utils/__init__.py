"""Utility functions organized by domain.

All functions are re-exported here; prefer importing from specific modules:
    from loan_decision.utils.strings import mask_document
    from loan_decision.utils.generators import generate_request_id
"""

from .converters import normalize_path
from .generators import generate_request_id
from .strings import mask_document, sanitize_log_data

__all__ = [
    # Converters
    "normalize_path",
    # Generators
    "generate_request_id",
    # Strings
    "mask_document",
    "sanitize_log_data",
]
