"""String manipulation utilities."""

from typing import Any

from ..core.constants import Security

PII_KEYS = ('personal_code', 'personalCode', 'document')

def mask_document(document: str, visible_chars: int | None = None) -> str:
    """Mask identity document for security (PII protection).

    Shows only the last N characters, masking the rest with asterisks.

    Args:
        document: The document string to mask
        visible_chars: Number of characters to show at the end (default from Security constants)

    Returns:
        Masked document string

    Examples:
        >>> mask_document("49002013008")
        "*******3008"
        >>> mask_document("ABC")
        "****"
    """
    if not document:
        return Security.DOCUMENT_MASK_FULL

    visible = visible_chars or Security.DOCUMENT_VISIBLE_CHARS

    if len(document) <= visible:
        return Security.DOCUMENT_MASK_FULL

    masked_length = len(document) - visible
    return Security.DOCUMENT_MASK_CHAR * masked_length + document[-visible:]


def sanitize_log_data(data: dict[str, Any]) -> dict[str, Any]:
    """Sanitize log data by masking personal codes.

    Nested dictionaries and lists of dictionaries are sanitized recursively.

    Examples:
        >>> sanitize_log_data({'personal_code': '49002013008', 'loan_amount': 4000})
        {'personal_code': '*******3008', 'loan_amount': 4000}
    """
    if not data or not isinstance(data, dict):
        return data

    sanitized = data.copy()

    for key in PII_KEYS:
        if key in sanitized and sanitized[key]:
            sanitized[key] = mask_document(str(sanitized[key]))

    for key, value in sanitized.items():
        if isinstance(value, dict):
            sanitized[key] = sanitize_log_data(value)
        elif isinstance(value, list):
            sanitized[key] = [
                sanitize_log_data(item) if isinstance(item, dict) else item
                for item in value
            ]

    return sanitized
