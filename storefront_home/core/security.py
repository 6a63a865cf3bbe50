"""
Security utilities - never log or return storefront tokens.
"""

import re
from typing import Any, Dict

SENSITIVE_KEYS = (
    'storefront_access_token',
    'x-shopify-storefront-access-token',
    'authorization',
    'token',
    'secret',
    'password',
)


def sanitize_dict_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Redact sensitive fields (case-insensitive) from a dict before logging.

    Args:
        data: Dictionary that may contain secrets, e.g. request headers.

    Returns:
        Copy with secret values replaced.
    """
    result = {}
    for key, value in data.items():
        if str(key).lower() in SENSITIVE_KEYS:
            result[key] = '***REDACTED***'
        elif isinstance(value, dict):
            result[key] = sanitize_dict_for_logging(value)
        elif isinstance(value, list):
            result[key] = [
                sanitize_dict_for_logging(item) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value
    return result


def sanitize_string_for_logging(text: str, secrets: tuple = ()) -> str:
    """
    Remove known tokens and token-shaped strings from text.

    Args:
        text: String that may contain secrets (error bodies, URLs).
        secrets: Exact values to mask, e.g. the configured access token.

    Returns:
        Sanitized string.
    """
    if not text:
        return text

    result = text
    for secret in secrets:
        if secret:
            result = result.replace(secret, '***')

    # Shopify access tokens
    patterns = [
        (r'shp(at|ca|pa|ss)_[a-fA-F0-9]{16,}', 'shp_***'),
        (r'(access[_-]?token["\']?\s*[:=]\s*["\']?)[^"\'&\s,}]+', r'\1***'),
    ]
    for pattern, replacement in patterns:
        result = re.sub(pattern, replacement, result, flags=re.IGNORECASE)

    return result
