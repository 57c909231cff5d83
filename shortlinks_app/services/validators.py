"""Input validation for link creation."""

import re

from pydantic import HttpUrl, TypeAdapter, ValidationError

from shortlinks_app.services.errors import InvalidInputError

SHORT_CODE_PATTERN = re.compile(r"[A-Za-z0-9-]+")

# pydantic's HttpUrl limit
MAX_URL_LENGTH = 2083

# Paths served by the app itself; a link under one of these could never redirect
RESERVED_CODES = frozenset({"api", "docs", "redoc", "health", "openapi"})

_http_url = TypeAdapter(HttpUrl)


def validate_original_url(url: str) -> str:
    """
    Check that url is an absolute http(s) URL with a host.
    
    Pydantic's HttpUrl does the parsing; the caller keeps the original
    string, not pydantic's normalized form.
    
    Returns:
        The URL, stripped of surrounding whitespace
    
    Raises:
        InvalidInputError: for anything else (ftp://, relative paths, junk)
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidInputError("URL is required")

    url = url.strip()
    if len(url) > MAX_URL_LENGTH:
        raise InvalidInputError(f"URL is too long (max {MAX_URL_LENGTH} characters)")

    try:
        parsed = _http_url.validate_python(url)
    except ValidationError as e:
        reason = e.errors()[0]["msg"] if e.errors() else "invalid URL"
        raise InvalidInputError(f"Invalid URL: {reason}")

    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise InvalidInputError("URL must start with http:// or https://")
    return url


def validate_short_code(code: str, min_length: int = 3, max_length: int = 10) -> str:
    """
    Check a short code against the length bounds and ``[A-Za-z0-9-]``.
    
    Codes naming one of the app's own routes are refused.
    
    Raises:
        InvalidInputError: if the code is too short, too long, has other
            characters or is reserved
    """
    if not isinstance(code, str):
        raise InvalidInputError("Short code must be a string")
    if len(code) < min_length:
        raise InvalidInputError(f"Short code must be at least {min_length} characters")
    if len(code) > max_length:
        raise InvalidInputError(f"Short code must be at most {max_length} characters")
    if not SHORT_CODE_PATTERN.fullmatch(code):
        raise InvalidInputError("Short code may only contain letters, numbers and hyphens")
    if code.lower() in RESERVED_CODES:
        raise InvalidInputError(f"'{code}' is a reserved word and cannot be used")
    return code
