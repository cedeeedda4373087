"""
jwtguard - request-time JWT validation.

Extracts a bearer token from an HTTP request, verifies it with PyJWT
against a caller-supplied key resolver, and enforces a pinned signing
algorithm.
"""

from .auth import (
    JWTAuthError,
    ExtractionFormatError,
    TokenNotFoundError,
    TokenExtractionError,
    TokenParseError,
    AlgorithmMismatchError,
    from_auth_header,
    from_query_param,
    from_cookie,
    from_first,
    static_key,
    hmac_secret_from_env,
    Token,
    UnverifiedToken,
    Options,
    Validator,
)

__version__ = "0.1.0"

__all__ = [
    "JWTAuthError",
    "ExtractionFormatError",
    "TokenNotFoundError",
    "TokenExtractionError",
    "TokenParseError",
    "AlgorithmMismatchError",
    "from_auth_header",
    "from_query_param",
    "from_cookie",
    "from_first",
    "static_key",
    "hmac_secret_from_env",
    "Token",
    "UnverifiedToken",
    "Options",
    "Validator",
]
