"""
Authentication module for jwtguard.

Extracts JWTs from requests and verifies them against a caller-supplied
key resolver and a pinned signing algorithm.
"""

from .errors import (
    JWTAuthError,
    ExtractionFormatError,
    TokenNotFoundError,
    TokenExtractionError,
    TokenParseError,
    AlgorithmMismatchError,
)
from .extractors import (
    TokenExtractor,
    from_auth_header,
    from_query_param,
    from_cookie,
    from_first,
)
from .keys import static_key, hmac_secret_from_env
from .tokens import KeyResolver, Token, UnverifiedToken
from .validator import (
    DEFAULT_EXTRACTOR,
    DEFAULT_SIGNING_ALGORITHM,
    Options,
    Validator,
)

__all__ = [
    'JWTAuthError',
    'ExtractionFormatError',
    'TokenNotFoundError',
    'TokenExtractionError',
    'TokenParseError',
    'AlgorithmMismatchError',
    'TokenExtractor',
    'from_auth_header',
    'from_query_param',
    'from_cookie',
    'from_first',
    'static_key',
    'hmac_secret_from_env',
    'KeyResolver',
    'Token',
    'UnverifiedToken',
    'DEFAULT_EXTRACTOR',
    'DEFAULT_SIGNING_ALGORITHM',
    'Options',
    'Validator',
]
