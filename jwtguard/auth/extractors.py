"""
Token extractors for jwtguard.

An extractor is any callable taking a request and returning the raw token
string. Returning an empty string means "no token here" and is not an error;
raising means the request carried something that cannot be a token.
"""

from typing import Callable

from starlette.requests import HTTPConnection

from .errors import ExtractionFormatError

TokenExtractor = Callable[[HTTPConnection], str]

AUTH_HEADER = "Authorization"
BEARER_SCHEME = "bearer"


def from_auth_header(request: HTTPConnection) -> str:
    """
    Default extractor. Reads the token from the 'Authorization' header.

    The header must be of the form 'Bearer <token>'. The scheme is compared
    case-insensitively and the token part is returned verbatim.

    Args:
        request: Incoming request (anything with a case-insensitive `headers` mapping)

    Returns:
        str: The token, or an empty string if the header is absent or empty

    Raises:
        ExtractionFormatError: If the header is not of the form 'Bearer <token>'

    Example:
        >>> from_auth_header(request)  # Authorization: Bearer eyJhbGci...
        'eyJhbGci...'
    """
    header = request.headers.get(AUTH_HEADER)
    if not header:
        return ""

    parts = header.split(" ")
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
        raise ExtractionFormatError(
            "Authorization header format must be 'Bearer <token>'"
        )

    return parts[1]


def from_query_param(name: str = "token") -> TokenExtractor:
    """
    Build an extractor reading the token from a query parameter.

    Useful for WebSocket handshakes, where browsers cannot set headers.

    Args:
        name: Query parameter name (default: "token")

    Returns:
        TokenExtractor: Extractor returning the parameter value or ""

    Example:
        >>> extractor = from_query_param("access_token")
    """
    def extract(request: HTTPConnection) -> str:
        return request.query_params.get(name) or ""

    return extract


def from_cookie(name: str) -> TokenExtractor:
    """
    Build an extractor reading the token from a cookie.

    Args:
        name: Cookie name

    Returns:
        TokenExtractor: Extractor returning the cookie value or ""
    """
    def extract(request: HTTPConnection) -> str:
        return request.cookies.get(name) or ""

    return extract


def from_first(*extractors: TokenExtractor) -> TokenExtractor:
    """
    Combine extractors, returning the first non-empty token.

    Errors are not skipped: if an extractor raises, the combined
    extractor raises too.

    Args:
        *extractors: Extractors to try, in order

    Returns:
        TokenExtractor: Combined extractor

    Example:
        >>> extractor = from_first(from_auth_header, from_query_param("token"))
    """
    def extract(request: HTTPConnection) -> str:
        for extractor in extractors:
            token = extractor(request)
            if token:
                return token
        return ""

    return extract
