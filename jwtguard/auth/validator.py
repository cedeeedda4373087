"""
JWT validator for jwtguard.

Pulls the raw token out of a request, verifies it with PyJWT using the key
returned by the configured resolver, then checks the token's 'alg' header
against the pinned signing algorithm.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

import jwt
from jwt.algorithms import get_default_algorithms
from pydantic import BaseModel
from starlette.requests import HTTPConnection

from .errors import (
    AlgorithmMismatchError,
    TokenExtractionError,
    TokenNotFoundError,
    TokenParseError,
)
from .extractors import TokenExtractor, from_auth_header
from .tokens import KeyResolver, Token, UnverifiedToken
from jwtguard.utils import logger, truncate_text

DEFAULT_SIGNING_ALGORITHM = "HS256"
DEFAULT_EXTRACTOR = from_auth_header

ClaimsType = Callable[[Dict[str, Any]], Any]


@dataclass(frozen=True)
class Options:
    """
    Validator configuration.

    Attributes:
        key_resolver: Returns the key to verify a token with. Required; if
            unset, every validation fails with TokenParseError.
        extractor: Pulls the raw token from a request.
            Defaults to the 'Authorization: Bearer <token>' header.
        signing_algorithm: The only algorithm tokens may declare.
            Defaults to HS256.
        audience: Expected 'aud' claim, passed through to PyJWT.
        issuer: Expected 'iss' claim, passed through to PyJWT.
        leeway: Clock skew tolerance in seconds for exp/nbf/iat.
    """
    key_resolver: Optional[KeyResolver] = None
    extractor: Optional[TokenExtractor] = None
    signing_algorithm: Optional[str] = None
    audience: Optional[Union[str, Sequence[str]]] = None
    issuer: Optional[str] = None
    leeway: float = 0


class Validator:
    """
    Validates JWTs carried on requests.

    The validator holds no per-request state; one instance can serve
    concurrent requests.

    Example:
        >>> validator = Validator(Options(key_resolver=static_key(secret)))
        >>> token = validator.get(request)
        >>> token.claims["sub"]
    """

    def __init__(self, options: Optional[Options] = None):
        """
        Initialize the validator, filling in defaults for unset options.

        Args:
            options: Validator options

        Raises:
            ValueError: If the signing algorithm is unknown to PyJWT or is 'none'
        """
        options = options or Options()
        self.options = dataclasses.replace(
            options,
            extractor=options.extractor or DEFAULT_EXTRACTOR,
            signing_algorithm=options.signing_algorithm or DEFAULT_SIGNING_ALGORITHM,
        )

        supported = _supported_algorithms()
        if self.options.signing_algorithm not in supported:
            raise ValueError(
                f"Unsupported signing algorithm '{self.options.signing_algorithm}'. "
                f"Supported algorithms: {', '.join(sorted(supported))}"
            )
        self._algorithms = supported

    def get(self, request: HTTPConnection) -> Token:
        """
        Extract and validate the token from the request.

        Args:
            request: Incoming request

        Returns:
            Token: The verified token with its claims as a dict

        Raises:
            TokenExtractionError: If the extractor failed
            TokenNotFoundError: If the request carries no token
            TokenParseError: If PyJWT rejected the token
            AlgorithmMismatchError: If the token's algorithm is not the pinned one
        """
        raw = self._raw_token(request)
        token = self._parse(raw)
        self._validate_token(token)
        return token

    def get_with_claims(self, request: HTTPConnection, claims_type: ClaimsType) -> Token:
        """
        Extract and validate the token, decoding its claims into `claims_type`.

        Args:
            request: Incoming request
            claims_type: A pydantic model class, or any callable taking the
                payload dict and returning the claims object

        Returns:
            Token: The verified token with `claims` built by `claims_type`

        Raises:
            Same as get(). Claims that `claims_type` refuses raise TokenParseError.
        """
        raw = self._raw_token(request)
        token = self._parse(raw, claims_type)
        self._validate_token(token)
        return token

    # Helpers

    def _raw_token(self, request: HTTPConnection) -> str:
        try:
            raw = self.options.extractor(request)
        except Exception as e:
            raise TokenExtractionError(f"Error extracting token: {e}") from e

        if not raw:
            raise TokenNotFoundError("Token not found")

        return raw

    def _parse(self, raw: str, claims_type: Optional[ClaimsType] = None) -> Token:
        try:
            key = self._resolve_key(raw)
            decoded = jwt.decode_complete(
                raw,
                key,
                algorithms=self._algorithms,
                audience=self.options.audience,
                issuer=self.options.issuer,
                leeway=self.options.leeway,
            )
            claims = decoded["payload"]
            if claims_type is not None:
                claims = _decode_claims(claims_type, claims)
        except Exception as e:
            logger.debug(f"[AUTH] Token rejected | {e} | token: {truncate_text(raw)}")
            raise TokenParseError(f"Error parsing token: {e}") from e

        return Token(
            raw=raw,
            header=decoded["header"],
            claims=claims,
            signature=decoded["signature"],
            valid=True,
        )

    def _resolve_key(self, raw: str) -> Any:
        if self.options.key_resolver is None:
            raise ValueError("no key resolver was provided")

        unverified = UnverifiedToken(
            raw=raw,
            header=jwt.get_unverified_header(raw),
            claims=jwt.decode(raw, options={"verify_signature": False}),
        )
        return self.options.key_resolver(unverified)

    def _validate_token(self, token: Token) -> None:
        # Pin the algorithm independently of what the token claims
        alg = self.options.signing_algorithm
        if alg != token.header.get("alg"):
            logger.debug(
                f"[AUTH] Algorithm mismatch | wanted: {alg} | got: {token.header.get('alg')}"
            )
            raise AlgorithmMismatchError(alg, token.header.get("alg"))


def _supported_algorithms() -> List[str]:
    # 'none' never verifies a signature, so it is never offered to PyJWT
    return [name for name in get_default_algorithms() if name != "none"]


def _decode_claims(claims_type: ClaimsType, payload: Dict[str, Any]) -> Any:
    if isinstance(claims_type, type) and issubclass(claims_type, BaseModel):
        return claims_type.model_validate(payload)
    return claims_type(payload)
