"""
FastAPI dependencies for jwtguard.

Wraps a Validator so that route handlers receive a verified Token, and
failed validations turn into 401 responses.
"""

from typing import Optional

from fastapi import HTTPException, Request, status

from jwtguard.auth import JWTAuthError, Token, Validator
from jwtguard.auth.validator import ClaimsType
from jwtguard.utils import logger


class JWTBearer:
    """
    Dependency returning the verified token for the current request.

    Example:
        >>> bearer = JWTBearer(validator)
        >>> @app.get("/me")
        ... def me(token: Token = Depends(bearer)):
        ...     return token.claims
    """

    def __init__(self, validator: Validator, claims_type: Optional[ClaimsType] = None):
        """
        Initialize the dependency.

        Args:
            validator: Validator shared by all requests
            claims_type: If set, claims are decoded with get_with_claims()
        """
        self.validator = validator
        self.claims_type = claims_type

    def __call__(self, request: Request) -> Token:
        try:
            if self.claims_type is None:
                token = self.validator.get(request)
            else:
                token = self.validator.get_with_claims(request, self.claims_type)
        except JWTAuthError as e:
            logger.warning(
                f"[AUTH] Rejected {request.method} {request.url.path} | {e.code}: {e.message}"
            )
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail={"error": e.code, "message": e.message},
                headers={"WWW-Authenticate": "Bearer"},
            ) from e

        request.state.token = token
        return token
