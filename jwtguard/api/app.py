"""
FastAPI application for jwtguard.

A minimal service exposing a public health check and a protected endpoint
echoing the verified token's claims.
"""

from typing import Any, Dict

from fastapi import Depends, FastAPI

from jwtguard.auth import Options, Token, Validator, hmac_secret_from_env
from jwtguard.settings import get_signing_algorithm
from jwtguard.utils import logger
from .dependencies import JWTBearer


def create_app(validator: Validator) -> FastAPI:
    """
    Build the FastAPI application around a validator.

    Args:
        validator: Validator used by the protected routes

    Returns:
        FastAPI: Configured application
    """
    app = FastAPI(title="jwtguard")
    bearer = JWTBearer(validator)

    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.get("/me")
    def me(token: Token = Depends(bearer)) -> Dict[str, Any]:
        return {"algorithm": token.algorithm, "claims": token.claims}

    return app


def get_app() -> FastAPI:
    """
    Application factory used by run.py.

    The validator verifies HMAC tokens signed with JWT_SECRET and pins
    JWT_ALGORITHM (default HS256).

    Returns:
        FastAPI: Configured application
    """
    algorithm = get_signing_algorithm()
    logger.info(f"[APP] Starting jwtguard | pinned algorithm: {algorithm}")

    validator = Validator(Options(
        key_resolver=hmac_secret_from_env("JWT_SECRET"),
        signing_algorithm=algorithm,
    ))
    return create_app(validator)
