"""
Environment configuration for the jwtguard app.

Only the bundled FastAPI app, the env key resolver and the runner read the
environment; the validator itself is configured entirely through Options.
"""

import logging
import os
from typing import Any, Dict


def get_jwt_secret(var: str = 'JWT_SECRET') -> str:
    """
    Read an HMAC signing secret from the environment.

    Args:
        var: Name of the variable holding the secret (default: "JWT_SECRET")

    Returns:
        str: The secret

    Raises:
        ValueError: If the variable is unset or empty
    """
    secret = os.getenv(var)
    if not secret:
        raise ValueError(f"{var} environment variable is required for authentication")
    return secret


def get_signing_algorithm() -> str:
    """
    Get the pinned signing algorithm (JWT_ALGORITHM, default HS256).

    Returns:
        str: Algorithm identifier, e.g. "HS256"
    """
    return os.getenv('JWT_ALGORITHM', 'HS256')


def get_log_level() -> int:
    """
    Get the log level from LOG_LEVEL (default INFO).

    Unknown level names fall back to INFO.

    Returns:
        int: A logging level constant
    """
    name = os.getenv('LOG_LEVEL', 'INFO').upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_server_config() -> Dict[str, Any]:
    """
    Get uvicorn settings from HOST, PORT and RELOAD.

    Returns:
        Dict with host, port and reload keys
    """
    return {
        "host": os.getenv("HOST", "0.0.0.0"),
        "port": int(os.getenv("PORT", 8000)),
        "reload": os.getenv("RELOAD", "false").lower() == "true",
    }
