"""
Key resolver helpers for jwtguard.

A key resolver receives the unverified token and returns the key material
PyJWT should verify the signature with. Resolvers may raise; the validator
reports that as a parse error.
"""

from typing import Any

from jwtguard.settings import get_jwt_secret
from .tokens import KeyResolver, UnverifiedToken


def static_key(key: Any) -> KeyResolver:
    """
    Build a resolver that always answers the same key.

    Args:
        key: Shared secret (str/bytes) or public key accepted by PyJWT

    Returns:
        KeyResolver: Resolver returning `key` for every token
    """
    def resolve(token: UnverifiedToken) -> Any:
        return key

    return resolve


def hmac_secret_from_env(var: str = "JWT_SECRET") -> KeyResolver:
    """
    Build a resolver reading an HMAC secret from the environment.

    The variable is read on every call so a restarted worker picks up
    a changed .env without rebuilding the validator.

    Args:
        var: Environment variable holding the secret (default: "JWT_SECRET")

    Returns:
        KeyResolver: Resolver returning the secret; it raises ValueError
        when the variable is not set
    """
    def resolve(token: UnverifiedToken) -> str:
        return get_jwt_secret(var)

    return resolve
