"""
Token types for jwtguard.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional


@dataclass(frozen=True)
class UnverifiedToken:
    """A token decoded without signature verification, handed to key resolvers."""
    raw: str
    header: Dict[str, Any]
    claims: Dict[str, Any]

    @property
    def algorithm(self) -> Optional[str]:
        return self.header.get("alg")

    @property
    def key_id(self) -> Optional[str]:
        return self.header.get("kid")


@dataclass(frozen=True)
class Token:
    """
    A verified token. `claims` is a dict unless a claims type was requested.

    The validator only ever builds verified tokens, so `valid` is always True;
    it is kept so handlers can check the flag the way other JWT APIs expose it.
    """
    raw: str
    header: Dict[str, Any]
    claims: Any
    signature: bytes = field(repr=False, default=b"")
    valid: bool = True

    @property
    def algorithm(self) -> Optional[str]:
        return self.header.get("alg")


KeyResolver = Callable[[UnverifiedToken], Any]
