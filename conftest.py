"""
Shared fixtures for the jwtguard tests.
"""

import time
from typing import Dict, Optional

import jwt
import pytest
from cryptography.hazmat.primitives.asymmetric import rsa
from starlette.requests import Request

SECRET = "test-secret-that-is-at-least-32-bytes-long"
CLAIMS = {"sub": "user-1", "name": "Ada Lovelace", "admin": True}


def make_request(
    authorization: Optional[str] = None,
    query_string: str = "",
    cookie: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> Request:
    """Build a starlette Request carrying the given auth material."""
    raw_headers = []
    if authorization is not None:
        raw_headers.append((b"authorization", authorization.encode("latin-1")))
    if cookie is not None:
        raw_headers.append((b"cookie", cookie.encode("latin-1")))
    for name, value in (headers or {}).items():
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))

    return Request({
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": raw_headers,
        "query_string": query_string.encode("latin-1"),
    })


def bearer(token: str) -> Request:
    return make_request(authorization=f"Bearer {token}")


@pytest.fixture
def hs256_token() -> str:
    return jwt.encode(CLAIMS, SECRET, algorithm="HS256")


@pytest.fixture(scope="session")
def rsa_private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def expired_token() -> str:
    claims = dict(CLAIMS, exp=int(time.time()) - 60)
    return jwt.encode(claims, SECRET, algorithm="HS256")
