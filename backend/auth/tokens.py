"""
auth/tokens.py
--------------
Signed bearer tokens for the login endpoint.

Format:  <payload>.<signature>
  payload   - base64url (no padding) of the JSON {"sub", "iat", "exp"}
  signature - base64url (no padding) of HMAC-SHA256(secret, payload)

Timestamps are epoch seconds.
"""

import base64
import hashlib
import hmac
import json
import time


# ---------------------------------------------------------------------------
# Encoding helpers
# ---------------------------------------------------------------------------

def _base64UrlEncode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _sign(secret: str, encodedPayload: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), encodedPayload.encode("utf-8"), hashlib.sha256).digest()
    return _base64UrlEncode(digest)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def issueToken(username: str, secret: str, ttlSeconds: int, now: int | None = None) -> str:
    """
    Issue a token for `username` valid for `ttlSeconds`.

    Args:
        username:   Subject stored in the "sub" claim.
        secret:     HMAC key.
        ttlSeconds: Lifetime; "exp" = "iat" + ttlSeconds.
        now:        Issue time override (epoch seconds), for tests.
    """
    issuedAt = int(time.time()) if now is None else now
    payload  = {"sub": username, "iat": issuedAt, "exp": issuedAt + ttlSeconds}

    encodedPayload = _base64UrlEncode(json.dumps(payload, separators=(",", ":")).encode("utf-8"))
    return f"{encodedPayload}.{_sign(secret, encodedPayload)}"
