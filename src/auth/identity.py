"""
Bearer credential verification.

Turns the raw value of the configured authorization header into an
``Identity`` or ``None``. Verification fails closed: every parsing, signature
or expiry problem yields ``None`` and is reported to the observability hook.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Sequence, Union

from jose import ExpiredSignatureError, JWTError, jwt

from src.observability.hooks import NullHook, ObservabilityHook

RawCredential = Union[str, Sequence[str], None]


@dataclass(frozen=True)
class Identity:
    user_id: int


def normalize_credential(raw: Any) -> Optional[str]:
    """Reduce a header value to a single credential string.

    Multi-valued headers arrive as lists; only the first value counts.
    """
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (list, tuple)) and raw and isinstance(raw[0], str):
        return raw[0]
    return None


def _user_id_claim(payload: dict) -> Optional[int]:
    value = payload.get("userId")
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return None


def create_token(
    user_id: int,
    secret: str,
    algorithm: str = "HS256",
    expires_delta: Optional[timedelta] = timedelta(hours=1),
) -> str:
    now = datetime.now(timezone.utc)
    payload = {"userId": user_id, "iat": now}
    if expires_delta is not None:
        payload["exp"] = now + expires_delta
    return jwt.encode(payload, secret, algorithm=algorithm)


class IdentityExtractor:
    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        require_expiry: bool = False,
        hook: Optional[ObservabilityHook] = None,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.require_expiry = require_expiry
        self.hook = hook or NullHook()

    @classmethod
    def from_config(cls, cfg, hook: Optional[ObservabilityHook] = None) -> "IdentityExtractor":
        return cls(
            secret=cfg.jwt_secret,
            algorithm=cfg.jwt_algorithm,
            require_expiry=cfg.require_expiry,
            hook=hook,
        )

    def parse_bearer(self, credential: Optional[str]) -> Optional[str]:
        if not credential:
            return None
        parts = credential.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            self.hook.auth_failed("malformed_credential")
            return None
        return parts[1]

    def verify(self, token: str) -> Optional[dict]:
        options = {"require_exp": self.require_expiry, "leeway": 0}
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm], options=options)
        except ExpiredSignatureError:
            self.hook.auth_failed("expired")
        except JWTError:
            self.hook.auth_failed("invalid_token")
        return None

    def extract(self, raw: RawCredential) -> Optional[Identity]:
        token = self.parse_bearer(normalize_credential(raw))
        if token is None:
            return None
        payload = self.verify(token)
        if payload is None:
            return None
        user_id = _user_id_claim(payload)
        if user_id is None:
            self.hook.auth_failed("missing_user_id")
            return None
        return Identity(user_id=user_id)
