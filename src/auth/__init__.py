"""Caller identity and operation access policy."""

from .identity import Identity, IdentityExtractor, create_token, normalize_credential
from .policy import AccessPolicy, AuthError, ConfigError, Forbidden, Unauthenticated

__all__ = [
    "AccessPolicy",
    "AuthError",
    "ConfigError",
    "Forbidden",
    "Identity",
    "IdentityExtractor",
    "Unauthenticated",
    "create_token",
    "normalize_credential",
]
