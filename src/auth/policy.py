from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from src.auth.identity import Identity

logger = logging.getLogger(__name__)

PUBLIC = "public"
AUTHENTICATED = "authenticated"
AUTHOR = "author"
CAPABILITY_ORDER = {PUBLIC: 0, AUTHENTICATED: 1, AUTHOR: 2}

OPERATIONS = ("getPost", "allPosts", "createPost", "updatePost", "deletePost")
DEFAULT_POLICY = {
    "getPost": PUBLIC,
    "allPosts": PUBLIC,
    "createPost": AUTHENTICATED,
    "updatePost": PUBLIC,
    "deletePost": PUBLIC,
}
# createPost stamps the caller as author, so it can never be public.
MINIMUM_CAPABILITY = {"createPost": AUTHENTICATED}


class ConfigError(ValueError):
    pass


class AuthError(Exception):
    pass


class Unauthenticated(AuthError):
    def __init__(self, action: str = "perform this operation"):
        super().__init__(f"You must be logged in to {action}")


class Forbidden(AuthError):
    def __init__(self, action: str = "perform this operation"):
        super().__init__(f"Only the author may {action}")


class AccessPolicy:
    """Operation -> required capability table."""

    def __init__(self, rules: Optional[Mapping[str, str]] = None):
        table: Dict[str, str] = dict(DEFAULT_POLICY)
        for operation, capability in (rules or {}).items():
            if operation not in OPERATIONS:
                raise ConfigError(f"Unknown operation in policy: {operation}")
            if capability not in CAPABILITY_ORDER:
                raise ConfigError(f"Unknown capability '{capability}' for {operation}")
            table[operation] = capability
        for operation, minimum in MINIMUM_CAPABILITY.items():
            if CAPABILITY_ORDER[table[operation]] < CAPABILITY_ORDER[minimum]:
                logger.warning("Policy for %s raised from %s to %s", operation, table[operation], minimum)
                table[operation] = minimum
        self.rules = table

    @classmethod
    def from_config(cls, cfg) -> "AccessPolicy":
        return cls(cfg.policy)

    def capability(self, operation: str) -> str:
        return self.rules[operation]

    def authorize(self, operation: str, identity: Optional[Identity], action: str) -> None:
        """Check the identity requirement of an operation."""
        if self.rules[operation] == PUBLIC:
            return
        if identity is None or not identity.user_id:
            raise Unauthenticated(action)

    def requires_author(self, operation: str) -> bool:
        return self.rules[operation] == AUTHOR

    def check_author(self, identity: Identity, author_id: int, action: str) -> None:
        if identity.user_id != author_id:
            raise Forbidden(action)
