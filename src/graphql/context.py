from __future__ import annotations

from typing import Optional

from strawberry.fastapi import BaseContext

from src.auth.identity import Identity
from src.auth.policy import AccessPolicy
from src.database.post_store import PostStore
from src.observability.hooks import ObservabilityHook


class PostContext(BaseContext):
    """Per-request state handed to every resolver."""

    def __init__(
        self,
        store: PostStore,
        policy: AccessPolicy,
        hook: ObservabilityHook,
        identity: Optional[Identity] = None,
    ):
        super().__init__()
        self.store = store
        self.policy = policy
        self.hook = hook
        self.identity = identity
