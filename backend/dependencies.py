from typing import Optional

from fastapi import Depends, Request

from src.auth.identity import Identity, IdentityExtractor
from src.auth.policy import AccessPolicy
from src.database.post_store import PostStore
from src.graphql.context import PostContext
from src.observability.hooks import ObservabilityHook
from src.utils.config import config

hook = ObservabilityHook()
store = PostStore()
policy = AccessPolicy.from_config(config)
extractor = IdentityExtractor.from_config(config, hook=hook)
AUTH_HEADER = config.auth_header


def get_store() -> PostStore:
    return store


def get_identity(request: Request) -> Optional[Identity]:
    # Multi-valued headers are passed through; the extractor keeps only the first value
    values = request.headers.getlist(AUTH_HEADER)
    return extractor.extract(values or None)


async def get_context(
    identity: Optional[Identity] = Depends(get_identity),  # noqa: B008
    post_store: PostStore = Depends(get_store),  # noqa: B008
) -> PostContext:
    return PostContext(store=post_store, policy=policy, hook=hook, identity=identity)
