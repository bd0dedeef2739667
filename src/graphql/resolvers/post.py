"""
Post resolvers: CRUD operations and the Post <-> User relationship fields.

Every function takes the request context (identity, store, policy, hook) and
works on plain ``Post`` records; the schema layer maps them to GraphQL types.
"""

from __future__ import annotations

import logging
import re
from typing import Any, List, Mapping, Optional

from src.database.models import Post, UserReference
from src.graphql.context import PostContext
from src.observability.tracing import trace_function

logger = logging.getLogger(__name__)


def parse_id(value: Any) -> Optional[int]:
    """Convert a GraphQL ID to a post/user id; non-numeric ids match nothing."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if re.fullmatch(r"-?[0-9]+", text):
        return int(text)
    return None


@trace_function("posts.get_post")
def get_post(ctx: PostContext, post_id: Any) -> Optional[Post]:
    ctx.policy.authorize("getPost", ctx.identity, "read a post")
    parsed = parse_id(post_id)
    if parsed is None:
        return None
    return ctx.store.get(parsed)


@trace_function("posts.all_posts")
def all_posts(ctx: PostContext) -> List[Post]:
    ctx.policy.authorize("allPosts", ctx.identity, "list posts")
    return ctx.store.list()


@trace_function("posts.create_post")
def create_post(ctx: PostContext, data: Mapping[str, Any]) -> Post:
    """Store a new post authored by the caller.

    Any ``authorId`` supplied by the client is ignored: the authenticated
    identity is the author.
    """
    ctx.policy.authorize("createPost", ctx.identity, "create a post")
    post = ctx.store.insert(
        title=data["title"],
        content=data["content"],
        author_id=ctx.identity.user_id,
    )
    ctx.hook.mutation_applied("createPost", post.id, ctx.identity.user_id, store_size=len(ctx.store))
    return post


def _author_guard(ctx: PostContext, operation: str, action: str):
    if not ctx.policy.requires_author(operation):
        return None

    def guard(current: Post) -> None:
        ctx.policy.check_author(ctx.identity, current.author_id, action)

    return guard


@trace_function("posts.update_post")
def update_post(ctx: PostContext, data: Mapping[str, Any]) -> Optional[Post]:
    ctx.policy.authorize("updatePost", ctx.identity, "update a post")
    parsed = parse_id(data.get("id"))
    if parsed is None:
        return None
    fields = {name: data.get(name) for name in ("title", "content")}
    post = ctx.store.update(parsed, fields, precondition=_author_guard(ctx, "updatePost", "update this post"))
    if post is None:
        logger.debug("updatePost: no post with id %s", parsed)
        return None
    ctx.hook.mutation_applied("updatePost", post.id, _caller_id(ctx), store_size=len(ctx.store))
    return post


@trace_function("posts.delete_post")
def delete_post(ctx: PostContext, post_id: Any) -> Optional[Post]:
    ctx.policy.authorize("deletePost", ctx.identity, "delete a post")
    parsed = parse_id(post_id)
    if parsed is None:
        return None
    post = ctx.store.delete(parsed, precondition=_author_guard(ctx, "deletePost", "delete this post"))
    if post is None:
        logger.debug("deletePost: no post with id %s", parsed)
        return None
    ctx.hook.mutation_applied("deletePost", post.id, _caller_id(ctx), store_size=len(ctx.store))
    return post


def post_author(post: Post) -> UserReference:
    """Federation stub for the post's author; the owning subgraph fills in the rest."""
    return UserReference(id=parse_id(post.author_id))


def user_posts(ctx: PostContext, user_id: Any) -> List[Post]:
    parsed = parse_id(user_id)
    if parsed is None:
        return []
    return ctx.store.by_author(parsed)


def _caller_id(ctx: PostContext) -> Optional[int]:
    return ctx.identity.user_id if ctx.identity else None
