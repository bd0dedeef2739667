import random

import pytest

from src.auth.policy import Forbidden, Unauthenticated
from src.database.models import UserReference
from src.graphql.resolvers import post as resolvers


def test_create_then_get_uses_identity_as_author(make_context):
    ctx = make_context(user_id=7)
    created = resolvers.create_post(ctx, {"title": "Hello", "content": "World", "authorId": "99"})
    fetched = resolvers.get_post(ctx, str(created.id))
    assert (fetched.title, fetched.content) == ("Hello", "World")
    assert fetched.author_id == 7


def test_create_without_identity_fails_and_stores_nothing(make_context, store):
    with pytest.raises(Unauthenticated, match="create a post"):
        resolvers.create_post(make_context(), {"title": "t", "content": "c"})
    with pytest.raises(Unauthenticated):
        resolvers.create_post(make_context(user_id=0), {"title": "t", "content": "c"})
    assert len(store) == 0


def test_update_unknown_id_returns_none(make_context, store):
    ctx = make_context(user_id=1)
    resolvers.create_post(ctx, {"title": "t", "content": "c"})
    before = store.list()
    assert resolvers.update_post(make_context(), {"id": "42", "title": "x"}) is None
    assert store.list() == before


def test_update_is_partial_and_open_by_default(make_context):
    created = resolvers.create_post(make_context(user_id=1), {"title": "t", "content": "c"})
    updated = resolvers.update_post(make_context(), {"id": str(created.id), "content": "new"})
    assert (updated.title, updated.content, updated.author_id) == ("t", "new", 1)


def test_delete_then_get_returns_none(make_context):
    ctx = make_context(user_id=1)
    created = resolvers.create_post(ctx, {"title": "t", "content": "c"})
    assert resolvers.delete_post(ctx, str(created.id)).id == created.id
    assert resolvers.get_post(ctx, str(created.id)) is None
    assert resolvers.delete_post(ctx, str(created.id)) is None


def test_non_numeric_ids_match_nothing(make_context):
    ctx = make_context(user_id=1)
    resolvers.create_post(ctx, {"title": "t", "content": "c"})
    assert resolvers.get_post(ctx, "abc") is None
    assert resolvers.delete_post(ctx, "1abc") is None
    assert resolvers.user_posts(ctx, "nobody") == []
    assert resolvers.get_post(ctx, "--1") is None
    assert resolvers.delete_post(ctx, "²") is None
    assert resolvers.update_post(ctx, {"id": "1_0", "title": "x"}) is None
    assert resolvers.user_posts(ctx, "--1") == []
    assert resolvers.get_post(ctx, " 1 ").id == 1


def test_relationships_between_users_and_posts(make_context):
    first = resolvers.create_post(make_context(user_id=1), {"title": "one", "content": "c", "authorId": "1"})
    second = resolvers.create_post(make_context(user_id=2), {"title": "two", "content": "c", "authorId": "2"})
    ctx = make_context()

    assert resolvers.user_posts(ctx, "1") == [first]
    assert resolvers.user_posts(ctx, 2) == [second]
    assert resolvers.post_author(first) == UserReference(id=1)
    assert resolvers.post_author(second).typename == "User"
    assert resolvers.post_author(second).id == 2


def test_ids_stay_unique_across_random_operations(make_context):
    ctx = make_context(user_id=3)
    rng = random.Random(1234)
    for _ in range(200):
        posts = resolvers.all_posts(ctx)
        if posts and rng.random() < 0.4:
            resolvers.delete_post(ctx, str(rng.choice(posts).id))
        else:
            resolvers.create_post(ctx, {"title": "t", "content": "c"})
        ids = [p.id for p in resolvers.all_posts(ctx)]
        assert len(ids) == len(set(ids))


def test_author_only_policy(make_context, store):
    rules = {"updatePost": "author", "deletePost": "author"}
    created = resolvers.create_post(make_context(user_id=1, rules=rules), {"title": "t", "content": "c"})

    with pytest.raises(Unauthenticated):
        resolvers.update_post(make_context(rules=rules), {"id": str(created.id), "title": "x"})
    with pytest.raises(Forbidden):
        resolvers.update_post(make_context(user_id=2, rules=rules), {"id": str(created.id), "title": "x"})
    with pytest.raises(Forbidden):
        resolvers.delete_post(make_context(user_id=2, rules=rules), str(created.id))
    assert store.get(created.id).title == "t"

    owner = make_context(user_id=1, rules=rules)
    assert resolvers.update_post(owner, {"id": str(created.id), "title": "x"}).title == "x"
    assert resolvers.delete_post(owner, str(created.id)).id == created.id
    assert len(store) == 0


def test_protected_reads(make_context):
    rules = {"getPost": "authenticated", "allPosts": "authenticated"}
    with pytest.raises(Unauthenticated):
        resolvers.get_post(make_context(rules=rules), "1")
    with pytest.raises(Unauthenticated):
        resolvers.all_posts(make_context(rules=rules))
    assert resolvers.all_posts(make_context(user_id=1, rules=rules)) == []


def test_mutations_are_reported_to_the_hook(make_context, hook):
    ctx = make_context(user_id=5)
    created = resolvers.create_post(ctx, {"title": "t", "content": "c"})
    resolvers.update_post(ctx, {"id": str(created.id), "title": "x"})
    resolvers.delete_post(ctx, str(created.id))
    resolvers.delete_post(ctx, str(created.id))

    applied = [e for e in hook.events if e[0] == "mutation_applied"]
    assert applied == [
        ("mutation_applied", "createPost", created.id, 5),
        ("mutation_applied", "updatePost", created.id, 5),
        ("mutation_applied", "deletePost", created.id, 5),
    ]
