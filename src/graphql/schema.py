from __future__ import annotations

from typing import List, Optional

import strawberry
from strawberry import federation
from strawberry.types import Info

from src.database.models import Post as PostModel
from src.graphql.resolvers import post as post_resolvers


@federation.type(keys=["id"], extend=True)
class User:
    id: strawberry.ID = federation.field(external=True)

    @strawberry.field
    def posts(self, info: Info) -> List[Post]:
        return [Post.from_model(p) for p in post_resolvers.user_posts(info.context, self.id)]

    @classmethod
    def resolve_reference(cls, id: strawberry.ID) -> "User":
        return cls(id=id)


@federation.type(keys=["id"])
class Post:
    id: strawberry.ID
    title: str
    content: str
    author_id: strawberry.ID

    @strawberry.field
    def author(self) -> User:
        reference = post_resolvers.post_author(self)
        return User(id=strawberry.ID(str(reference.id)))

    @classmethod
    def resolve_reference(cls, info: Info, id: strawberry.ID) -> Optional["Post"]:
        return Post.from_model(post_resolvers.get_post(info.context, id))

    @staticmethod
    def from_model(model: Optional[PostModel]) -> Optional["Post"]:
        if model is None:
            return None
        return Post(
            id=strawberry.ID(str(model.id)),
            title=model.title,
            content=model.content,
            author_id=strawberry.ID(str(model.author_id)),
        )


@strawberry.input
class CreatePostInput:
    title: str
    content: str
    author_id: strawberry.ID


@strawberry.input
class UpdatePostInput:
    id: strawberry.ID
    title: Optional[str] = None
    content: Optional[str] = None


@strawberry.type
class Query:
    @strawberry.field
    def get_post(self, info: Info, id: strawberry.ID) -> Optional[Post]:
        return Post.from_model(post_resolvers.get_post(info.context, id))

    @strawberry.field
    def all_posts(self, info: Info) -> List[Post]:
        return [Post.from_model(p) for p in post_resolvers.all_posts(info.context)]


@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_post(self, info: Info, post: CreatePostInput) -> Optional[Post]:
        created = post_resolvers.create_post(info.context, {"title": post.title, "content": post.content})
        return Post.from_model(created)

    @strawberry.mutation
    def update_post(self, info: Info, post: UpdatePostInput) -> Optional[Post]:
        data = {"id": post.id, "title": post.title, "content": post.content}
        return Post.from_model(post_resolvers.update_post(info.context, data))

    @strawberry.mutation
    def delete_post(self, info: Info, id: strawberry.ID) -> Optional[Post]:
        return Post.from_model(post_resolvers.delete_post(info.context, id))
