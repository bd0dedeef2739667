"""
Apollo Federation helper for exporting the Strawberry schema as a subgraph.
"""

from __future__ import annotations

import strawberry
from strawberry.federation import Schema

from src.graphql.extensions import ObservabilityExtension
from src.graphql.schema import Query, Mutation, User


def build_federated_schema() -> Schema:
    """
    Build a federated schema that can be served by an ASGI app (e.g., via strawberry.fastapi).
    """
    return strawberry.federation.Schema(
        query=Query,
        mutation=Mutation,
        types=[User],
        extensions=[ObservabilityExtension],
    )


schema = build_federated_schema()
