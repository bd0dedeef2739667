"""
In-memory entity models.
"""

from dataclasses import dataclass


@dataclass
class Post:
    id: int
    title: str
    content: str
    author_id: int


@dataclass(frozen=True)
class UserReference:
    """Reference to a User owned by another subgraph; only the key is known here."""

    id: int
    typename: str = "User"
