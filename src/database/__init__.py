from .models import Post, UserReference
from .post_store import PostStore

__all__ = ["Post", "PostStore", "UserReference"]
