"""
Thread-safe in-memory post storage.

All access goes through one re-entrant lock, so id assignment and the
lookup-then-write sequences of update/delete are atomic with respect to other
requests. Callers always receive copies of stored posts.
"""

import logging
import threading
from dataclasses import replace
from typing import Callable, Dict, List, Mapping, Optional

from .models import Post

logger = logging.getLogger(__name__)

Precondition = Callable[[Post], None]
MUTABLE_FIELDS = ("title", "content")


class PostStore:
    """Insertion-ordered id -> Post mapping with a monotonic id counter."""

    def __init__(self):
        self._posts: Dict[int, Post] = {}
        self._last_id = 0
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._posts)

    def get(self, post_id: int) -> Optional[Post]:
        with self._lock:
            post = self._posts.get(post_id)
            return replace(post) if post else None

    def list(self) -> List[Post]:
        with self._lock:
            return [replace(p) for p in self._posts.values()]

    def by_author(self, author_id: int) -> List[Post]:
        """O(n) scan over all posts, unpaginated."""
        with self._lock:
            return [replace(p) for p in self._posts.values() if p.author_id == author_id]

    def insert(self, title: str, content: str, author_id: int) -> Post:
        with self._lock:
            self._last_id += 1
            post = Post(id=self._last_id, title=title, content=content, author_id=author_id)
            self._posts[post.id] = post
            logger.debug("Stored post %s for author %s", post.id, author_id)
            return replace(post)

    def update(
        self,
        post_id: int,
        fields: Mapping[str, Optional[str]],
        precondition: Optional[Precondition] = None,
    ) -> Optional[Post]:
        """Merge provided title/content into an existing post.

        ``precondition`` runs under the lock against the current post and may
        raise to abort the update.
        """
        with self._lock:
            post = self._posts.get(post_id)
            if post is None:
                return None
            if precondition is not None:
                precondition(replace(post))
            for name in MUTABLE_FIELDS:
                value = fields.get(name)
                if value is not None:
                    setattr(post, name, value)
            return replace(post)

    def delete(self, post_id: int, precondition: Optional[Precondition] = None) -> Optional[Post]:
        with self._lock:
            post = self._posts.get(post_id)
            if post is None:
                return None
            if precondition is not None:
                precondition(replace(post))
            del self._posts[post_id]
            return replace(post)
