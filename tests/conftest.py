from datetime import timedelta

import pytest

from src.auth.identity import Identity, IdentityExtractor, create_token
from src.auth.policy import AccessPolicy
from src.database.post_store import PostStore
from src.graphql.context import PostContext
from src.observability.hooks import ObservabilityHook

SECRET = "test-secret"


class RecordingHook(ObservabilityHook):
    def __init__(self):
        self.events = []

    def request_started(self, operation_type, operation_name=None):
        self.events.append(("request_started", operation_type))

    def request_finished(self, operation_type, duration):
        self.events.append(("request_finished", operation_type))

    def auth_failed(self, reason):
        self.events.append(("auth_failed", reason))

    def mutation_applied(self, operation, post_id, user_id=None, store_size=None):
        self.events.append(("mutation_applied", operation, post_id, user_id))


@pytest.fixture
def hook():
    return RecordingHook()


@pytest.fixture
def store():
    return PostStore()


@pytest.fixture
def extractor(hook):
    return IdentityExtractor(secret=SECRET, hook=hook)


@pytest.fixture
def make_token():
    def factory(user_id=7, expires_delta=timedelta(minutes=5), secret=SECRET):
        return create_token(user_id, secret, expires_delta=expires_delta)

    return factory


@pytest.fixture
def make_context(store, hook):
    def factory(user_id=None, rules=None):
        identity = Identity(user_id=user_id) if user_id is not None else None
        return PostContext(store=store, policy=AccessPolicy(rules), hook=hook, identity=identity)

    return factory
