"""Shared fixtures for the users API tests."""

import pytest

from users_api.application.profile_handler import ProfileHandler
from users_api.domain.entities import ApiRequest, UserProfile
from users_api.infrastructure.local_identity_provider import LocalIdentityProvider
from users_api.infrastructure.local_profile_store import LocalProfileStore


@pytest.fixture
def profile_store():
    """In-memory store seeded with one user."""
    store = LocalProfileStore()
    store.add_user(
        UserProfile(
            username="jdoe",
            bio="Loves hiking",
            profile_picture="https://cdn.example.com/jdoe.png",
        )
    )
    return store


@pytest.fixture
def identity_provider():
    """In-memory identity provider knowing one token."""
    provider = LocalIdentityProvider()
    provider.add_user("token-123", sub="abc-123", email="jdoe@example.com", nickname="JD")
    return provider


@pytest.fixture
def profile_handler(profile_store, identity_provider):
    return ProfileHandler(profile_store=profile_store, identity_provider=identity_provider)


@pytest.fixture
def make_request():
    """Factory for requests from the authenticated user ``jdoe``."""

    def _make(method="GET", username="jdoe", authorization="Bearer token-123", body=None):
        headers = {} if authorization is None else {"authorization": authorization}
        claims = {} if username is None else {"username": username}
        return ApiRequest(method=method, headers=headers, claims=claims, body=body)

    return _make
