"""Domain interfaces for the users API."""

from .identity_provider import IdentityProvider
from .profile_store import ProfileStore

__all__ = ["IdentityProvider", "ProfileStore"]
