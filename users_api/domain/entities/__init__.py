"""Domain entities for the users API."""

from .http import ApiRequest, ApiResponse
from .identity import CallerContext, IdentityAttribute, IdentityAttributes
from .user_profile import ProfileUpdate, ProfileView, UserProfile

__all__ = [
    # Profile entities
    "UserProfile",
    "ProfileUpdate",
    "ProfileView",
    # Identity entities
    "CallerContext",
    "IdentityAttribute",
    "IdentityAttributes",
    # HTTP entities
    "ApiRequest",
    "ApiResponse",
]
