"""Infrastructure layer components."""

from .cognito_identity_provider import CognitoIdentityProvider
from .local_identity_provider import LocalIdentityProvider
from .local_profile_store import LocalProfileStore
from .sql_profile_store import SqlProfileStore

__all__ = [
    "CognitoIdentityProvider",
    "LocalIdentityProvider",
    "LocalProfileStore",
    "SqlProfileStore",
]
