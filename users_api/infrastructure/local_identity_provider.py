"""Local in-memory implementation of IdentityProvider."""

from typing import Dict

from ..domain.entities.identity import IdentityAttribute
from ..domain.exceptions import DependencyError
from ..domain.interfaces.identity_provider import IdentityProvider


class LocalIdentityProvider(IdentityProvider):
    """Token-to-attributes map for testing and development purposes."""

    def __init__(self):
        self._users: Dict[str, list[IdentityAttribute]] = {}

    def get_user(self, access_token: str) -> list[IdentityAttribute]:
        """Retrieve the attributes registered for ``access_token``.

        Raises:
            DependencyError: If the token is unknown.
        """
        if access_token not in self._users:
            raise DependencyError("Invalid Access Token")
        return list(self._users[access_token])

    def add_user(self, access_token: str, **attributes: str) -> None:
        """Register a token with the given attributes, e.g. ``email="a@b.c"``."""
        self._users[access_token] = [
            IdentityAttribute(name=name, value=value) for name, value in attributes.items()
        ]

    def clear(self) -> None:
        self._users.clear()
