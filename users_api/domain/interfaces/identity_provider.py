"""Identity provider protocol."""

from typing import Protocol, runtime_checkable

from ..entities.identity import IdentityAttribute


@runtime_checkable
class IdentityProvider(Protocol):
    """Protocol for looking up identity attributes of the token holder."""

    def get_user(self, access_token: str) -> list[IdentityAttribute]:
        """Retrieve the attributes of the user owning ``access_token``.

        Args:
            access_token: The caller's bearer token.

        Returns:
            list[IdentityAttribute]: The user's attributes, in provider order.

        Raises:
            DependencyError: If the provider rejects the token or is unreachable.
        """
        ...
