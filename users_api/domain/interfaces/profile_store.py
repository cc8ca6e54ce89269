"""Profile store protocol."""

from typing import Optional, Protocol, runtime_checkable

from ..entities.user_profile import UserProfile


@runtime_checkable
class ProfileStore(Protocol):
    """Protocol for profile persistence backends.

    Implementations can use different storage backends (MySQL through
    SQLAlchemy, in-memory, etc.).
    """

    def find_by_username(self, username: str) -> Optional[UserProfile]:
        """Retrieve a live profile by username.

        Args:
            username: The primary key of the profile.

        Returns:
            Optional[UserProfile]: The profile, or None if it does not exist
            or has been soft-deleted.

        Raises:
            DependencyError: If the backend cannot be queried.
        """
        ...

    def save(self, profile: UserProfile) -> None:
        """Insert or update a profile by its username.

        Args:
            profile: The profile to persist.

        Raises:
            DependencyError: If the write fails.
        """
        ...
