"""Local in-memory implementation of ProfileStore."""

from datetime import datetime, timezone
from typing import Dict, Optional

from ..domain.entities.user_profile import UserProfile
from ..domain.interfaces.profile_store import ProfileStore


class LocalProfileStore(ProfileStore):
    """Local in-memory implementation of the ProfileStore protocol.

    Stores profiles in a dictionary for testing and development purposes.
    """

    def __init__(self):
        self._profiles: Dict[str, UserProfile] = {}

    def find_by_username(self, username: str) -> Optional[UserProfile]:
        """Retrieve a live profile by username from the dictionary.

        Args:
            username: The primary key of the profile.

        Returns:
            Optional[UserProfile]: A copy of the profile, or None if missing
            or soft-deleted.
        """
        profile = self._profiles.get(username)
        if profile is None or profile.is_deleted:
            return None
        return profile.model_copy()

    def save(self, profile: UserProfile) -> None:
        """Insert or update a profile, stamping its timestamps.

        Args:
            profile: The profile to store.
        """
        now = datetime.now(timezone.utc)
        existing = self._profiles.get(profile.username)
        created_at = existing.created_at if existing else (profile.created_at or now)
        self._profiles[profile.username] = profile.model_copy(
            update={"created_at": created_at, "updated_at": now}
        )

    def add_user(self, profile: UserProfile) -> None:
        """Seed a profile.

        Args:
            profile: The profile to store.
        """
        self.save(profile)

    def delete_user(self, username: str) -> None:
        """Soft-delete a profile.

        Args:
            username: The primary key of the profile.

        Raises:
            ValueError: If the user is not found.
        """
        if username not in self._profiles:
            raise ValueError(f"User {username} not found")

        self._profiles[username] = self._profiles[username].model_copy(
            update={"deleted_at": datetime.now(timezone.utc)}
        )

    def clear(self) -> None:
        """Clear all profiles from the dictionary."""
        self._profiles.clear()
