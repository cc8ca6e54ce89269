"""SQLAlchemy implementation of ProfileStore."""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..domain.entities.user_profile import UserProfile
from ..domain.exceptions import DependencyError
from ..domain.interfaces.profile_store import ProfileStore
from .database import UserRecord

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    # MySQL DATETIME columns are naive; keep everything in UTC.
    return datetime.now(timezone.utc).replace(tzinfo=None)


class SqlProfileStore(ProfileStore):
    """Relational profile store bound to a single SQLAlchemy session."""

    def __init__(self, session: Session):
        """Initialize the store.

        Args:
            session: Session scoped to the current invocation.
        """
        self.session = session

    def find_by_username(self, username: str) -> Optional[UserProfile]:
        """Retrieve a live profile by username.

        Args:
            username: The primary key of the profile.

        Returns:
            Optional[UserProfile]: The profile, or None if missing or soft-deleted.

        Raises:
            DependencyError: If the query fails.
        """
        stmt = select(UserRecord).where(
            UserRecord.username == username,
            UserRecord.deleted_at.is_(None),
        )
        try:
            record = self.session.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Failed to query user {username}: {e}", exc_info=True)
            raise DependencyError(str(e)) from e

        if record is None:
            return None
        return self._record_to_profile(record)

    def save(self, profile: UserProfile) -> None:
        """Upsert a profile by username and commit.

        Args:
            profile: The profile to persist.

        Raises:
            DependencyError: If the write fails. The transaction is rolled back.
        """
        now = _utcnow()
        try:
            record = self.session.get(UserRecord, profile.username)
            if record is None:
                record = UserRecord(username=profile.username, created_at=profile.created_at or now)
                self.session.add(record)

            record.bio = profile.bio
            record.profile_picture = profile.profile_picture
            record.deleted_at = profile.deleted_at
            record.updated_at = now
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to save user {profile.username}: {e}", exc_info=True)
            raise DependencyError(str(e)) from e

    def _record_to_profile(self, record: UserRecord) -> UserProfile:
        """Convert a ``users`` row to a UserProfile entity.

        Args:
            record: The mapped row.

        Returns:
            UserProfile: The profile entity.
        """
        return UserProfile(
            username=record.username,
            bio=record.bio or "",
            profile_picture=record.profile_picture or "",
            created_at=record.created_at,
            updated_at=record.updated_at,
            deleted_at=record.deleted_at,
        )
