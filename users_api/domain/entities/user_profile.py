"""User profile entities for the users API."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserProfile(BaseModel):
    """Persisted user profile keyed by username."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "username": "jdoe",
                "bio": "Loves hiking",
                "profilePicture": "https://cdn.example.com/jdoe.png",
            }
        },
    )

    username: str = Field(min_length=1, max_length=128)
    bio: str = Field(default="", max_length=1024)
    profile_picture: str = Field(default="", max_length=512, alias="profilePicture")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class ProfileUpdate(BaseModel):
    """Mutable subset of a profile accepted from a PUT body.

    Anything outside this allow-list (username, timestamps, ...) is dropped
    during validation, so a caller can never rewrite the record's key.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    bio: Optional[str] = Field(default=None, max_length=1024)
    profile_picture: Optional[str] = Field(default=None, max_length=512, alias="profilePicture")

    def apply_to(self, profile: UserProfile) -> UserProfile:
        """Return a copy of ``profile`` with the provided fields overwritten.

        Fields that were absent from the body, or sent as ``null``, keep
        their stored value.
        """
        changes = self.model_dump(exclude_unset=True, exclude_none=True)
        return profile.model_copy(update=changes)


class ProfileView(BaseModel):
    """Merged profile returned to the caller on GET."""

    model_config = ConfigDict(populate_by_name=True)

    username: str
    nickname: str = ""
    email: str
    bio: str = ""
    profile_picture: str = Field(default="", alias="profilePicture")
