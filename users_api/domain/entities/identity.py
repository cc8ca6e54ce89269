"""Identity entities: provider attributes and the per-request caller context."""

from pydantic import BaseModel, ConfigDict, Field

EMAIL_ATTRIBUTE = "email"
NICKNAME_ATTRIBUTE = "nickname"


class IdentityAttribute(BaseModel):
    """A single name/value attribute as reported by the identity provider."""

    name: str
    value: str = ""


class IdentityAttributes(BaseModel):
    """Identity fields merged into the profile view. Never persisted."""

    email: str = Field(min_length=1)
    nickname: str = ""

    @classmethod
    def from_attributes(cls, attributes: list[IdentityAttribute]) -> "IdentityAttributes":
        """Pick email and nickname out of a provider attribute list.

        Raises:
            ValueError: If no non-empty email attribute is present.
        """
        email = ""
        nickname = ""
        for attribute in attributes:
            if attribute.name == EMAIL_ATTRIBUTE:
                email = attribute.value
            elif attribute.name == NICKNAME_ATTRIBUTE:
                nickname = attribute.value

        if not email:
            raise ValueError("could not find user email")

        return cls(email=email, nickname=nickname)


class CallerContext(BaseModel):
    """Who is calling, as asserted by the upstream authorizer."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(min_length=1)
    bearer_token: str = Field(default="", repr=False)
