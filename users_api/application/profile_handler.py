"""Profile handler: method dispatch, profile read and partial update."""

import logging

from pydantic import ValidationError

from ..domain.entities import (
    ApiRequest,
    ApiResponse,
    CallerContext,
    IdentityAttributes,
    ProfileUpdate,
    ProfileView,
    UserProfile,
)
from ..domain.exceptions import (
    AuthContextError,
    ClientError,
    MethodNotAllowedError,
    NotFoundError,
    ProfileError,
    UnauthorizedError,
)
from ..domain.interfaces.identity_provider import IdentityProvider
from ..domain.interfaces.profile_store import ProfileStore

logger = logging.getLogger(__name__)

USERNAME_CLAIM = "username"

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def html_escape_json(payload: str) -> str:
    """Escape characters that are unsafe when JSON is embedded in HTML."""
    return "".join(_HTML_ESCAPES.get(ch, ch) for ch in payload)


class ProfileHandler:
    """
    Handles profile requests for the authenticated caller.

    The handler holds no state of its own; the store and identity provider
    are injected per invocation.
    """

    def __init__(self, profile_store: ProfileStore, identity_provider: IdentityProvider):
        """
        Initialize the handler with injected dependencies.

        Args:
            profile_store: Persistence for username, bio and profile picture
            identity_provider: Source of email and nickname for a bearer token
        """
        self.profile_store = profile_store
        self.identity_provider = identity_provider

    def dispatch(self, request: ApiRequest) -> ApiResponse:
        """Route a request by HTTP method and turn errors into responses."""
        logger.info(f"Dispatching {request.method} request")
        try:
            if request.method == "GET":
                return self.read_profile(request)
            if request.method == "PUT":
                return self.update_profile(request)
            raise MethodNotAllowedError(request.method)
        except ProfileError as e:
            if e.status_code >= 500:
                logger.error(f"{request.method} failed with {e.status_code}: {e.message}")
            else:
                logger.warning(f"{request.method} rejected with {e.status_code}: {e.message}")
            return ApiResponse.text(e.status_code, e.message)

    def read_profile(self, request: ApiRequest) -> ApiResponse:
        """
        Return the caller's stored profile merged with identity attributes.

        Args:
            request: The inbound GET request

        Returns:
            ApiResponse: 200 with the merged profile as HTML-safe JSON

        Raises:
            AuthContextError: Username claim missing or email not returned
            UnauthorizedError: Authorization header missing or malformed
            DependencyError: Identity provider or store failure
            NotFoundError: No live profile for the username
        """
        caller = CallerContext(
            username=self._username(request),
            bearer_token=self._bearer_token(request),
        )

        attributes = self.identity_provider.get_user(caller.bearer_token)
        try:
            identity = IdentityAttributes.from_attributes(attributes)
        except ValueError as e:
            raise AuthContextError("could not find user email") from e

        profile = self._load_profile(caller.username)

        view = ProfileView(
            username=caller.username,
            nickname=identity.nickname,
            email=identity.email,
            bio=profile.bio,
            profile_picture=profile.profile_picture,
        )
        try:
            payload = view.model_dump_json(by_alias=True)
        except (ValueError, TypeError) as e:
            logger.error(f"Failed to serialize profile for {caller.username}: {e}")
            raise ProfileError("could not marshal JSON") from e

        return ApiResponse.json_body(200, html_escape_json(payload))

    def update_profile(self, request: ApiRequest) -> ApiResponse:
        """
        Apply the allow-listed fields of the request body to the caller's profile.

        Args:
            request: The inbound PUT request

        Returns:
            ApiResponse: 200 with a confirmation message

        Raises:
            AuthContextError: Username claim missing
            NotFoundError: No live profile for the username
            ClientError: Body is not a valid profile update
            DependencyError: Store failure
        """
        caller = CallerContext(username=self._username(request))
        profile = self._load_profile(caller.username)

        if request.body_malformed:
            raise ClientError("invalid request body")
        try:
            update = ProfileUpdate.model_validate_json(request.body or "")
        except ValidationError as e:
            raise ClientError("invalid request body") from e

        self.profile_store.save(update.apply_to(profile))
        logger.info(f"Updated profile for {caller.username}")

        return ApiResponse.text(200, "user updated successfully")

    def _load_profile(self, username: str) -> UserProfile:
        profile = self.profile_store.find_by_username(username)
        if profile is None:
            raise NotFoundError("user not found")
        return profile

    def _username(self, request: ApiRequest) -> str:
        username = request.claims.get(USERNAME_CLAIM)
        if not isinstance(username, str) or not username:
            raise AuthContextError("failed to parse username")
        return username

    def _bearer_token(self, request: ApiRequest) -> str:
        # Expected form: "<scheme> <token>"
        fields = (request.header("authorization") or "").split()
        if len(fields) < 2:
            raise UnauthorizedError("invalid authorization header")
        return fields[1]
