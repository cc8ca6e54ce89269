"""Amazon Cognito implementation of IdentityProvider."""

import logging
from typing import Any, Dict, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..domain.entities.identity import IdentityAttribute
from ..domain.exceptions import DependencyError
from ..domain.interfaces.identity_provider import IdentityProvider

logger = logging.getLogger(__name__)


class CognitoIdentityProvider(IdentityProvider):
    """Cognito user pool implementation of the IdentityProvider protocol."""

    def __init__(
        self,
        region_name: str = "us-east-1",
        user_pool_id: Optional[str] = None,
        app_client_id: Optional[str] = None,
    ):
        """Initialize the Cognito identity provider.

        Args:
            region_name: AWS region of the user pool (default: us-east-1).
            user_pool_id: Cognito user pool id.
            app_client_id: Cognito app client id.
        """
        self.region_name = region_name
        self.user_pool_id = user_pool_id
        self.app_client_id = app_client_id
        self.client = boto3.client("cognito-idp", region_name=region_name)

    def get_user(self, access_token: str) -> list[IdentityAttribute]:
        """Retrieve the attributes of the access token's owner.

        Args:
            access_token: A Cognito access token.

        Returns:
            list[IdentityAttribute]: The user's attributes.

        Raises:
            DependencyError: If Cognito rejects the token or cannot be reached.
        """
        try:
            response = self.client.get_user(AccessToken=access_token)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Cognito GetUser failed: {e}")
            raise DependencyError(str(e)) from e

        return [self._to_attribute(item) for item in response.get("UserAttributes") or []]

    def _to_attribute(self, item: Dict[str, Any]) -> IdentityAttribute:
        return IdentityAttribute(name=item["Name"], value=item.get("Value") or "")

    def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        self.client.close()
