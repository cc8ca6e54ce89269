"""AWS Lambda entry point for the users API.

GET  /users -> returns the caller's profile merged with Cognito attributes
PUT  /users -> updates bio / profilePicture of the caller's profile

Identity:
- username comes from the Lambda authorizer context
  (requestContext.authorizer.lambda.username)
- the bearer token in the authorization header is passed through to Cognito
"""

import logging
from contextlib import contextmanager
from functools import lru_cache
from typing import Any, Dict, Iterator

from sqlalchemy.engine import Engine

from ..domain.entities import ApiRequest
from ..infrastructure.cognito_identity_provider import CognitoIdentityProvider
from ..infrastructure.database import create_db_engine, session_scope
from ..infrastructure.sql_profile_store import SqlProfileStore
from .config import Settings, get_settings
from .profile_handler import ProfileHandler

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
# The Lambda runtime installs its own root handler, which makes basicConfig a no-op.
logging.getLogger().setLevel(settings.log_level)
logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Connection pool reused across invocations of a warm container."""
    return create_db_engine(settings.database_url, echo=settings.debug)


@contextmanager
def invocation_scope(config: Settings = settings) -> Iterator[ProfileHandler]:
    """Acquire a store session and a Cognito client for one invocation.

    Both are released on every exit path.
    """
    with session_scope(get_engine()) as session:
        identity_provider = CognitoIdentityProvider(
            region_name=config.aws_region,
            user_pool_id=config.cognito_user_pool_id,
            app_client_id=config.cognito_app_client_id,
        )
        try:
            yield ProfileHandler(
                profile_store=SqlProfileStore(session),
                identity_provider=identity_provider,
            )
        finally:
            identity_provider.close()


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    try:
        request = ApiRequest.from_event(event)
        with invocation_scope() as profile_handler:
            response = profile_handler.dispatch(request)
        return response.to_lambda()

    except Exception as e:
        logger.error(f"Unhandled error: {e}", exc_info=True)
        return {"statusCode": 500, "body": "Internal Server Error"}
