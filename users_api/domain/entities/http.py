"""HTTP request and response entities for the users API."""

import base64
import binascii
import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


class ApiRequest(BaseModel):
    """Inbound request as seen by the profile handler."""

    method: str
    headers: Dict[str, str] = Field(default_factory=dict)
    claims: Dict[str, Any] = Field(default_factory=dict)
    body: Optional[str] = None
    body_malformed: bool = False

    @field_validator("headers")
    @classmethod
    def _lower_header_names(cls, value: Dict[str, str]) -> Dict[str, str]:
        return {name.lower(): header for name, header in value.items()}

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower())

    @classmethod
    def from_event(cls, event: Dict[str, Any]) -> "ApiRequest":
        """Build a request from an API Gateway HTTP API (payload v2.0) event.

        Lambda authorizer context lands under
        ``requestContext.authorizer.lambda``.
        """
        rc = event.get("requestContext") or {}
        http = rc.get("http") or {}
        authorizer = rc.get("authorizer") or {}

        body = event.get("body")
        body_malformed = False
        if body is not None and event.get("isBase64Encoded"):
            try:
                body = base64.b64decode(body, validate=True).decode("utf-8")
            except (binascii.Error, UnicodeDecodeError) as e:
                logger.warning(f"Discarding undecodable request body: {e}")
                body = None
                body_malformed = True

        return cls(
            method=http.get("method", ""),
            headers=event.get("headers") or {},
            claims=authorizer.get("lambda") or {},
            body=body,
            body_malformed=body_malformed,
        )


class ApiResponse(BaseModel):
    """Outbound response, rendered back into the Lambda proxy format."""

    status_code: int
    body: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def text(cls, status_code: int, message: str) -> "ApiResponse":
        return cls(status_code=status_code, body=message)

    @classmethod
    def json_body(cls, status_code: int, payload: str) -> "ApiResponse":
        return cls(
            status_code=status_code,
            body=payload,
            headers={"Content-Type": "application/json"},
        )

    def to_lambda(self) -> Dict[str, Any]:
        response: Dict[str, Any] = {"statusCode": self.status_code, "body": self.body}
        if self.headers:
            response["headers"] = dict(self.headers)
        return response
