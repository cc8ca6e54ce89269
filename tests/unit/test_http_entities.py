"""Unit tests for HTTP request/response entities."""

import base64

from users_api.domain.entities import ApiRequest, ApiResponse


def make_event(method="GET", headers=None, username="jdoe", body=None, is_base64=False):
    """Build a minimal API Gateway HTTP API (v2.0) event."""
    return {
        "version": "2.0",
        "routeKey": f"{method} /users",
        "rawPath": "/users",
        "headers": headers if headers is not None else {"authorization": "Bearer token-123"},
        "requestContext": {
            "http": {"method": method, "path": "/users"},
            "authorizer": {"lambda": {"username": username}},
        },
        "body": body,
        "isBase64Encoded": is_base64,
    }


class TestApiRequest:
    """Tests for ApiRequest."""

    def test_from_event(self):
        """Test extraction of method, headers, claims and body."""
        request = ApiRequest.from_event(make_event(method="PUT", body='{"bio": "hi"}'))

        assert request.method == "PUT"
        assert request.header("authorization") == "Bearer token-123"
        assert request.claims == {"username": "jdoe"}
        assert request.body == '{"bio": "hi"}'

    def test_from_event_decodes_base64_body(self):
        """Test that base64-encoded bodies are decoded."""
        encoded = base64.b64encode(b'{"bio": "hi"}').decode("ascii")

        request = ApiRequest.from_event(make_event(method="PUT", body=encoded, is_base64=True))

        assert request.body == '{"bio": "hi"}'

    def test_from_event_invalid_base64_body(self):
        """Test that a body that is not base64 is dropped and flagged."""
        request = ApiRequest.from_event(make_event(method="PUT", body="!!!notbase64", is_base64=True))

        assert request.body is None
        assert request.body_malformed is True

    def test_from_event_non_utf8_body(self):
        """Test that a body decoding to invalid UTF-8 is dropped and flagged."""
        encoded = base64.b64encode(b'{"bio": "\xff"}').decode("ascii")

        request = ApiRequest.from_event(make_event(method="PUT", body=encoded, is_base64=True))

        assert request.body is None
        assert request.body_malformed is True

    def test_from_event_keeps_method_verbatim(self):
        """Test that the method is not normalized."""
        request = ApiRequest.from_event(make_event(method="get"))

        assert request.method == "get"
        assert request.body_malformed is False

    def test_from_event_without_authorizer(self):
        """Test that a missing authorizer context yields empty claims."""
        event = make_event()
        del event["requestContext"]["authorizer"]

        request = ApiRequest.from_event(event)

        assert request.claims == {}

    def test_from_empty_event(self):
        """Test that an empty event does not crash."""
        request = ApiRequest.from_event({})

        assert request.method == ""
        assert request.headers == {}
        assert request.body is None

    def test_header_lookup_is_case_insensitive(self):
        """Test header name normalization."""
        request = ApiRequest(method="GET", headers={"Authorization": "Bearer abc"})

        assert request.header("authorization") == "Bearer abc"
        assert request.header("AUTHORIZATION") == "Bearer abc"
        assert request.header("x-missing") is None


class TestApiResponse:
    """Tests for ApiResponse."""

    def test_text_response_to_lambda(self):
        """Test plain text responses carry no headers."""
        response = ApiResponse.text(404, "user not found")

        assert response.to_lambda() == {"statusCode": 404, "body": "user not found"}

    def test_json_response_to_lambda(self):
        """Test JSON responses carry a content type."""
        response = ApiResponse.json_body(200, '{"a": 1}')

        assert response.to_lambda() == {
            "statusCode": 200,
            "body": '{"a": 1}',
            "headers": {"Content-Type": "application/json"},
        }
