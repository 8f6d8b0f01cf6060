"""Tests for the error taxonomy and failure classification."""

import pytest
import requests

from predator_sdk.utils.enums import ErrorKind
from predator_sdk.utils.errors import (
    ApiError,
    DomainError,
    KeyInitError,
    NoResponseError,
    RequestError,
    ValidationError,
    classify,
)


def _response(status: int, body: bytes) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = body
    resp.encoding = "utf-8"
    return resp


class TestClassify:
    def test_attached_response_is_api_error(self):
        failure = requests.HTTPError("500 Server Error", response=_response(500, b"boom"))

        error = classify(failure)

        assert isinstance(error, ApiError)
        assert error.kind is ErrorKind.API
        assert error.status == 500
        assert error.body == "boom"
        assert str(error) == "API error: 500 - boom"
        assert error.cause is failure

    def test_request_without_response_is_no_response_error(self):
        request = requests.Request("POST", "https://api.predator.bot/buy")
        failure = requests.ConnectionError("connection reset", request=request)

        error = classify(failure)

        assert isinstance(error, NoResponseError)
        assert error.kind is ErrorKind.NO_RESPONSE
        assert str(error) == "No response received from the server"
        assert error.status is None

    def test_local_failure_is_request_error(self):
        failure = TypeError("Object of type bytes is not JSON serializable")

        error = classify(failure)

        assert isinstance(error, RequestError)
        assert error.kind is ErrorKind.REQUEST
        assert str(error) == "Request error: Object of type bytes is not JSON serializable"

    def test_requests_failure_before_sending_is_request_error(self):
        error = classify(requests.exceptions.MissingSchema("Invalid URL 'buy'"))

        assert isinstance(error, RequestError)
        assert "Invalid URL" in str(error)

    def test_domain_errors_pass_through_unchanged(self):
        original = KeyInitError("Encryption key not initialized")

        assert classify(original) is original

    def test_response_takes_precedence_over_request(self):
        request = requests.Request("GET", "https://api.predator.bot/encryption-key")
        failure = requests.HTTPError(request=request, response=_response(404, b"not found"))

        assert isinstance(classify(failure), ApiError)


def test_error_kinds_are_distinct():
    classes = [ValidationError, KeyInitError, ApiError, NoResponseError, RequestError]

    assert {cls.kind for cls in classes} == set(ErrorKind)
    assert all(issubclass(cls, DomainError) for cls in classes)


def test_domain_error_carries_structured_fields():
    error = ApiError("API error: 429 - slow down", status=429, body="slow down")

    assert error.message == "API error: 429 - slow down"
    assert (error.status, error.body) == (429, "slow down")
    with pytest.raises(DomainError):
        raise error
