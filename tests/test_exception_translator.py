"""Tests for translating error statuses into domain exceptions."""

import pytest

from github_rest.domain.exceptions import (
    ApiError,
    ApiValidationError,
    AuthorizationError,
    ErrorKind,
    ForbiddenError,
    NotFoundError,
    RateLimitExceededError,
)
from github_rest.domain.value_objects import RawResponse
from github_rest.infrastructure.exception_translator import raise_for_status, translate


class TestTranslate:
    @pytest.mark.parametrize(
        "status, expected",
        [
            (401, AuthorizationError),
            (403, ForbiddenError),
            (404, NotFoundError),
            (422, ApiValidationError),
            (429, RateLimitExceededError),
            (400, ApiError),
            (409, ApiError),
            (500, ApiError),
            (502, ApiError),
            (304, ApiError),
        ],
    )
    def test_maps_status_to_error_type(self, status, expected):
        error = translate(RawResponse(status))

        assert type(error) is expected
        assert error.status_code == status

    def test_forbidden_with_exhausted_quota_is_rate_limit(self):
        response = RawResponse(403, headers={"x-ratelimit-remaining": "0"})

        assert isinstance(translate(response), RateLimitExceededError)

    def test_uses_api_message(self):
        response = RawResponse(422, body='{"message": "Validation Failed"}')

        error = translate(response)

        assert str(error) == "Validation Failed"
        assert error.response is response

    def test_falls_back_to_status_line_for_non_json_body(self):
        error = translate(RawResponse(502, body="<html>Bad gateway</html>"))

        assert error.message == "API returned HTTP 502"

    def test_error_kinds(self):
        assert translate(RawResponse(404)).kind is ErrorKind.NOT_FOUND
        assert translate(RawResponse(500)).kind is ErrorKind.HTTP
        assert translate(RawResponse(401)).kind is ErrorKind.HTTP


class TestRaiseForStatus:
    @pytest.mark.parametrize("status", [200, 201, 204])
    def test_success_passes(self, status):
        raise_for_status(RawResponse(status))

    def test_raises_not_found(self):
        with pytest.raises(NotFoundError):
            raise_for_status(RawResponse(404, body='{"message": "Not Found"}'))

    def test_raises_other_errors(self):
        with pytest.raises(ApiError) as excinfo:
            raise_for_status(RawResponse(500))

        assert not isinstance(excinfo.value, NotFoundError)
