import pytest

from link_module.errors import handle_client_error
from link_module.exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    BadRequestError,
    ClientRequestError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)


def _error(status, body=""):
    return ClientRequestError(
        f"Client error {status}",
        method="PATCH",
        url="https://api.test/links/7",
        status_code=status,
        body=body,
    )


@pytest.mark.parametrize("status,exc", [
    (400, BadRequestError),
    (401, AuthenticationError),
    (403, AuthorizationError),
    (404, NotFoundError),
    (422, ValidationError),
    (429, RateLimitError),
])
def test_status_maps_to_exception(status, exc):
    with pytest.raises(exc) as info:
        handle_client_error(_error(status))
    assert info.value.status_code == status


def test_unmapped_status_raises_api_error():
    with pytest.raises(ApiError) as info:
        handle_client_error(_error(418, "teapot"))
    assert type(info.value) is ApiError
    assert "teapot" in str(info.value)


def test_message_and_errors_come_from_json_body():
    body = '{"message": "The given data was invalid.", "errors": {"name": ["required"]}}'
    with pytest.raises(ValidationError) as info:
        handle_client_error(_error(422, body))
    assert "The given data was invalid." in str(info.value)
    assert "PATCH https://api.test/links/7" in str(info.value)
    assert info.value.errors == {"name": ["required"]}


def test_original_error_is_chained():
    original = _error(404)
    with pytest.raises(NotFoundError) as info:
        handle_client_error(original)
    assert info.value.__cause__ is original


def test_non_json_body_used_as_message():
    with pytest.raises(BadRequestError) as info:
        handle_client_error(_error(400, "plain text failure"))
    assert "plain text failure" in str(info.value)
    assert info.value.errors == {}


class _PlainResponse:
    status_code = 404
    text = '{"message": "gone"}'


def test_message_read_from_body_not_response_object():
    err = ClientRequestError(
        "Client error 404",
        method="GET",
        url="https://api.test/links/3",
        status_code=404,
        body='{"message": "gone"}',
        response=_PlainResponse(),
    )
    with pytest.raises(NotFoundError) as info:
        handle_client_error(err)
    assert "gone" in str(info.value)
