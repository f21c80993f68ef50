import pytest
from pydantic import ValidationError

from user_service.app.schemas import UserRequest


def test_valid_request():
    request = UserRequest(username="bob", password="secret", email="bob@example.com")
    assert request.username == "bob"

@pytest.mark.parametrize("field, value", [
    ("username", "ab"),
    ("username", "x" * 51),
    ("username", "    "),
    ("password", "12345"),
    ("password", "p" * 101),
    ("password", "       "),
    ("email", "bob-at-example.com"),
])
def test_invalid_field(field, value):
    fields = {"username": "bob", "password": "secret", "email": "bob@example.com", field: value}
    with pytest.raises(ValidationError):
        UserRequest(**fields)

def test_missing_fields():
    with pytest.raises(ValidationError) as exc_info:
        UserRequest()
    assert {e["loc"][0] for e in exc_info.value.errors()} == {"username", "password", "email"}
