"""Error hierarchy — status codes, categories and REST envelope."""

from app.core.errors import (
    AuthenticationError, BloglistError, ConflictError, DatabaseError,
    ErrorCategory, ErrorContext, PermissionDeniedError, ResourceNotFoundError,
)


def test_every_error_is_a_bloglist_error():
    for exc in (
        AuthenticationError(),
        PermissionDeniedError("delete"),
        ResourceNotFoundError("Blog", "x"),
        ConflictError("taken", "username"),
        DatabaseError("boom", "commit"),
    ):
        assert isinstance(exc, BloglistError)


def test_http_status_per_error():
    assert AuthenticationError().http_status == 401
    assert PermissionDeniedError("delete").http_status == 403
    assert ResourceNotFoundError("Blog", "x").http_status == 404
    assert ConflictError("taken", "username").http_status == 409
    assert DatabaseError("boom", "commit").http_status == 503


def test_not_found_message_names_resource():
    exc = ResourceNotFoundError("Blog", "abc")
    assert exc.message == "Blog 'abc' not found"
    assert exc.category == ErrorCategory.RESOURCE_NOT_FOUND


def test_to_response_envelope_carries_context():
    exc = PermissionDeniedError(
        "delete another user's blog", ErrorContext(user_id="u1", blog_id="b1"),
    )
    error = exc.to_response()["error"]
    assert error["code"] == "PERMISSION_DENIED"
    assert error["category"] == "permission"
    assert error["severity"] == "warning"
    assert error["context"] == {"user_id": "u1", "blog_id": "b1"}
    assert "timestamp" in error
