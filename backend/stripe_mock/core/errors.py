"""Error types raised by the mock API.

Every failure carries an :class:`ErrorKind` tag plus the offending parameter
name and the HTTP status the remote API would answer with. The FastAPI
handler in ``stripe_mock.main`` turns them into the remote error envelope.
"""

from enum import Enum
from typing import Any, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    INVALID_REQUEST = "invalid_request"
    NOT_FOUND = "not_found"
    CARD_REQUIRED = "card_required"


class StripeMockError(Exception):
    """Base error for every failure the mock reports to a client."""

    kind: ErrorKind = ErrorKind.INVALID_REQUEST
    default_status: int = 400
    default_code: str | None = None

    def __init__(
        self,
        message: str,
        param: str | None = None,
        http_status: int | None = None,
        code: str | None = None,
    ):
        self.message = message
        self.param = param
        self.http_status = http_status or self.default_status
        self.code = code or self.default_code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the remote API's ``{"error": {...}}`` envelope."""
        return {
            "error": {
                "type": "invalid_request_error",
                "code": self.code,
                "message": self.message,
                "param": self.param,
            }
        }


class InvalidRequestError(StripeMockError):
    kind = ErrorKind.INVALID_REQUEST
    default_status = 400


class ResourceNotFoundError(StripeMockError):
    kind = ErrorKind.NOT_FOUND
    default_status = 404
    default_code = "resource_missing"


class CardRequiredError(StripeMockError):
    kind = ErrorKind.CARD_REQUIRED
    default_status = 400
    default_code = "missing_payment_source"

    def __init__(self, message: str = "This customer has no attached payment source"):
        super().__init__(message)


def assert_existence(kind: str, object_id: str, result: T | None) -> T:
    """Return ``result`` or raise NotFound naming the missing ``kind``."""
    if result is None:
        raise ResourceNotFoundError(f"No such {kind}: '{object_id}'", param=kind)
    return result
