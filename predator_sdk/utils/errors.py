"""
Error taxonomy for the SDK.

Every failure in the request pipeline reaches the caller as a ``DomainError``
subclass. ``classify`` turns raw transport failures (``requests`` exceptions
or anything else raised while preparing a request) into one of them.
"""

from typing import Any, Optional

from predator_sdk.utils.enums import ErrorKind


class DomainError(Exception):
    """Base class for all classified SDK failures"""

    kind: ErrorKind = ErrorKind.REQUEST

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        body: Any = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body
        self.cause = cause

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value}, message={self.message!r})"


class ValidationError(DomainError):
    """Bad caller input: invalid percentage, unsupported operation, missing option"""

    kind = ErrorKind.VALIDATION


class KeyInitError(DomainError):
    """Encryption key could not be fetched, or was used before it was fetched"""

    kind = ErrorKind.KEY_INIT


class ApiError(DomainError):
    """Server answered with a non-success status"""

    kind = ErrorKind.API


class NoResponseError(DomainError):
    """Request was sent but no response arrived"""

    kind = ErrorKind.NO_RESPONSE


class RequestError(DomainError):
    """Any other local failure while building or sending a request"""

    kind = ErrorKind.REQUEST


def _response_body(response: Any) -> Any:
    text = getattr(response, "text", None)
    if text is not None:
        return text
    return getattr(response, "content", None)


def classify(failure: BaseException) -> DomainError:
    """
    Map a failed request into a DomainError.

    The checks follow the shape of ``requests.exceptions.RequestException``:
    an attached ``response`` means the server answered, an attached
    ``request`` without a response means nothing came back.
    """
    if isinstance(failure, DomainError):
        return failure

    response = getattr(failure, "response", None)
    if response is not None:
        status = getattr(response, "status_code", None)
        body = _response_body(response)
        return ApiError(
            f"API error: {status} - {body}",
            status=status,
            body=body,
            cause=failure,
        )

    if getattr(failure, "request", None) is not None:
        return NoResponseError("No response received from the server", cause=failure)

    return RequestError(f"Request error: {failure}", cause=failure)
