"""
Storage error mapping.

Classifies anything raised by the blob store layer (botocore client and
transport errors, builtin network errors, arbitrary values) into the fixed
StorageError taxonomy. The mapper is total: it never raises.

Dependencies: botocore
System role: Single funnel from native failures to UI-actionable errors
"""

from typing import Any

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionError as BotoConnectionError,
    HTTPClientError,
    NoCredentialsError,
    PartialCredentialsError,
)

from area_sessions.core.exceptions import StorageOperationError
from area_sessions.models.storage_error import StorageError, StorageErrorCode

NOT_FOUND_CODES = frozenset({"NoSuchKey", "404", "NotFound"})
UNAUTHORIZED_CODES = frozenset({
    "AccessDenied",
    "403",
    "Forbidden",
    "InvalidAccessKeyId",
    "SignatureDoesNotMatch",
    "ExpiredToken",
    "AllAccessDisabled",
})
QUOTA_CODES = frozenset({"QuotaExceeded", "ServiceQuotaExceededException"})
TIMEOUT_CODES = frozenset({"RequestTimeout", "RequestTimeoutException"})

_NETWORK_MESSAGE = "Network error. Please check your connection."
_UNKNOWN_MESSAGE = "Something went wrong. Please try again."


def _client_error_code(error: ClientError) -> str:
    response = getattr(error, "response", None)
    if not isinstance(response, dict):
        return ""
    details = response.get("Error")
    if not isinstance(details, dict):
        return ""
    return str(details.get("Code", ""))


def _retries_exhausted(error: ClientError) -> bool:
    response = getattr(error, "response", None)
    if not isinstance(response, dict):
        return False
    metadata = response.get("ResponseMetadata")
    return isinstance(metadata, dict) and bool(metadata.get("MaxAttemptsReached"))


def _message_of(error: BaseException) -> str:
    try:
        return str(error)
    except Exception:
        return ""


def is_object_not_found(error: Any) -> bool:
    """True when a blob store error reports a missing object."""
    return isinstance(error, ClientError) and _client_error_code(error) in NOT_FOUND_CODES


def not_authenticated_error() -> StorageError:
    """Error for operations attempted without a signed-in identity."""
    return StorageError(
        code=StorageErrorCode.NOT_AUTHENTICATED,
        message="Not authenticated",
        retry=False,
    )


def session_not_found_error() -> StorageError:
    """Error for a session blob that does not exist."""
    return StorageError(
        code=StorageErrorCode.SESSION_NOT_FOUND,
        message="Session not found",
        retry=False,
    )


def _network_error() -> StorageError:
    return StorageError(code=StorageErrorCode.NETWORK_ERROR, message=_NETWORK_MESSAGE, retry=True)


def _unknown_error() -> StorageError:
    return StorageError(code=StorageErrorCode.UNKNOWN, message=_UNKNOWN_MESSAGE, retry=True)


def _permission_denied_error() -> StorageError:
    return StorageError(
        code=StorageErrorCode.PERMISSION_DENIED,
        message="Access denied. Please sign in again.",
        retry=False,
    )


def _map_client_error(error: ClientError) -> StorageError:
    code = _client_error_code(error)
    if code in NOT_FOUND_CODES:
        return session_not_found_error()
    if code in UNAUTHORIZED_CODES:
        return _permission_denied_error()
    if code in QUOTA_CODES:
        return StorageError(
            code=StorageErrorCode.QUOTA_EXCEEDED,
            message="Storage quota exceeded",
            retry=False,
        )
    if code in TIMEOUT_CODES or _retries_exhausted(error):
        return _network_error()
    return _unknown_error()


def map_storage_error(error: Any) -> StorageError:
    """
    Map any raised value to a StorageError.

    Args:
        error: Exception or arbitrary value caught from a storage operation

    Returns:
        StorageError: Classified error with retry hint
    """
    if isinstance(error, StorageError):
        return error
    if isinstance(error, StorageOperationError):
        return error.error

    if isinstance(error, ClientError):
        return _map_client_error(error)
    if isinstance(error, (NoCredentialsError, PartialCredentialsError)):
        return _permission_denied_error()
    if isinstance(error, (BotoConnectionError, HTTPClientError)):
        return _network_error()
    if isinstance(error, BotoCoreError):
        return _unknown_error()

    if isinstance(error, TypeError) and "fetch" in _message_of(error):
        return _network_error()
    if isinstance(error, (ConnectionError, TimeoutError)):
        return _network_error()

    return _unknown_error()
