"""
Session error handling utilities.

Provides a decorator that turns session store failures into HTTPExceptions
whose detail is the classified StorageError.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from area_sessions.core.exceptions import StorageOperationError, ValidationError
from area_sessions.models.storage_error import StorageErrorCode
from area_sessions.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

STATUS_BY_CODE: dict[StorageErrorCode, int] = {
    StorageErrorCode.NOT_AUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    StorageErrorCode.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
    StorageErrorCode.SESSION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    StorageErrorCode.INDEX_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    StorageErrorCode.INDEX_CORRUPTED: status.HTTP_422_UNPROCESSABLE_ENTITY,
    StorageErrorCode.INVALID_DATA: status.HTTP_422_UNPROCESSABLE_ENTITY,
    StorageErrorCode.QUOTA_EXCEEDED: status.HTTP_507_INSUFFICIENT_STORAGE,
    StorageErrorCode.NETWORK_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
    StorageErrorCode.UNKNOWN: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def handle_session_errors(func: F) -> F:
    """
    Decorator to handle session store errors and transform them into HTTPExceptions.

    - StorageOperationError -> status by error code, StorageError as detail
    - ValidationError -> 400
    - anything else -> 500
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except StorageOperationError as e:
            status_code = STATUS_BY_CODE.get(e.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
            logger.warning(
                "Session storage operation failed",
                extra={"code": e.code.value, "retry": e.retry, "status_code": status_code},
            )
            raise HTTPException(
                status_code=status_code,
                detail=e.error.model_dump(mode="json"),
            )

        except ValidationError as e:
            logger.warning("Invalid session request", extra={"field": e.field, "error": e.message})
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=e.message,
            )

        except HTTPException:
            raise

        except Exception as e:
            log_exception_with_context(
                logger,
                "Unexpected failure in session operation",
                e,
                operation=func.__name__,
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred during session operation",
            )

    return wrapper  # type: ignore
