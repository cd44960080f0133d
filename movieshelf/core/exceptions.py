# movieshelf/core/exceptions.py

from typing import Any, Optional


class ApiError(Exception):
    """Error that maps directly onto the error envelope."""

    status_code: int = 500
    code: str = "general:error"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        errors: Any = None,
    ):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code
        self.errors = errors


class ValidationFailed(ApiError):
    status_code = 422
    code = "validation:failed"


class NotFoundError(ApiError):
    status_code = 404
    code = "general:not-found"


class AuthenticationError(ApiError):
    status_code = 401
    code = "auth:unauthenticated"


class StoreError(ApiError):
    code = "store:failed"


class UpstreamError(ApiError):
    code = "tmdb:error"


class UpstreamAuthError(UpstreamError):
    code = "tmdb:auth_missing"


class UpstreamRequestError(UpstreamError):
    code = "tmdb:request_failed"

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        super().__init__(message)
        self.upstream_status = upstream_status
