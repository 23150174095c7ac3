from __future__ import annotations
from typing import Any, Optional


class ShopifyError(Exception):
    """Base class for every error raised by this library."""

class MissingRequiredArgument(ShopifyError):
    """A required argument (access token, query, request body) was not supplied."""

class UnsupportedSurfaceType(ShopifyError):
    """The API client type is not handled by this client (configuration bug)."""

class MissingAccessToken(ShopifyError):
    """The api type / auth mode combination resolved to an empty credential."""

class HttpRequestError(ShopifyError):
    """Network failure, timeout or undecodable response body."""

class HttpResponseError(HttpRequestError):
    """Non-2xx response not otherwise classified."""

    def __init__(self, message: str, status_code: int, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

class HttpAuthError(HttpResponseError):
    """Authentication or authorization failure (401/403)."""

class HttpThrottlingError(HttpResponseError):
    """Rate limiting encountered (429)."""

    def __init__(self, message: str, status_code: int, body: Any = None, retry_after: Optional[float] = None):
        super().__init__(message, status_code, body)
        self.retry_after = retry_after
