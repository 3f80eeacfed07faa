"""Domain‑level exception hierarchy for the service and repository layers.

Each error carries an ``ErrorCode`` plus the parameters its message
template needs, and the HTTP status the API layer answers with.  The
message text itself is resolved through ``core.messages``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .messages import ErrorCode, format_message


class ShopError(Exception):
    """Base class for domain‑specific failures."""

    status_code: int = 400

    def __init__(self, code: ErrorCode, **params: Any) -> None:
        self.code = code
        self.params = params
        super().__init__(format_message(code, **params))

    def message(self, locale: Optional[str] = None) -> str:
        return format_message(self.code, locale, **self.params)

    def to_dict(self, locale: Optional[str] = None) -> Dict[str, Any]:
        return {"code": self.code.value, "detail": self.message(locale)}


class ValidationError(ShopError):
    """Raised when input fails a domain rule (price floor, paging, sort field)."""


class NotFoundError(ShopError):
    """Raised when a requested entity does not exist."""

    status_code = 404


class AuthorizationError(ShopError):
    """Raised when the caller does not own the entities it acts on."""


class DuplicateError(ShopError):
    """Raised when an operation would create a duplicate row."""


class ExternalServiceError(ShopError):
    """Raised when the product search service fails or is not configured."""

    status_code = 502
