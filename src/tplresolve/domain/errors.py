"""Domain errors raised while resolving templates.

Each error carries a stable ``code`` that the service layer copies into
:class:`~tplresolve.services.result.ServiceError`. Transports map codes to
their own failure shape (HTTP status, exit code).
"""

from __future__ import annotations

from typing import Any


class TemplateError(Exception):
    """Base class for all resolution failures."""

    code: str = "TEMPLATE_ERROR"

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail or {}


class InvalidInputError(TemplateError):
    """Neither an identifier nor a complete natural key was supplied."""

    code = "INVALID_INPUT"


class UnsupportedTypeError(TemplateError):
    """Resource-type tag is outside the closed enumeration or has no resolver."""

    code = "UNSUPPORTED_TYPE"

    def __init__(self, resource_type: object) -> None:
        super().__init__(
            f"Unsupported resource type: {resource_type!r}",
            detail={"resource_type": str(resource_type)},
        )
        self.resource_type = resource_type


class RecordNotFoundError(TemplateError):
    """No record matched the lookup."""

    code = "NOT_FOUND"

    def __init__(self, resource_type: str, lookup: dict[str, Any]) -> None:
        keys = ", ".join(f"{k}={v!r}" for k, v in lookup.items())
        super().__init__(
            f"No {resource_type} found for {keys}",
            detail={"resource_type": resource_type, "lookup": lookup},
        )
        self.resource_type = resource_type
        self.lookup = lookup
