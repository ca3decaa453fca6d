"""Optional API-key guard for the HTTP adapter."""

from __future__ import annotations

from collections.abc import Callable

from fastapi import Header, HTTPException


def api_key_guard(api_key: str | None) -> Callable[[str | None], None]:
    """Build a dependency that checks ``X-API-Key`` against *api_key*.

    When *api_key* is unset every request is allowed.
    """

    def require_api_key(x_api_key: str | None = Header(default=None)) -> None:
        if not api_key:
            return
        if (x_api_key or "") != api_key:
            raise HTTPException(status_code=401, detail="invalid API key")

    return require_api_key
