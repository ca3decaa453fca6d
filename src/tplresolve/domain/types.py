"""Resource types — the closed set of template kinds a request can target."""

from __future__ import annotations

from enum import StrEnum

from tplresolve.domain.errors import UnsupportedTypeError


class ResourceType(StrEnum):
    """Template kinds with a dedicated repository and resolver."""

    PRODUCT = "product"
    MODEL = "model"
    RATE = "rate"

    @classmethod
    def parse(cls, value: str | ResourceType) -> ResourceType:
        """Coerce a tag into a member, case-insensitively.

        Raises :class:`UnsupportedTypeError` for anything outside the enum.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedTypeError(value)
