"""Root error class for the ingress_edge error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of every error the edge raises itself.

    Nothing derived from this class ever reaches an HTTP client; errors end up
    as log fields and error reports, so ``detail`` must only carry
    identifiers (project id, store key, origin) and never payload content.

    Args:
        message: Human-readable description.
        code: Stable slug used as log field and report attribute
            (defaults to ``default_code``).
        detail: Identifier-only diagnostic context.
        cause: Lower-level exception that triggered this error.
    """

    default_code: str = "ingress_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Log/report representation; the cause is reduced to its type name."""
        fields: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            fields["cause"] = type(self.cause).__name__
        return fields


__all__ = ["BaseError"]
