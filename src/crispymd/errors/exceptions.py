"""Custom exception hierarchy for crispymd."""

from __future__ import annotations

from typing import Any


class CrispyMdError(Exception):
    """Base exception for all crispymd errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(CrispyMdError):
    """Invalid configuration — raised when a component is constructed.

    Examples: non-boolean unsafe-HTML flag, non-positive expiration,
    empty container class.
    """

    def __init__(self, message: str = "", field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class StoreError(CrispyMdError):
    """Key-value store failure — the cache layer is degraded.

    Never surfaced to render callers; the renderer logs it and recomputes.
    """

    def __init__(
        self,
        message: str = "",
        operation: str = "get",
        key: str | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.key = key
        self.original = original
