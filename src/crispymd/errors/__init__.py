"""Error types — configuration and store failures."""

from crispymd.errors.exceptions import (
    ConfigurationError,
    CrispyMdError,
    StoreError,
)

__all__ = [
    "CrispyMdError",
    "ConfigurationError",
    "StoreError",
]
