"""Base controller classes."""

from kubesummary.controllers.base.base_controller import (
    BaseController,
    FetchError,
    FetchResult,
    elapsed_ms,
)

__all__ = [
    "BaseController",
    "FetchError",
    "FetchResult",
    "elapsed_ms",
]
