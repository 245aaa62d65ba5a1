"""Controllers module for KubeSummary.

This module provides the controller that fetches and aggregates cluster
network status for the summary view.
"""

from __future__ import annotations

# Base classes
from kubesummary.controllers.base import (
    BaseController,
    FetchError,
    FetchResult,
)

# Summary domain
from kubesummary.controllers.summary.controller import (
    FetchStatus,
    SummaryController,
    SummarySnapshot,
)

__all__ = [
    # Base
    "BaseController",
    "FetchError",
    "FetchResult",
    # Summary domain
    "FetchStatus",
    "SummaryController",
    "SummarySnapshot",
]
