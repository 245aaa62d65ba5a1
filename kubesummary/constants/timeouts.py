"""Timeout constants for the TUI.

All timeout values for kubectl requests and async fetch operations.
"""

from typing import Final

# ============================================================================
# API/Cluster timeouts (string format for kubectl)
# ============================================================================

SUMMARY_REQUEST_TIMEOUT: Final = "30s"

# Process-level command timeout (must be greater than request timeout)
KUBECTL_COMMAND_TIMEOUT: Final = 45

# ============================================================================
# Async operation timeouts (float, in seconds)
# ============================================================================

SUMMARY_FETCH_TIMEOUT: Final = 60.0
CLUSTER_CHECK_TIMEOUT: Final = 12.0

__all__ = [
    "CLUSTER_CHECK_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
    "SUMMARY_FETCH_TIMEOUT",
    "SUMMARY_REQUEST_TIMEOUT",
]
