"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum, auto

# =============================================================================
# Fetch State Enums
# =============================================================================

class FetchState(Enum):
    """Data fetch state values."""

    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class FetchSources(Enum):
    """Data source identifiers."""

    CONTROLLER_INFO = "controller_info"
    AGENT_INFOS = "agent_infos"
    FEATURE_GATES = "feature_gates"
    NODE_LATENCY_STATS = "node_latency_stats"


class PanelState(Enum):
    """Display state of a single summary panel."""

    LOADING = auto()  # Source not settled yet
    READY = auto()  # Data available
    FAILED = auto()  # Source fetch failed


# =============================================================================
# Component Enums
# =============================================================================

class FeatureGateComponent(Enum):
    """Component tags carried by feature gates."""

    CONTROLLER = "controller"
    AGENT = "agent"


class ConditionStatus(Enum):
    """Kubernetes condition status values."""

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


__all__ = [
    "ConditionStatus",
    "FeatureGateComponent",
    "FetchSources",
    "FetchState",
    "PanelState",
]
