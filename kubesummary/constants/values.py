"""Scalar constants shared across the application."""

from typing import Final

APP_TITLE: Final = "KubeSummary"

# Placeholder shown when a reference or version is absent
STATUS_UNKNOWN: Final = "Unknown"
STATUS_NONE: Final = "None"

# Condition types read for the "Healthy" columns
CONTROLLER_HEALTHY_CONDITION: Final = "ControllerHealthy"
AGENT_HEALTHY_CONDITION: Final = "AgentHealthy"

# Latency values are microseconds; the heat-map shows milliseconds
LATENCY_DISPLAY_DIVISOR: Final = 1000

__all__ = [
    "AGENT_HEALTHY_CONDITION",
    "APP_TITLE",
    "CONTROLLER_HEALTHY_CONDITION",
    "LATENCY_DISPLAY_DIVISOR",
    "STATUS_NONE",
    "STATUS_UNKNOWN",
]
