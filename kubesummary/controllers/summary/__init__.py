"""Init file for summary module."""

from kubesummary.controllers.summary.fetchers import (
    AgentInfoFetcher,
    ControllerInfoFetcher,
    FeatureGateFetcher,
    NodeLatencyFetcher,
)
from kubesummary.controllers.summary.parsers import (
    FeatureGateParser,
    InfoParser,
    NodeLatencyParser,
)

__all__ = [
    "AgentInfoFetcher",
    "ControllerInfoFetcher",
    "FeatureGateFetcher",
    "FeatureGateParser",
    "InfoParser",
    "NodeLatencyFetcher",
    "NodeLatencyParser",
]
