"""Fetchers for summary data sources."""

from kubesummary.controllers.summary.fetchers.agent_info_fetcher import AgentInfoFetcher
from kubesummary.controllers.summary.fetchers.base_fetcher import KubectlJsonFetcher
from kubesummary.controllers.summary.fetchers.controller_info_fetcher import (
    ControllerInfoFetcher,
)
from kubesummary.controllers.summary.fetchers.feature_gate_fetcher import (
    FeatureGateFetcher,
)
from kubesummary.controllers.summary.fetchers.node_latency_fetcher import (
    NodeLatencyFetcher,
)

__all__ = [
    "AgentInfoFetcher",
    "ControllerInfoFetcher",
    "FeatureGateFetcher",
    "KubectlJsonFetcher",
    "NodeLatencyFetcher",
]
