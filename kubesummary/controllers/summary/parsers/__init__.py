"""Parsers for summary data sources."""

from kubesummary.controllers.summary.parsers.feature_gate_parser import FeatureGateParser
from kubesummary.controllers.summary.parsers.info_parser import InfoParser
from kubesummary.controllers.summary.parsers.latency_parser import NodeLatencyParser

__all__ = ["FeatureGateParser", "InfoParser", "NodeLatencyParser"]
