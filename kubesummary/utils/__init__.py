"""Utility functions for KubeSummary."""

from kubesummary.utils.feature_gates import partition_feature_gates
from kubesummary.utils.latency_matrix import build_latency_matrix

__all__ = [
    "build_latency_matrix",
    "partition_feature_gates",
]
