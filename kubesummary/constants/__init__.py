"""Constants module for KubeSummary.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, numbers with Final)
- timeouts.py: Timeout values (seconds)
- defaults.py: Default values for settings
"""

from kubesummary.constants.defaults import (
    AGENT_INFO_RESOURCE_DEFAULT,
    CONTROLLER_INFO_NAME_DEFAULT,
    CONTROLLER_INFO_RESOURCE_DEFAULT,
    FEATURE_GATES_PATH_DEFAULT,
    NODE_LATENCY_RESOURCE_DEFAULT,
    THEME_DEFAULT,
)
from kubesummary.constants.enums import (
    ConditionStatus,
    FeatureGateComponent,
    FetchSources,
    FetchState,
    PanelState,
)
from kubesummary.constants.timeouts import (
    CLUSTER_CHECK_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
    SUMMARY_FETCH_TIMEOUT,
    SUMMARY_REQUEST_TIMEOUT,
)
from kubesummary.constants.values import (
    AGENT_HEALTHY_CONDITION,
    APP_TITLE,
    CONTROLLER_HEALTHY_CONDITION,
    LATENCY_DISPLAY_DIVISOR,
    STATUS_NONE,
    STATUS_UNKNOWN,
)

__all__ = [
    "AGENT_HEALTHY_CONDITION",
    "AGENT_INFO_RESOURCE_DEFAULT",
    "APP_TITLE",
    "CLUSTER_CHECK_TIMEOUT",
    "CONTROLLER_HEALTHY_CONDITION",
    "CONTROLLER_INFO_NAME_DEFAULT",
    "CONTROLLER_INFO_RESOURCE_DEFAULT",
    "ConditionStatus",
    "FEATURE_GATES_PATH_DEFAULT",
    "FeatureGateComponent",
    "FetchSources",
    "FetchState",
    "KUBECTL_COMMAND_TIMEOUT",
    "LATENCY_DISPLAY_DIVISOR",
    "NODE_LATENCY_RESOURCE_DEFAULT",
    "PanelState",
    "STATUS_NONE",
    "STATUS_UNKNOWN",
    "SUMMARY_FETCH_TIMEOUT",
    "SUMMARY_REQUEST_TIMEOUT",
    "THEME_DEFAULT",
]
