"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# UI defaults
# ============================================================================

THEME_DEFAULT: Final = "textual-dark"

# ============================================================================
# Remote read defaults
# ============================================================================

CONTROLLER_INFO_NAME_DEFAULT: Final = "antrea-controller"
CONTROLLER_INFO_RESOURCE_DEFAULT: Final = "antreacontrollerinfos.crd.antrea.io"
AGENT_INFO_RESOURCE_DEFAULT: Final = "antreaagentinfos.crd.antrea.io"
NODE_LATENCY_RESOURCE_DEFAULT: Final = "nodelatencystats.stats.antrea.io"
FEATURE_GATES_PATH_DEFAULT: Final = (
    "/api/v1/namespaces/kube-system/services/https:antrea:443/proxy/featuregates"
)

__all__ = [
    "AGENT_INFO_RESOURCE_DEFAULT",
    "CONTROLLER_INFO_NAME_DEFAULT",
    "CONTROLLER_INFO_RESOURCE_DEFAULT",
    "FEATURE_GATES_PATH_DEFAULT",
    "NODE_LATENCY_RESOURCE_DEFAULT",
    "THEME_DEFAULT",
]
