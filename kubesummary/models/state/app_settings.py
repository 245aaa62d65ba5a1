"""Application settings models."""

from pydantic import BaseModel, ConfigDict

from kubesummary.constants.defaults import (
    AGENT_INFO_RESOURCE_DEFAULT,
    CONTROLLER_INFO_NAME_DEFAULT,
    CONTROLLER_INFO_RESOURCE_DEFAULT,
    FEATURE_GATES_PATH_DEFAULT,
    NODE_LATENCY_RESOURCE_DEFAULT,
    THEME_DEFAULT,
)
from kubesummary.constants.timeouts import (
    SUMMARY_FETCH_TIMEOUT,
    SUMMARY_REQUEST_TIMEOUT,
)


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Cluster access
    context: str | None = None
    request_timeout: str = SUMMARY_REQUEST_TIMEOUT
    fetch_timeout_seconds: float = SUMMARY_FETCH_TIMEOUT

    # Remote reads
    controller_info_name: str = CONTROLLER_INFO_NAME_DEFAULT
    controller_info_resource: str = CONTROLLER_INFO_RESOURCE_DEFAULT
    agent_info_resource: str = AGENT_INFO_RESOURCE_DEFAULT
    node_latency_resource: str = NODE_LATENCY_RESOURCE_DEFAULT
    feature_gates_path: str = FEATURE_GATES_PATH_DEFAULT

    # UI preferences
    theme: str = THEME_DEFAULT


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
