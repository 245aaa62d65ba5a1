"""Summary screen configuration - panel IDs, titles and column definitions."""

from __future__ import annotations

# =============================================================================
# Panel IDs
# =============================================================================

PANEL_CONTROLLER = "panel-controller"
PANEL_AGENTS = "panel-agents"
PANEL_NODE_LATENCY = "panel-node-latency"
PANEL_CONTROLLER_FEATURE_GATES = "panel-controller-feature-gates"
PANEL_AGENT_FEATURE_GATES = "panel-agent-feature-gates"
PANEL_IDS: list[str] = [
    PANEL_CONTROLLER,
    PANEL_AGENTS,
    PANEL_NODE_LATENCY,
    PANEL_CONTROLLER_FEATURE_GATES,
    PANEL_AGENT_FEATURE_GATES,
]

PANEL_TITLES: dict[str, str] = {
    PANEL_CONTROLLER: "Controller",
    PANEL_AGENTS: "Agents",
    PANEL_NODE_LATENCY: "NodeLatency",
    PANEL_CONTROLLER_FEATURE_GATES: "Controller Feature Gates",
    PANEL_AGENT_FEATURE_GATES: "Agent Feature Gates",
}

PANEL_LOADING_TEXT: dict[str, str] = {
    PANEL_CONTROLLER: "Loading Controller Information",
    PANEL_AGENTS: "Loading Agents Information",
    PANEL_NODE_LATENCY: "Loading NodeIPLatency Information",
    PANEL_CONTROLLER_FEATURE_GATES: "Loading Controller Feature Gates",
    PANEL_AGENT_FEATURE_GATES: "Loading Agent Feature Gates",
}

PANEL_FAILED_TEXT: dict[str, str] = {
    PANEL_CONTROLLER: "Controller Information unavailable",
    PANEL_AGENTS: "Agents Information unavailable",
    PANEL_NODE_LATENCY: "NodeIPLatency Information unavailable",
    PANEL_CONTROLLER_FEATURE_GATES: "Controller Feature Gates unavailable",
    PANEL_AGENT_FEATURE_GATES: "Agent Feature Gates unavailable",
}

# =============================================================================
# Table Column Definitions
# =============================================================================

CONTROLLER_TABLE_COLUMNS: list[str] = [
    "Name",
    "Version",
    "Pod Name",
    "Node Name",
    "Connected Agents",
    "Healthy",
    "Last Heartbeat",
]

AGENT_TABLE_COLUMNS: list[str] = [
    "Name",
    "Version",
    "Pod Name",
    "Node Name",
    "Local Pods",
    "Node Subnets",
    "OVS Version",
    "Healthy",
    "Last Heartbeat",
]

FEATURE_GATE_TABLE_COLUMNS: list[str] = ["Name", "Status", "Version"]

# =============================================================================
# Widget IDs
# =============================================================================

ERROR_BANNER_ID = "error-banner"
SUMMARY_BODY_ID = "summary-body"
