"""Controller and agent info models."""

from pydantic import BaseModel, ConfigDict, Field

from kubesummary.models.core.k8s_ref import Condition, K8sRef


class ControllerInfo(BaseModel):
    """Point-in-time snapshot of the cluster controller."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str | None = None
    pod_ref: K8sRef | None = None
    node_ref: K8sRef | None = None
    connected_agent_num: int | None = None
    controller_conditions: list[Condition] = Field(default_factory=list)


class OVSInfo(BaseModel):
    """OVS subsystem details embedded in an agent info."""

    model_config = ConfigDict(frozen=True)

    version: str | None = None
    bridge_name: str | None = None


class AgentInfo(BaseModel):
    """Point-in-time snapshot of one node agent."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str | None = None
    pod_ref: K8sRef | None = None
    node_ref: K8sRef | None = None
    local_pod_num: int | None = None
    node_subnets: list[str] | None = None
    ovs_info: OVSInfo | None = None
    agent_conditions: list[Condition] = Field(default_factory=list)
