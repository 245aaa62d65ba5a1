"""Object reference and condition models shared by component info models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from kubesummary.constants.enums import ConditionStatus


class K8sRef(BaseModel):
    """Reference to a cluster object by name and optional namespace."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str | None = None


class Condition(BaseModel):
    """Named health condition reported by a component."""

    model_config = ConfigDict(frozen=True)

    type: str
    status: str = ConditionStatus.UNKNOWN.value
    last_heartbeat_time: datetime | None = None
    reason: str | None = None
    message: str | None = None
