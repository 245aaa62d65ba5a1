"""Feature gate models."""

from pydantic import BaseModel, Field


class FeatureGate(BaseModel):
    """A named, versioned toggle owned by one component."""

    name: str
    status: str = "Disabled"
    component: str = ""
    version: str = ""


class FeatureGatePartition(BaseModel):
    """Feature gates split by owning component."""

    controller: list[FeatureGate] = Field(default_factory=list)
    agent: list[FeatureGate] = Field(default_factory=list)
