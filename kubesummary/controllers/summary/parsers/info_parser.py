"""Info parser for summary controller - parses controller and agent info objects."""

from __future__ import annotations

from contextlib import suppress
from datetime import datetime
from typing import Any

from kubesummary.controllers.base import FetchError
from kubesummary.models.core.component_info import AgentInfo, ControllerInfo, OVSInfo
from kubesummary.models.core.k8s_ref import Condition, K8sRef


class InfoParser:
    """Parses controller/agent info objects into structured formats."""

    @staticmethod
    def _parse_timestamp(timestamp: Any) -> datetime | None:
        """Parse kubernetes timestamp strings into aware datetimes."""
        if not isinstance(timestamp, str) or not timestamp:
            return None
        with suppress(ValueError, TypeError):
            return datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
        return None

    @staticmethod
    def _parse_int(value: Any) -> int | None:
        if value is None:
            return None
        with suppress(ValueError, TypeError):
            return int(value)
        return None

    def _parse_ref(self, raw: Any) -> K8sRef | None:
        if not isinstance(raw, dict) or not raw.get("name"):
            return None
        return K8sRef(name=str(raw["name"]), namespace=raw.get("namespace") or None)

    def _parse_conditions(self, raw: Any) -> list[Condition]:
        if not isinstance(raw, list):
            return []
        return [
            Condition(
                type=str(c["type"]),
                status=str(c.get("status", "Unknown")),
                last_heartbeat_time=self._parse_timestamp(c.get("lastHeartbeatTime")),
                reason=c.get("reason"),
                message=c.get("message"),
            )
            for c in raw
            if isinstance(c, dict) and "type" in c
        ]

    @staticmethod
    def _object_name(obj: dict[str, Any], kind: str) -> str:
        name = obj.get("metadata", {}).get("name")
        if not name:
            raise FetchError(f"{kind} object has no metadata.name")
        return str(name)

    @staticmethod
    def _list_items(payload: Any, kind: str) -> list[dict[str, Any]]:
        if not isinstance(payload, dict):
            raise FetchError(f"Unexpected {kind} payload type: {type(payload).__name__}")
        items = payload.get("items", [])
        if not isinstance(items, list):
            raise FetchError(f"{kind} payload 'items' is not a list")
        return [item for item in items if isinstance(item, dict)]

    def parse_controller_info(self, payload: Any) -> ControllerInfo:
        """Parse a controller info object or a List holding it.

        Args:
            payload: Decoded JSON from the API

        Returns:
            ControllerInfo object.

        Raises:
            FetchError: If the payload holds no controller info.
        """
        obj = payload
        if isinstance(payload, dict) and "items" in payload:
            items = self._list_items(payload, "controller info")
            if not items:
                raise FetchError("No controller info object found")
            obj = items[0]
        if not isinstance(obj, dict):
            raise FetchError("Unexpected controller info payload")

        return ControllerInfo(
            name=self._object_name(obj, "Controller info"),
            version=obj.get("version") or None,
            pod_ref=self._parse_ref(obj.get("podRef")),
            node_ref=self._parse_ref(obj.get("nodeRef")),
            connected_agent_num=self._parse_int(obj.get("connectedAgentNum")),
            controller_conditions=self._parse_conditions(obj.get("controllerConditions")),
        )

    def parse_agent_info(self, obj: dict[str, Any]) -> AgentInfo:
        """Parse a single agent info object."""
        ovs_raw = obj.get("ovsInfo")
        ovs_info = None
        if isinstance(ovs_raw, dict):
            ovs_info = OVSInfo(
                version=ovs_raw.get("version") or None,
                bridge_name=ovs_raw.get("bridgeName") or None,
            )
        subnets = obj.get("nodeSubnets")

        return AgentInfo(
            name=self._object_name(obj, "Agent info"),
            version=obj.get("version") or None,
            pod_ref=self._parse_ref(obj.get("podRef")),
            node_ref=self._parse_ref(obj.get("nodeRef")),
            local_pod_num=self._parse_int(obj.get("localPodNum")),
            node_subnets=[str(s) for s in subnets] if isinstance(subnets, list) else None,
            ovs_info=ovs_info,
            agent_conditions=self._parse_conditions(obj.get("agentConditions")),
        )

    def parse_agent_infos(self, payload: Any) -> list[AgentInfo]:
        """Parse an agent info List, keeping response order."""
        return [
            self.parse_agent_info(item)
            for item in self._list_items(payload, "agent info")
        ]
