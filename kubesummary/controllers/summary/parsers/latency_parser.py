"""Latency parser for summary controller.

Handles two payload shapes:

* the info list served by the dashboard backend::

    {"Items": [{"name": "a", "NodeIPLatencyList": [{"NodeName": "b", "LastMeasuredRTT": 1500}]}]}

* the ``NodeLatencyStats`` list served by the stats API::

    {"items": [{"metadata": {"name": "a"},
                "peerNodeLatencyStats": [{"nodeName": "b",
                    "targetIPLatencyStats": [{"lastMeasuredRTTNanoseconds": 1500000}]}]}]}

RTT values come out in microseconds either way.
"""

from __future__ import annotations

from contextlib import suppress
from typing import Any

from kubesummary.controllers.base import FetchError
from kubesummary.models.core.latency_info import (
    NodeIPLatencyEntry,
    NodeIPLatencyStatsInfo,
)


class NodeLatencyParser:
    """Parses node latency listings into NodeIPLatencyStatsInfo rows."""

    _NANOSECONDS_PER_MICROSECOND = 1000

    @staticmethod
    def _parse_rtt(value: Any) -> int:
        with suppress(ValueError, TypeError):
            return int(value)
        return 0

    def _parse_info_row(self, item: dict[str, Any]) -> NodeIPLatencyStatsInfo:
        name = item.get("name")
        if not name:
            raise FetchError("Latency row has no node name")
        entries = [
            NodeIPLatencyEntry(
                node_name=str(entry["NodeName"]),
                last_measured_rtt=self._parse_rtt(entry.get("LastMeasuredRTT")),
            )
            for entry in item.get("NodeIPLatencyList") or []
            if isinstance(entry, dict) and entry.get("NodeName")
        ]
        return NodeIPLatencyStatsInfo(name=str(name), node_ip_latency_list=entries)

    def _parse_stats_row(self, item: dict[str, Any]) -> NodeIPLatencyStatsInfo:
        name = item.get("metadata", {}).get("name")
        if not name:
            raise FetchError("NodeLatencyStats object has no metadata.name")
        entries: list[NodeIPLatencyEntry] = []
        for peer in item.get("peerNodeLatencyStats") or []:
            if not isinstance(peer, dict) or not peer.get("nodeName"):
                continue
            # One entry per target IP; the last IP wins in the matrix
            for target in peer.get("targetIPLatencyStats") or []:
                if not isinstance(target, dict):
                    continue
                rtt_ns = self._parse_rtt(target.get("lastMeasuredRTTNanoseconds"))
                entries.append(
                    NodeIPLatencyEntry(
                        node_name=str(peer["nodeName"]),
                        last_measured_rtt=rtt_ns // self._NANOSECONDS_PER_MICROSECOND,
                    )
                )
        return NodeIPLatencyStatsInfo(name=str(name), node_ip_latency_list=entries)

    def parse_latency_stats(self, payload: Any) -> list[NodeIPLatencyStatsInfo]:
        """Parse either supported payload shape, keeping response order.

        Raises:
            FetchError: If the payload matches neither shape.
        """
        if not isinstance(payload, dict):
            raise FetchError("Unexpected node latency payload")

        if "Items" in payload:
            items = payload.get("Items") or []
            parse_row = self._parse_info_row
        else:
            items = payload.get("items") or []
            parse_row = self._parse_stats_row

        if not isinstance(items, list):
            raise FetchError("Node latency payload items is not a list")
        return [parse_row(item) for item in items if isinstance(item, dict)]
