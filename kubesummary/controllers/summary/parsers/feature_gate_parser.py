"""Feature gate parser for summary controller."""

from __future__ import annotations

from typing import Any

from kubesummary.controllers.base import FetchError
from kubesummary.models.core.feature_gate import FeatureGate


class FeatureGateParser:
    """Parses feature gate listings into FeatureGate models."""

    def parse_feature_gates(self, payload: Any) -> list[FeatureGate]:
        """Parse a bare JSON list or an object with ``items``.

        Raises:
            FetchError: If the payload is not a list of gates.
        """
        items = payload.get("items") if isinstance(payload, dict) else payload
        if not isinstance(items, list):
            raise FetchError("Unexpected feature gates payload")

        gates: list[FeatureGate] = []
        for item in items:
            if not isinstance(item, dict) or not item.get("name"):
                raise FetchError(f"Malformed feature gate entry: {item!r}")
            gates.append(
                FeatureGate(
                    name=str(item["name"]),
                    status=str(item.get("status", "")),
                    component=str(item.get("component", "")),
                    version=str(item.get("version", "")),
                )
            )
        return gates
