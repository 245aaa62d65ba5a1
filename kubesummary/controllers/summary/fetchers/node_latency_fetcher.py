"""Node latency fetcher - reads per-node RTT measurements."""

from __future__ import annotations

from kubesummary.constants.defaults import NODE_LATENCY_RESOURCE_DEFAULT
from kubesummary.constants.timeouts import SUMMARY_REQUEST_TIMEOUT
from kubesummary.controllers.summary.fetchers.base_fetcher import (
    KubectlJsonFetcher,
    RunKubectl,
)
from kubesummary.controllers.summary.parsers import NodeLatencyParser
from kubesummary.models.core.latency_info import NodeIPLatencyStatsInfo


class NodeLatencyFetcher(KubectlJsonFetcher):
    """Fetches the node latency stats list."""

    def __init__(
        self,
        run_kubectl_func: RunKubectl,
        request_timeout: str = SUMMARY_REQUEST_TIMEOUT,
        *,
        resource: str = NODE_LATENCY_RESOURCE_DEFAULT,
    ) -> None:
        super().__init__(run_kubectl_func, request_timeout)
        self._resource = resource
        self._parser = NodeLatencyParser()

    def build_args(self) -> tuple[str, ...]:
        return ("get", self._resource, "-o", "json", self._timeout_arg())

    async def fetch(self) -> list[NodeIPLatencyStatsInfo]:
        payload = await self._fetch_json(self.build_args())
        return self._parser.parse_latency_stats(payload)
