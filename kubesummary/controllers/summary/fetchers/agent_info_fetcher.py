"""Agent info fetcher - reads every agent's self-reported info object."""

from __future__ import annotations

from kubesummary.constants.defaults import AGENT_INFO_RESOURCE_DEFAULT
from kubesummary.constants.timeouts import SUMMARY_REQUEST_TIMEOUT
from kubesummary.controllers.summary.fetchers.base_fetcher import (
    KubectlJsonFetcher,
    RunKubectl,
)
from kubesummary.controllers.summary.parsers import InfoParser
from kubesummary.models.core.component_info import AgentInfo


class AgentInfoFetcher(KubectlJsonFetcher):
    """Fetches the list of agent infos."""

    def __init__(
        self,
        run_kubectl_func: RunKubectl,
        request_timeout: str = SUMMARY_REQUEST_TIMEOUT,
        *,
        resource: str = AGENT_INFO_RESOURCE_DEFAULT,
    ) -> None:
        super().__init__(run_kubectl_func, request_timeout)
        self._resource = resource
        self._parser = InfoParser()

    def build_args(self) -> tuple[str, ...]:
        return ("get", self._resource, "-o", "json", self._timeout_arg())

    async def fetch(self) -> list[AgentInfo]:
        payload = await self._fetch_json(self.build_args())
        return self._parser.parse_agent_infos(payload)
