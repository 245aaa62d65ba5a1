"""Controller info fetcher - reads the controller's self-reported info object."""

from __future__ import annotations

from kubesummary.constants.defaults import (
    CONTROLLER_INFO_NAME_DEFAULT,
    CONTROLLER_INFO_RESOURCE_DEFAULT,
)
from kubesummary.constants.timeouts import SUMMARY_REQUEST_TIMEOUT
from kubesummary.controllers.summary.fetchers.base_fetcher import (
    KubectlJsonFetcher,
    RunKubectl,
)
from kubesummary.controllers.summary.parsers import InfoParser
from kubesummary.models.core.component_info import ControllerInfo


class ControllerInfoFetcher(KubectlJsonFetcher):
    """Fetches the singleton controller info."""

    def __init__(
        self,
        run_kubectl_func: RunKubectl,
        request_timeout: str = SUMMARY_REQUEST_TIMEOUT,
        *,
        resource: str = CONTROLLER_INFO_RESOURCE_DEFAULT,
        name: str = CONTROLLER_INFO_NAME_DEFAULT,
    ) -> None:
        super().__init__(run_kubectl_func, request_timeout)
        self._resource = resource
        self._name = name
        self._parser = InfoParser()

    def build_args(self) -> tuple[str, ...]:
        args = ["get", self._resource]
        if self._name:
            args.append(self._name)
        args.extend(["-o", "json", self._timeout_arg()])
        return tuple(args)

    async def fetch(self) -> ControllerInfo:
        payload = await self._fetch_json(self.build_args())
        return self._parser.parse_controller_info(payload)
