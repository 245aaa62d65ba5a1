"""Feature gate fetcher - reads the flat feature gate list for all components."""

from __future__ import annotations

from kubesummary.constants.defaults import FEATURE_GATES_PATH_DEFAULT
from kubesummary.constants.timeouts import SUMMARY_REQUEST_TIMEOUT
from kubesummary.controllers.summary.fetchers.base_fetcher import (
    KubectlJsonFetcher,
    RunKubectl,
)
from kubesummary.controllers.summary.parsers import FeatureGateParser
from kubesummary.models.core.feature_gate import FeatureGate


class FeatureGateFetcher(KubectlJsonFetcher):
    """Fetches feature gates through a raw API path."""

    def __init__(
        self,
        run_kubectl_func: RunKubectl,
        request_timeout: str = SUMMARY_REQUEST_TIMEOUT,
        *,
        path: str = FEATURE_GATES_PATH_DEFAULT,
    ) -> None:
        super().__init__(run_kubectl_func, request_timeout)
        self._path = path
        self._parser = FeatureGateParser()

    def build_args(self) -> tuple[str, ...]:
        return ("get", "--raw", self._path, self._timeout_arg())

    async def fetch(self) -> list[FeatureGate]:
        payload = await self._fetch_json(self.build_args())
        return self._parser.parse_feature_gates(payload)
