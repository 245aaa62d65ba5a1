"""Shared kubectl-JSON plumbing for summary fetchers."""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from kubesummary.constants.timeouts import SUMMARY_REQUEST_TIMEOUT
from kubesummary.controllers.base import FetchError

logger = logging.getLogger(__name__)

RunKubectl = Callable[[tuple[str, ...]], Awaitable[str]]


class KubectlJsonFetcher:
    """Runs one kubectl read and decodes its JSON output."""

    def __init__(
        self,
        run_kubectl_func: RunKubectl,
        request_timeout: str = SUMMARY_REQUEST_TIMEOUT,
    ) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
            request_timeout: Value passed to kubectl ``--request-timeout``
        """
        self._run_kubectl = run_kubectl_func
        self._request_timeout = request_timeout

    def _timeout_arg(self) -> str:
        return f"--request-timeout={self._request_timeout}"

    async def _fetch_json(self, args: tuple[str, ...]) -> Any:
        """Run kubectl and decode stdout.

        Raises:
            FetchError: If kubectl printed nothing or non-JSON output.
        """
        output = await self._run_kubectl(args)
        if not output or not output.strip():
            raise FetchError(f"Empty response from kubectl {' '.join(args[:2])}")
        try:
            return json.loads(output)
        except json.JSONDecodeError as exc:
            logger.debug("Non-JSON output for %s: %.200s", args, output)
            raise FetchError(f"Invalid JSON from kubectl {' '.join(args[:2])}") from exc
