"""Summary controller for cluster network status.

This module serves as the orchestrator for the summary view, fanning out to
the controller-info, agent-info, feature-gate and node-latency fetchers and
folding their results into one snapshot that tolerates partial failure.
"""

from __future__ import annotations

import asyncio
import logging
import subprocess
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, TypeVar

from kubesummary.constants.enums import FetchSources, FetchState
from kubesummary.constants.timeouts import (
    CLUSTER_CHECK_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)
from kubesummary.controllers.base import (
    BaseController,
    FetchError,
    FetchResult,
    elapsed_ms,
)
from kubesummary.controllers.summary.fetchers import (
    AgentInfoFetcher,
    ControllerInfoFetcher,
    FeatureGateFetcher,
    NodeLatencyFetcher,
)
from kubesummary.models.core.component_info import AgentInfo, ControllerInfo
from kubesummary.models.core.feature_gate import FeatureGate, FeatureGatePartition
from kubesummary.models.core.latency_info import LatencyMatrix, NodeIPLatencyStatsInfo
from kubesummary.models.state.app_settings import AppSettings
from kubesummary.models.state.error_notification import ErrorNotification
from kubesummary.utils.feature_gates import partition_feature_gates
from kubesummary.utils.latency_matrix import build_latency_matrix

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class FetchStatus:
    """Status tracking for a single data source fetch operation."""

    source_name: str
    state: FetchState = FetchState.LOADING
    error_message: str | None = None
    last_updated: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "source_name": self.source_name,
            "state": self.state.value,
            "error_message": self.error_message,
            "last_updated": self.last_updated.isoformat()
            if self.last_updated
            else None,
        }


@dataclass
class SummarySnapshot:
    """Result of one aggregation cycle.

    Each source is present on success and ``None`` on failure. The derived
    views exist only when their own source succeeded.
    """

    controller_info: ControllerInfo | None = None
    agent_infos: list[AgentInfo] | None = None
    feature_gates: list[FeatureGate] | None = None
    node_latency_stats: list[NodeIPLatencyStatsInfo] | None = None
    feature_gate_partition: FeatureGatePartition | None = None
    latency_matrix: LatencyMatrix | None = None
    errors: dict[str, str] = field(default_factory=dict)
    duration_ms: float = 0.0

    @property
    def all_succeeded(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-friendly dictionary."""

        def _dump(value: Any) -> Any:
            if value is None:
                return None
            if isinstance(value, list):
                return [item.model_dump(mode="json") for item in value]
            return value.model_dump(mode="json")

        return {
            "controller_info": _dump(self.controller_info),
            "agent_infos": _dump(self.agent_infos),
            "feature_gates": _dump(self.feature_gates),
            "node_latency_stats": _dump(self.node_latency_stats),
            "feature_gate_partition": _dump(self.feature_gate_partition),
            "latency_matrix": _dump(self.latency_matrix),
            "errors": dict(self.errors),
        }


class SummaryController(BaseController):
    """Cluster summary data operations with concurrent fetching.

    This class serves as an orchestrator that delegates to four fetchers:
    - ControllerInfoFetcher: Controller identity and health
    - AgentInfoFetcher: Per-node agent identity and health
    - FeatureGateFetcher: Feature gates of both components
    - NodeLatencyFetcher: Pairwise node RTT measurements
    """

    SOURCE_CONTROLLER_INFO = FetchSources.CONTROLLER_INFO.value
    SOURCE_AGENT_INFOS = FetchSources.AGENT_INFOS.value
    SOURCE_FEATURE_GATES = FetchSources.FEATURE_GATES.value
    SOURCE_NODE_LATENCY_STATS = FetchSources.NODE_LATENCY_STATS.value
    SOURCES = (
        SOURCE_CONTROLLER_INFO,
        SOURCE_AGENT_INFOS,
        SOURCE_FEATURE_GATES,
        SOURCE_NODE_LATENCY_STATS,
    )
    _ERROR_MESSAGE_MAX_LENGTH = 160

    def __init__(
        self,
        context: str | None = None,
        *,
        settings: AppSettings | None = None,
        notification: ErrorNotification | None = None,
        run_kubectl_func: Callable[[tuple[str, ...]], Awaitable[str]] | None = None,
    ) -> None:
        """Initialize the summary controller.

        Args:
            context: Optional Kubernetes context name. Overrides settings.context.
            settings: Application settings; defaults are used when omitted.
            notification: Error banner state shared with the presentation layer.
            run_kubectl_func: Replacement kubectl runner, mainly for tests.
        """
        self.settings = settings or AppSettings()
        self.context = context if context is not None else self.settings.context
        self.notification = notification or ErrorNotification()
        run_kubectl = run_kubectl_func or self._run_kubectl
        request_timeout = self.settings.request_timeout

        # Initialize fetchers
        self._controller_info_fetcher = ControllerInfoFetcher(
            run_kubectl,
            request_timeout,
            resource=self.settings.controller_info_resource,
            name=self.settings.controller_info_name,
        )
        self._agent_info_fetcher = AgentInfoFetcher(
            run_kubectl,
            request_timeout,
            resource=self.settings.agent_info_resource,
        )
        self._feature_gate_fetcher = FeatureGateFetcher(
            run_kubectl,
            request_timeout,
            path=self.settings.feature_gates_path,
        )
        self._node_latency_fetcher = NodeLatencyFetcher(
            run_kubectl,
            request_timeout,
            resource=self.settings.node_latency_resource,
        )
        self._run_kubectl_func = run_kubectl

        # Fetch state tracking
        self._fetch_states: dict[str, FetchStatus] = {}
        self._initialize_fetch_states()

    # =========================================================================
    # kubectl
    # =========================================================================

    def _run_kubectl_sync(self, args: tuple[str, ...]) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = ["kubectl"]
        if self.context:
            cmd.extend(["--context", self.context])
        cmd.extend(args)
        result = subprocess.run(
            cmd, capture_output=True, text=True, timeout=KUBECTL_COMMAND_TIMEOUT
        )
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise RuntimeError(stderr or "kubectl command failed")
        return result.stdout

    async def _run_kubectl(self, args: tuple[str, ...]) -> str:
        return await asyncio.to_thread(self._run_kubectl_sync, args)

    # =========================================================================
    # Fetch state
    # =========================================================================

    def _initialize_fetch_states(self) -> None:
        """Initialize fetch states for all data sources."""
        for source in self.SOURCES:
            self._fetch_states[source] = FetchStatus(source_name=source)

    def _update_fetch_state(
        self,
        source: str,
        state: FetchState,
        error_message: str | None = None,
    ) -> None:
        """Update the fetch state for a data source."""
        if source not in self._fetch_states:
            self._fetch_states[source] = FetchStatus(source_name=source)
        self._fetch_states[source].state = state
        self._fetch_states[source].error_message = error_message
        if state == FetchState.SUCCESS:
            self._fetch_states[source].last_updated = datetime.now(timezone.utc)

    def get_fetch_state(self, source: str) -> FetchStatus | None:
        """Get the fetch state for a specific data source."""
        return self._fetch_states.get(source)

    def get_all_fetch_states(self) -> dict[str, FetchStatus]:
        """Get all fetch states."""
        return self._fetch_states.copy()

    def get_error_sources(self) -> list[str]:
        """Get list of data sources with errors."""
        return [
            source
            for source, status in self._fetch_states.items()
            if status.state == FetchState.ERROR
        ]

    def reset_fetch_state(self, source: str) -> bool:
        """Reset the fetch state for a data source to initial loading state."""
        if source not in self._fetch_states:
            return False
        self._fetch_states[source].state = FetchState.LOADING
        self._fetch_states[source].error_message = None
        return True

    def is_all_success(self) -> bool:
        """Check if all data sources have been fetched successfully."""
        return all(
            status.state == FetchState.SUCCESS for status in self._fetch_states.values()
        )

    @classmethod
    def _summarize_error(cls, error: BaseException) -> str:
        """Extract a concise, user-facing message from a fetch error."""
        lines = [line.strip() for line in str(error).splitlines() if line.strip()]
        if not lines:
            return f"{type(error).__name__} while fetching data"
        cleaned = lines[-1].removeprefix("error:").strip() or lines[-1]
        limit = cls._ERROR_MESSAGE_MAX_LENGTH
        if len(cleaned) > limit:
            return f"{cleaned[:limit - 3].rstrip()}..."
        return cleaned

    # =========================================================================
    # Fetch contracts
    # =========================================================================

    async def fetch_controller_info(self) -> ControllerInfo:
        return await self._controller_info_fetcher.fetch()

    async def fetch_agent_infos(self) -> list[AgentInfo]:
        return await self._agent_info_fetcher.fetch()

    async def fetch_feature_gates(self) -> list[FeatureGate]:
        return await self._feature_gate_fetcher.fetch()

    async def fetch_node_latency_stats(self) -> list[NodeIPLatencyStatsInfo]:
        return await self._node_latency_fetcher.fetch()

    @staticmethod
    async def _call_loader(loader: Callable[[], Awaitable[T]]) -> T:
        """Await a loader, keeping its own timeouts apart from the fetch budget.

        Only an expired ``wait_for`` in ``_guarded_fetch`` may surface as
        ``TimeoutError``; a timeout raised inside the loader (socket, OS) is
        re-raised as ``FetchError`` with its own message.
        """
        try:
            return await loader()
        except (TimeoutError, asyncio.TimeoutError) as exc:
            raise FetchError(str(exc) or "Request timed out") from exc

    async def _guarded_fetch(
        self,
        source: str,
        loader: Callable[[], Awaitable[T]],
    ) -> FetchResult[T]:
        """Run one fetch and turn any failure into an empty result.

        Cancellation is not caught so a stale cycle can be abandoned.
        """
        self._update_fetch_state(source, FetchState.LOADING)
        started = time.monotonic()
        try:
            data = await asyncio.wait_for(
                self._call_loader(loader),
                timeout=self.settings.fetch_timeout_seconds,
            )
        except asyncio.TimeoutError:
            message = (
                f"Timed out after {self.settings.fetch_timeout_seconds:g}s"
            )
            logger.error("Fetching %s failed: %s", source, message)
            self._update_fetch_state(source, FetchState.ERROR, message)
            return FetchResult(
                source=source,
                error=message,
                duration_ms=elapsed_ms(started),
            )
        except Exception as exc:
            message = self._summarize_error(exc)
            logger.error("Fetching %s failed: %s", source, exc, exc_info=True)
            self._update_fetch_state(source, FetchState.ERROR, message)
            return FetchResult(
                source=source,
                error=message,
                duration_ms=elapsed_ms(started),
            )

        self._update_fetch_state(source, FetchState.SUCCESS)
        return FetchResult(
            source=source,
            data=data,
            duration_ms=elapsed_ms(started),
        )

    async def check_connection(self) -> bool:
        """Check if the cluster API answers."""
        try:
            await asyncio.wait_for(
                self._run_kubectl_func(
                    ("cluster-info", f"--request-timeout={self.settings.request_timeout}")
                ),
                timeout=CLUSTER_CHECK_TIMEOUT,
            )
        except asyncio.TimeoutError:
            logger.warning("Cluster connection check timed out")
            return False
        except Exception as exc:
            logger.warning("Cluster connection check failed: %s", self._summarize_error(exc))
            return False
        return True

    async def fetch_all(self) -> SummarySnapshot:
        """Fetch all summary sources.

        Runs the four independent fetches in parallel via asyncio.gather().
        Every fetch settles into a FetchResult, so one failing source never
        prevents the others from landing in the snapshot.

        Returns:
            SummarySnapshot with whatever succeeded.
        """
        started = time.monotonic()
        (
            controller_result,
            agents_result,
            gates_result,
            latency_result,
        ) = await asyncio.gather(
            self._guarded_fetch(self.SOURCE_CONTROLLER_INFO, self.fetch_controller_info),
            self._guarded_fetch(self.SOURCE_AGENT_INFOS, self.fetch_agent_infos),
            self._guarded_fetch(self.SOURCE_FEATURE_GATES, self.fetch_feature_gates),
            self._guarded_fetch(
                self.SOURCE_NODE_LATENCY_STATS, self.fetch_node_latency_stats
            ),
        )

        snapshot = SummarySnapshot(
            controller_info=controller_result.data,
            agent_infos=agents_result.data,
            feature_gates=gates_result.data,
            node_latency_stats=latency_result.data,
        )
        if gates_result.success and gates_result.data is not None:
            snapshot.feature_gate_partition = partition_feature_gates(gates_result.data)
        if latency_result.success and latency_result.data is not None:
            snapshot.latency_matrix = build_latency_matrix(latency_result.data)

        results = (controller_result, agents_result, gates_result, latency_result)
        snapshot.errors = {
            result.source: result.error
            for result in results
            if result.error is not None
        }

        # All fetches have settled; the banner is the only shared state
        if snapshot.errors:
            first_error = next(iter(snapshot.errors.values()))
            self.notification.raise_error(first_error)
        else:
            self.notification.clear()

        snapshot.duration_ms = elapsed_ms(started)
        logger.debug(
            "Summary fetch finished in %.2fms (%d/%d sources ok)",
            snapshot.duration_ms,
            len(results) - len(snapshot.errors),
            len(results),
        )
        return snapshot
