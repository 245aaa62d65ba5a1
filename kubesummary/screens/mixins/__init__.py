"""Screen mixins."""

from kubesummary.screens.mixins.worker_mixin import WorkerMixin

__all__ = ["WorkerMixin"]
