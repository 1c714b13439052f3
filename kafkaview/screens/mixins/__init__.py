"""Screen mixins."""

from kafkaview.screens.mixins.worker_mixin import WorkerMixin

__all__ = ["WorkerMixin"]
