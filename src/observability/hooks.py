"""
Observability hook invoked at the service's extension points.

The resolver core and the identity extractor never log directly; they report
request start, credential rejections and applied mutations here, and the hook
fans them out to structlog and Prometheus.
"""

from __future__ import annotations

from typing import Optional

import structlog

from src.observability import metrics

logger = structlog.get_logger("posts.observability")


class ObservabilityHook:
    def request_started(self, operation_type: str, operation_name: Optional[str] = None) -> None:
        logger.info("graphql.request.started", operation_type=operation_type, operation_name=operation_name)

    def request_finished(self, operation_type: str, duration: float) -> None:
        metrics.record_request_metrics(operation_type, duration)

    def auth_failed(self, reason: str) -> None:
        metrics.auth_failures_total.labels(reason=reason).inc()
        logger.warning("auth.failed", reason=reason)

    def mutation_applied(
        self,
        operation: str,
        post_id: int,
        user_id: Optional[int] = None,
        store_size: Optional[int] = None,
    ) -> None:
        metrics.mutations_total.labels(operation=operation).inc()
        if store_size is not None:
            metrics.store_size.set(store_size)
        logger.info("post.mutation.applied", operation=operation, post_id=post_id, user_id=user_id)


class NullHook(ObservabilityHook):
    """Hook that drops every event."""

    def request_started(self, operation_type, operation_name=None):
        pass

    def request_finished(self, operation_type, duration):
        pass

    def auth_failed(self, reason):
        pass

    def mutation_applied(self, operation, post_id, user_id=None, store_size=None):
        pass
