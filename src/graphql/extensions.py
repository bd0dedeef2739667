from __future__ import annotations

import time

from strawberry.extensions import SchemaExtension

from src.observability.hooks import NullHook


class ObservabilityExtension(SchemaExtension):
    """Reports operation start and duration to the request's observability hook."""

    def on_execute(self):
        execution_context = self.execution_context
        hook = getattr(execution_context.context, "hook", None) or NullHook()
        operation_type = execution_context.operation_type.value
        hook.request_started(operation_type, execution_context.operation_name)
        started = time.perf_counter()
        yield
        hook.request_finished(operation_type, time.perf_counter() - started)
