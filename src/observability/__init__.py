"""Logging, metrics, tracing and the observability hook."""
