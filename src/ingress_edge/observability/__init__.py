"""Observability – structured logging, metrics and error reporting."""
