"""Adapters – Redis, FastAPI and OpenTelemetry integrations."""
