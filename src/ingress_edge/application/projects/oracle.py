"""Application projects – ProjectConfigOracle."""
from __future__ import annotations

from ingress_edge.application.store import KeyValueStore
from ingress_edge.kernel.errors import BaseError, ConfigNotFoundError
from ingress_edge.kernel.ingress import KeyTag, ProjectConfig, project_key
from ingress_edge.observability.logging import get_logger
from ingress_edge.observability.reporting import ErrorReporter

_log = get_logger(__name__)


class ProjectConfigOracle:
    """Read project configuration written by the control plane.

    A missing key, a malformed document and a store failure all yield
    ``None``: to the admission pipeline they mean the same thing, the
    request cannot be admitted. Each failure is logged and reported with the
    project id and the key that was read.
    """

    def __init__(self, store: KeyValueStore, reporter: ErrorReporter) -> None:
        self._store = store
        self._reporter = reporter

    async def lookup(self, project_id: str) -> ProjectConfig | None:
        config_key = project_key(project_id, KeyTag.CONFIG)
        try:
            raw = await self._store.get(config_key)
            if not raw:
                raise ConfigNotFoundError(project_id)
            return ProjectConfig.from_json(raw)
        except BaseError as exc:
            _log.warning(
                "project_config.unavailable",
                project_id=project_id,
                config_key=config_key,
                error_code=exc.code,
            )
            self._reporter.report(exc, {"projectID": project_id, "configKey": config_key})
            return None


__all__ = ["ProjectConfigOracle"]
