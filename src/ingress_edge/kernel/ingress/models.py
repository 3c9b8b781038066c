"""Kernel ingress – ProjectConfig, IncomingEvent, OverLimitStats."""
from __future__ import annotations

import dataclasses
import json
from typing import Any

from ingress_edge.kernel.errors import SerializationError


@dataclasses.dataclass(frozen=True)
class ProjectConfig:
    """Per-project policy written by the control plane.

    Stored as JSON with the camelCase wire names ``origins``, ``dailyLimit``
    and ``publicKey``.
    """

    origins: tuple[str, ...]
    daily_limit: int | None = None
    public_key: str | None = None

    @property
    def has_daily_limit(self) -> bool:
        # a limit of 0 means "unlimited" for the control plane
        return bool(self.daily_limit)

    @classmethod
    def from_json(cls, raw: str | bytes) -> "ProjectConfig":
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as exc:
            raise SerializationError("Project configuration is not valid JSON", payload_type="ProjectConfig", cause=exc) from exc
        if not isinstance(data, dict):
            raise SerializationError("Project configuration must be an object", payload_type="ProjectConfig")

        origins = data.get("origins", [])
        if not isinstance(origins, list) or not all(isinstance(o, str) for o in origins):
            raise SerializationError("'origins' must be a list of strings", payload_type="ProjectConfig")

        daily_limit = data.get("dailyLimit")
        if daily_limit is not None and (isinstance(daily_limit, bool) or not isinstance(daily_limit, int)):
            raise SerializationError("'dailyLimit' must be an integer", payload_type="ProjectConfig")

        public_key = data.get("publicKey")
        if public_key is not None and not isinstance(public_key, str):
            raise SerializationError("'publicKey' must be a string", payload_type="ProjectConfig")

        return cls(origins=tuple(origins), daily_limit=daily_limit, public_key=public_key or None)

    def to_json(self) -> str:
        data: dict[str, Any] = {"origins": list(self.origins)}
        if self.daily_limit is not None:
            data["dailyLimit"] = self.daily_limit
        if self.public_key is not None:
            data["publicKey"] = self.public_key
        return json.dumps(data)


@dataclasses.dataclass(frozen=True)
class IncomingEvent:
    """An admitted tracker event, as appended to the project's data queue."""

    project_id: str
    payload: str
    received_at: int
    perf: int = -1
    country: str | None = None

    def to_json(self) -> str:
        message: dict[str, Any] = {
            "payload": self.payload,
            "perf": self.perf,
            "received": self.received_at,
        }
        if self.country is not None:
            message["country"] = self.country
        return json.dumps(message, separators=(",", ":"))

    @classmethod
    def from_json(cls, project_id: str, raw: str | bytes) -> "IncomingEvent":
        try:
            data = json.loads(raw)
            return cls(
                project_id=project_id,
                payload=data["payload"],
                perf=int(data["perf"]),
                received_at=int(data["received"]),
                country=data.get("country"),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise SerializationError("Malformed queued message", payload_type="IncomingEvent", cause=exc) from exc


@dataclasses.dataclass(frozen=True)
class OverLimitStats:
    """Published on the over-limit channel when a project exceeds its daily limit."""

    project_id: str
    usage: int
    over_usage: int
    current_time: int
    remaining_time: int

    def to_dict(self) -> dict[str, int | str]:
        return {
            "projectID": self.project_id,
            "usage": self.usage,
            "overUsage": self.over_usage,
            "currentTime": self.current_time,
            "remainingTime": self.remaining_time,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_json(cls, raw: str | bytes) -> "OverLimitStats":
        data = json.loads(raw)
        return cls(
            project_id=data["projectID"],
            usage=data["usage"],
            over_usage=data["overUsage"],
            current_time=data["currentTime"],
            remaining_time=data["remainingTime"],
        )


__all__ = ["IncomingEvent", "OverLimitStats", "ProjectConfig"]
