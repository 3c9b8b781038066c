"""Application admission – IngestRequest."""
from __future__ import annotations

import dataclasses
import re

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_perf(raw: str | None) -> int:
    """Parse the tracker's ``perf`` query parameter.

    Lenient like the tracker's own encoder: leading digits are kept
    (``"12ms"`` → 12), anything unparseable and ``0`` become ``-1``.
    """
    if not raw:
        return -1
    match = _LEADING_INT.match(raw)
    if match is None:
        return -1
    return int(match.group(1)) or -1


@dataclasses.dataclass(frozen=True)
class IngestRequest:
    """Validated per-request parameters, built once from the HTTP layer.

    Nothing is rejected at construction time; the admission gates decide.
    """

    project_id: str
    payload: str | None = None
    perf: int = -1
    tracker_version: str | None = None
    tracker_xhr: str | None = None
    origin: str | None = None
    country: str | None = None
    dnt: bool = False

    @classmethod
    def from_params(
        cls,
        project_id: str,
        *,
        payload: str | None = None,
        perf: str | None = None,
        version: str | None = None,
        xhr: str | None = None,
        origin: str | None = None,
        country: str | None = None,
        dnt: str | None = None,
    ) -> "IngestRequest":
        return cls(
            project_id=project_id,
            payload=payload or None,
            perf=parse_perf(perf),
            tracker_version=version or None,
            tracker_xhr=xhr or None,
            origin=origin or None,
            country=country or None,
            dnt=dnt == "1",
        )

    def with_payload(self, payload: str, *, xhr: str | None = None) -> "IngestRequest":
        return dataclasses.replace(self, payload=payload, tracker_xhr=xhr or self.tracker_xhr)

    def diagnostic_tags(self) -> dict[str, str]:
        """Tags for error reports; identifiers only, never the payload."""
        return {
            "projectID": self.project_id,
            "trackerVersion": self.tracker_version or "unknown",
            "trackerXHR": self.tracker_xhr or "unknown",
        }


__all__ = ["IngestRequest", "parse_perf"]
