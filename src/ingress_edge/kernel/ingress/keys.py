"""Store key layout and pub/sub channel names shared with the downstream consumers.

These strings are a wire contract with existing deployments; changing them
breaks interop with the processing workers.
"""
from __future__ import annotations

from enum import Enum
from typing import Final

PAYLOAD_PREFIX: Final = "v1.naclbox."


class KeyTag(str, Enum):
    CONFIG = "config"
    COUNT = "count"
    DATA = "data"


class Channel(str, Enum):
    NEW_DATA_AVAILABLE = "newDataAvailable"
    OVER_LIMIT = "overLimit"


def project_key(project_id: str, tag: KeyTag) -> str:
    """Return the store key for *project_id* and purpose *tag*."""
    return f"{project_id}.{tag.value}"


__all__ = ["PAYLOAD_PREFIX", "Channel", "KeyTag", "project_key"]
