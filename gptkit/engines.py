"""Engine descriptions returned by the engines endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ENGINES_SUFFIX = "/engines"


def _object(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a JSON object, got {data!r}")
    return data


@dataclass
class Engine:
    """An engine with its owner and availability."""

    id: str = ""
    object: str = ""
    owner: str = ""
    ready: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Engine":
        data = _object(data, "engine")
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            owner=data.get("owner") or "",
            ready=bool(data.get("ready")),
        )


@dataclass
class EnginesList:
    """The engines currently available."""

    engines: list[Engine] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "EnginesList":
        data = _object(data, "engines list")
        return cls(engines=[Engine.from_dict(item) for item in data.get("data") or []])