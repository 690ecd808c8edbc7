"""Requests and responses of the (deprecated) edits endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

EDITS_SUFFIX = "/edits"


def _object(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a JSON object, got {data!r}")
    return data


@dataclass
class EditsRequest:
    """Parameters of an edit request."""

    model: Optional[str] = None
    input: str = ""
    instruction: str = ""
    n: int = 0
    temperature: float = 0.0
    top_p: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """JSON body, leaving out fields that hold their zero value."""
        body: dict[str, Any] = {}
        if self.model is not None:
            body["model"] = self.model
        optional = (
            ("input", self.input),
            ("instruction", self.instruction),
            ("n", self.n),
            ("temperature", self.temperature),
            ("top_p", self.top_p),
        )
        body.update((key, value) for key, value in optional if value)
        return body


@dataclass
class EditsChoice:
    """One edited text."""

    text: str = ""
    index: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "EditsChoice":
        data = _object(data, "edits choice")
        return cls(text=data.get("text") or "", index=data.get("index") or 0)


@dataclass
class EditsResponse:
    """Response of the edits endpoint."""

    object: str = ""
    created: int = 0
    usage: dict[str, Any] = field(default_factory=dict)
    choices: list[EditsChoice] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "EditsResponse":
        data = _object(data, "edits response")
        usage = data.get("usage")
        return cls(
            object=data.get("object") or "",
            created=data.get("created") or 0,
            usage={} if usage is None else dict(_object(usage, "usage")),
            choices=[EditsChoice.from_dict(item) for item in data.get("choices") or []],
        )