"""Fine-tuning job requests, responses and listing paths."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import urlencode

from gptkit.fine_tunes import FineTuneEvent

FINE_TUNING_JOBS_SUFFIX = "/fine_tuning/jobs"


def _object(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a JSON object, got {data!r}")
    return data


def fine_tuning_job_events_path(
    job_id: str, after: Optional[str] = None, limit: Optional[int] = None
) -> str:
    """URL suffix listing the events of a job, with optional paging parameters."""
    params: dict[str, str] = {}
    if after is not None:
        params["after"] = after
    if limit is not None:
        params["limit"] = str(int(limit))
    query = f"?{urlencode(sorted(params.items()))}" if params else ""
    return f"{FINE_TUNING_JOBS_SUFFIX}/{job_id}/events{query}"


@dataclass
class Hyperparameters:
    """Training hyperparameters; each may be a number or "auto"."""

    epochs: Any = None
    learning_rate_multiplier: Any = None
    batch_size: Any = None

    def to_dict(self) -> dict[str, Any]:
        pairs = (
            ("n_epochs", self.epochs),
            ("learning_rate_multiplier", self.learning_rate_multiplier),
            ("batch_size", self.batch_size),
        )
        return {key: value for key, value in pairs if value is not None}

    @classmethod
    def from_dict(cls, data: Any) -> "Hyperparameters":
        if data is None:
            return cls()
        data = _object(data, "hyperparameters")
        return cls(
            epochs=data.get("n_epochs"),
            learning_rate_multiplier=data.get("learning_rate_multiplier"),
            batch_size=data.get("batch_size"),
        )


@dataclass
class FineTuningJob:
    """A fine-tuning job."""

    id: str = ""
    object: str = ""
    created_at: int = 0
    finished_at: int = 0
    model: str = ""
    fine_tuned_model: str = ""
    organization_id: str = ""
    status: str = ""
    hyperparameters: Hyperparameters = field(default_factory=Hyperparameters)
    training_file: str = ""
    validation_file: str = ""
    result_files: list[str] = field(default_factory=list)
    trained_tokens: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "FineTuningJob":
        data = _object(data, "fine-tuning job")
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created_at=data.get("created_at") or 0,
            finished_at=data.get("finished_at") or 0,
            model=data.get("model") or "",
            fine_tuned_model=data.get("fine_tuned_model") or "",
            organization_id=data.get("organization_id") or "",
            status=data.get("status") or "",
            hyperparameters=Hyperparameters.from_dict(data.get("hyperparameters")),
            training_file=data.get("training_file") or "",
            validation_file=data.get("validation_file") or "",
            result_files=list(data.get("result_files") or []),
            trained_tokens=data.get("trained_tokens") or 0,
        )

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "id": self.id,
            "object": self.object,
            "created_at": self.created_at,
            "finished_at": self.finished_at,
            "model": self.model,
        }
        if self.fine_tuned_model:
            body["fine_tuned_model"] = self.fine_tuned_model
        body["organization_id"] = self.organization_id
        body["status"] = self.status
        body["hyperparameters"] = self.hyperparameters.to_dict()
        body["training_file"] = self.training_file
        if self.validation_file:
            body["validation_file"] = self.validation_file
        body["result_files"] = list(self.result_files)
        body["trained_tokens"] = self.trained_tokens
        return body


@dataclass
class FineTuningJobRequest:
    """Parameters for creating a fine-tuning job."""

    training_file: str = ""
    validation_file: str = ""
    model: str = ""
    hyperparameters: Optional[Hyperparameters] = None
    suffix: str = ""

    def to_dict(self) -> dict[str, Any]:
        """JSON body, leaving out optional fields that hold their zero value."""
        body: dict[str, Any] = {"training_file": self.training_file}
        if self.validation_file:
            body["validation_file"] = self.validation_file
        if self.model:
            body["model"] = self.model
        if self.hyperparameters is not None:
            body["hyperparameters"] = self.hyperparameters.to_dict()
        if self.suffix:
            body["suffix"] = self.suffix
        return body


@dataclass
class FineTuningJobEventList:
    """A page of events of one fine-tuning job."""

    object: str = ""
    data: list[FineTuneEvent] = field(default_factory=list)
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "FineTuningJobEventList":
        data = _object(data, "fine-tuning job event list")
        return cls(
            object=data.get("object") or "",
            data=[FineTuneEvent.from_dict(item) for item in data.get("data") or []],
            has_more=bool(data.get("has_more")),
        )


@dataclass
class FineTuningJobEvent:
    """A single fine-tuning job event."""

    object: str = ""
    id: str = ""
    created_at: int = 0
    level: str = ""
    message: str = ""
    data: Any = None
    type: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "FineTuningJobEvent":
        data = _object(data, "fine-tuning job event")
        return cls(
            object=data.get("object") or "",
            id=data.get("id") or "",
            created_at=data.get("created_at") or 0,
            level=data.get("level") or "",
            message=data.get("message") or "",
            data=data.get("data"),
            type=data.get("type") or "",
        )