"""Requests and responses of the legacy fine-tunes endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from gptkit.files import File

FINE_TUNES_SUFFIX = "/fine-tunes"


def _object(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a JSON object, got {data!r}")
    return data


def _files(value: Any) -> list[File]:
    return [File.from_dict(item) for item in value or []]


@dataclass
class FineTuneRequest:
    """Parameters of a legacy fine-tune job."""

    training_file: str = ""
    validation_file: str = ""
    model: str = ""
    epochs: int = 0
    batch_size: int = 0
    learning_rate_multiplier: float = 0.0
    prompt_loss_rate: float = 0.0
    compute_classification_metrics: bool = False
    classification_classes: int = 0
    classification_positive_class: str = ""
    classification_betas: list[float] = field(default_factory=list)
    suffix: str = ""

    def to_dict(self) -> dict[str, Any]:
        """JSON body, leaving out optional fields that hold their zero value."""
        body: dict[str, Any] = {"training_file": self.training_file}
        optional = (
            ("validation_file", self.validation_file),
            ("model", self.model),
            ("n_epochs", self.epochs),
            ("batch_size", self.batch_size),
            ("learning_rate_multiplier", self.learning_rate_multiplier),
            ("prompt_loss_rate", self.prompt_loss_rate),
            ("compute_classification_metrics", self.compute_classification_metrics),
            ("classification_n_classes", self.classification_classes),
            ("classification_positive_class", self.classification_positive_class),
            ("classification_betas", list(self.classification_betas)),
            ("suffix", self.suffix),
        )
        body.update((key, value) for key, value in optional if value)
        return body


@dataclass
class FineTuneEvent:
    """A log event of a fine-tune job."""

    object: str = ""
    created_at: int = 0
    level: str = ""
    message: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "FineTuneEvent":
        data = _object(data, "fine-tune event")
        return cls(
            object=data.get("object") or "",
            created_at=data.get("created_at") or 0,
            level=data.get("level") or "",
            message=data.get("message") or "",
        )


@dataclass
class FineTuneHyperParams:
    """Hyperparameters a fine-tune job ran with."""

    batch_size: int = 0
    learning_rate_multiplier: float = 0.0
    epochs: int = 0
    prompt_loss_weight: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> "FineTuneHyperParams":
        if data is None:
            return cls()
        data = _object(data, "fine-tune hyperparams")
        return cls(
            batch_size=data.get("batch_size") or 0,
            learning_rate_multiplier=float(data.get("learning_rate_multiplier") or 0.0),
            epochs=data.get("n_epochs") or 0,
            prompt_loss_weight=float(data.get("prompt_loss_weight") or 0.0),
        )


@dataclass
class FineTune:
    """A legacy fine-tune job."""

    id: str = ""
    object: str = ""
    model: str = ""
    created_at: int = 0
    events: list[FineTuneEvent] = field(default_factory=list)
    fine_tuned_model: str = ""
    hyperparams: FineTuneHyperParams = field(default_factory=FineTuneHyperParams)
    organization_id: str = ""
    result_files: list[File] = field(default_factory=list)
    status: str = ""
    validation_files: list[File] = field(default_factory=list)
    training_files: list[File] = field(default_factory=list)
    updated_at: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "FineTune":
        data = _object(data, "fine-tune")
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            model=data.get("model") or "",
            created_at=data.get("created_at") or 0,
            events=[FineTuneEvent.from_dict(item) for item in data.get("events") or []],
            fine_tuned_model=data.get("fine_tuned_model") or "",
            hyperparams=FineTuneHyperParams.from_dict(data.get("hyperparams")),
            organization_id=data.get("organization_id") or "",
            result_files=_files(data.get("result_files")),
            status=data.get("status") or "",
            validation_files=_files(data.get("validation_files")),
            training_files=_files(data.get("training_files")),
            updated_at=data.get("updated_at") or 0,
        )


@dataclass
class FineTuneList:
    """A page of fine-tune jobs."""

    object: str = ""
    data: list[FineTune] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "FineTuneList":
        data = _object(data, "fine-tune list")
        return cls(
            object=data.get("object") or "",
            data=[FineTune.from_dict(item) for item in data.get("data") or []],
        )


@dataclass
class FineTuneEventList:
    """Events of one fine-tune job."""

    object: str = ""
    data: list[FineTuneEvent] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "FineTuneEventList":
        data = _object(data, "fine-tune event list")
        return cls(
            object=data.get("object") or "",
            data=[FineTuneEvent.from_dict(item) for item in data.get("data") or []],
        )


@dataclass
class FineTuneDeleteResponse:
    """Result of deleting a fine-tuned model."""

    id: str = ""
    object: str = ""
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "FineTuneDeleteResponse":
        data = _object(data, "fine-tune delete response")
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            deleted=bool(data.get("deleted")),
        )