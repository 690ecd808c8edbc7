"""File upload requests and file descriptions."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from gptkit.form_builder import FormBuilder

FILES_SUFFIX = "/files"


class PurposeType(str, Enum):
    """The purpose a file is uploaded for."""

    FINE_TUNE = "fine-tune"
    FINE_TUNE_RESULTS = "fine-tune-results"
    ASSISTANTS = "assistants"
    ASSISTANTS_OUTPUT = "assistants_output"
    BATCH = "batch"


def _text(value: Any) -> str:
    return str(value.value if isinstance(value, Enum) else value)


def _object(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a JSON object, got {data!r}")
    return data


@dataclass
class FileRequest:
    """Upload of a local file given by its path."""

    file_name: str = ""
    file_path: str = ""
    purpose: PurposeType | str = ""


@dataclass
class FileBytesRequest:
    """Upload of in-memory bytes under a given name."""

    name: str = ""
    data: bytes = b""
    purpose: PurposeType | str = ""


@dataclass
class File:
    """A stored file."""

    bytes: int = 0
    created_at: int = 0
    id: str = ""
    filename: str = ""
    object: str = ""
    status: str = ""
    purpose: str = ""
    status_details: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "File":
        data = _object(data, "file")
        return cls(
            bytes=data.get("bytes") or 0,
            created_at=data.get("created_at") or 0,
            id=data.get("id") or "",
            filename=data.get("filename") or "",
            object=data.get("object") or "",
            status=data.get("status") or "",
            purpose=data.get("purpose") or "",
            status_details=data.get("status_details") or "",
        )


@dataclass
class FilesList:
    """Files belonging to the user or organisation."""

    files: list[File] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "FilesList":
        data = _object(data, "files list")
        return cls(files=[File.from_dict(item) for item in data.get("data") or []])


def build_file_bytes_upload(request: FileBytesRequest) -> tuple[bytes, str]:
    """Multipart body and its content type for uploading ``request.data``."""
    body = io.BytesIO()
    builder = FormBuilder(body)
    builder.write_field("purpose", _text(request.purpose))
    builder.create_form_file_reader("file", io.BytesIO(request.data), request.name)
    builder.close()
    return body.getvalue(), builder.form_data_content_type()


def build_file_upload(request: FileRequest) -> tuple[bytes, str]:
    """Multipart body and its content type for uploading the file at ``request.file_path``.

    Raises OSError (e.g. FileNotFoundError) when the file cannot be opened.
    """
    body = io.BytesIO()
    builder = FormBuilder(body)
    builder.write_field("purpose", _text(request.purpose))
    with open(request.file_path, "rb") as handle:
        builder.create_form_file("file", handle)
    builder.close()
    return body.getvalue(), builder.form_data_content_type()