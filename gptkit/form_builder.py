"""Builds multipart/form-data request bodies."""

from __future__ import annotations

import secrets
from typing import Any

_CHUNK_SIZE = 32 * 1024


def escape_quotes(value: str) -> str:
    """Escape backslashes and double quotes for a quoted header parameter."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _base_name(path: str) -> str:
    if path == "":
        return "."
    stripped = path.rstrip("/")
    if stripped == "":
        return "/"
    return stripped.rsplit("/", 1)[-1]


def _attribute(obj: Any, name: str) -> Any:
    value = getattr(obj, name, None)
    if callable(value):
        value = value()
    return value


class FormBuilder:
    """Writes multipart form parts into a binary writable ``body``."""

    def __init__(self, body: Any) -> None:
        self._body = body
        self._boundary = secrets.token_hex(30)
        self._has_part = False

    def _create_part(self, headers: dict[str, str]) -> None:
        prefix = "\r\n--" if self._has_part else "--"
        lines = [f"{prefix}{self._boundary}\r\n"]
        lines.extend(f"{key}: {headers[key]}\r\n" for key in sorted(headers))
        lines.append("\r\n")
        self._body.write("".join(lines).encode("utf-8"))
        self._has_part = True

    def _copy(self, reader: Any) -> None:
        while True:
            chunk = reader.read(_CHUNK_SIZE)
            if not chunk:
                break
            if isinstance(chunk, str):
                chunk = chunk.encode("utf-8")
            self._body.write(chunk)

    def create_form_file(self, fieldname: str, file: Any) -> None:
        """Add a file part named after ``file.name``."""
        name = _attribute(file, "name")
        self._create_form_file(fieldname, file, "" if name is None else str(name))

    def _create_form_file(self, fieldname: str, reader: Any, filename: str) -> None:
        if not filename:
            raise ValueError("filename cannot be empty")
        self._create_part(
            {
                "Content-Disposition": (
                    f'form-data; name="{escape_quotes(fieldname)}"; '
                    f'filename="{escape_quotes(filename)}"'
                ),
                "Content-Type": "application/octet-stream",
            }
        )
        self._copy(reader)

    def create_form_file_reader(self, fieldname: str, reader: Any, filename: str = "") -> None:
        """Add a file part from any readable object.

        When ``filename`` is empty the reader's own name is used; a content
        type offered by the reader is sent along.
        """
        if not filename:
            name = _attribute(reader, "name")
            if name:
                filename = str(name)
        content_type = _attribute(reader, "content_type") or ""

        headers = {
            "Content-Disposition": (
                f'form-data; name="{escape_quotes(fieldname)}"; '
                f'filename="{escape_quotes(_base_name(filename))}"'
            )
        }
        if content_type:
            headers["Content-Type"] = str(content_type)
        self._create_part(headers)
        self._copy(reader)

    def write_field(self, fieldname: str, value: str) -> None:
        """Add a plain text field."""
        if not fieldname:
            raise ValueError("fieldname cannot be empty")
        self._create_part({"Content-Disposition": f'form-data; name="{escape_quotes(fieldname)}"'})
        self._body.write(value.encode("utf-8"))

    def close(self) -> None:
        """Write the closing boundary."""
        self._body.write(f"\r\n--{self._boundary}--\r\n".encode("utf-8"))

    def form_data_content_type(self) -> str:
        """Content-Type header value for the body being built."""
        return f"multipart/form-data; boundary={self._boundary}"