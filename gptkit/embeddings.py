"""Embedding requests, responses and vector helpers."""

from __future__ import annotations

import base64
import json
import struct
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

EMBEDDINGS_SUFFIX = "/embeddings"

_SIZE_OF_FLOAT32 = 4


class VectorLengthMismatchError(ValueError):
    """Two embedding vectors of different lengths were combined."""

    def __init__(self, message: str = "vector length mismatch") -> None:
        super().__init__(message)


class EmbeddingModel(str, Enum):
    """Models that produce embedding vectors."""

    # Shut down; kept so responses naming them are recognised.
    ADA_SIMILARITY = "text-similarity-ada-001"
    BABBAGE_SIMILARITY = "text-similarity-babbage-001"
    CURIE_SIMILARITY = "text-similarity-curie-001"
    DAVINCI_SIMILARITY = "text-similarity-davinci-001"
    ADA_SEARCH_DOCUMENT = "text-search-ada-doc-001"
    ADA_SEARCH_QUERY = "text-search-ada-query-001"
    BABBAGE_SEARCH_DOCUMENT = "text-search-babbage-doc-001"
    BABBAGE_SEARCH_QUERY = "text-search-babbage-query-001"
    CURIE_SEARCH_DOCUMENT = "text-search-curie-doc-001"
    CURIE_SEARCH_QUERY = "text-search-curie-query-001"
    DAVINCI_SEARCH_DOCUMENT = "text-search-davinci-doc-001"
    DAVINCI_SEARCH_QUERY = "text-search-davinci-query-001"
    ADA_CODE_SEARCH_CODE = "code-search-ada-code-001"
    ADA_CODE_SEARCH_TEXT = "code-search-ada-text-001"
    BABBAGE_CODE_SEARCH_CODE = "code-search-babbage-code-001"
    BABBAGE_CODE_SEARCH_TEXT = "code-search-babbage-text-001"

    ADA_EMBEDDING_V2 = "text-embedding-ada-002"
    SMALL_EMBEDDING_3 = "text-embedding-3-small"
    LARGE_EMBEDDING_3 = "text-embedding-3-large"


class EmbeddingEncodingFormat(str, Enum):
    """Encoding of the returned embedding data."""

    FLOAT = "float"
    BASE64 = "base64"


def _text(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _object(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a JSON object, got {data!r}")
    return data


def _usage(data: Any) -> dict[str, Any]:
    return {} if data is None else dict(_object(data, "usage"))


def decode_base64_embedding(data: str) -> list[float]:
    """Decode base64 little-endian float32 values; trailing partial bytes are ignored.

    Raises ValueError (binascii.Error) on invalid base64.
    """
    raw = base64.b64decode(data, validate=True)
    count = len(raw) // _SIZE_OF_FLOAT32
    return list(struct.unpack(f"<{count}f", raw[: count * _SIZE_OF_FLOAT32]))


@dataclass
class Embedding:
    """One embedding vector and its position in the request."""

    object: str = ""
    embedding: list[float] = field(default_factory=list)
    index: int = 0

    def dot_product(self, other: "Embedding") -> float:
        """Dot product with ``other``; raises VectorLengthMismatchError on unequal lengths."""
        if len(self.embedding) != len(other.embedding):
            raise VectorLengthMismatchError()
        return sum(a * b for a, b in zip(self.embedding, other.embedding))

    @classmethod
    def from_dict(cls, data: Any) -> "Embedding":
        data = _object(data, "embedding")
        return cls(
            object=data.get("object") or "",
            embedding=[float(value) for value in data.get("embedding") or []],
            index=data.get("index") or 0,
        )


@dataclass
class EmbeddingResponse:
    """Response of the embeddings endpoint."""

    object: str = ""
    data: list[Embedding] = field(default_factory=list)
    model: str = ""
    usage: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "EmbeddingResponse":
        data = _object(data, "embedding response")
        return cls(
            object=data.get("object") or "",
            data=[Embedding.from_dict(item) for item in data.get("data") or []],
            model=data.get("model") or "",
            usage=_usage(data.get("usage")),
        )


@dataclass
class Base64Embedding:
    """An embedding whose vector is still base64 encoded."""

    object: str = ""
    embedding: str = ""
    index: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "Base64Embedding":
        data = _object(data, "base64 embedding")
        return cls(
            object=data.get("object") or "",
            embedding=data.get("embedding") or "",
            index=data.get("index") or 0,
        )


@dataclass
class EmbeddingResponseBase64:
    """Response of the embeddings endpoint in base64 encoding format."""

    object: str = ""
    data: list[Base64Embedding] = field(default_factory=list)
    model: str = ""
    usage: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "EmbeddingResponseBase64":
        data = _object(data, "embedding response")
        return cls(
            object=data.get("object") or "",
            data=[Base64Embedding.from_dict(item) for item in data.get("data") or []],
            model=data.get("model") or "",
            usage=_usage(data.get("usage")),
        )

    def to_embedding_response(self) -> EmbeddingResponse:
        """Decode every vector; raises ValueError if one is not valid base64."""
        return EmbeddingResponse(
            object=self.object,
            data=[
                Embedding(
                    object=item.object,
                    embedding=decode_base64_embedding(item.embedding),
                    index=item.index,
                )
                for item in self.data
            ],
            model=self.model,
            usage=dict(self.usage),
        )


@dataclass
class EmbeddingRequest:
    """Parameters of an embeddings request with input of any shape."""

    input: Any = None
    model: EmbeddingModel | str = ""
    user: str = ""
    encoding_format: EmbeddingEncodingFormat | str = ""
    dimensions: int = 0
    extra_body: dict[str, Any] = field(default_factory=dict)

    def convert(self) -> "EmbeddingRequest":
        return self

    def to_dict(self) -> dict[str, Any]:
        """JSON form, leaving out optional fields that hold their zero value."""
        body: dict[str, Any] = {"input": self.input, "model": _text(self.model)}
        optional = (
            ("user", self.user),
            ("encoding_format", _text(self.encoding_format)),
            ("dimensions", self.dimensions),
            ("extra_body", self.extra_body),
        )
        body.update((key, value) for key, value in optional if value)
        return body

    def to_body(self) -> dict[str, Any]:
        """Request payload with the extra body fields merged in at the top level.

        Raises TypeError when the input cannot be encoded as JSON.
        """
        payload = {key: value for key, value in self.to_dict().items() if key != "extra_body"}
        body = json.loads(json.dumps(payload))
        body.update(self.extra_body)
        return body


@dataclass
class EmbeddingRequestStrings:
    """Embeddings request whose input is a list of strings."""

    input: list[str] = field(default_factory=list)
    model: EmbeddingModel | str = ""
    user: str = ""
    encoding_format: EmbeddingEncodingFormat | str = ""
    dimensions: int = 0
    extra_body: dict[str, Any] = field(default_factory=dict)

    def convert(self) -> EmbeddingRequest:
        return EmbeddingRequest(
            input=list(self.input),
            model=self.model,
            user=self.user,
            encoding_format=self.encoding_format,
            dimensions=self.dimensions,
            extra_body=dict(self.extra_body),
        )


@dataclass
class EmbeddingRequestTokens:
    """Embeddings request whose input is lists of token ids."""

    input: list[list[int]] = field(default_factory=list)
    model: EmbeddingModel | str = ""
    user: str = ""
    encoding_format: EmbeddingEncodingFormat | str = ""
    dimensions: int = 0
    extra_body: dict[str, Any] = field(default_factory=dict)

    def convert(self) -> EmbeddingRequest:
        return EmbeddingRequest(
            input=[list(tokens) for tokens in self.input],
            model=self.model,
            user=self.user,
            encoding_format=self.encoding_format,
            dimensions=self.dimensions,
            extra_body=dict(self.extra_body),
        )