"""Image generation requests, responses and multipart forms for edits and variations."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from gptkit.form_builder import FormBuilder

IMAGES_GENERATIONS_SUFFIX = "/images/generations"
IMAGES_EDITS_SUFFIX = "/images/edits"
IMAGES_VARIATIONS_SUFFIX = "/images/variations"

CREATE_IMAGE_SIZE_256X256 = "256x256"
CREATE_IMAGE_SIZE_512X512 = "512x512"
CREATE_IMAGE_SIZE_1024X1024 = "1024x1024"
# dall-e-3 only.
CREATE_IMAGE_SIZE_1792X1024 = "1792x1024"
CREATE_IMAGE_SIZE_1024X1792 = "1024x1792"
# gpt-image-1 only.
CREATE_IMAGE_SIZE_1536X1024 = "1536x1024"
CREATE_IMAGE_SIZE_1024X1536 = "1024x1536"

# dall-e-2 and dall-e-3 only.
CREATE_IMAGE_RESPONSE_FORMAT_B64_JSON = "b64_json"
CREATE_IMAGE_RESPONSE_FORMAT_URL = "url"

CREATE_IMAGE_MODEL_DALL_E_2 = "dall-e-2"
CREATE_IMAGE_MODEL_DALL_E_3 = "dall-e-3"
CREATE_IMAGE_MODEL_GPT_IMAGE_1 = "gpt-image-1"

CREATE_IMAGE_QUALITY_HD = "hd"
CREATE_IMAGE_QUALITY_STANDARD = "standard"
# gpt-image-1 only.
CREATE_IMAGE_QUALITY_HIGH = "high"
CREATE_IMAGE_QUALITY_MEDIUM = "medium"
CREATE_IMAGE_QUALITY_LOW = "low"

# dall-e-3 only.
CREATE_IMAGE_STYLE_VIVID = "vivid"
CREATE_IMAGE_STYLE_NATURAL = "natural"

# gpt-image-1 only.
CREATE_IMAGE_BACKGROUND_TRANSPARENT = "transparent"
CREATE_IMAGE_BACKGROUND_OPAQUE = "opaque"

CREATE_IMAGE_MODERATION_LOW = "low"

CREATE_IMAGE_OUTPUT_FORMAT_PNG = "png"
CREATE_IMAGE_OUTPUT_FORMAT_JPEG = "jpeg"
CREATE_IMAGE_OUTPUT_FORMAT_WEBP = "webp"


def _object(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a JSON object, got {data!r}")
    return data


@dataclass
class ImageRequest:
    """Parameters of an image generation request."""

    prompt: str = ""
    model: str = ""
    n: int = 0
    quality: str = ""
    size: str = ""
    style: str = ""
    response_format: str = ""
    user: str = ""
    background: str = ""
    moderation: str = ""
    output_compression: int = 0
    output_format: str = ""

    def to_dict(self) -> dict[str, Any]:
        """JSON body, leaving out fields that hold their zero value."""
        pairs = (
            ("prompt", self.prompt),
            ("model", self.model),
            ("n", self.n),
            ("quality", self.quality),
            ("size", self.size),
            ("style", self.style),
            ("response_format", self.response_format),
            ("user", self.user),
            ("background", self.background),
            ("moderation", self.moderation),
            ("output_compression", self.output_compression),
            ("output_format", self.output_format),
        )
        return {key: value for key, value in pairs if value}


@dataclass
class ImageResponseInputTokensDetails:
    """Breakdown of input tokens."""

    text_tokens: int = 0
    image_tokens: int = 0


@dataclass
class ImageResponseUsage:
    """Token usage of an image request."""

    total_tokens: int = 0
    input_tokens: int = 0
    output_tokens: int = 0
    input_tokens_details: ImageResponseInputTokensDetails = field(
        default_factory=ImageResponseInputTokensDetails
    )


@dataclass
class ImageResponseDataInner:
    """One generated image, as a URL or base64 JSON."""

    url: str = ""
    b64_json: str = ""
    revised_prompt: str = ""


def _details_from_dict(data: Any) -> ImageResponseInputTokensDetails:
    if data is None:
        return ImageResponseInputTokensDetails()
    data = _object(data, "input tokens details")
    return ImageResponseInputTokensDetails(
        text_tokens=data.get("text_tokens") or 0,
        image_tokens=data.get("image_tokens") or 0,
    )


def _usage_from_dict(data: Any) -> ImageResponseUsage:
    if data is None:
        return ImageResponseUsage()
    data = _object(data, "usage")
    return ImageResponseUsage(
        total_tokens=data.get("total_tokens") or 0,
        input_tokens=data.get("input_tokens") or 0,
        output_tokens=data.get("output_tokens") or 0,
        input_tokens_details=_details_from_dict(data.get("input_tokens_details")),
    )


def _data_from_dict(data: Any) -> ImageResponseDataInner:
    data = _object(data, "image data")
    return ImageResponseDataInner(
        url=data.get("url") or "",
        b64_json=data.get("b64_json") or "",
        revised_prompt=data.get("revised_prompt") or "",
    )


@dataclass
class ImageResponse:
    """Response of the image endpoints."""

    created: int = 0
    data: list[ImageResponseDataInner] = field(default_factory=list)
    usage: ImageResponseUsage = field(default_factory=ImageResponseUsage)

    @classmethod
    def from_dict(cls, data: Any) -> "ImageResponse":
        data = _object(data, "image response")
        return cls(
            created=data.get("created") or 0,
            data=[_data_from_dict(item) for item in data.get("data") or []],
            usage=_usage_from_dict(data.get("usage")),
        )


class WrappedReader:
    """A readable object carrying a file name and a content type."""

    def __init__(self, reader: Any, filename: str = "", content_type: str = "") -> None:
        self._reader = reader
        self._name = filename
        self._content_type = content_type

    def read(self, size: int = -1) -> Any:
        """Read from the wrapped reader."""
        return self._reader.read(size)

    def name(self) -> str:
        """The given file name, else the wrapped reader's own name, else empty."""
        if self._name:
            return self._name
        inner = getattr(self._reader, "name", None)
        if callable(inner):
            inner = inner()
        return inner if isinstance(inner, str) else ""

    def content_type(self) -> str:
        return self._content_type


def wrap_reader(reader: Any, filename: str = "", content_type: str = "") -> WrappedReader:
    """Attach a file name and content type to ``reader``."""
    return WrappedReader(reader, filename, content_type)


@dataclass
class ImageEditRequest:
    """Parameters of an image edit; use wrap_reader to name the image streams."""

    image: Any = None
    mask: Any = None
    prompt: str = ""
    model: str = ""
    n: int = 0
    size: str = ""
    response_format: str = ""
    quality: str = ""
    user: str = ""


@dataclass
class ImageVariRequest:
    """Parameters of an image variation; use wrap_reader to name the image stream."""

    image: Any = None
    model: str = ""
    n: int = 0
    size: str = ""
    response_format: str = ""
    user: str = ""


def build_image_edit_form(
    request: ImageEditRequest,
    builder_factory: Optional[Callable[[Any], Any]] = None,
) -> tuple[bytes, str]:
    """Multipart body and content type for an image edit; builder errors propagate."""
    body = io.BytesIO()
    builder = (builder_factory or FormBuilder)(body)
    builder.create_form_file_reader("image", request.image, "")
    if request.mask is not None:
        builder.create_form_file_reader("mask", request.mask, "")
    builder.write_field("prompt", request.prompt)
    builder.write_field("n", str(request.n))
    builder.write_field("size", request.size)
    builder.write_field("response_format", request.response_format)
    builder.close()
    return body.getvalue(), builder.form_data_content_type()


def build_image_variation_form(
    request: ImageVariRequest,
    builder_factory: Optional[Callable[[Any], Any]] = None,
) -> tuple[bytes, str]:
    """Multipart body and content type for an image variation; builder errors propagate."""
    body = io.BytesIO()
    builder = (builder_factory or FormBuilder)(body)
    builder.create_form_file_reader("image", request.image, "")
    builder.write_field("n", str(request.n))
    builder.write_field("size", request.size)
    builder.write_field("response_format", request.response_format)
    builder.close()
    return body.getvalue(), builder.form_data_content_type()