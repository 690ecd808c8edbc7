"""Client configuration and its defaults."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

OPENAI_API_URL_V1 = "https://api.openai.com/v1"
ANTHROPIC_API_URL_V1 = "https://api.anthropic.com/v1"
DEFAULT_EMPTY_MESSAGES_LIMIT = 300

AZURE_API_PREFIX = "openai"
AZURE_DEPLOYMENTS_PREFIX = "deployments"
AZURE_AUTH_HEADER = "api-key"
AZURE_DEFAULT_API_VERSION = "2023-05-15"

ANTHROPIC_API_VERSION = "2023-06-01"

DEFAULT_ASSISTANT_VERSION = "v2"

_AZURE_MODEL_PUNCTUATION = re.compile(r"[.:]")


class APIType(str, Enum):
    """The flavour of API a client talks to."""

    OPENAI = "OPEN_AI"
    AZURE = "AZURE"
    AZURE_AD = "AZURE_AD"
    CLOUDFLARE_AZURE = "CLOUDFLARE_AZURE"
    ANTHROPIC = "ANTHROPIC"


def _strip_model_punctuation(model: str) -> str:
    return _AZURE_MODEL_PUNCTUATION.sub("", model)


@dataclass(repr=False)
class ClientConfig:
    """Settings shared by every request a client makes."""

    auth_token: str = field(default_factory=str)
    base_url: str = OPENAI_API_URL_V1
    org_id: str = ""
    api_type: APIType = APIType.OPENAI
    api_version: str = ""
    assistant_version: str = DEFAULT_ASSISTANT_VERSION
    azure_model_mapper_func: Optional[Callable[[str], str]] = None
    http_client: Any = None
    empty_messages_limit: int = DEFAULT_EMPTY_MESSAGES_LIMIT
    extra: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return "<OpenAI API ClientConfig>"

    def get_azure_deployment_by_model(self, model: str) -> str:
        """Map a model name to an Azure deployment name."""
        if self.azure_model_mapper_func is not None:
            return self.azure_model_mapper_func(model)
        return model


def default_config(auth_token: str) -> ClientConfig:
    """Configuration for the standard API."""
    return ClientConfig(auth_token=auth_token)


def default_azure_config(api_key: str, base_url: str) -> ClientConfig:
    """Configuration for an Azure endpoint."""
    return ClientConfig(
        auth_token=api_key,
        base_url=base_url,
        api_type=APIType.AZURE,
        api_version=AZURE_DEFAULT_API_VERSION,
        assistant_version="",
        azure_model_mapper_func=_strip_model_punctuation,
    )


def default_anthropic_config(api_key: str, base_url: str) -> ClientConfig:
    """Configuration for the Anthropic compatibility endpoint."""
    return ClientConfig(
        auth_token=api_key,
        base_url=base_url or ANTHROPIC_API_URL_V1,
        api_type=APIType.ANTHROPIC,
        api_version=ANTHROPIC_API_VERSION,
        assistant_version="",
    )