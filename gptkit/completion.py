"""Text completion requests, responses and the checks made before sending."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

COMPLETIONS_SUFFIX = "/completions"
CHAT_COMPLETIONS_SUFFIX = "/chat/completions"

O1_MINI = "o1-mini"
O1_MINI_2024_09_12 = "o1-mini-2024-09-12"
O1_PREVIEW = "o1-preview"
O1_PREVIEW_2024_09_12 = "o1-preview-2024-09-12"
O1 = "o1"
O1_2024_12_17 = "o1-2024-12-17"
O3 = "o3"
O3_2025_04_16 = "o3-2025-04-16"
O3_MINI = "o3-mini"
O3_MINI_2025_01_31 = "o3-mini-2025-01-31"
O4_MINI = "o4-mini"
O4_MINI_2025_04_16 = "o4-mini-2025-04-16"
GPT4_32K_0613 = "gpt-4-32k-0613"
GPT4_32K_0314 = "gpt-4-32k-0314"
GPT4_32K = "gpt-4-32k"
GPT4_0613 = "gpt-4-0613"
GPT4_0314 = "gpt-4-0314"
GPT4O = "gpt-4o"
GPT4O_2024_05_13 = "gpt-4o-2024-05-13"
GPT4O_2024_08_06 = "gpt-4o-2024-08-06"
GPT4O_2024_11_20 = "gpt-4o-2024-11-20"
GPT4O_LATEST = "chatgpt-4o-latest"
GPT4O_MINI = "gpt-4o-mini"
GPT4O_MINI_AUDIO_PREVIEW = "gpt-4o-mini-audio-preview"
GPT4O_MINI_2024_07_18 = "gpt-4o-mini-2024-07-18"
GPT4_TURBO = "gpt-4-turbo"
GPT4_TURBO_2024_04_09 = "gpt-4-turbo-2024-04-09"
GPT4_TURBO_0125 = "gpt-4-0125-preview"
GPT4_TURBO_1106 = "gpt-4-1106-preview"
GPT4_TURBO_PREVIEW = "gpt-4-turbo-preview"
GPT4_VISION_PREVIEW = "gpt-4-vision-preview"
GPT4 = "gpt-4"
GPT4_1 = "gpt-4.1"
GPT4_1_2025_04_14 = "gpt-4.1-2025-04-14"
GPT4_1_MINI = "gpt-4.1-mini"
GPT4_1_MINI_2025_04_14 = "gpt-4.1-mini-2025-04-14"
GPT4_1_NANO = "gpt-4.1-nano"
GPT4_1_NANO_2025_04_14 = "gpt-4.1-nano-2025-04-14"
GPT4_5_PREVIEW = "gpt-4.5-preview"
GPT4_5_PREVIEW_2025_02_27 = "gpt-4.5-preview-2025-02-27"
GPT3_5_TURBO_0125 = "gpt-3.5-turbo-0125"
GPT3_5_TURBO_1106 = "gpt-3.5-turbo-1106"
GPT3_5_TURBO_0613 = "gpt-3.5-turbo-0613"
GPT3_5_TURBO_0301 = "gpt-3.5-turbo-0301"
GPT3_5_TURBO_16K = "gpt-3.5-turbo-16k"
GPT3_5_TURBO_16K_0613 = "gpt-3.5-turbo-16k-0613"
GPT3_5_TURBO = "gpt-3.5-turbo"
GPT3_5_TURBO_INSTRUCT = "gpt-3.5-turbo-instruct"
# Shut down; kept so requests naming them are recognised.
GPT3_TEXT_DAVINCI_003 = "text-davinci-003"
GPT3_TEXT_DAVINCI_002 = "text-davinci-002"
GPT3_TEXT_CURIE_001 = "text-curie-001"
GPT3_TEXT_BABBAGE_001 = "text-babbage-001"
GPT3_TEXT_ADA_001 = "text-ada-001"
GPT3_TEXT_DAVINCI_001 = "text-davinci-001"
GPT3_DAVINCI_INSTRUCT_BETA = "davinci-instruct-beta"
GPT3_DAVINCI = "davinci"
GPT3_DAVINCI_002 = "davinci-002"
GPT3_CURIE_INSTRUCT_BETA = "curie-instruct-beta"
GPT3_CURIE = "curie"
GPT3_CURIE_002 = "curie-002"
GPT3_ADA = "ada"
GPT3_ADA_002 = "ada-002"
GPT3_BABBAGE = "babbage"
GPT3_BABBAGE_002 = "babbage-002"

CODEX_CODE_DAVINCI_002 = "code-davinci-002"
CODEX_CODE_CUSHMAN_001 = "code-cushman-001"
CODEX_CODE_DAVINCI_001 = "code-davinci-001"

DISABLED_MODELS_FOR_ENDPOINTS: dict[str, frozenset[str]] = {
    COMPLETIONS_SUFFIX: frozenset(
        {
            O1_MINI,
            O1_MINI_2024_09_12,
            O1_PREVIEW,
            O1_PREVIEW_2024_09_12,
            O3_MINI,
            O3_MINI_2025_01_31,
            O4_MINI,
            O4_MINI_2025_04_16,
            O3,
            O3_2025_04_16,
            GPT3_5_TURBO,
            GPT3_5_TURBO_0301,
            GPT3_5_TURBO_0613,
            GPT3_5_TURBO_1106,
            GPT3_5_TURBO_0125,
            GPT3_5_TURBO_16K,
            GPT3_5_TURBO_16K_0613,
            GPT4,
            GPT4_5_PREVIEW,
            GPT4_5_PREVIEW_2025_02_27,
            GPT4O,
            GPT4O_2024_05_13,
            GPT4O_2024_08_06,
            GPT4O_2024_11_20,
            GPT4O_LATEST,
            GPT4O_MINI,
            GPT4O_MINI_2024_07_18,
            GPT4_TURBO_PREVIEW,
            GPT4_VISION_PREVIEW,
            GPT4_TURBO_1106,
            GPT4_TURBO_0125,
            GPT4_TURBO,
            GPT4_TURBO_2024_04_09,
            GPT4_0314,
            GPT4_0613,
            GPT4_32K,
            GPT4_32K_0314,
            GPT4_32K_0613,
            O1,
            GPT4_1,
            GPT4_1_2025_04_14,
            GPT4_1_MINI,
            GPT4_1_MINI_2025_04_14,
            GPT4_1_NANO,
            GPT4_1_NANO_2025_04_14,
        }
    ),
    CHAT_COMPLETIONS_SUFFIX: frozenset(
        {
            CODEX_CODE_DAVINCI_002,
            CODEX_CODE_CUSHMAN_001,
            CODEX_CODE_DAVINCI_001,
            GPT3_TEXT_DAVINCI_003,
            GPT3_TEXT_DAVINCI_002,
            GPT3_TEXT_CURIE_001,
            GPT3_TEXT_BABBAGE_001,
            GPT3_TEXT_ADA_001,
            GPT3_TEXT_DAVINCI_001,
            GPT3_DAVINCI_INSTRUCT_BETA,
            GPT3_DAVINCI,
            GPT3_CURIE_INSTRUCT_BETA,
            GPT3_CURIE,
            GPT3_ADA,
            GPT3_BABBAGE,
        }
    ),
}


class CompletionError(ValueError):
    """A completion request that cannot be sent."""

    default_message = "invalid completion request"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class CompletionStreamNotSupportedError(CompletionError):
    """Streaming was requested from the non-streaming call."""

    default_message = (
        "streaming is not supported with this method, please use CreateCompletionStream"
    )


class CompletionUnsupportedModelError(CompletionError):
    """The model is not served by the completions endpoint."""

    default_message = (
        "this model is not supported with this method, "
        "please use CreateChatCompletion client method instead"
    )


class CompletionPromptTypeError(CompletionError):
    """The prompt is neither a string nor a list of strings."""

    default_message = "the type of CompletionRequest.Prompt only supports string and []string"


def check_endpoint_supports_model(endpoint: str, model: str) -> bool:
    """True unless ``model`` is known not to work with ``endpoint``."""
    return model not in DISABLED_MODELS_FOR_ENDPOINTS.get(endpoint, frozenset())


def check_prompt_type(prompt: Any) -> bool:
    """True for a string or a list/tuple made only of strings."""
    if isinstance(prompt, str):
        return True
    if isinstance(prompt, (list, tuple)):
        return all(isinstance(item, str) for item in prompt)
    return False


def _object(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a JSON object, got {data!r}")
    return data


def _list(value: Any) -> list[Any]:
    return list(value) if value else []


@dataclass
class CompletionRequest:
    """Parameters of a text completion request."""

    model: str = ""
    prompt: Any = None
    best_of: int = 0
    echo: bool = False
    frequency_penalty: float = 0.0
    logit_bias: dict[str, int] = field(default_factory=dict)
    store: bool = False
    metadata: dict[str, str] = field(default_factory=dict)
    logprobs: int = 0
    max_tokens: int = 0
    n: int = 0
    presence_penalty: float = 0.0
    seed: Optional[int] = None
    stop: list[str] = field(default_factory=list)
    stream: bool = False
    suffix: str = ""
    temperature: float = 0.0
    top_p: float = 0.0
    user: str = ""
    stream_options: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        """JSON body, leaving out fields that hold their zero value."""
        body: dict[str, Any] = {"model": self.model}
        if self.prompt is not None:
            body["prompt"] = list(self.prompt) if isinstance(self.prompt, tuple) else self.prompt
        optional = (
            ("best_of", self.best_of),
            ("echo", self.echo),
            ("frequency_penalty", self.frequency_penalty),
            ("logit_bias", self.logit_bias),
            ("store", self.store),
            ("metadata", self.metadata),
            ("logprobs", self.logprobs),
            ("max_tokens", self.max_tokens),
            ("n", self.n),
            ("presence_penalty", self.presence_penalty),
        )
        body.update((key, value) for key, value in optional if value)
        if self.seed is not None:
            body["seed"] = self.seed
        optional = (
            ("stop", self.stop),
            ("stream", self.stream),
            ("suffix", self.suffix),
            ("temperature", self.temperature),
            ("top_p", self.top_p),
            ("user", self.user),
        )
        body.update((key, value) for key, value in optional if value)
        if self.stream_options is not None:
            body["stream_options"] = self.stream_options
        return body


def validate_completion_request(request: CompletionRequest) -> CompletionRequest:
    """Return ``request`` if it may be sent to the completions endpoint, else raise."""
    if request.stream:
        raise CompletionStreamNotSupportedError()
    if not check_endpoint_supports_model(COMPLETIONS_SUFFIX, request.model):
        raise CompletionUnsupportedModelError()
    if not check_prompt_type(request.prompt):
        raise CompletionPromptTypeError()
    return request


@dataclass
class LogprobResult:
    """Token log-probabilities of one choice."""

    tokens: list[str] = field(default_factory=list)
    token_logprobs: list[float] = field(default_factory=list)
    top_logprobs: list[dict[str, float]] = field(default_factory=list)
    text_offset: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "LogprobResult":
        if data is None:
            return cls()
        data = _object(data, "logprobs")
        return cls(
            tokens=_list(data.get("tokens")),
            token_logprobs=_list(data.get("token_logprobs")),
            top_logprobs=[dict(item or {}) for item in _list(data.get("top_logprobs"))],
            text_offset=_list(data.get("text_offset")),
        )


@dataclass
class CompletionChoice:
    """One generated completion."""

    text: str = ""
    index: int = 0
    finish_reason: str = ""
    logprobs: LogprobResult = field(default_factory=LogprobResult)

    @classmethod
    def from_dict(cls, data: Any) -> "CompletionChoice":
        data = _object(data, "completion choice")
        return cls(
            text=data.get("text") or "",
            index=data.get("index") or 0,
            finish_reason=data.get("finish_reason") or "",
            logprobs=LogprobResult.from_dict(data.get("logprobs")),
        )


@dataclass
class CompletionResponse:
    """Response of the completions endpoint."""

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: list[CompletionChoice] = field(default_factory=list)
    usage: Optional[dict[str, Any]] = None

    @classmethod
    def from_dict(cls, data: Any) -> "CompletionResponse":
        data = _object(data, "completion response")
        usage = data.get("usage")
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created=data.get("created") or 0,
            model=data.get("model") or "",
            choices=[CompletionChoice.from_dict(item) for item in _list(data.get("choices"))],
            usage=None if usage is None else dict(_object(usage, "usage")),
        )