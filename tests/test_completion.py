import pytest

from gptkit.completion import (
    CHAT_COMPLETIONS_SUFFIX,
    COMPLETIONS_SUFFIX,
    GPT3_5_TURBO,
    GPT4_1,
    GPT4_1_2025_04_14,
    GPT4_1_MINI,
    GPT4_1_MINI_2025_04_14,
    GPT4_1_NANO,
    GPT4_1_NANO_2025_04_14,
    GPT4_5_PREVIEW,
    GPT4_5_PREVIEW_2025_02_27,
    GPT4O,
    GPT4O_2024_05_13,
    GPT4O_2024_08_06,
    GPT4O_2024_11_20,
    GPT4O_LATEST,
    GPT4O_MINI,
    GPT4O_MINI_2024_07_18,
    O1,
    O3,
    O4_MINI,
    CompletionChoice,
    CompletionError,
    CompletionPromptTypeError,
    CompletionRequest,
    CompletionResponse,
    CompletionStreamNotSupportedError,
    CompletionUnsupportedModelError,
    LogprobResult,
    check_endpoint_supports_model,
    check_prompt_type,
    validate_completion_request,
)

UNSUPPORTED = [
    GPT3_5_TURBO,
    O3,
    O4_MINI,
    O1,
    GPT4_1,
    GPT4_1_2025_04_14,
    GPT4_1_MINI,
    GPT4_1_MINI_2025_04_14,
    GPT4_1_NANO,
    GPT4_1_NANO_2025_04_14,
    GPT4_5_PREVIEW,
    GPT4_5_PREVIEW_2025_02_27,
    GPT4O,
    GPT4O_2024_05_13,
    GPT4O_2024_08_06,
    GPT4O_2024_11_20,
    GPT4O_LATEST,
    GPT4O_MINI,
    GPT4O_MINI_2024_07_18,
]


@pytest.mark.parametrize("model", UNSUPPORTED)
def test_unsupported_models_rejected(model):
    with pytest.raises(CompletionUnsupportedModelError):
        validate_completion_request(CompletionRequest(model=model, max_tokens=5))


def test_stream_rejected_first():
    with pytest.raises(CompletionStreamNotSupportedError):
        validate_completion_request(CompletionRequest(stream=True))


def test_errors_share_base_class():
    with pytest.raises(CompletionError) as info:
        validate_completion_request(CompletionRequest(model=GPT3_5_TURBO))
    assert "CreateChatCompletion" in str(info.value)


def test_mixed_prompt_list_rejected():
    req = CompletionRequest(model="ada", max_tokens=5, prompt=["Lorem ipsum", 9])
    with pytest.raises(CompletionPromptTypeError):
        validate_completion_request(req)


def test_missing_prompt_rejected():
    with pytest.raises(CompletionPromptTypeError):
        validate_completion_request(CompletionRequest(model="ada"))


def test_single_prompt_accepted():
    req = CompletionRequest(model="ada", max_tokens=5, prompt="Lorem ipsum")
    assert validate_completion_request(req).to_dict() == {
        "model": "ada",
        "prompt": "Lorem ipsum",
        "max_tokens": 5,
    }


def test_multiple_prompts_accepted():
    req = CompletionRequest(model="ada", max_tokens=5, prompt=["Lorem ipsum", "Lorem ipsum"])
    assert validate_completion_request(req).to_dict()["prompt"] == ["Lorem ipsum", "Lorem ipsum"]


@pytest.mark.parametrize(
    "prompt, expected",
    [
        ("x", True),
        (["a", "b"], True),
        ([], True),
        (("a",), True),
        (["a", 1], False),
        (None, False),
        (5, False),
    ],
)
def test_check_prompt_type(prompt, expected):
    assert check_prompt_type(prompt) is expected


def test_check_endpoint_supports_model():
    assert check_endpoint_supports_model(COMPLETIONS_SUFFIX, "ada") is True
    assert check_endpoint_supports_model(CHAT_COMPLETIONS_SUFFIX, "ada") is False
    assert check_endpoint_supports_model(CHAT_COMPLETIONS_SUFFIX, GPT3_5_TURBO) is True
    assert check_endpoint_supports_model("/unknown", GPT3_5_TURBO) is True


def test_to_dict_keeps_zero_seed_and_omits_zero_values():
    req = CompletionRequest(model="m", seed=0, stop=["\n"], temperature=0.5)
    assert req.to_dict() == {"model": "m", "seed": 0, "stop": ["\n"], "temperature": 0.5}


def test_response_from_dict():
    data = {
        "id": "1",
        "object": "test-object",
        "created": 1700000000,
        "model": "ada",
        "choices": [
            {"text": "Lorem ipsumaaaaa", "index": 0, "finish_reason": "length", "logprobs": None},
            {"text": "aaaaa", "index": 1},
        ],
        "usage": {"prompt_tokens": 2, "completion_tokens": 10, "total_tokens": 12},
    }
    res = CompletionResponse.from_dict(data)
    assert [c.text for c in res.choices] == ["Lorem ipsumaaaaa", "aaaaa"]
    assert res.choices[0].finish_reason == "length"
    assert res.choices[1].logprobs == LogprobResult()
    assert res.usage["total_tokens"] == 12
    assert res.model == "ada"


def test_response_without_usage():
    assert CompletionResponse.from_dict({"choices": None}).usage is None


def test_choice_logprobs():
    choice = CompletionChoice.from_dict(
        {
            "text": "hi",
            "logprobs": {
                "tokens": ["hi"],
                "token_logprobs": [-0.5],
                "top_logprobs": [{"hi": -0.5}],
                "text_offset": [0],
            },
        }
    )
    assert choice.logprobs.tokens == ["hi"]
    assert choice.logprobs.token_logprobs == [-0.5]
    assert choice.logprobs.top_logprobs == [{"hi": -0.5}]
    assert choice.logprobs.text_offset == [0]


def test_response_rejects_non_object():
    with pytest.raises(ValueError):
        CompletionResponse.from_dict([1, 2])