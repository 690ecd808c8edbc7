import binascii

import pytest

from gptkit.codec import JSONMarshaller
from gptkit.embeddings import (
    Base64Embedding,
    Embedding,
    EmbeddingEncodingFormat,
    EmbeddingModel,
    EmbeddingRequest,
    EmbeddingRequestStrings,
    EmbeddingRequestTokens,
    EmbeddingResponse,
    EmbeddingResponseBase64,
    VectorLengthMismatchError,
    decode_base64_embedding,
)

FIRST = [1.23, 4.56, 7.89]
SECOND = [-0.006968617, -0.0052718227, 0.011901081]

DEPRECATED_MODELS = [
    EmbeddingModel.ADA_SIMILARITY,
    EmbeddingModel.BABBAGE_SIMILARITY,
    EmbeddingModel.CURIE_SIMILARITY,
    EmbeddingModel.DAVINCI_SIMILARITY,
    EmbeddingModel.ADA_SEARCH_DOCUMENT,
    EmbeddingModel.ADA_SEARCH_QUERY,
    EmbeddingModel.BABBAGE_SEARCH_DOCUMENT,
    EmbeddingModel.BABBAGE_SEARCH_QUERY,
    EmbeddingModel.CURIE_SEARCH_DOCUMENT,
    EmbeddingModel.CURIE_SEARCH_QUERY,
    EmbeddingModel.DAVINCI_SEARCH_DOCUMENT,
    EmbeddingModel.DAVINCI_SEARCH_QUERY,
    EmbeddingModel.ADA_CODE_SEARCH_CODE,
    EmbeddingModel.ADA_CODE_SEARCH_TEXT,
    EmbeddingModel.BABBAGE_CODE_SEARCH_CODE,
    EmbeddingModel.BABBAGE_CODE_SEARCH_TEXT,
]

TEXTS = ["The food was delicious and the waiter", "Other examples of embedding request"]


def _marshal(request):
    return JSONMarshaller().marshal(request.convert().to_dict())


@pytest.mark.parametrize("model", DEPRECATED_MODELS)
def test_requests_carry_model_field(model):
    expected = f'"model":"{model.value}"'.encode()
    assert expected in _marshal(EmbeddingRequest(input=TEXTS, model=model))
    assert expected in _marshal(
        EmbeddingRequest(
            input=TEXTS, model=model, extra_body={"input_type": "query", "truncate": "NONE"}
        )
    )
    assert expected in _marshal(EmbeddingRequestStrings(input=TEXTS, model=model))
    tokens = [[464, 2057, 373, 12625, 290, 262, 46612], [6395, 6096, 286, 11525, 12083, 2581]]
    assert expected in _marshal(EmbeddingRequestTokens(input=tokens, model=model))


def test_to_dict_omits_zero_values():
    assert EmbeddingRequest().to_dict() == {"input": None, "model": ""}


def test_to_dict_includes_set_values():
    request = EmbeddingRequest(
        input=["a"],
        model=EmbeddingModel.SMALL_EMBEDDING_3,
        user="someone",
        encoding_format=EmbeddingEncodingFormat.BASE64,
        dimensions=4,
    )
    assert request.to_dict() == {
        "input": ["a"],
        "model": "text-embedding-3-small",
        "user": "someone",
        "encoding_format": "base64",
        "dimensions": 4,
    }


def test_to_body_merges_extra_body():
    request = EmbeddingRequest(
        extra_body={"input_type": "query", "truncate": "NONE"}, dimensions=1
    )
    body = request.to_body()
    assert body == {
        "input": None,
        "model": "",
        "dimensions": 1,
        "input_type": "query",
        "truncate": "NONE",
    }
    assert "extra_body" not in body


def test_to_body_rejects_unserializable_input():
    with pytest.raises(TypeError):
        EmbeddingRequest(input=object(), model="example_model").to_body()


def test_strings_convert_copies_fields():
    request = EmbeddingRequestStrings(
        input=TEXTS,
        model=EmbeddingModel.ADA_EMBEDDING_V2,
        user="u",
        encoding_format=EmbeddingEncodingFormat.FLOAT,
        dimensions=8,
        extra_body={"k": 1},
    )
    converted = request.convert()
    assert converted == EmbeddingRequest(
        input=TEXTS,
        model=EmbeddingModel.ADA_EMBEDDING_V2,
        user="u",
        encoding_format=EmbeddingEncodingFormat.FLOAT,
        dimensions=8,
        extra_body={"k": 1},
    )


def test_tokens_convert_copies_input():
    request = EmbeddingRequestTokens(input=[[1, 2], [3]], model="m")
    converted = request.convert()
    assert converted.input == [[1, 2], [3]]
    assert converted.model == "m"


def test_request_convert_is_identity():
    request = EmbeddingRequest(input=["x"])
    assert request.convert() is request


def test_response_from_dict():
    response = EmbeddingResponse.from_dict(
        {
            "object": "list",
            "data": [{"embedding": FIRST}, {"embedding": SECOND, "index": 1}],
            "model": "text-embedding-ada-002",
            "usage": {"prompt_tokens": 3, "total_tokens": 3},
        }
    )
    assert response.data == [Embedding(embedding=FIRST), Embedding(embedding=SECOND, index=1)]
    assert response.model == "text-embedding-ada-002"
    assert response.usage == {"prompt_tokens": 3, "total_tokens": 3}


def test_response_from_dict_rejects_non_object():
    with pytest.raises(ValueError):
        EmbeddingResponse.from_dict([1, 2])


def test_decode_base64_embedding():
    assert decode_base64_embedding("pHCdP4XrkUDhevxA") == pytest.approx(FIRST, rel=1e-6)
    assert decode_base64_embedding("/1jku0G/rLvA/EI8") == pytest.approx(SECOND, rel=1e-6)


def test_decode_base64_embedding_invalid():
    with pytest.raises(binascii.Error):
        decode_base64_embedding("----")


def test_base64_response_to_embedding_response():
    response = EmbeddingResponseBase64(
        data=[
            Base64Embedding(embedding="pHCdP4XrkUDhevxA"),
            Base64Embedding(embedding="/1jku0G/rLvA/EI8"),
        ]
    )
    converted = response.to_embedding_response()
    assert len(converted.data) == 2
    assert converted.data[0].embedding == pytest.approx(FIRST, rel=1e-6)
    assert converted.data[1].embedding == pytest.approx(SECOND, rel=1e-6)
    assert converted.object == ""
    assert converted.model == ""
    assert converted.usage == {}


def test_base64_response_from_dict_then_convert():
    response = EmbeddingResponseBase64.from_dict(
        {"object": "list", "data": [{"embedding": "pHCdP4XrkUDhevxA", "index": 0}], "model": "m"}
    )
    converted = response.to_embedding_response()
    assert converted.object == "list"
    assert converted.model == "m"
    assert converted.data[0].embedding == pytest.approx(FIRST, rel=1e-6)


def test_base64_response_with_invalid_embedding():
    response = EmbeddingResponseBase64(data=[Base64Embedding(embedding="----")])
    with pytest.raises(ValueError):
        response.to_embedding_response()


def test_dot_product():
    v1 = Embedding(embedding=[1, 2, 3])
    v2 = Embedding(embedding=[2, 4, 6])
    assert v1.dot_product(v2) == pytest.approx(28.0, abs=1e-12)

    v1 = Embedding(embedding=[1, 0, 0])
    v2 = Embedding(embedding=[0, 1, 0])
    assert v1.dot_product(v2) == pytest.approx(0.0, abs=1e-12)


def test_dot_product_length_mismatch():
    v1 = Embedding(embedding=[1, 0, 0])
    v2 = Embedding(embedding=[0, 1])
    with pytest.raises(VectorLengthMismatchError):
        v1.dot_product(v2)