import pytest

from gptkit.errors import APIError, InnerError, RequestError

AZURE_RESPONSE = """{
    "message": "test message",
    "type": null,
    "param": "prompt",
    "code": "content_filter",
    "status": 400,
    "innererror": {
        "code": "ResponsibleAIPolicyViolation",
        "content_filter_result": {
            "hate": {"filtered": false, "severity": "safe"},
            "self_harm": {"filtered": false, "severity": "safe"},
            "sexual": {"filtered": true, "severity": "medium"},
            "violence": {"filtered": false, "severity": "safe"}
        }
    }
}"""


@pytest.mark.parametrize(
    ("response", "expected"),
    [
        ('{"message":"foo","type":"invalid_request_error","param":null,"code":null}', "foo"),
        ('{"message":["foo"],"type":"invalid_request_error","param":null,"code":null}', "foo"),
        (
            '{"message":["foo", "bar", "baz"],"type":"invalid_request_error","param":null,"code":null}',
            "foo, bar, baz",
        ),
        ('{"message":[],"type":"invalid_request_error","param":null,"code":null}', ""),
        ('{"message":null,"type":"invalid_request_error","param":null,"code":null}', ""),
    ],
)
def test_message_parsing(response, expected):
    error = APIError.from_json(response)
    assert error.message == expected
    assert error.type == "invalid_request_error"
    assert error.param is None


def test_azure_inner_error():
    error = APIError.from_json(AZURE_RESPONSE)
    assert error.inner_error == InnerError(
        code="ResponsibleAIPolicyViolation",
        content_filter_results={
            "hate": {"filtered": False, "severity": "safe"},
            "self_harm": {"filtered": False, "severity": "safe"},
            "sexual": {"filtered": True, "severity": "medium"},
            "violence": {"filtered": False, "severity": "safe"},
        },
    )
    assert error.code == "content_filter"
    assert error.param == "prompt"
    assert error.type == ""


def test_empty_inner_error():
    error = APIError.from_json(
        '{"message": "","type": null,"param": "","code": "","status": 0,"innererror": {}}'
    )
    assert error.inner_error == InnerError()


@pytest.mark.parametrize(
    "response",
    [
        '{"message": "","type": null,"param": "","code": "","status": 0,"innererror": "test"}',
        '{"message":{},"type":"invalid_request_error","param":null,"code":null}',
        '{"message":1,"type":"invalid_request_error","param":null,"code":null}',
        '{"message":0.1,"type":"invalid_request_error","param":null,"code":null}',
        '{"message":true,"type":"invalid_request_error","param":null,"code":null}',
        '{"type":"invalid_request_error","param":null,"code":null}',
        '{"code":418,"message":"I\'m a teapot","param":true,"type":"teapot_error"}',
        '{"code":418,"message":"I\'m a teapot","param":"prompt","type":true}',
        '--- {"code":418,"message":"I\'m a teapot","param":"prompt","type":"teapot_error"}',
    ],
)
def test_parse_failures(response):
    with pytest.raises(ValueError):
        APIError.from_json(response)


@pytest.mark.parametrize(
    ("response", "expected"),
    [
        ('{"code":418,"message":"I\'m a teapot","param":"prompt","type":"teapot_error"}', 418),
        ('{"code":"teapot","message":"I\'m a teapot","param":"prompt","type":"teapot_error"}', "teapot"),
        ('{"message":"I\'m a teapot","param":"prompt","type":"teapot_error"}', None),
    ],
)
def test_code_parsing(response, expected):
    assert APIError.from_json(response).code == expected


def test_int_code_stays_int():
    code = APIError.from_json(b'{"code":418,"message":"x"}').code
    assert isinstance(code, int) and code == 418


def test_inner_error_from_dict_rejects_non_object():
    with pytest.raises(ValueError):
        InnerError.from_dict("test")


def test_api_error_str():
    assert str(APIError("boom")) == "boom"
    error = APIError("boom", http_status="401 Unauthorized", http_status_code=401)
    assert str(error) == "error, status code: 401, status: 401 Unauthorized, message: boom"


def test_request_error():
    cause = ValueError("i am a teapot")
    error = RequestError(cause, http_status_code=418)
    assert error.http_status_code == 418
    assert error.__cause__ is cause
    assert str(error) == "error, status code: 418, status: , message: i am a teapot, body: "


def test_request_error_with_body():
    cause = ValueError("bad")
    error = RequestError(cause, http_status="500", http_status_code=500, body=b"oops")
    assert isinstance(error, Exception)
    assert error.http_status_code == 500
    assert error.http_status == "500"
    assert error.body == b"oops"
    assert error.__cause__ is cause
    assert str(error) == "error, status code: 500, status: 500, message: bad, body: oops"