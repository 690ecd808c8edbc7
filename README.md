# gptkit

Building blocks for working with OpenAI-compatible HTTP APIs. The package has
request and response dataclasses for completions, edits, engines, embeddings,
files, fine-tunes, fine-tuning jobs and images. It also has a multipart form
builder, a request builder, JSON helpers and error types that parse the API's
error payloads. It uses only the standard library.

## Install

```
pip install gptkit
pip install "gptkit[test]"   # adds pytest for the test suite
```

## What it does not do

gptkit has no HTTP client. It builds request bodies, URLs and `Request`
objects, and it parses response payloads that you have already decoded. You
send the requests with whatever HTTP library you use. It has no support for
streamed responses apart from `ErrorAccumulator`, which only collects raw
error bytes. It provides no command-line tool.

## Modules

| Module | Contents |
| --- | --- |
| `gptkit.config` | `ClientConfig`, `APIType`, `default_config`, `default_azure_config`, `default_anthropic_config` |
| `gptkit.errors` | `APIError`, `InnerError`, `RequestError` |
| `gptkit.codec` | `JSONMarshaller`, `JSONUnmarshaler` |
| `gptkit.request_builder` | `Request`, `RequestBuilder` |
| `gptkit.form_builder` | `FormBuilder`, `escape_quotes` |
| `gptkit.error_accumulator` | `ErrorAccumulator`, `ErrorAccumulatorError` |
| `gptkit.completion` | `CompletionRequest`, `CompletionResponse`, model name constants, `check_endpoint_supports_model`, `check_prompt_type`, `validate_completion_request` |
| `gptkit.edits` | `EditsRequest`, `EditsResponse`, `EditsChoice` |
| `gptkit.engines` | `Engine`, `EnginesList` |
| `gptkit.embeddings` | `EmbeddingRequest`, `EmbeddingRequestStrings`, `EmbeddingRequestTokens`, `Embedding`, `EmbeddingResponse`, `EmbeddingResponseBase64`, `decode_base64_embedding` |
| `gptkit.files` | `FileRequest`, `FileBytesRequest`, `File`, `FilesList`, `PurposeType`, `build_file_upload`, `build_file_bytes_upload` |
| `gptkit.fine_tunes` | `FineTuneRequest`, `FineTune` and related list and event types |
| `gptkit.fine_tuning_job` | `FineTuningJobRequest`, `FineTuningJob`, `Hyperparameters`, event types, `fine_tuning_job_events_path` |
| `gptkit.image` | `ImageRequest`, `ImageResponse`, `ImageEditRequest`, `ImageVariRequest`, `wrap_reader`, `build_image_edit_form`, `build_image_variation_form` |

## Configuration

```python
from gptkit.config import default_config, default_azure_config, default_anthropic_config

config = default_config("placeholder")
azure = default_azure_config("placeholder", "https://example.com/")
azure.get_azure_deployment_by_model("gpt-3.5-turbo")   # "gpt-35-turbo"
anthropic = default_anthropic_config("placeholder", "")
anthropic.base_url                                     # "https://api.anthropic.com/v1"
```

`str(config)` always returns `"<OpenAI API ClientConfig>"`, so the key never
appears in logs. The Azure mapper removes `.` and `:` from model names. You
can supply your own mapper through `azure_model_mapper_func`.

## Building requests

```python
from gptkit.codec import JSONMarshaller
from gptkit.request_builder import RequestBuilder
from gptkit.completion import CompletionRequest, validate_completion_request

request = CompletionRequest(model="babbage-002", prompt="Lorem ipsum", max_tokens=5)
validate_completion_request(request)

builder = RequestBuilder(JSONMarshaller())
http_request = builder.build("POST", "/v1/completions", request.to_dict(), None)
http_request.body   # compact JSON bytes
```

`validate_completion_request` raises `CompletionStreamNotSupportedError` when
streaming is requested. It raises `CompletionUnsupportedModelError` for chat
models and `CompletionPromptTypeError` when the prompt is not a string or a
list of strings. All three derive from `CompletionError`, which is a
`ValueError`.

`RequestBuilder.build` passes any body with a `read` method through
unchanged. It encodes every other body with the marshaller.

## Embeddings

```python
from gptkit.embeddings import Embedding, EmbeddingResponseBase64

a = Embedding(embedding=[1.0, 2.0, 3.0])
b = Embedding(embedding=[2.0, 4.0, 6.0])
a.dot_product(b)   # 28.0

payload = {"data": [{"embedding": "pHCdP4XrkUDhevxA"}]}
response = EmbeddingResponseBase64.from_dict(payload).to_embedding_response()
response.data[0].embedding   # about [1.23, 4.56, 7.89]
```

`dot_product` raises `VectorLengthMismatchError` when the two vectors have
different lengths. `EmbeddingRequest.to_body()` merges `extra_body` into the
top level of the payload.

## Multipart uploads

```python
import io
from gptkit.form_builder import FormBuilder
from gptkit.image import ImageEditRequest, wrap_reader, build_image_edit_form

body, content_type = build_image_edit_form(
    ImageEditRequest(
        image=wrap_reader(io.BytesIO(b"..."), "image.png", "image/png"),
        prompt="There is a turtle in the pool",
        n=1,
    ),
    FormBuilder,
)
```

`gptkit.files.build_file_upload` reads the file at `file_path`. It raises
`OSError` if the file cannot be opened. `build_file_bytes_upload` uploads
in-memory bytes instead. Both functions return the body and the content type.

## Errors

`APIError.from_json` parses the error object that the API returns. The
message may be a string, a list of strings joined with `", "`, or null. The
code may be an integer or a string. Malformed payloads raise `ValueError`.
`RequestError` describes a failed request together with its status and body.
Its `err` holds the underlying exception.