"""GroqLLMClient against an in-process stand-in for the Groq SDK."""

import json
from types import SimpleNamespace

import groq
import httpx
import pytest

from fakes import ANALYSIS_RESPONSE, JD_RESPONSE
from ranking.validation import JD_EXTRACT_SCHEMA, RESUME_ANALYSIS_SCHEMA
from resume_matcher.config import Settings
from resume_matcher.errors import MissingAPIKeyError, UpstreamAPIError
from resume_matcher.llm import GroqLLMClient

SETTINGS = Settings(api_key="gsk_test", model="test-model", embed_model="test-embed", temperature=0.3)
URL = "https://api.groq.com/openai/v1/chat/completions"


def _completion(content=None, refusal=None, empty=False):
    if empty:
        return SimpleNamespace(choices=[])
    message = SimpleNamespace(content=content, refusal=refusal)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeGroq:
    def __init__(self, completion=None, error=None):
        self.completion = completion
        self.error = error
        self.chat_requests = []
        self.embed_requests = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))
        self.embeddings = SimpleNamespace(create=self._embed)

    def _create(self, **kwargs):
        self.chat_requests.append(kwargs)
        if self.error:
            raise self.error
        return self.completion

    def _embed(self, model, input):
        self.embed_requests.append({"model": model, "input": list(input)})
        if self.error:
            raise self.error
        items = [SimpleNamespace(index=i, embedding=[float(len(text))]) for i, text in enumerate(input)]
        return SimpleNamespace(data=list(reversed(items)))


def _status_error(status, body, text):
    response = httpx.Response(status, text=text, request=httpx.Request("POST", URL))
    return groq.APIStatusError(f"Error code: {status}", response=response, body=body)


def test_missing_key():
    with pytest.raises(MissingAPIKeyError):
        GroqLLMClient(Settings())


def test_builds_sdk_client_without_retries():
    client = GroqLLMClient(Settings(api_key="gsk_test", base_url="https://proxy.local"))
    assert client.client.max_retries == 0
    assert str(client.client.base_url).startswith("https://proxy.local")


def test_complete_json_request_shape():
    sdk = FakeGroq(_completion(json.dumps(JD_RESPONSE)))
    data = GroqLLMClient(SETTINGS, client=sdk).complete_json(JD_EXTRACT_SCHEMA, "system text", "user text")
    assert data == JD_RESPONSE

    (request,) = sdk.chat_requests
    assert request["model"] == "test-model"
    assert request["temperature"] == 0.3
    assert request["messages"] == [
        {"role": "system", "content": "system text"},
        {"role": "user", "content": "user text"},
    ]
    assert request["response_format"]["json_schema"]["strict"] is True
    assert request["response_format"]["json_schema"]["name"] == "jd_extract"


@pytest.mark.parametrize(
    "completion, fragment",
    [
        (_completion(empty=True), "empty response"),
        (_completion(content="{}", refusal="I can't help with that"), "refusal"),
        (_completion(content="   "), "empty content"),
        (_completion(content="not json"), "invalid json"),
        (_completion(content=json.dumps({"summary": "x"})), "failed schema"),
    ],
)
def test_bad_completions_raise_upstream(completion, fragment):
    client = GroqLLMClient(SETTINGS, client=FakeGroq(completion))
    with pytest.raises(UpstreamAPIError, match=fragment):
        client.complete_json(RESUME_ANALYSIS_SCHEMA, "s", "u")


def test_valid_analysis_passes():
    client = GroqLLMClient(SETTINGS, client=FakeGroq(_completion(json.dumps(ANALYSIS_RESPONSE))))
    assert client.complete_json(RESUME_ANALYSIS_SCHEMA, "s", "u")["summary"] == ANALYSIS_RESPONSE["summary"]


def test_status_error_surfaces_upstream_message_and_type():
    body = {"error": {"message": "model not found", "type": "invalid_request_error"}}
    sdk = FakeGroq(error=_status_error(404, body, json.dumps(body)))
    with pytest.raises(UpstreamAPIError) as exc_info:
        GroqLLMClient(SETTINGS, client=sdk).complete_json(JD_EXTRACT_SCHEMA, "s", "u")
    assert str(exc_info.value) == "model not found (invalid_request_error)"


def test_status_error_without_message_uses_status_and_body():
    sdk = FakeGroq(error=_status_error(502, None, " bad gateway "))
    with pytest.raises(UpstreamAPIError) as exc_info:
        GroqLLMClient(SETTINGS, client=sdk).embed_texts(["a"])
    assert str(exc_info.value) == "http 502: bad gateway"


def test_connection_error():
    sdk = FakeGroq(error=groq.APIConnectionError(request=httpx.Request("POST", URL)))
    with pytest.raises(UpstreamAPIError):
        GroqLLMClient(SETTINGS, client=sdk).complete_json(JD_EXTRACT_SCHEMA, "s", "u")


def test_embed_texts_batches_and_places_by_index():
    sdk = FakeGroq()
    settings = Settings(api_key="k", embed_model="test-embed", embed_batch_size=2)
    vectors = GroqLLMClient(settings, client=sdk).embed_texts(["aaa", "  ", "c"])

    assert sdk.embed_requests == [
        {"model": "test-embed", "input": ["aaa", "empty"]},
        {"model": "test-embed", "input": ["c"]},
    ]
    assert vectors == [[3.0], [5.0], [1.0]]


def test_embed_texts_empty_list():
    sdk = FakeGroq()
    assert GroqLLMClient(SETTINGS, client=sdk).embed_texts([]) == []
    assert sdk.embed_requests == []
