import json

import httpx
import pytest

from request_debugger.schemas.draft import (
    ExecutionState,
    HttpMethod,
    KeyValuePair,
    RequestDraft,
)
from request_debugger.schemas.response import DraftResponse, JsonBody, TextBody
from request_debugger.tools.request_executor import copy_response_to_text


def make_draft(**overrides) -> RequestDraft:
    data = {"id": "tab-test", "name": "Request 1", "path": "/api/ping"}
    data.update(overrides)
    return RequestDraft(**data)


@pytest.mark.asyncio
async def test_text_response_is_not_json_parsed(make_executor):
    executor = make_executor(lambda request: httpx.Response(200, text="hello"))
    draft = make_draft()

    output = await executor.execute_draft(draft)

    assert draft.response.data == TextBody(text="hello")
    assert draft.error is None
    assert draft.state == ExecutionState.SUCCEEDED
    assert output.response == draft.response
    assert output.state == ExecutionState.SUCCEEDED


@pytest.mark.asyncio
async def test_json_response_is_parsed(make_executor):
    executor = make_executor(
        lambda request: httpx.Response(200, json={"items": [1, 2], "ok": True})
    )
    draft = make_draft()

    await executor.execute_draft(draft)

    assert draft.response.data == JsonBody(value={"items": [1, 2], "ok": True})
    assert draft.response.status == 200
    assert draft.response.status_text == "OK"
    assert draft.response.headers["content-type"] == "application/json"


@pytest.mark.asyncio
async def test_invalid_json_falls_back_to_text(make_executor):
    executor = make_executor(
        lambda request: httpx.Response(
            200, content=b"{oops", headers={"Content-Type": "application/json"}
        )
    )
    draft = make_draft()

    await executor.execute_draft(draft)

    assert draft.response.data == TextBody(text="{oops")
    assert draft.error is None


@pytest.mark.asyncio
async def test_server_errors_are_responses_not_failures(make_executor):
    executor = make_executor(
        lambda request: httpx.Response(500, json={"message": "boom"})
    )
    draft = make_draft()

    await executor.execute_draft(draft)

    assert draft.error is None
    assert draft.response.status == 500
    assert draft.response.status_text == "Internal Server Error"
    assert draft.state == ExecutionState.SUCCEEDED


@pytest.mark.asyncio
async def test_unreachable_host_sets_error(make_executor):
    def refuse(request):
        raise httpx.ConnectError("[Errno 111] Connection refused", request=request)

    executor = make_executor(refuse)
    draft = make_draft()
    draft.record_response(DraftResponse(status=200, data=TextBody(text="stale")))

    output = await executor.execute_draft(draft)

    assert isinstance(draft.error, str) and draft.error
    assert draft.response is None
    assert draft.state == ExecutionState.FAILED
    assert output.error == draft.error


@pytest.mark.asyncio
async def test_request_is_built_from_draft(make_executor, recorded_requests):
    executor = make_executor(lambda request: httpx.Response(201, json={}))
    draft = make_draft(
        path="/api/students?school=1",
        method=HttpMethod.POST,
        request_body='{"name": "Ann"}',
        query_params=[KeyValuePair(key="page", value="2"), KeyValuePair()],
        header_params=[
            KeyValuePair(key="Authorization", value="A"),
            KeyValuePair(key="Authorization", value="B"),
        ],
    )

    output = await executor.execute_draft(draft)

    sent = recorded_requests[0]
    assert sent.method == "POST"
    assert str(sent.url) == "http://backend.test/api/students?school=1&page=2"
    assert sent.headers["authorization"] == "B"
    assert sent.headers["content-type"] == "application/json"
    assert sent.content == b'{"name": "Ann"}'
    assert output.request.url == "/api/students?school=1&page=2"


@pytest.mark.asyncio
async def test_lowercase_content_type_row_replaces_default(make_executor, recorded_requests):
    executor = make_executor(lambda request: httpx.Response(200, text="ok"))
    draft = make_draft(
        method=HttpMethod.POST,
        request_body="plain body",
        header_params=[KeyValuePair(key="content-type", value="text/plain")],
    )

    await executor.execute_draft(draft)

    assert recorded_requests[0].headers.get_list("content-type") == ["text/plain"]


@pytest.mark.asyncio
async def test_get_sends_no_body(make_executor, recorded_requests):
    executor = make_executor(lambda request: httpx.Response(204))
    draft = make_draft(method=HttpMethod.GET, request_body='{"ignored": true}')

    await executor.execute_draft(draft)

    assert recorded_requests[0].content == b""
    assert draft.response.data == TextBody(text="")


@pytest.mark.asyncio
async def test_absolute_path_bypasses_base_url(make_executor, recorded_requests):
    executor = make_executor(lambda request: httpx.Response(200, text="ok"))
    draft = make_draft(path="https://other.test/health")

    await executor.execute_draft(draft)

    assert str(recorded_requests[0].url) == "https://other.test/health"


class TestCopyResponseToText:
    def test_text_is_returned_as_is(self):
        response = DraftResponse(status=200, data=TextBody(text="plain"))
        assert copy_response_to_text(response) == "plain"

    def test_json_is_pretty_printed(self):
        response = DraftResponse(status=200, data=JsonBody(value={"a": [1], "b": "é"}))
        text = copy_response_to_text(response)
        assert text == json.dumps({"a": [1], "b": "é"}, indent=2, ensure_ascii=False)

    def test_missing_response_gives_empty_text(self):
        assert copy_response_to_text(None) == ""

    def test_unserializable_value_falls_back_to_indicator(self):
        response = DraftResponse(status=200, data=JsonBody(value={"when": object()}))
        assert copy_response_to_text(response) == "[unable to serialize response]"
