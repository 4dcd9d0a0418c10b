# tools/request_executor.py

import asyncio
import json
import time
from typing import Optional

import httpx

from request_debugger.core import BaseTool
from request_debugger.config.constants import (
    JSON_CONTENT_TYPE,
    REQUEST_FAILED_MESSAGE,
    UNSERIALIZABLE_RESPONSE_MESSAGE,
)
from request_debugger.schemas.draft import ExecutionState, RequestDraft
from request_debugger.schemas.response import DraftResponse, JsonBody, TextBody
from request_debugger.schemas.tools.request_executor import (
    RequestDescriptor,
    RequestExecutorInput,
    RequestExecutorOutput,
)
from request_debugger.tools.request_builder import build_request


class RequestExecutorTool(BaseTool):
    """
    Sends a draft's request through httpx.AsyncClient and writes the
    normalized outcome back onto the draft.

    Any HTTP response, 4xx/5xx included, is a success of the tool; only
    failures to obtain a response end up in ``draft.error``.
    """

    def __init__(
        self,
        *,
        name: str = "request_executor",
        description: str = "Executes ad-hoc HTTP requests built from drafts",
        base_url: str = "",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        verbose: bool = False,
    ):
        super().__init__(
            name=name,
            description=description,
            input_schema=RequestExecutorInput,
            output_schema=RequestExecutorOutput,
            verbose=verbose,
        )
        self._base_url = base_url or ""
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        kwargs = {"base_url": self._base_url}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)

    async def execute_draft(self, draft: RequestDraft) -> RequestExecutorOutput:
        """Execute ``draft`` and mutate its response/error/state in place."""
        return await self.execute(RequestExecutorInput(draft=draft))

    async def _execute(self, inp: RequestExecutorInput) -> RequestExecutorOutput:
        draft = inp.draft
        draft.state = ExecutionState.PENDING
        draft.response = None
        draft.error = None

        start = time.perf_counter()
        request: Optional[RequestDescriptor] = None

        try:
            request = build_request(draft)
            self.logger.info(f"Sending {request.method.value} {request.url}")
            self.logger.add_context(
                draft_id=draft.id,
                method=request.method.value,
                url=request.url,
                has_body=request.body is not None,
            )

            async with self._client() as client:
                response = await client.request(
                    method=request.method.value,
                    url=request.url,
                    headers=request.headers,
                    content=request.body,
                )

            elapsed = time.perf_counter() - start
            result = self._normalize(response, elapsed)
            draft.record_response(result)
            self.logger.info(f"Received {response.status_code} in {elapsed:.3f}s")

        except asyncio.CancelledError:
            # No outcome to record; the draft must not stay pending
            self.logger.warning(f"Request for draft {draft.id} was cancelled")
            if draft.state == ExecutionState.PENDING:
                draft.state = ExecutionState.IDLE
            raise
        except httpx.TimeoutException as e:
            elapsed = time.perf_counter() - start
            self.logger.error(f"Request timed out after {elapsed:.3f}s")
            draft.record_error(str(e) or f"Request timed out after {elapsed:.3f}s")
        except httpx.RequestError as e:
            elapsed = time.perf_counter() - start
            self.logger.error(f"Request error: {e}")
            draft.record_error(str(e) or REQUEST_FAILED_MESSAGE)
        except Exception as e:
            # Invalid URLs and header/body encoding failures raise before sending
            elapsed = time.perf_counter() - start
            self.logger.error(f"Could not send request: {e}")
            draft.record_error(str(e) or REQUEST_FAILED_MESSAGE)
        finally:
            self.logger.clear_context()

        return RequestExecutorOutput(
            draft_id=draft.id,
            request=request,
            response=draft.response,
            error=draft.error,
            state=draft.state,
            elapsed=elapsed,
        )

    def _normalize(self, response: httpx.Response, elapsed: float) -> DraftResponse:
        content_type = response.headers.get("content-type", "")
        if JSON_CONTENT_TYPE in content_type:
            try:
                data = JsonBody(value=response.json())
            except ValueError:
                self.logger.warning("Response declared JSON but did not parse; keeping text")
                data = TextBody(text=response.text)
        else:
            data = TextBody(text=response.text)

        return DraftResponse(
            status=response.status_code,
            status_text=response.reason_phrase,
            headers=dict(response.headers),
            data=data,
            url=str(response.request.url),
            elapsed_ms=elapsed * 1000.0,
        )


def copy_response_to_text(response: Optional[DraftResponse]) -> str:
    """Render a response body for clipboard export; never raises."""
    if response is None:
        return ""
    data = response.data
    if isinstance(data, TextBody):
        return data.text
    try:
        return json.dumps(data.value, indent=2, ensure_ascii=False)
    except (TypeError, ValueError):
        return UNSERIALIZABLE_RESPONSE_MESSAGE
