# application/services/debugger_service.py

from typing import Optional

from request_debugger.application.services.tab_store import (
    HEADER_ROWS,
    QUERY_ROWS,
    TabStore,
)
from request_debugger.common.logger import LoggerFactory
from request_debugger.schemas.draft import DraftFields, ExecutionState, RequestDraft
from request_debugger.schemas.session import DebuggerSnapshot
from request_debugger.schemas.tools.request_executor import RequestExecutorOutput
from request_debugger.tools.request_executor import (
    RequestExecutorTool,
    copy_response_to_text,
)


class RequestInFlightError(Exception):
    """Raised when the active draft is executed again before it completed."""

    def __init__(self, draft_id: str):
        super().__init__(f"A request for draft {draft_id} is already in flight")
        self.draft_id = draft_id


class DebuggerService:
    """Operator-facing session over the tab store and the request executor."""

    PARAM_LISTS = {"query": QUERY_ROWS, "header": HEADER_ROWS}

    def __init__(self, tab_store: TabStore, executor: RequestExecutorTool):
        self.tab_store = tab_store
        self.executor = executor
        self.logger = LoggerFactory.get_logger(name="service.debugger")
        self._started = False

    def start(self) -> DebuggerSnapshot:
        """Hydrate the session from storage once per process."""
        if not self._started:
            drafts, active_id = self.tab_store.load()
            self.logger.info(f"Debugger session started with {len(drafts)} drafts, active {active_id}")
            self._started = True
        return self.snapshot()

    def snapshot(self) -> DebuggerSnapshot:
        return DebuggerSnapshot(
            drafts=self.tab_store.drafts,
            active_id=self.tab_store.active_id,
            working=self.tab_store.working,
        )

    # Tab management

    def create_draft(self) -> RequestDraft:
        return self.tab_store.create_draft()

    def switch_active(self, draft_id: str) -> bool:
        return self.tab_store.switch_active(draft_id)

    def rename(self, draft_id: str, name: str) -> bool:
        return self.tab_store.rename(draft_id, name)

    def delete(self, draft_id: str) -> bool:
        return self.tab_store.delete(draft_id)

    # Editing the active draft

    def edit(
        self,
        path: Optional[str] = None,
        method: Optional[str] = None,
        request_body: Optional[str] = None,
    ) -> DraftFields:
        return self.tab_store.edit(path=path, method=method, request_body=request_body)

    def replace_fields(self, fields: DraftFields) -> DraftFields:
        return self.tab_store.update_working(fields)

    def add_param(self, kind: str) -> DraftFields:
        return self.tab_store.add_param(self._param_list(kind))

    def update_param(
        self, kind: str, index: int, key: Optional[str] = None, value: Optional[str] = None
    ) -> bool:
        return self.tab_store.update_param(self._param_list(kind), index, key=key, value=value)

    def remove_param(self, kind: str, index: int) -> bool:
        return self.tab_store.remove_param(self._param_list(kind), index)

    def refresh_token(self) -> bool:
        return self.tab_store.refresh_token()

    # Execution

    async def execute_active(self) -> RequestExecutorOutput:
        """Send the active draft and persist the (sanitized) collection afterwards.

        Raises:
            RequestInFlightError: if the active draft is still pending
        """
        draft = self.tab_store.active_draft
        if draft.state == ExecutionState.PENDING:
            raise RequestInFlightError(draft.id)

        self.tab_store.flush(draft.id, self.tab_store.working)
        output = await self.executor.execute_draft(draft)
        self.tab_store.persist()

        if output.error:
            self.logger.warning(f"Draft {draft.id} failed: {output.error}")
        return output

    def copy_active_response(self) -> str:
        return copy_response_to_text(self.tab_store.active_draft.response)

    def _param_list(self, kind: str) -> str:
        try:
            return self.PARAM_LISTS[kind]
        except KeyError:
            raise ValueError(f"Unknown parameter kind: {kind}")
