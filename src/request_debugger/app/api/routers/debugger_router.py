# app/api/routers/debugger_router.py

from fastapi import APIRouter, HTTPException, status

from request_debugger.app.api.dto.debugger_dto import (
    CopyResponseText,
    EditDraftRequest,
    ParamKind,
    ParamRowRequest,
    RenameDraftRequest,
)
from request_debugger.application.services.debugger_service import (
    DebuggerService,
    RequestInFlightError,
)
from request_debugger.common.logger import LoggerFactory
from request_debugger.infra.di.container import debugger_service_dependency
from request_debugger.schemas.draft import DraftFields
from request_debugger.schemas.session import DebuggerSnapshot
from request_debugger.schemas.tools.request_executor import RequestExecutorOutput


def _logger():
    # Looked up per call; LoggerFactory is configured after import
    return LoggerFactory.get_logger(name="router.debugger")


router = APIRouter(prefix="/api/v1/debugger", tags=["Debugger"])


def _require_draft(service: DebuggerService, draft_id: str) -> None:
    if service.tab_store.get(draft_id) is None:
        raise HTTPException(status_code=404, detail=f"Draft not found: {draft_id}")


@router.get("", response_model=DebuggerSnapshot)
async def get_snapshot(service: DebuggerService = debugger_service_dependency):
    """All drafts, the active id and the edit buffer."""
    return service.start()


@router.post("/drafts", response_model=DebuggerSnapshot, status_code=status.HTTP_201_CREATED)
async def create_draft(service: DebuggerService = debugger_service_dependency):
    draft = service.create_draft()
    _logger().info(f"POST /drafts - created {draft.id}")
    return service.snapshot()


@router.post("/drafts/{draft_id}/activate", response_model=DebuggerSnapshot)
async def activate_draft(
    draft_id: str, service: DebuggerService = debugger_service_dependency
):
    if not service.switch_active(draft_id):
        raise HTTPException(status_code=404, detail=f"Draft not found: {draft_id}")
    return service.snapshot()


@router.patch("/drafts/{draft_id}", response_model=DebuggerSnapshot)
async def rename_draft(
    draft_id: str,
    request: RenameDraftRequest,
    service: DebuggerService = debugger_service_dependency,
):
    _require_draft(service, draft_id)
    if not service.rename(draft_id, request.name):
        raise HTTPException(status_code=400, detail="Draft name must not be blank")
    return service.snapshot()


@router.delete("/drafts/{draft_id}", response_model=DebuggerSnapshot)
async def delete_draft(draft_id: str, service: DebuggerService = debugger_service_dependency):
    _require_draft(service, draft_id)
    if not service.delete(draft_id):
        raise HTTPException(status_code=409, detail="The last draft cannot be deleted")
    _logger().info(f"DELETE /drafts/{draft_id}")
    return service.snapshot()


@router.patch("/working", response_model=DebuggerSnapshot)
async def edit_working(
    request: EditDraftRequest, service: DebuggerService = debugger_service_dependency
):
    try:
        service.edit(
            path=request.path,
            method=request.method.value if request.method else None,
            request_body=request.request_body,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return service.snapshot()


@router.put("/working", response_model=DebuggerSnapshot)
async def replace_working(
    fields: DraftFields, service: DebuggerService = debugger_service_dependency
):
    service.replace_fields(fields)
    return service.snapshot()


@router.post("/working/params/{kind}", response_model=DebuggerSnapshot)
async def add_param(kind: ParamKind, service: DebuggerService = debugger_service_dependency):
    service.add_param(kind.value)
    return service.snapshot()


@router.patch("/working/params/{kind}/{index}", response_model=DebuggerSnapshot)
async def update_param(
    kind: ParamKind,
    index: int,
    request: ParamRowRequest,
    service: DebuggerService = debugger_service_dependency,
):
    if not service.update_param(kind.value, index, key=request.key, value=request.value):
        raise HTTPException(status_code=404, detail=f"No {kind.value} row at index {index}")
    return service.snapshot()


@router.delete("/working/params/{kind}/{index}", response_model=DebuggerSnapshot)
async def remove_param(
    kind: ParamKind, index: int, service: DebuggerService = debugger_service_dependency
):
    if not service.remove_param(kind.value, index):
        raise HTTPException(
            status_code=400,
            detail=f"Cannot remove {kind.value} row {index}; at least one row is kept",
        )
    return service.snapshot()


@router.post("/working/refresh-token", response_model=DebuggerSnapshot)
async def refresh_token(service: DebuggerService = debugger_service_dependency):
    if not service.refresh_token():
        _logger().info("No session token available to refresh")
    return service.snapshot()


@router.post("/execute", response_model=RequestExecutorOutput)
async def execute_active(service: DebuggerService = debugger_service_dependency):
    """Send the active draft. Transport failures come back in ``error``, not as 5xx."""
    try:
        return await service.execute_active()
    except RequestInFlightError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/response/text", response_model=CopyResponseText)
async def copy_response(service: DebuggerService = debugger_service_dependency):
    return CopyResponseText(text=service.copy_active_response())
