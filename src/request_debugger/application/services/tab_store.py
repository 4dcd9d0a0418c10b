# application/services/tab_store.py

import json
import uuid
from typing import Any, List, Optional, Tuple

from pydantic import ValidationError

from request_debugger.common.logger import LoggerFactory
from request_debugger.common.storage import KeyValueStorage
from request_debugger.config.constants import (
    AUTHORIZATION_HEADER,
    DEFAULT_DRAFT_NAME,
    DEFAULT_STORAGE_KEY,
    DRAFT_ID_PREFIX,
)
from request_debugger.domain.ports.session_token_provider import SessionTokenProvider
from request_debugger.schemas.draft import (
    DraftFields,
    ExecutionState,
    KeyValuePair,
    PersistedDraft,
    RequestDraft,
    default_header_params,
)


QUERY_ROWS = "query_params"
HEADER_ROWS = "header_params"


class TabStore:
    """Source of truth for the saved request drafts and the active one.

    The store keeps the draft list, the active draft id and an edit buffer
    holding the active draft's editable fields. Every edit is written through
    to the draft and the whole sanitized collection is persisted under one
    storage key. Storage failures are logged and never raised; the in-memory
    state stays authoritative for the session.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        token_provider: Optional[SessionTokenProvider] = None,
        storage_key: str = DEFAULT_STORAGE_KEY,
    ):
        self.storage = storage
        self.token_provider = token_provider
        self.storage_key = storage_key
        self.logger = LoggerFactory.get_logger(name="store.tabs")

        self._drafts: List[RequestDraft] = []
        self._active_id: Optional[str] = None
        self._working: DraftFields = DraftFields()
        self._loaded = False

    # ------------------------------------------------------------------ views

    @property
    def drafts(self) -> List[RequestDraft]:
        self._ensure_loaded()
        return list(self._drafts)

    @property
    def active_id(self) -> str:
        self._ensure_loaded()
        return self._active_id

    @property
    def active_draft(self) -> RequestDraft:
        self._ensure_loaded()
        return self.get(self._active_id)

    @property
    def working(self) -> DraftFields:
        """Copy of the edit buffer."""
        self._ensure_loaded()
        return self._working.model_copy(deep=True)

    def get(self, draft_id: str) -> Optional[RequestDraft]:
        for draft in self._drafts:
            if draft.id == draft_id:
                return draft
        return None

    # ------------------------------------------------------------- lifecycle

    def load(self) -> Tuple[List[RequestDraft], str]:
        """Restore drafts from storage, or start with one default draft."""
        drafts = self._read_persisted()
        self._drafts = drafts
        self._active_id = None
        self._loaded = True

        if not drafts:
            self.logger.info("No saved drafts, creating a default one")
            draft = self._new_draft()
            self._drafts.append(draft)
            self._activate(draft)
            self.persist()
        else:
            self.logger.info(f"Restored {len(drafts)} drafts")
            self._activate(drafts[0])

        return list(self._drafts), self._active_id

    def create_draft(self) -> RequestDraft:
        """Append a new draft and make it active."""
        self._ensure_loaded()
        self.flush(self._active_id, self._working)

        draft = self._new_draft()
        self._drafts.append(draft)
        self._activate(draft)
        self.persist()

        self.logger.info(f"Created draft {draft.id} ({draft.name})")
        return draft

    def switch_active(self, draft_id: str) -> bool:
        """Flush the outgoing edit buffer, then hydrate ``draft_id``."""
        self._ensure_loaded()
        if self.get(draft_id) is None:
            return False

        self.flush(self._active_id, self._working)
        self.hydrate(draft_id)
        return True

    def flush(self, draft_id: str, fields: DraftFields) -> bool:
        """First phase of a switch: persist the outgoing buffer."""
        return self.save(draft_id, fields)

    def hydrate(self, draft_id: str) -> Optional[DraftFields]:
        """Second phase of a switch: load ``draft_id`` into the edit buffer."""
        draft = self.get(draft_id)
        if draft is None:
            return None
        self._activate(draft)
        return self.working

    def rename(self, draft_id: str, new_name: str) -> bool:
        self._ensure_loaded()
        draft = self.get(draft_id)
        name = (new_name or "").strip()
        if draft is None or not name:
            return False

        draft.name = name
        self.persist()
        return True

    def delete(self, draft_id: str) -> bool:
        """Remove a draft; the last remaining one can never be removed."""
        self._ensure_loaded()
        draft = self.get(draft_id)
        if draft is None or len(self._drafts) <= 1:
            return False

        self._drafts.remove(draft)
        if draft_id == self._active_id:
            self._activate(self._drafts[0])
        self.persist()

        self.logger.info(f"Deleted draft {draft_id}")
        return True

    def save(self, draft_id: str, fields: DraftFields) -> bool:
        """Overwrite the editable fields of ``draft_id`` and persist everything."""
        draft = self.get(draft_id)
        if draft is None:
            return False

        draft.apply(fields)
        if draft_id == self._active_id:
            self._working = draft.editable_fields()
        self.persist()
        return True

    def persist(self) -> bool:
        """Write the sanitized collection; response/error never leave memory."""
        payload = [
            draft.to_persisted().model_dump(mode="json", by_alias=True)
            for draft in self._drafts
        ]
        try:
            ok = self.storage.set(self.storage_key, json.dumps(payload, ensure_ascii=False))
        except Exception as e:
            self.logger.warning(f"Failed to persist drafts: {e}")
            return False

        if not ok:
            self.logger.warning("Storage rejected the draft collection; keeping it in memory")
        return ok

    # ----------------------------------------------------------------- edits

    def update_working(self, fields: DraftFields) -> DraftFields:
        """Replace the whole edit buffer."""
        self._ensure_loaded()
        self._working = fields.model_copy(deep=True)
        return self._commit_edit()

    def edit(self, **changes: Any) -> DraftFields:
        """Change ``path``, ``method`` and/or ``request_body`` of the active draft.

        Raises:
            ValueError: when a value does not validate (e.g. unknown method)
        """
        self._ensure_loaded()
        allowed = {"path", "method", "request_body"}
        unknown = set(changes) - allowed
        if unknown:
            raise ValueError(f"Unsupported fields: {', '.join(sorted(unknown))}")

        data = self._working.model_dump()
        data.update({k: v for k, v in changes.items() if v is not None})
        self._working = DraftFields.model_validate(data)
        return self._commit_edit()

    def add_param(self, rows: str) -> DraftFields:
        self._ensure_loaded()
        self._rows(rows).append(KeyValuePair())
        return self._commit_edit()

    def update_param(
        self,
        rows: str,
        index: int,
        key: Optional[str] = None,
        value: Optional[str] = None,
    ) -> bool:
        self._ensure_loaded()
        params = self._rows(rows)
        if not 0 <= index < len(params):
            return False

        if key is not None:
            params[index].key = key
        if value is not None:
            params[index].value = value
        self._commit_edit()
        return True

    def remove_param(self, rows: str, index: int) -> bool:
        """Remove one row; the editor always keeps at least one."""
        self._ensure_loaded()
        params = self._rows(rows)
        if len(params) <= 1 or not 0 <= index < len(params):
            return False

        del params[index]
        self._commit_edit()
        return True

    def refresh_token(self) -> bool:
        """Copy the current session token into every Authorization row."""
        self._ensure_loaded()
        token = self._session_token()
        if not token:
            return False

        for param in self._working.header_params:
            if param.key == AUTHORIZATION_HEADER:
                param.value = token
        self._commit_edit()
        return True

    # --------------------------------------------------------------- helpers

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.load()

    def _activate(self, draft: RequestDraft) -> None:
        self._active_id = draft.id
        self._working = draft.editable_fields()

    def _commit_edit(self) -> DraftFields:
        draft = self.get(self._active_id)
        if draft.state != ExecutionState.PENDING:
            draft.state = ExecutionState.IDLE
        self.save(self._active_id, self._working)
        return self.working

    def _rows(self, rows: str) -> List[KeyValuePair]:
        if rows not in (QUERY_ROWS, HEADER_ROWS):
            raise ValueError(f"Unknown parameter list: {rows}")
        return getattr(self._working, rows)

    def _session_token(self) -> Optional[str]:
        if self.token_provider is None:
            return None
        return self.token_provider.get_token()

    def _new_id(self) -> str:
        while True:
            draft_id = f"{DRAFT_ID_PREFIX}{uuid.uuid4().hex}"
            if self.get(draft_id) is None:
                return draft_id

    def _new_draft(self) -> RequestDraft:
        header_params = default_header_params()
        token = self._session_token()
        if token:
            header_params[0].value = token

        return RequestDraft(
            id=self._new_id(),
            name=DEFAULT_DRAFT_NAME.format(index=len(self._drafts) + 1),
            header_params=header_params,
        )

    def _read_persisted(self) -> List[RequestDraft]:
        try:
            raw = self.storage.get(self.storage_key)
        except Exception as e:
            self.logger.warning(f"Could not read saved drafts: {e}")
            return []
        if not raw:
            return []

        try:
            payload = json.loads(raw)
        except (TypeError, ValueError) as e:
            self.logger.warning(f"Saved drafts are not valid JSON, starting fresh: {e}")
            return []
        if not isinstance(payload, list):
            self.logger.warning("Saved drafts are not a list, starting fresh")
            return []

        drafts: List[RequestDraft] = []
        seen = set()
        for index, item in enumerate(payload):
            try:
                persisted = PersistedDraft.model_validate(item)
            except ValidationError as e:
                self.logger.warning(f"Skipping saved draft #{index}: {e.error_count()} errors")
                continue
            if persisted.id in seen:
                continue
            seen.add(persisted.id)
            drafts.append(RequestDraft.model_validate(persisted.model_dump()))
        return drafts
