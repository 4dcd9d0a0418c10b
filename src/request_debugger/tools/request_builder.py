# tools/request_builder.py

"""Pure helpers turning a draft's editable fields into an executable request."""

from typing import Dict, Iterable, Optional, Union
from urllib.parse import quote

from request_debugger.config.constants import BASE_REQUEST_HEADERS, URI_COMPONENT_SAFE
from request_debugger.schemas.draft import DraftFields, HttpMethod, KeyValuePair
from request_debugger.schemas.tools.request_executor import RequestDescriptor


def _encode_component(text: str) -> str:
    return quote(text, safe=URI_COMPONENT_SAFE)


def _active_rows(params: Iterable[KeyValuePair]):
    # Rows with a blank key stay in the editable list but are never sent
    return [param for param in params if param.key.strip() != ""]


def build_url(path: str, query_params: Iterable[KeyValuePair]) -> str:
    """Append the non-empty query rows to ``path`` in list order.

    Keys and values are percent-encoded independently; repeated keys are
    kept as separate pairs. ``&`` is used as the joiner when ``path``
    already carries a query string.
    """
    rows = _active_rows(query_params)
    if not rows:
        return path

    query_string = "&".join(
        f"{_encode_component(row.key)}={_encode_component(row.value)}" for row in rows
    )
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{query_string}"


def build_headers(header_params: Iterable[KeyValuePair]) -> Dict[str, str]:
    """Overlay the non-empty header rows on the base headers; later rows win.

    Header names are case-insensitive, so a row replaces any earlier entry
    whose name differs only in case and keeps its own spelling.
    """
    headers = dict(BASE_REQUEST_HEADERS)
    for row in _active_rows(header_params):
        for existing in [name for name in headers if name.lower() == row.key.lower()]:
            del headers[existing]
        headers[row.key] = row.value
    return headers


def build_body(method: Union[HttpMethod, str], request_body: str) -> Optional[str]:
    """GET never carries a body; other methods send the text untouched."""
    if not isinstance(method, HttpMethod):
        method = HttpMethod(method.strip().upper())
    if method == HttpMethod.GET:
        return None
    return request_body


def build_request(fields: DraftFields) -> RequestDescriptor:
    return RequestDescriptor(
        method=fields.method,
        url=build_url(fields.path, fields.query_params),
        headers=build_headers(fields.header_params),
        body=build_body(fields.method, fields.request_body),
    )
