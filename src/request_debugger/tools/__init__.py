from .request_builder import build_body, build_headers, build_request, build_url
from .request_executor import RequestExecutorTool, copy_response_to_text

__all__ = [
    "build_body",
    "build_headers",
    "build_request",
    "build_url",
    "RequestExecutorTool",
    "copy_response_to_text",
]
