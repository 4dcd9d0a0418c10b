from .request_executor import (
    RequestDescriptor,
    RequestExecutorInput,
    RequestExecutorOutput,
)

__all__ = [
    "RequestDescriptor",
    "RequestExecutorInput",
    "RequestExecutorOutput",
]
