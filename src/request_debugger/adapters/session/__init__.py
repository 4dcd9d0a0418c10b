from .token_providers import StaticTokenProvider, StorageTokenProvider

__all__ = ["StaticTokenProvider", "StorageTokenProvider"]
