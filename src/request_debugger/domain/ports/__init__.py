from .session_token_provider import SessionTokenProvider

__all__ = ["SessionTokenProvider"]
