from .base_tool import BaseTool

__all__ = ["BaseTool"]
