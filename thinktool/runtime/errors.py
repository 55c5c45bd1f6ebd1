# thinktool/runtime/errors.py
from __future__ import annotations

from typing import Any, Dict


class ThinkToolError(Exception):
    """Base error surfaced to the caller of a tool."""

    code: str = "ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message}


class InvalidInput(ThinkToolError):
    code = "INVALID_INPUT"


class EmptyState(ThinkToolError):
    code = "EMPTY_STATE"


class UnknownTool(ThinkToolError):
    code = "NOT_FOUND"
