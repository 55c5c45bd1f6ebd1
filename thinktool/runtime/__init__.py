from .errors import EmptyState, InvalidInput, ThinkToolError, UnknownTool
from .notebook import Entry, Notebook
from .models import Context, Response, ToolCall

__all__ = [
    "Context",
    "EmptyState",
    "Entry",
    "InvalidInput",
    "Notebook",
    "Response",
    "ThinkToolError",
    "ToolCall",
    "UnknownTool",
]
