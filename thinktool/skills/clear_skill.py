from dataclasses import dataclass
from typing import Optional, Type

from pydantic import BaseModel

from thinktool.runtime.models import Context, Response, ToolCall

CLEARED_TEXT = "Thoughts cleared."


@dataclass
class ClearSkill:
    name: str = "clear_thoughts"
    description: str = (
        "Clear all recorded thoughts from the current session. "
        "Use this to start fresh if the thinking process needs to be reset."
    )
    args_model: Optional[Type[BaseModel]] = None

    def run(self, call: ToolCall, ctx: Context) -> Response:
        ctx.notebook.clear_all()
        return Response(text=CLEARED_TEXT)
