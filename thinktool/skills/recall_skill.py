from dataclasses import dataclass
from typing import Optional, Type

from pydantic import BaseModel

from thinktool.runtime.models import Context, Response, ToolCall


@dataclass
class RecallSkill:
    """Returns every recorded thought, oldest first."""

    name: str = "get_thoughts"
    description: str = (
        "Retrieve all thoughts recorded in the current session. "
        "This tool helps review the thinking process that has occurred so far."
    )
    args_model: Optional[Type[BaseModel]] = None

    def run(self, call: ToolCall, ctx: Context) -> Response:
        entries = ctx.notebook.list_all()
        return Response(text=ctx.notebook.render(entries), meta={"count": len(entries)})
