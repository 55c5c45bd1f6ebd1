from dataclasses import dataclass
from typing import Optional, Type

from pydantic import BaseModel, Field

from thinktool.runtime.models import Context, Response, ToolCall

THINK_DESCRIPTION = """Use this tool to think about something.
It will not obtain new information or change anything, but just append the thought to the log.
Use it when complex reasoning or cache memory is needed."""


class ThinkArgs(BaseModel):
    thought: str = Field(..., description="a thought to record")


@dataclass
class ThinkSkill:
    name: str = "think"
    description: str = THINK_DESCRIPTION
    args_model: Optional[Type[BaseModel]] = ThinkArgs

    def run(self, call: ToolCall, ctx: Context) -> Response:
        thought = call.arguments.get("thought", "")
        echo = ctx.notebook.append(thought)
        return Response(text=f"Thought: {echo}", meta={"length": len(thought)})
