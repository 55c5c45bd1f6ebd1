from __future__ import annotations

from typing import Optional, Protocol, Type

from pydantic import BaseModel

from thinktool.runtime.models import Context, Response, ToolCall


class Skill(Protocol):
    name: str
    description: str
    args_model: Optional[Type[BaseModel]]
    def run(self, call: ToolCall, ctx: Context) -> Response: ...
