from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from thinktool.runtime.errors import InvalidInput, UnknownTool
from thinktool.runtime.event_logger import EventLogger
from thinktool.runtime.models import Context, Response, ToolCall
from thinktool.runtime.notebook import Notebook
from thinktool.skills.base import Skill


def _describe_validation(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "arguments"
        parts.append(f"{loc}: {err.get('msg', 'invalid')}")
    return "invalid arguments (" + "; ".join(parts) + ")"


class Router:
    def __init__(
        self,
        skills: List[Skill],
        notebook: Optional[Notebook] = None,
        events: Optional[EventLogger] = None,
    ):
        if not skills:
            raise ValueError("Router requires at least one skill")
        self.skills: Dict[str, Skill] = {}
        for skill in skills:
            if skill.name in self.skills:
                raise ValueError(f"duplicate skill name: {skill.name}")
            self.skills[skill.name] = skill
        self.ctx = Context(notebook=notebook if notebook is not None else Notebook())
        self.events = events or EventLogger()

    @property
    def notebook(self) -> Notebook:
        return self.ctx.notebook

    def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> Response:
        return self.handle(ToolCall(name=name, arguments=dict(arguments or {})))

    def handle(self, call: ToolCall) -> Response:
        with self.events.span("tool", tool=call.name) as ev:
            skill = self.skills.get(call.name)
            if skill is None:
                raise UnknownTool(f"unknown tool: {call.name}")
            call = self._validate(skill, call)
            resp = skill.run(call, self.ctx)
            ev.update(resp.meta)
            return resp

    # ---------- helpers ----------
    def _validate(self, skill: Skill, call: ToolCall) -> ToolCall:
        model = skill.args_model
        if model is None:
            return call
        try:
            parsed = model.model_validate(call.arguments)
        except ValidationError as e:
            raise InvalidInput(_describe_validation(e)) from e
        return ToolCall(name=call.name, arguments=parsed.model_dump())
