from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict

from thinktool.runtime.notebook import Notebook


@dataclass
class ToolCall:
    name: str
    arguments: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Response:
    text: str
    meta: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Context:
    """
    Minimal context passed around the router/skills.
    `notebook` is the one shared Notebook for the process.
    """
    notebook: Notebook
