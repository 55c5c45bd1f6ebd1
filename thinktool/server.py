# thinktool/server.py
from __future__ import annotations

from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from thinktool.config import Settings
from thinktool.runtime.notebook import Notebook
from thinktool.runtime.router import Router
from thinktool.skills import default_skills


def build_router(settings: Settings, notebook: Optional[Notebook] = None) -> Router:
    if notebook is None:
        notebook = Notebook(echo_limit=settings.THINKTOOL_ECHO_LIMIT)
    return Router(default_skills(), notebook=notebook)


def build_server(settings: Optional[Settings] = None, router: Optional[Router] = None) -> FastMCP:
    """
    Wire the three tools onto a FastMCP server.
    One Router (and so one Notebook) backs every call for the life of the process.
    """
    if settings is None:
        settings = Settings()
    if router is None:
        router = build_router(settings)
    skills = router.skills

    mcp = FastMCP(settings.THINKTOOL_SERVER_NAME, log_level=settings.THINKTOOL_LOG_LEVEL)
    # reported to clients in the initialize handshake
    mcp._mcp_server.version = settings.THINKTOOL_SERVER_VERSION

    @mcp.tool(name="think", description=skills["think"].description)
    def think(thought: Annotated[str, Field(description="a thought to record")]) -> str:
        return router.dispatch("think", {"thought": thought}).text

    @mcp.tool(name="get_thoughts", description=skills["get_thoughts"].description)
    def get_thoughts() -> str:
        return router.dispatch("get_thoughts").text

    @mcp.tool(name="clear_thoughts", description=skills["clear_thoughts"].description)
    def clear_thoughts() -> str:
        return router.dispatch("clear_thoughts").text

    return mcp
