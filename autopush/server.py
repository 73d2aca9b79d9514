import asyncio
import json
from datetime import datetime
from pathlib import Path

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from . import __version__
from .config import Settings
from .errors import ConfigError
from .runner import run_workflow


class AutoPushMCPServer:

    def __init__(self):
        self._server = Server("autopush")
        self._register_handlers()

    def _register_handlers(self):
        self._server.list_tools()(self._list_tools)
        self._server.call_tool()(self._call_tool)

    async def _list_tools(self) -> list[Tool]:
        return [
            Tool(
                name="commit_and_push",
                description=(
                    "Stage every change in a git working tree, commit it with a "
                    "generated conventional commit message and push it. Retries the "
                    "push once with -u origin <branch> when no upstream is set."
                ),
                inputSchema={
                    "type": "object",
                    "properties": {
                        "project_path": {
                            "type": "string",
                            "description": "Absolute path to the git working tree"
                        }
                    },
                    "required": ["project_path"]
                }
            ),
            Tool(
                name="health_check",
                description="Returns server status, timestamp and version.",
                inputSchema={"type": "object", "properties": {}}
            ),
        ]

    async def _call_tool(self, name: str, arguments: dict) -> list[TextContent]:
        if name == "commit_and_push":
            # git calls block, keep them off the event loop
            return await asyncio.to_thread(self._handle_commit_and_push, arguments)
        if name == "health_check":
            return self._handle_health_check(arguments)
        return [TextContent(type="text", text=f"Unknown tool: {name}")]

    def _handle_commit_and_push(self, arguments: dict) -> list[TextContent]:
        project_path = Path(arguments["project_path"])
        if not project_path.is_dir():
            return self._error(f"Not a directory: {project_path}")

        try:
            settings = Settings.load(project_path)
        except ConfigError as e:
            return self._error(str(e))

        result = run_workflow(project_path, settings)
        return [TextContent(type="text", text=json.dumps(result.to_dict(), indent=2))]

    def _handle_health_check(self, arguments: dict) -> list[TextContent]:
        """Returns server status."""
        result = {
            "status": "ok",
            "timestamp": datetime.now().isoformat(),
            "version": __version__,
        }
        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    @staticmethod
    def _error(message: str) -> list[TextContent]:
        return [TextContent(type="text", text=json.dumps({"status": "error", "error": message}, indent=2))]

    async def run(self):
        async with stdio_server() as (read_stream, write_stream):
            await self._server.run(read_stream, write_stream, self._server.create_initialization_options())


def main():
    server = AutoPushMCPServer()
    asyncio.run(server.run())


if __name__ == "__main__":
    main()
