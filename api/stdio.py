import sys
from typing import Any, Dict, List, Optional

import anyio
import mcp.types as types
import structlog
from anyio import to_thread
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from core.client import FreepikClient
from core.config import ProcessConfig
from core.errors import InvalidSettingError, MissingApiKeyError
from core.log import configure_logging
from tools.server import MCPServer

SERVER_NAME = "freepik-mcp"
SERVER_VERSION = "1.0.0"

log = structlog.get_logger()


def build_server(dispatcher: MCPServer) -> Server:
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.input_schema,
            )
            for tool in dispatcher.list_tools()
        ]

    # Arguments are validated by the dispatcher so errors keep the `Error: ...` form.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        result = await to_thread.run_sync(dispatcher.call_tool, name, arguments)
        return [types.TextContent(type="text", text=block.text) for block in result.content]

    return server


async def serve(dispatcher: MCPServer) -> None:
    server = build_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        log.info("server.starting", name=SERVER_NAME, transport="stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    configure_logging()
    try:
        config = ProcessConfig.from_env()
    except MissingApiKeyError as exc:
        log.error("config.missing_api_key", error=str(exc))
        sys.exit(1)
    except InvalidSettingError as exc:
        log.error("config.invalid", variable=exc.variable, error=str(exc))
        sys.exit(1)

    configure_logging(config.log_level)
    client = FreepikClient(config)
    try:
        anyio.run(serve, MCPServer(client=client))
    finally:
        client.close()


if __name__ == "__main__":
    main()
