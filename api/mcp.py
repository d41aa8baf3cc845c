from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Request

from tools.schemas import ToolCallResult, ToolDescriptor
from tools.server import MCPServer

router = APIRouter(prefix="/mcp", tags=["mcp"])


def get_server(request: Request) -> MCPServer:
    return request.app.state.mcp_server


@router.get("/tools", response_model=List[ToolDescriptor])
def list_tools(server: MCPServer = Depends(get_server)):
    return server.list_tools()


@router.post("/call/{tool_name}", response_model=ToolCallResult)
def call_tool(
    tool_name: str,
    arguments: Optional[Dict[str, Any]] = Body(default=None),
    server: MCPServer = Depends(get_server),
):
    return server.call_tool(tool_name, arguments)
