from fastapi import FastAPI

from api.mcp import router as mcp_router
from core.client import FreepikClient
from core.config import ProcessConfig
from core.log import configure_logging
from tools.server import MCPServer


def create_app(server: MCPServer) -> FastAPI:
    app = FastAPI(title="Freepik MCP API")
    app.state.mcp_server = server
    app.include_router(mcp_router)
    return app


def app_from_env() -> FastAPI:
    """Factory for `uvicorn --factory api.main:app_from_env`."""
    config = ProcessConfig.from_env()
    configure_logging(config.log_level)
    return create_app(MCPServer(client=FreepikClient(config)))
