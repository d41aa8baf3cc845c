import time
from typing import Any, Dict, List, Mapping, Optional

import structlog

from core.client import FreepikClient
from core.errors import UnknownToolError
from tools.base import MCPTool
from tools.registry import TOOL_REGISTRY
from tools.schemas import ToolCallResult, ToolDescriptor

log = structlog.get_logger()


class MCPServer:
    """
    MCP logical server: catalog plus dispatcher.
    Transport-free; stdio and HTTP front-ends both delegate here.
    """

    def __init__(
        self,
        client: FreepikClient,
        registry: Optional[Mapping[str, MCPTool]] = None,
    ) -> None:
        self._client = client
        self._registry = registry if registry is not None else TOOL_REGISTRY

    def list_tools(self) -> List[ToolDescriptor]:
        return [
            ToolDescriptor.model_validate(tool.schema())
            for tool in self._registry.values()
        ]

    def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolCallResult:
        """
        Run one tool call. Never raises: every failure comes back as
        a single `Error: ...` text block.
        """
        started = time.perf_counter()
        log.info("tool.called", tool=name)
        try:
            tool = self._registry.get(name)
            if tool is None:
                raise UnknownToolError(name)

            args = tool.validate(arguments)
            text = tool.execute(args, self._client)
        except Exception as exc:
            log.warning(
                "tool.failed",
                tool=name,
                error=str(exc),
                elapsed_ms=_elapsed_ms(started),
            )
            return ToolCallResult.of_text(f"Error: {exc}")

        log.info("tool.completed", tool=name, elapsed_ms=_elapsed_ms(started))
        return ToolCallResult.of_text(text)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 1)
