from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from toolhooks.tools.base import BaseTool

if TYPE_CHECKING:
    from toolhooks.agent.tool_hooks import ToolHookInterceptor
    from toolhooks.tools.context import HookContext

logger = structlog.get_logger()


class ToolRegistry:
    """Registry for agent tools. Provides lookup and hook wrapping."""

    def __init__(self) -> None:
        self._tools: dict[str, BaseTool] = {}

    def register(self, tool: BaseTool) -> None:
        """Register a tool. Raises ValueError if name already registered."""
        if tool.name in self._tools:
            raise ValueError(f"Tool already registered: {tool.name}")
        self._tools[tool.name] = tool
        logger.info("tool_registered", tool_name=tool.name)

    def get(self, name: str) -> BaseTool | None:
        """Get a tool by name. Returns None if not found."""
        return self._tools.get(name)

    def list_tools(self) -> list[BaseTool]:
        """Return registered tools in registration order."""
        return list(self._tools.values())

    def get_tools_schema(self) -> list[dict]:
        """Return tools in OpenAI function calling format.

        Output format:
        [{"type": "function", "function": {"name": ..., "description": ..., "parameters": ...}}]
        """
        return [
            {
                "type": "function",
                "function": {
                    "name": tool.name,
                    "description": tool.description,
                    "parameters": tool.parameters,
                },
            }
            for tool in self._tools.values()
        ]

    def wrap_with_hooks(
        self,
        interceptor: ToolHookInterceptor,
        context: HookContext | None = None,
    ) -> list[BaseTool]:
        """Return every registered tool wrapped with before/after hooks.

        The registry keeps the unwrapped originals; wrapping is per agent run
        since context carries the run's agent_id / session_key.
        """
        return [interceptor.wrap(tool, context) for tool in self._tools.values()]
