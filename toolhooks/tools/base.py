from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

ProgressCallback = Callable[[Any], None]

DEFAULT_TOOL_NAME = "tool"


class BaseTool(ABC):
    """Abstract base class for agent tools."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique tool name used in function calling."""
        ...

    @property
    def description(self) -> str:
        """Human-readable description of what the tool does."""
        return ""

    @property
    def parameters(self) -> dict:
        """JSON Schema describing the tool's input parameters."""
        return {"type": "object", "properties": {}}

    @abstractmethod
    async def execute(
        self,
        call_id: str,
        params: Any,
        signal: Any = None,
        on_update: ProgressCallback | None = None,
    ) -> Any:
        """Execute the tool.

        signal is an opaque cancellation signal (usually an asyncio.Event)
        owned by the caller. on_update receives partial results while the
        tool is still running.
        """
        ...


def tool_display_name(tool: Any) -> str:
    """Return the tool's name, falling back to "tool" when it has none."""
    return getattr(tool, "name", None) or DEFAULT_TOOL_NAME
