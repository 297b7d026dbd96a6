"""Plugin hook interception for agent tool calls."""

from __future__ import annotations

from toolhooks.agent.tool_hooks import (
    HookAllowed,
    HookBlocked,
    HookedTool,
    ToolHookInterceptor,
    ToolResultOutcome,
    wrap_tool_with_hooks,
)
from toolhooks.infra.errors import ToolBlockedError
from toolhooks.plugins.runner import HookRunner, PluginHookRunner
from toolhooks.tools.context import HookContext

__all__ = [
    "HookAllowed",
    "HookBlocked",
    "HookContext",
    "HookRunner",
    "HookedTool",
    "PluginHookRunner",
    "ToolBlockedError",
    "ToolHookInterceptor",
    "ToolResultOutcome",
    "wrap_tool_with_hooks",
]

__version__ = "0.1.0"
