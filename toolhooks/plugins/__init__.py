from __future__ import annotations

from toolhooks.plugins.runner import HookRunner, PluginHookRunner
from toolhooks.plugins.types import (
    UNSET,
    BeforeToolCallEvent,
    BeforeToolCallResult,
    HookName,
    HookRegistration,
    ToolHookContext,
    ToolResultReceivedEvent,
    ToolResultReceivedResult,
)

__all__ = [
    "UNSET",
    "BeforeToolCallEvent",
    "BeforeToolCallResult",
    "HookName",
    "HookRegistration",
    "HookRunner",
    "PluginHookRunner",
    "ToolHookContext",
    "ToolResultReceivedEvent",
    "ToolResultReceivedResult",
]
