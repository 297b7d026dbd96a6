"""Custom exception hierarchy for toolhooks.

All package-specific exceptions inherit from ToolHooksError,
which carries an error code callers can map onto tool result frames.
"""

from __future__ import annotations


class ToolHooksError(Exception):
    """Base exception for all toolhooks errors."""

    def __init__(self, message: str, *, code: str = "INTERNAL_ERROR") -> None:
        super().__init__(message)
        self.code = code


class ToolError(ToolHooksError):
    """Errors surfaced from a tool call."""

    def __init__(self, message: str, *, code: str = "TOOL_ERROR") -> None:
        super().__init__(message, code=code)


class ToolBlockedError(ToolError):
    """Tool call vetoed by a plugin hook.

    stage is the hook that issued the block: "before_tool_call" means the tool
    never ran, "tool_result_received" means it ran and its result was discarded.
    """

    def __init__(self, message: str, *, stage: str) -> None:
        super().__init__(message, code="TOOL_BLOCKED")
        self.stage = stage


class HookError(ToolHooksError):
    """Errors in the plugin hook runner."""

    def __init__(self, message: str, *, code: str = "HOOK_ERROR") -> None:
        super().__init__(message, code=code)


class HookHandlerError(HookError):
    """A registered hook handler raised while error catching was disabled."""

    def __init__(self, message: str, *, hook_name: str, plugin_id: str) -> None:
        super().__init__(message, code="HOOK_HANDLER_FAILED")
        self.hook_name = hook_name
        self.plugin_id = plugin_id
