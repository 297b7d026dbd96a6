"""before_tool_call / tool_result_received interception around tool execution.

Flow for a wrapped tool: before hook (may rewrite params or block) →
original execute (timed) → after hook (may rewrite result or block) → caller.

Hook runner failures never break a tool call: they are logged and the call
proceeds as if the hook had returned no verdict. Only a well-formed block
verdict stops a call, surfaced as ToolBlockedError.
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from toolhooks.infra.errors import ToolBlockedError
from toolhooks.infra.logging import get_subsystem_logger
from toolhooks.plugins.types import (
    UNSET,
    BeforeToolCallEvent,
    HookName,
    ToolHookContext,
    ToolResultReceivedEvent,
)
from toolhooks.tools.base import BaseTool, ProgressCallback, tool_display_name
from toolhooks.tools.policy import normalize_tool_name

if TYPE_CHECKING:
    from toolhooks.plugins.runner import HookRunner
    from toolhooks.tools.context import HookContext

DEFAULT_CALL_BLOCK_REASON = "Tool call blocked by plugin hook"
DEFAULT_RESULT_BLOCK_REASON = "Tool result blocked by plugin hook"


@dataclass(frozen=True)
class HookBlocked:
    """before_tool_call vetoed the call."""

    reason: str
    blocked: bool = True


@dataclass(frozen=True)
class HookAllowed:
    """before_tool_call let the call through with these params."""

    params: Any
    blocked: bool = False


BeforeToolCallOutcome = HookBlocked | HookAllowed


@dataclass(frozen=True)
class ToolResultOutcome:
    """Outcome of tool_result_received. result is the original when blocked."""

    blocked: bool
    result: Any
    reason: str | None = None


def is_plain_mapping(value: Any) -> bool:
    """True for key-value mappings; False for None, sequences, strings and scalars."""
    return isinstance(value, Mapping)


def _hook_context(tool_name: str, context: HookContext | None) -> ToolHookContext:
    return ToolHookContext(
        tool_name=tool_name,
        agent_id=context.agent_id if context else None,
        session_key=context.session_key if context else None,
    )


class ToolHookInterceptor:
    """Runs plugin hooks around tool calls.

    hook_runner may be None, which behaves exactly like a runner with no
    handlers registered. The interceptor holds no per-call state, so one
    instance can serve concurrent calls.
    """

    def __init__(self, hook_runner: HookRunner | None, *, logger: Any = None) -> None:
        self._hook_runner = hook_runner
        self._logger = logger if logger is not None else get_subsystem_logger("agents/tools")

    async def run_before_tool_call(
        self,
        tool_name: str,
        params: Any,
        call_id: str | None = None,
        context: HookContext | None = None,
    ) -> BeforeToolCallOutcome:
        """Give before_tool_call handlers a chance to rewrite or block params.

        Non-mapping params reach the hook as {} but are returned untouched
        unless the hook supplies replacement params.
        """
        runner = self._hook_runner
        if runner is None or not runner.has_hooks(HookName.before_tool_call):
            return HookAllowed(params=params)

        name = normalize_tool_name(tool_name or "tool")
        try:
            normalized_params = params if is_plain_mapping(params) else {}
            verdict = await runner.run_before_tool_call(
                BeforeToolCallEvent(tool_name=name, params=normalized_params),
                _hook_context(name, context),
            )

            if verdict is not None and verdict.block:
                return HookBlocked(reason=verdict.block_reason or DEFAULT_CALL_BLOCK_REASON)

            if verdict is not None and is_plain_mapping(verdict.params):
                if is_plain_mapping(params):
                    return HookAllowed(params={**params, **verdict.params})
                return HookAllowed(params=verdict.params)
        except Exception as e:
            self._logger.warning(
                "before_tool_call_hook_failed",
                tool_name=name,
                tool_call_id=call_id,
                error=str(e),
            )

        return HookAllowed(params=params)

    async def run_tool_result_received(
        self,
        tool_name: str,
        params: Any,
        result: Any,
        call_id: str | None = None,
        context: HookContext | None = None,
        duration_ms: float | None = None,
    ) -> ToolResultOutcome:
        """Give tool_result_received handlers a chance to replace or block a result."""
        runner = self._hook_runner
        if runner is None or not runner.has_hooks(HookName.tool_result_received):
            return ToolResultOutcome(blocked=False, result=result)

        name = normalize_tool_name(tool_name or "tool")
        try:
            verdict = await runner.run_tool_result_received(
                ToolResultReceivedEvent(
                    tool_name=name,
                    params=params,
                    result=result,
                    duration_ms=duration_ms,
                ),
                _hook_context(name, context),
            )

            if verdict is not None and verdict.block:
                return ToolResultOutcome(
                    blocked=True,
                    result=result,
                    reason=verdict.block_reason or DEFAULT_RESULT_BLOCK_REASON,
                )

            if verdict is not None and verdict.result is not UNSET:
                return ToolResultOutcome(blocked=False, result=verdict.result)
        except Exception as e:
            self._logger.warning(
                "tool_result_received_hook_failed",
                tool_name=name,
                tool_call_id=call_id,
                error=str(e),
            )

        return ToolResultOutcome(blocked=False, result=result)

    def wrap(self, tool: Any, context: HookContext | None = None) -> Any:
        """Return a tool whose execute runs through both hooks.

        Tools without a callable execute are returned as-is.
        """
        if not callable(getattr(tool, "execute", None)):
            return tool
        return HookedTool(tool, self, context)


class HookedTool(BaseTool):
    """A tool sharing another tool's identity, with hooks around execute.

    The wrapped tool is never mutated. Attributes other than execute are
    read through from it.
    """

    def __init__(
        self,
        tool: Any,
        interceptor: ToolHookInterceptor,
        context: HookContext | None = None,
    ) -> None:
        self._tool = tool
        self._interceptor = interceptor
        self._context = context

    @property
    def wrapped(self) -> Any:
        return self._tool

    @property
    def name(self) -> str:
        return getattr(self._tool, "name", "")

    @property
    def description(self) -> str:
        return getattr(self._tool, "description", "")

    @property
    def parameters(self) -> dict:
        return getattr(self._tool, "parameters", {"type": "object", "properties": {}})

    def __getattr__(self, attr: str) -> Any:
        # Only reached for attributes HookedTool does not define itself.
        if attr.startswith("__") or attr in ("_tool", "_interceptor", "_context"):
            raise AttributeError(attr)
        return getattr(self._tool, attr)

    async def execute(
        self,
        call_id: str,
        params: Any,
        signal: Any = None,
        on_update: ProgressCallback | None = None,
    ) -> Any:
        tool_name = tool_display_name(self._tool)

        before = await self._interceptor.run_before_tool_call(
            tool_name, params, call_id, self._context
        )
        if before.blocked:
            raise ToolBlockedError(before.reason, stage=HookName.before_tool_call.value)

        # Only the tool's own execution is timed, hook overhead excluded.
        started = time.perf_counter()
        result = await self._tool.execute(call_id, before.params, signal, on_update)
        duration_ms = (time.perf_counter() - started) * 1000

        after = await self._interceptor.run_tool_result_received(
            tool_name,
            before.params,
            result,
            call_id,
            self._context,
            duration_ms,
        )
        if after.blocked:
            raise ToolBlockedError(after.reason, stage=HookName.tool_result_received.value)

        return after.result


def wrap_tool_with_hooks(
    tool: Any,
    hook_runner: HookRunner | None,
    context: HookContext | None = None,
    *,
    logger: Any = None,
) -> Any:
    """Shortcut for ToolHookInterceptor(hook_runner, logger=logger).wrap(tool, context)."""
    return ToolHookInterceptor(hook_runner, logger=logger).wrap(tool, context)
