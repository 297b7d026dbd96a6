"""Plugin hook runner: stores registered handlers and executes them per event.

Handlers for an event run sequentially, highest priority first. Each may
return a verdict (or None); verdicts are folded into one merged verdict that
the tool hook layer interprets.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Protocol

from toolhooks.infra.errors import HookHandlerError
from toolhooks.infra.logging import get_subsystem_logger
from toolhooks.plugins.types import (
    UNSET,
    BeforeToolCallEvent,
    BeforeToolCallHandler,
    BeforeToolCallResult,
    HookHandler,
    HookName,
    HookRegistration,
    ToolHookContext,
    ToolResultReceivedEvent,
    ToolResultReceivedHandler,
    ToolResultReceivedResult,
)

if TYPE_CHECKING:
    from toolhooks.config.settings import HookSettings


class HookRunner(Protocol):
    """What the tool hook layer needs from a hook runner."""

    def has_hooks(self, hook_name: str) -> bool: ...

    async def run_before_tool_call(
        self, event: BeforeToolCallEvent, ctx: ToolHookContext
    ) -> BeforeToolCallResult | None: ...

    async def run_tool_result_received(
        self, event: ToolResultReceivedEvent, ctx: ToolHookContext
    ) -> ToolResultReceivedResult | None: ...


def _merge_before_tool_call(
    acc: BeforeToolCallResult | None, nxt: BeforeToolCallResult
) -> BeforeToolCallResult:
    if acc is None:
        return BeforeToolCallResult(
            params=nxt.params, block=nxt.block, block_reason=nxt.block_reason
        )
    return BeforeToolCallResult(
        params=nxt.params if nxt.params is not None else acc.params,
        block=acc.block or nxt.block,
        block_reason=nxt.block_reason or acc.block_reason,
    )


def _merge_tool_result_received(
    acc: ToolResultReceivedResult | None, nxt: ToolResultReceivedResult
) -> ToolResultReceivedResult:
    if acc is None:
        return ToolResultReceivedResult(
            result=nxt.result, block=nxt.block, block_reason=nxt.block_reason
        )
    return ToolResultReceivedResult(
        result=nxt.result if nxt.result is not UNSET else acc.result,
        block=acc.block or nxt.block,
        block_reason=nxt.block_reason or acc.block_reason,
    )


class PluginHookRunner:
    """In-process hook runner backed by a per-event handler list.

    catch_errors=True logs a failing handler and moves on to the next one.
    catch_errors=False raises HookHandlerError from the first failure.
    """

    def __init__(self, *, catch_errors: bool = True, logger: Any = None) -> None:
        self._catch_errors = catch_errors
        self._logger = logger if logger is not None else get_subsystem_logger("plugins")
        self._registrations: dict[HookName, list[HookRegistration]] = {
            name: [] for name in HookName
        }

    @classmethod
    def from_settings(cls, settings: HookSettings, *, logger: Any = None) -> PluginHookRunner:
        return cls(catch_errors=settings.catch_errors, logger=logger)

    def register(
        self,
        hook_name: HookName | str,
        handler: HookHandler,
        *,
        plugin_id: str = "anonymous",
        priority: int = 0,
    ) -> HookRegistration:
        """Register a handler. Raises ValueError for unknown hook names."""
        name = HookName(hook_name)
        registration = HookRegistration(
            hook_name=name, handler=handler, plugin_id=plugin_id, priority=priority
        )
        self._registrations[name].append(registration)
        # Stable sort keeps registration order among equal priorities.
        self._registrations[name].sort(key=lambda r: r.priority, reverse=True)
        self._logger.debug(
            "hook_registered", hook_name=name.value, plugin_id=plugin_id, priority=priority
        )
        return registration

    def unregister(self, hook_name: HookName | str, handler: HookHandler) -> bool:
        """Remove every registration of handler for hook_name. True if any was removed."""
        name = HookName(hook_name)
        before = self._registrations[name]
        after = [r for r in before if r.handler is not handler]
        self._registrations[name] = after
        return len(after) < len(before)

    def has_hooks(self, hook_name: HookName | str) -> bool:
        return self.get_hook_count(hook_name) > 0

    def get_hook_count(self, hook_name: HookName | str) -> int:
        try:
            name = HookName(hook_name)
        except ValueError:
            return 0
        return len(self._registrations[name])

    async def run_before_tool_call(
        self, event: BeforeToolCallEvent, ctx: ToolHookContext
    ) -> BeforeToolCallResult | None:
        merged: BeforeToolCallResult | None = None
        for registration in self._registrations[HookName.before_tool_call]:
            handler: BeforeToolCallHandler = registration.handler
            verdict = await self._call_handler(
                registration, handler, event, ctx, BeforeToolCallResult
            )
            if verdict is None:
                continue
            merged = _merge_before_tool_call(merged, verdict)
            if merged.block:
                break
        return merged

    async def run_tool_result_received(
        self, event: ToolResultReceivedEvent, ctx: ToolHookContext
    ) -> ToolResultReceivedResult | None:
        merged: ToolResultReceivedResult | None = None
        for registration in self._registrations[HookName.tool_result_received]:
            handler: ToolResultReceivedHandler = registration.handler
            verdict = await self._call_handler(
                registration, handler, event, ctx, ToolResultReceivedResult
            )
            if verdict is None:
                continue
            merged = _merge_tool_result_received(merged, verdict)
            if merged.block:
                break
        return merged

    async def _call_handler(
        self,
        registration: HookRegistration,
        handler: HookHandler,
        event: Any,
        ctx: ToolHookContext,
        verdict_type: type,
    ) -> Any:
        try:
            verdict = handler(event, ctx)
            if inspect.isawaitable(verdict):
                verdict = await verdict
            if verdict is not None and not isinstance(verdict, verdict_type):
                raise TypeError(
                    f"expected {verdict_type.__name__} or None, "
                    f"got {type(verdict).__name__}"
                )
            return verdict
        except Exception as e:
            if not self._catch_errors:
                raise HookHandlerError(
                    f"{registration.hook_name.value} handler from "
                    f"{registration.plugin_id} failed: {e}",
                    hook_name=registration.hook_name.value,
                    plugin_id=registration.plugin_id,
                ) from e
            self._logger.error(
                "hook_handler_failed",
                hook_name=registration.hook_name.value,
                plugin_id=registration.plugin_id,
                error=str(e),
            )
            return None
