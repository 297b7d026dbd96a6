"""Payload and verdict types exchanged between tool hooks and plugin handlers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class HookName(StrEnum):
    """Plugin hook events around a tool call."""

    before_tool_call = "before_tool_call"
    tool_result_received = "tool_result_received"


class _Unset:
    """Marker for "no replacement offered" where None is a legitimate value."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(frozen=True)
class ToolHookContext:
    """Context passed alongside every tool hook event."""

    tool_name: str
    agent_id: str | None = None
    session_key: str | None = None


@dataclass(frozen=True)
class BeforeToolCallEvent:
    """Payload for before_tool_call. params is always a mapping here."""

    tool_name: str
    params: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ToolResultReceivedEvent:
    """Payload for tool_result_received."""

    tool_name: str
    params: Any
    result: Any
    duration_ms: float | None = None


@dataclass
class BeforeToolCallResult:
    """Verdict from a before_tool_call handler.

    params, when a mapping, is shallow-merged over the caller's params.
    """

    params: dict[str, Any] | None = None
    block: bool = False
    block_reason: str | None = None


@dataclass
class ToolResultReceivedResult:
    """Verdict from a tool_result_received handler.

    result replaces the tool's output verbatim unless left UNSET; None, 0,
    "" and False are all honored as replacements.
    """

    result: Any = UNSET
    block: bool = False
    block_reason: str | None = None


# Handlers may be sync or async; they return a verdict or None.
BeforeToolCallHandler = Callable[[BeforeToolCallEvent, ToolHookContext], Any]
ToolResultReceivedHandler = Callable[[ToolResultReceivedEvent, ToolHookContext], Any]
HookHandler = Callable[..., Any]


@dataclass(frozen=True)
class HookRegistration:
    """A handler registered for one hook event by one plugin."""

    hook_name: HookName
    handler: HookHandler
    plugin_id: str = "anonymous"
    priority: int = 0
