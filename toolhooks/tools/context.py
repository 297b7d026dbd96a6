from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HookContext:
    """Invocation context forwarded to tool hooks.

    agent_id / session_key are opaque identifiers used by plugins for
    scoping and telemetry. Either may be absent; absent values reach the
    hook runner as None.
    """

    agent_id: str | None = None
    session_key: str | None = None
