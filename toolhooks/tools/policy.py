from __future__ import annotations

TOOL_NAME_ALIASES: dict[str, str] = {
    "bash": "exec",
    "apply-patch": "apply_patch",
}


def normalize_tool_name(name: str) -> str:
    """Canonicalize a tool name for hook payloads and policy lookups.

    Lowercases, strips surrounding whitespace and resolves known aliases.
    Never raises; an empty input yields an empty string.
    """
    normalized = (name or "").strip().lower()
    return TOOL_NAME_ALIASES.get(normalized, normalized)
