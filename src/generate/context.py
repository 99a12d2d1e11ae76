# Conversation context: filter caller history, keep the recent window,
# render as "User: ..." / "Talkio: ..." lines.

from __future__ import annotations
from typing import Any, Iterable, List, Optional

from .types import Message, ROLES

HISTORY_WINDOW = 10
EMPTY_CONTEXT = "(no prior messages)"
ROLE_LABELS = {"user": "User", "assistant": "Talkio"}


def _coerce(item: Any) -> Optional[Message]:
    if isinstance(item, Message):
        role, content = item.role, item.content
    elif isinstance(item, dict):
        role, content = item.get("role"), item.get("content")
    else:
        return None
    if role not in ROLES or not isinstance(content, str) or not content.strip():
        return None
    return item if isinstance(item, Message) else Message(role=role, content=content)


def recent_turns(history: Optional[Iterable[Any]], window: int = HISTORY_WINDOW) -> List[Message]:
    """Valid turns only, most recent `window`, oldest first."""
    if not history or isinstance(history, (str, bytes, dict)):
        return []
    turns = [m for m in (_coerce(h) for h in history) if m is not None]
    return turns[-window:] if window > 0 else []


def render_context(turns: Iterable[Message]) -> str:
    lines = [f"{ROLE_LABELS[m.role]}: {m.content}" for m in turns]
    return "\n".join(lines) or EMPTY_CONTEXT


def assemble_context(history: Optional[Iterable[Any]], window: int = HISTORY_WINDOW) -> str:
    return render_context(recent_turns(history, window))
