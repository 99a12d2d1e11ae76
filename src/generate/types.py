# Typed records shared across the generate modules.

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

ROLES = ("user", "assistant")


@dataclass(frozen=True)
class Message:
    """Single chat turn: user or assistant."""
    role: str
    content: str


@dataclass(frozen=True)
class Persona:
    """Static tone / behavior block selected by mode."""
    key: str
    name: str
    template: str


@dataclass
class ModelParams:
    """LLM parameters per request."""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


@dataclass(frozen=True)
class ReplyResult:
    """What the caller gets back. `outcome` is for the audit log only."""
    text: str
    flagged: Optional[str] = None
    outcome: str = "normal"
