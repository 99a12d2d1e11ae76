# Verdict of the pre-model gate.

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

GREETING = "greeting"
CRISIS = "crisis"
PASS = "pass"


@dataclass(frozen=True)
class Verdict:
    """Greeting(reply), Crisis(reply) or Pass; reply is None only for Pass."""
    kind: str
    reply: Optional[str] = None

    @classmethod
    def greeting(cls, reply: str) -> "Verdict":
        return cls(GREETING, reply)

    @classmethod
    def crisis(cls, reply: str) -> "Verdict":
        return cls(CRISIS, reply)

    @classmethod
    def passthrough(cls) -> "Verdict":
        return cls(PASS)

