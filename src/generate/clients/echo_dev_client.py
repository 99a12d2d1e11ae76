# Offline client for local dev and tests: echoes the last user line.

from typing import Any, Dict, Tuple
from ..types import ModelParams


class EchoDevClient:
    def __init__(self):
        self.model = "echo-dev"

    def generate(self, prompt: str, params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        user_lines = [l for l in prompt.splitlines() if l.startswith("User: ")]
        last = user_lines[-1][len("User: "):] if user_lines else "(no user input)"
        text = f"[ECHO RESPONSE] {last}"
        meta = {"engine": "echo", "model": self.model, "temp": params.temperature}
        return text, meta
