# OpenAI Chat Completions; the prompt goes in as a single user turn.

from typing import Any, Dict, Optional, Tuple
from openai import OpenAI
from ..errors import MissingCredential
from ..types import ModelParams


class OpenAIClient:
    def __init__(self, api_key: Optional[str], model: str = "gpt-4o-mini", timeout: float = 60):
        self.model = model
        self.client = OpenAI(api_key=api_key, timeout=timeout) if api_key else None

    def generate(self, prompt: str, params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        if self.client is None:
            raise MissingCredential("OPENAI_API_KEY")
        kwargs: Dict[str, Any] = {}
        if params.max_tokens:
            kwargs["max_tokens"] = params.max_tokens
        resp = self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=params.temperature if params.temperature is not None else 0.7,
            **kwargs,
        )
        text = (resp.choices[0].message.content or "").strip()
        meta = {"engine": "openai", "model": self.model}
        return text, meta
