# Ollama local inference over its REST API.

import requests
from typing import Any, Dict, Tuple
from ..types import ModelParams


class OllamaClient:
    def __init__(self, model: str = "mistral:7b-instruct", host: str = "http://localhost:11434",
                 timeout: float = 180):
        self.model = model
        self.host = host.rstrip("/")
        self.timeout = timeout

    def generate(self, prompt: str, params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        options: Dict[str, Any] = {"temperature": float(params.temperature or 0.7)}
        if params.max_tokens:
            options["num_predict"] = int(params.max_tokens)
        payload = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": options,
        }
        resp = requests.post(f"{self.host}/api/generate", json=payload, timeout=self.timeout)
        resp.raise_for_status()
        data = resp.json()
        return (data.get("response") or "").strip(), {"engine": "ollama", "model": self.model}
