# Google Generative Language API (generateContent) over plain REST.

import requests
from typing import Any, Dict, Optional, Tuple
from ..errors import MissingCredential
from ..types import ModelParams

GEMINI_HOST = "https://generativelanguage.googleapis.com/v1beta"


class GeminiError(RuntimeError):
    pass


class GeminiClient:
    def __init__(self, api_key: Optional[str], model: str = "gemini-2.5-flash", timeout: float = 60,
                 host: str = GEMINI_HOST):
        self.api_key = api_key
        self.model = model.removeprefix("models/")
        self.timeout = timeout
        self.host = host.rstrip("/")

    def generate(self, prompt: str, params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        if not self.api_key:
            raise MissingCredential("GEMINI_API_KEY")

        config: Dict[str, Any] = {"temperature": params.temperature if params.temperature is not None else 0.7}
        if params.max_tokens:
            config["maxOutputTokens"] = params.max_tokens
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": config,
        }
        url = f"{self.host}/models/{self.model}:generateContent"
        resp = requests.post(url, headers={"x-goog-api-key": self.api_key}, json=payload, timeout=self.timeout)
        resp.raise_for_status()
        data = resp.json()

        if data.get("error"):
            raise GeminiError(str(data["error"]))
        candidates = data.get("candidates") or []
        if not candidates:
            # blocked prompts come back without candidates
            feedback = data.get("promptFeedback", {})
            raise GeminiError(f"No candidates returned: {feedback.get('blockReason', 'unknown')}")

        parts = (candidates[0].get("content") or {}).get("parts") or []
        text = "".join(p.get("text", "") for p in parts).strip()
        meta = {"engine": "gemini", "model": self.model, "finish_reason": candidates[0].get("finishReason")}
        return text, meta
