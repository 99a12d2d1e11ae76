# Model client selection, driven by settings.MODEL_PROVIDER.

from .echo_dev_client import EchoDevClient


def build_model_client(settings):
    provider = (settings.MODEL_PROVIDER or "gemini").lower()
    if provider == "gemini":
        from .gemini_client import GeminiClient
        return GeminiClient(api_key=settings.GEMINI_API_KEY, model=settings.GEMINI_MODEL,
                            timeout=settings.REQUEST_TIMEOUT)
    if provider == "openai":
        from .openai_client import OpenAIClient
        return OpenAIClient(api_key=settings.OPENAI_API_KEY, model=settings.OPENAI_MODEL,
                            timeout=settings.REQUEST_TIMEOUT)
    if provider == "ollama":
        from .ollama_client import OllamaClient
        return OllamaClient(model=settings.OLLAMA_MODEL, host=settings.OLLAMA_HOST,
                            timeout=settings.REQUEST_TIMEOUT)
    if provider == "echo":
        return EchoDevClient()
    raise ValueError(f"Unknown MODEL_PROVIDER: {settings.MODEL_PROVIDER}")


__all__ = ["build_model_client", "EchoDevClient"]
