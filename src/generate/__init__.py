# Generate package
# Context assembly, persona prompts, model clients and the reply pipeline.

from .orchestrator import ReplyOrchestrator, extract_message
from .context import assemble_context, recent_turns
from .prompts import build_prompt, get_persona
from .types import Message, ModelParams, Persona, ReplyResult
from .errors import TalkioError, InvalidInput, MissingCredential, ProviderFailure
from .clients import build_model_client, EchoDevClient

__all__ = [
    "ReplyOrchestrator", "extract_message", "assemble_context", "recent_turns",
    "build_prompt", "get_persona", "Message", "ModelParams", "Persona", "ReplyResult",
    "TalkioError", "InvalidInput", "MissingCredential", "ProviderFailure",
    "build_model_client", "EchoDevClient",
]
