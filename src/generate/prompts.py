# Persona templates + prompt assembly.
# Personas live in personas.yaml and are read once per process.

from __future__ import annotations
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .types import Persona

PERSONAS_PATH = Path(__file__).resolve().parent / "personas.yaml"

OPEN_CHAT = "open_chat"
SUPPORTIVE = "supportive"

LANGUAGE_NAMES = {
    "en": "English",
    "tl": "Filipino",
    "es": "Spanish",
    "ko": "Korean",
    "zh": "Chinese",
    "hi": "Hindi",
    "th": "Thai",
    "mixed": "a mix of languages",
}


@lru_cache(maxsize=1)
def load_config(path: str = str(PERSONAS_PATH)) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not cfg.get("personas"):
        raise ValueError(f"No personas defined in {path}")
    return cfg


@lru_cache(maxsize=1)
def load_personas() -> Dict[str, Persona]:
    cfg = load_config()
    return {
        key: Persona(key=key, name=p.get("name", key), template=p["template"].strip())
        for key, p in cfg["personas"].items()
    }


def default_mode() -> str:
    return load_config().get("default_mode", OPEN_CHAT)


def resolve_mode(mode: Optional[str]) -> str:
    return mode if mode in load_personas() else default_mode()


def get_persona(mode: Optional[str]) -> Persona:
    return load_personas()[resolve_mode(mode)]


def fallback_reply() -> str:
    return load_config().get("fallback_reply", "Sorry, I lost my train of thought. Say that again?")


def build_prompt(mode: Optional[str], context: str, message: str, language: Optional[str] = None) -> str:
    persona = get_persona(mode)
    rule = load_config().get("language_rule", "").strip()
    hint = LANGUAGE_NAMES.get(language or "")
    if hint:
        rule += f"\nThe user seems to be writing in {hint} (heuristic guess, trust the message itself)."

    return f"""{persona.template}

{rule}

Conversation so far:
{context}

User: {message}

Talkio:"""
