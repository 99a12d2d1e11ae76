# Reply pipeline for one chat request:
#   validate -> greeting -> crisis (message, history) -> context + prompt
#   -> model call -> shaped reply
# Only the model call touches the outside world.

from __future__ import annotations
import logging
import random
import re
from typing import Any, Iterable, Optional

from src.safety import Verdict, classify, classify_crisis, crisis_reply, detect_language
from src.safety.types import CRISIS, GREETING
from src.safety.greetings import Chooser
from .context import HISTORY_WINDOW, recent_turns, render_context
from .errors import InvalidInput, MissingCredential, ProviderFailure, TalkioError
from .prompts import build_prompt, fallback_reply, resolve_mode
from .types import ModelParams, ReplyResult

logger = logging.getLogger("talkio.chat")

_USER_LINE = re.compile(r"^user\s*:\s*", re.IGNORECASE)


def _raw_text(message: Any, prompt: Any = None) -> str:
    for candidate in (message, prompt):
        if isinstance(candidate, str) and candidate.strip():
            return candidate.strip()
    return ""


def extract_message(message: Any, prompt: Any = None) -> str:
    """Pick `message`, else `prompt`; keep the last "User:" line of a pasted transcript."""
    raw = _raw_text(message, prompt)
    lines = [l.strip() for l in raw.split("\n") if l.strip()]
    user_lines = [l for l in lines if _USER_LINE.match(l)]
    if user_lines:
        raw = _USER_LINE.sub("", user_lines[-1]).strip()
    if not raw:
        raise InvalidInput()
    return raw


class ReplyOrchestrator:
    def __init__(
        self,
        model_client,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        history_window: int = HISTORY_WINDOW,
        crisis_region: str = "PH",
        chooser: Chooser = random.choice,
    ):
        self.model_client = model_client
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.history_window = history_window
        self.crisis_region = crisis_region
        self.chooser = chooser

    def reply(
        self,
        message: Any,
        prompt: Any = None,
        history: Optional[Iterable[Any]] = None,
        mode: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> ReplyResult:
        audit = {"mode": mode or "-", "session": session_id or "-", "history": 0, "language": "-"}
        try:
            mode = resolve_mode(mode)
            audit["mode"] = mode
            text = extract_message(message, prompt)
            turns = recent_turns(history, self.history_window)
            audit["history"] = len(turns)
            audit["language"] = detect_language(text).value
            result = self._reply(_raw_text(message, prompt), text, turns, mode, audit["language"])
        except InvalidInput:
            self._log("invalid", audit, logging.WARNING)
            raise
        except MissingCredential as e:
            self._log("error", audit, logging.ERROR, reason=e.message)
            raise
        except ProviderFailure:
            self._log("error", audit, logging.ERROR, exc_info=True)
            raise
        except Exception as e:
            self._log("error", audit, logging.ERROR, exc_info=True)
            raise TalkioError() from e
        self._log(result.outcome, audit)
        return result

    def _reply(self, raw: str, text: str, turns, mode: str, language: str) -> ReplyResult:
        # a pasted transcript is screened whole before the extracted line is
        if raw != text and classify_crisis(raw):
            return ReplyResult(text=crisis_reply(self.crisis_region), flagged=CRISIS, outcome=CRISIS)

        verdict: Verdict = classify(text, turns, chooser=self.chooser, region=self.crisis_region,
                                    window=self.history_window)
        if verdict.kind == GREETING:
            return ReplyResult(text=verdict.reply, outcome=GREETING)
        if verdict.kind == CRISIS:
            return ReplyResult(text=verdict.reply, flagged=CRISIS, outcome=CRISIS)

        full_prompt = build_prompt(mode, render_context(turns), text, language=language)
        params = ModelParams(temperature=self.temperature, max_tokens=self.max_tokens)
        try:
            out, _meta = self.model_client.generate(full_prompt, params)
        except MissingCredential:
            raise
        except Exception as e:
            raise ProviderFailure() from e

        reply = (out or "").strip() if isinstance(out, str) else ""
        return ReplyResult(text=reply or fallback_reply(), outcome="normal")

    def _log(self, outcome: str, audit: dict, level: int = logging.INFO, reason: str = "", exc_info=False):
        # never includes message content
        logger.log(
            level,
            "chat outcome=%s mode=%s language=%s history=%d session=%s%s",
            outcome, audit["mode"], audit["language"], audit["history"], audit["session"],
            f" reason={reason!r}" if reason else "",
            exc_info=exc_info,
        )
