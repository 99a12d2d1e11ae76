# Request / response bodies for the chat endpoint.

from __future__ import annotations
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    message: Optional[str] = None
    prompt: Optional[str] = None  # accepted when "message" is absent
    # raw turns; malformed ones are dropped by generate.context
    history: List[Any] = Field(default_factory=list)
    mode: Optional[str] = None
    session_id: Optional[str] = Field(default=None, alias="sessionId")

    @field_validator("history", mode="before")
    @classmethod
    def _history_list(cls, v):
        return v if isinstance(v, list) else []

    @field_validator("mode", "session_id", mode="before")
    @classmethod
    def _opaque_str(cls, v):
        return v if isinstance(v, str) else None


class ChatReply(BaseModel):
    reply: str
    flagged: Optional[Literal["crisis"]] = None


class ErrorBody(BaseModel):
    error: str
