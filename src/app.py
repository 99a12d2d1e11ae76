# ============================================================
# Talkio FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - Greeting / crisis gate ahead of any model call
#   - Persona prompt + recent conversation context
#   - Gemini, OpenAI, Ollama or Echo clients
# ============================================================

from functools import lru_cache

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# --- Local imports ---
from src.settings import settings, configure_logging
from src.schemas import ChatRequest, ChatReply, ErrorBody
from src.generate import ReplyOrchestrator, TalkioError, InvalidInput, build_model_client

configure_logging()

# ------------------------------------------------------------
# 🔧 Reply pipeline (one per process, no per-request state)
# ------------------------------------------------------------
@lru_cache(maxsize=1)
def get_orchestrator() -> ReplyOrchestrator:
    return ReplyOrchestrator(
        model_client=build_model_client(settings),
        temperature=settings.TEMPERATURE,
        max_tokens=settings.MAX_TOKENS,
        history_window=settings.HISTORY_WINDOW,
        crisis_region=settings.CRISIS_REGION,
    )

# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title="Talkio API", version="0.3")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["POST", "OPTIONS", "GET"],
    allow_headers=["Content-Type", "Authorization"],
)

# ------------------------------------------------------------
# ⚠️ Errors -> {"error": ...}
# ------------------------------------------------------------
@app.exception_handler(TalkioError)
def talkio_error(request: Request, exc: TalkioError):
    return JSONResponse(status_code=exc.status_code, content=ErrorBody(error=exc.message).model_dump())

@app.exception_handler(RequestValidationError)
def invalid_body(request: Request, exc: RequestValidationError):
    err = InvalidInput()
    return JSONResponse(status_code=err.status_code, content=ErrorBody(error=err.message).model_dump())

# ------------------------------------------------------------
# 💬 Main chat route
# ------------------------------------------------------------
ERROR_RESPONSES = {400: {"model": ErrorBody}, 500: {"model": ErrorBody}}

@app.post("/api/chat", response_model=ChatReply, response_model_exclude_none=True, responses=ERROR_RESPONSES)
@app.post("/chat", response_model=ChatReply, response_model_exclude_none=True, responses=ERROR_RESPONSES)
def chat(req: ChatRequest, orchestrator: ReplyOrchestrator = Depends(get_orchestrator)):
    out = orchestrator.reply(
        message=req.message,
        prompt=req.prompt,
        history=req.history,
        mode=req.mode,
        session_id=req.session_id,
    )
    return ChatReply(reply=out.text, flagged=out.flagged)

# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.app_name,
        "provider": settings.MODEL_PROVIDER,
    }

@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}

@app.get("/")
def hello():
    return {"message": "Talkio service running."}
