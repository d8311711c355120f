"""
FastAPI web server for the reply analyzer form.

This module provides:
- The browser form at `/`
- JSON endpoints to edit reply settings and run an analysis
- Health check endpoint for monitoring
"""

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel
import uvicorn

from reply_auto.config.settings import load_config, load_environment
from reply_auto.errors import AnalysisInProgressError, ConfigurationError
from reply_auto.web.page import INDEX_HTML
from reply_auto.workflow.pipeline import AnalyzerSession

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Global analyzer session (settings live in memory only)
session = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup: load .env, resolve configuration once and create the session.
    """
    global session

    logger.info("Starting Reply Analyzer")
    load_environment()
    config = load_config()
    session = AnalyzerSession(config)
    if not config.has_api_key:
        logger.warning("OPENAI_API_KEY is not set; analysis requests will fail")
    logger.info("Service startup complete")

    yield

    logger.info("Service shutdown complete")


app = FastAPI(
    title="Reply Analyzer",
    description="Decide whether text deserves a reply using local rules and LLM classification",
    version="1.0.0",
    lifespan=lifespan
)


class ToggleRequest(BaseModel):
    setting: str


class TermRequest(BaseModel):
    term: str


class ModelRequest(BaseModel):
    model: str


class AnalyzeRequest(BaseModel):
    text: str = ""


def _session() -> AnalyzerSession:
    if not session:
        raise HTTPException(status_code=503, detail="Session not initialized")
    return session


@app.get("/", response_class=HTMLResponse)
async def index():
    """Serve the analyzer form."""
    return HTMLResponse(INDEX_HTML)


@app.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns:
        Service status and whether the OpenAI API key is configured.
    """
    if not session:
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "error": "Session not initialized"}
        )

    return {
        "status": "healthy",
        "service": "Reply Analyzer",
        "api_key_configured": session.config.has_api_key,
        "analyzing": session.is_analyzing,
    }


@app.get("/api/state")
async def get_state():
    return _session().snapshot()


@app.post("/api/settings/toggle")
async def toggle_setting(request: ToggleRequest):
    current = _session()
    try:
        current.store.toggle(request.setting)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return current.snapshot()


@app.post("/api/settings/keywords")
async def add_keyword(request: TermRequest):
    current = _session()
    current.store.add_keyword(request.term)
    return current.snapshot()


@app.delete("/api/settings/keywords/{index}")
async def remove_keyword(index: int):
    current = _session()
    current.store.remove_keyword(index)
    return current.snapshot()


@app.post("/api/settings/blocked-terms")
async def add_blocked_term(request: TermRequest):
    current = _session()
    current.store.add_blocked_term(request.term)
    return current.snapshot()


@app.delete("/api/settings/blocked-terms/{index}")
async def remove_blocked_term(index: int):
    current = _session()
    current.store.remove_blocked_term(index)
    return current.snapshot()


@app.put("/api/settings/model")
async def set_model(request: ModelRequest):
    current = _session()
    current.store.set_model(request.model)
    return current.snapshot()


@app.post("/api/settings/reset")
async def reset_settings():
    current = _session()
    current.store.reset()
    return current.snapshot()


@app.post("/api/analyze")
def analyze(request: AnalyzeRequest):
    """
    Analyze the submitted text with the current settings.

    Runs in the threadpool since the classifier call blocks. Only one
    analysis may run at a time.

    Returns:
        The session snapshot. Status 503 when the API key is missing, 502 when
        the classifier call or its answer failed, 409 while busy.
    """
    current = _session()
    try:
        result = current.analyze(request.text)
    except AnalysisInProgressError as e:
        raise HTTPException(status_code=409, detail=e.user_message)

    if result is None:
        status_code = 503 if isinstance(current.failure, ConfigurationError) else 502
        return JSONResponse(status_code=status_code, content=current.snapshot())
    return current.snapshot()


if __name__ == "__main__":
    port = int(os.getenv("PORT", 8080))

    logger.info(f"Starting server on port {port}")

    uvicorn.run(
        "app:app",
        host="0.0.0.0",
        port=port,
        log_level="info",
        access_log=True
    )
