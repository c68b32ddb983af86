"""Status API - liveness endpoints for the Daily Updates bot.

Served by uvicorn on the bot's own event loop (see bot.py), or standalone:
Run with: uvicorn status_api.main:app --port 4000
"""

import asyncio
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI
from fastapi.responses import JSONResponse

app = FastAPI(
    title="Daily Updates Bot",
    description="Liveness endpoints for the Daily Updates bot",
    version="1.0.0"
)


def is_healthy() -> bool:
    """True while an asyncio event loop is running in this thread."""
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


# ============================================================
# Health Check
# ============================================================

@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": "Daily Updates Bot",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    if not is_healthy():
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return {"status": "ok"}


def build_server(host: str, port: int) -> uvicorn.Server:
    """uvicorn server for this app that can be awaited on an existing loop."""
    config = uvicorn.Config(app, host=host, port=port, log_level="warning")
    return uvicorn.Server(config)
