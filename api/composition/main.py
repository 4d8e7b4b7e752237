from datetime import datetime, timezone

import requests
from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import PlainTextResponse

from .errors import FetchError
from .fetch.article import fetch_article
from .fetch.youtube import fetch_youtube
from .http import get_http_session
from .logs import get_logger, setup_logging
from .schemas import ArticleSummary, VideoSummary
from .settings import Settings, get_settings, settings

logger = get_logger(__name__)

MISSING_URL = "Missing URL Parameter"

app = FastAPI(title="Composition API")

@app.on_event("startup")
def startup_event():
    setup_logging(settings.LOG_LEVEL)

@app.exception_handler(FetchError)
def fetch_error_handler(request: Request, exc: FetchError):
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=500)

def _missing_url(path: str) -> PlainTextResponse:
    logger.info("%s called without url", path)
    return PlainTextResponse(MISSING_URL, status_code=400)

@app.get("/article", response_model=ArticleSummary)
def article(
    url: str | None = Query(None),
    session: requests.Session = Depends(get_http_session),
    cfg: Settings = Depends(get_settings),
):
    if not url:
        return _missing_url("/article")
    return fetch_article(url, session, cfg)

@app.get("/youtube", response_model=VideoSummary)
def youtube(
    url: str | None = Query(None),
    session: requests.Session = Depends(get_http_session),
    cfg: Settings = Depends(get_settings),
):
    if not url:
        return _missing_url("/youtube")
    return fetch_youtube(url, session, cfg)

@app.get("/healthz")
def healthz():
    return {"status": "ok", "time": datetime.now(timezone.utc).isoformat()}
