from urllib.parse import parse_qs, urlsplit

import requests

from ..errors import MissingVideoIdError, VideoNotFoundError
from ..logs import get_logger
from ..schemas import RawVideoApiResponse, VideoSummary
from ..settings import Settings
from . import upstream

logger = get_logger(__name__)

def video_id_from_url(raw_url: str) -> str:
    """Return the first `v` query value of a watch URL."""
    try:
        query = urlsplit(raw_url).query
    except ValueError as e:
        raise MissingVideoIdError() from e
    values = parse_qs(query, keep_blank_values=True).get("v") or [""]
    if not values[0]:
        raise MissingVideoIdError()
    return values[0]

def fetch_youtube(raw_url: str, session: requests.Session, settings: Settings) -> VideoSummary:
    video_id = video_id_from_url(raw_url)
    logger.info("YouTube: looking up video %s", video_id)
    r = upstream.get(
        session,
        settings.YOUTUBE_API_URL,
        params={"part": "snippet", "id": video_id, "key": settings.YOUTUBE_TOKEN},
        timeout=settings.HTTP_TIMEOUT,
    )
    raw = upstream.decode(r, RawVideoApiResponse)
    if not raw.items:
        logger.warning("YouTube: no items for video %s", video_id)
        raise VideoNotFoundError()

    # Only the default-resolution thumbnail is published
    snippet = raw.items[0].snippet
    return VideoSummary(
        title=snippet.title,
        url=raw_url,
        author_name=snippet.channel_title,
        thumbnail=snippet.thumbnails.default.url,
        date_published=snippet.published_at,
        description=snippet.description,
    )
