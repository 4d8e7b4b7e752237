import requests

from ..logs import get_logger
from ..schemas import ArticleSummary
from ..settings import Settings
from . import upstream

logger = get_logger(__name__)

def fetch_article(url: str, session: requests.Session, settings: Settings) -> ArticleSummary:
    """Run `url` through the Mercury parser and keep the summary fields."""
    logger.info("Mercury: parsing %s", url)
    # requests percent-encodes the article URL as a query value
    r = upstream.get(
        session,
        settings.MERCURY_URL,
        params={"url": url},
        headers={"x-api-key": settings.MERCURY_TOKEN},
        timeout=settings.HTTP_TIMEOUT,
    )
    return upstream.decode(r, ArticleSummary)
