from typing import Any, Dict, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from ..errors import DecodeError, UpstreamStatusError, UpstreamTransportError
from ..logs import get_logger

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)

def get(session: requests.Session, url: str, params: Dict[str, str],
        headers: Optional[Dict[str, str]] = None, timeout: Optional[float] = None):
    """Issue a GET and return the response; only 2xx responses come back."""
    try:
        r = session.get(url, params=params, headers=headers or {}, timeout=timeout)
    except requests.RequestException as e:
        # requests puts the full query string (API keys included) in str(e)
        msg = f"GET {url} failed: {type(e).__name__}"
        logger.warning(msg)
        raise UpstreamTransportError(msg) from e
    if not 200 <= r.status_code < 300:
        logger.warning("GET %s returned HTTP %s", url, r.status_code)
        raise UpstreamStatusError(r.status_code, url)
    return r

def decode(r, model: Type[M]) -> M:
    try:
        data: Any = r.json()
    except ValueError as e:
        raise DecodeError(f"invalid JSON from upstream: {e}") from e
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"unexpected upstream payload: {e}") from e
