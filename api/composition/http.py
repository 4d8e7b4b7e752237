from typing import Iterator

import requests

USER_AGENT = "composition-api/0.1"

def get_http_session() -> Iterator[requests.Session]:
    s = requests.Session()
    s.headers["User-Agent"] = USER_AGENT
    try:
        yield s
    finally:
        s.close()
