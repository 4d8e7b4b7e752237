class FetchError(Exception):
    """Any failure while fetching or reshaping upstream content.

    The message is what the caller sees as the plain-text 500 body.
    """

class UpstreamTransportError(FetchError):
    pass

class UpstreamStatusError(FetchError):
    def __init__(self, status_code: int, url: str):
        self.status_code = status_code
        super().__init__(f"Upstream returned HTTP {status_code} for {url}")

class DecodeError(FetchError):
    pass

class MissingVideoIdError(FetchError):
    def __init__(self, message: str = "Missing video ID"):
        super().__init__(message)

class VideoNotFoundError(FetchError):
    def __init__(self, message: str = "Could Not Find Video"):
        super().__init__(message)
