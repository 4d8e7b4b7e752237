from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    MERCURY_URL: str = "https://mercury.postlight.com/parser"
    MERCURY_TOKEN: str = ""

    YOUTUBE_API_URL: str = "https://www.googleapis.com/youtube/v3/videos"
    YOUTUBE_TOKEN: str = ""

    # None keeps the requests default (no timeout)
    HTTP_TIMEOUT: float | None = None

    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    LOG_LEVEL: str = "INFO"

settings = Settings()

def get_settings() -> Settings:
    return settings
