from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

class Decoded(BaseModel):
    """Lenient decode target: unknown keys are ignored, missing or null keys
    fall back to the field's zero value."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

# Published shapes

class ArticleSummary(Decoded):
    excerpt: str = ""
    title: str = ""
    url: str = ""
    date_published: str = ""

class VideoSummary(BaseModel):
    title: str
    url: str
    author_name: str
    thumbnail: str
    date_published: str
    description: str

# YouTube Data API v3 videos.list (part=snippet)

class PageInfo(Decoded):
    total_results: int = Field(0, alias="totalResults")
    results_per_page: int = Field(0, alias="resultsPerPage")

class Thumbnail(Decoded):
    url: str = ""
    width: int = 0
    height: int = 0

class Thumbnails(Decoded):
    default: Thumbnail = Field(default_factory=Thumbnail)
    medium: Thumbnail = Field(default_factory=Thumbnail)
    high: Thumbnail = Field(default_factory=Thumbnail)

class Localized(Decoded):
    title: str = ""
    description: str = ""

class Snippet(Decoded):
    published_at: str = Field("", alias="publishedAt")
    channel_id: str = Field("", alias="channelId")
    title: str = ""
    description: str = ""
    thumbnails: Thumbnails = Field(default_factory=Thumbnails)
    channel_title: str = Field("", alias="channelTitle")
    tags: List[str] = Field(default_factory=list)
    category_id: str = Field("", alias="categoryId")
    live_broadcast_content: str = Field("", alias="liveBroadcastContent")
    default_language: str = Field("", alias="defaultLanguage")
    localized: Localized = Field(default_factory=Localized)

class VideoItem(Decoded):
    kind: str = ""
    etag: str = ""
    id: str = ""
    snippet: Snippet = Field(default_factory=Snippet)

class RawVideoApiResponse(Decoded):
    kind: str = ""
    etag: str = ""
    page_info: PageInfo = Field(default_factory=PageInfo, alias="pageInfo")
    items: List[VideoItem] = Field(default_factory=list)
