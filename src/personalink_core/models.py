from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class LinkCategory(StrEnum):
    PROJECT_REPOSITORY = "project_repository"
    WEBSITE = "website"
    BOOK = "book"
    YOUTUBE_VIDEO = "youtube_video"
    YOUTUBE_PLAYLIST = "youtube_playlist"
    LEARNING = "learning"
    OTHER = "other"


class IconTag(StrEnum):
    """
    Abstract icon classification for a link.

    The display layer maps each tag to its own visuals.
    """

    REPOSITORY = "repository"
    VIDEO = "video"
    PLAYLIST = "playlist"
    BOOK = "book"
    COURSE = "course"
    WEBSITE = "website"
    CIRCUIT = "circuit"
    ASSISTANT = "assistant"
    LINK = "link"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class LinkRecord:
    id: str
    title: str
    url: str
    category: LinkCategory
    created_at: datetime
    icon_tag: IconTag = IconTag.UNCLASSIFIED
    author: str | None = None
    description: str | None = None
    popularity: int = 0
    is_new: bool = False


@dataclass(frozen=True)
class RawSuggestion:
    title: str
    url: str
    category: LinkCategory | str
    author: str | None = None
    description: str | None = None
    icon_keywords: str | None = None  # free-text hint for the icon classifier


@dataclass(frozen=True)
class ExistingLinkRef:
    title: str
    url: str

    @classmethod
    def from_record(cls, record: LinkRecord) -> ExistingLinkRef:
        return cls(title=record.title, url=record.url)
