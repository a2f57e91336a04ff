"""In-memory video record. Timestamps are kept as ISO-8601 strings (UTC, ms, Z suffix)."""
import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone


class AvailableResolution(str, enum.Enum):
    P144 = "P144"
    P240 = "P240"
    P360 = "P360"
    P480 = "P480"
    P720 = "P720"
    P1080 = "P1080"
    P1440 = "P1440"
    P2160 = "P2160"


def to_iso(dt: datetime) -> str:
    """2023-10-19T12:50:41.242Z"""
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class Video:
    id: int
    title: str
    author: str
    created_at: str
    publication_date: str
    can_be_downloaded: bool = False
    min_age_restriction: int | None = None
    available_resolutions: list[AvailableResolution] = field(default_factory=list)


# Fields an update may touch; id and created_at are fixed at creation
MUTABLE_FIELDS = (
    "title",
    "author",
    "can_be_downloaded",
    "min_age_restriction",
    "publication_date",
    "available_resolutions",
)


def demo_video() -> Video:
    """The record a fresh store starts with."""
    return Video(
        id=0,
        title="string",
        author="string",
        can_be_downloaded=True,
        min_age_restriction=None,
        created_at="2023-10-19T12:50:41.242Z",
        publication_date="2023-10-19T12:50:41.242Z",
        available_resolutions=[AvailableResolution.P144],
    )
