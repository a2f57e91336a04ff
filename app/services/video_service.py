"""Create/update logic behind the videos router. Bodies arrive already validated by pydantic."""
from datetime import datetime, timedelta, timezone

from app.models.video import Video, to_iso
from app.repositories.video_repository import VideoStore
from app.schemas.video import VideoCreate, VideoUpdate

PUBLICATION_DELAY = timedelta(days=1)


def create_video(store: VideoStore, body: VideoCreate, now: datetime | None = None) -> Video:
    created_at = now or datetime.now(timezone.utc)
    video = Video(
        id=store.next_id(),
        title=body.title,
        author=body.author,
        can_be_downloaded=False,
        min_age_restriction=None,
        created_at=to_iso(created_at),
        publication_date=to_iso(created_at + PUBLICATION_DELAY),
        available_resolutions=body.available_resolutions,
    )
    return store.insert(video)


def update_video(store: VideoStore, video_id: int, body: VideoUpdate) -> Video:
    """
    Merge rules:
    - title, author, availableResolutions: always overwritten
    - canBeDownloaded: null/absent -> False
    - minAgeRestriction: kept when null
    - publicationDate: kept unless a non-empty string
    Raises VideoNotFoundError if the video was deleted after the lookup.
    """
    patch = {
        "title": body.title,
        "author": body.author,
        "available_resolutions": body.available_resolutions,
        "can_be_downloaded": bool(body.can_be_downloaded),
    }
    if body.min_age_restriction is not None:
        patch["min_age_restriction"] = body.min_age_restriction
    if body.publication_date:
        patch["publication_date"] = body.publication_date
    return store.update_by_id(video_id, patch)
