"""
In-memory video store: ordered list (insertion order) + strictly increasing id counter.
One instance per application (app.state.videos). FastAPI runs sync endpoints on a
thread pool, so every operation takes the same lock; update_by_id and remove_by_id
re-check the id under it, so a write never lands on a video deleted meanwhile.
"""
import itertools
import logging
import threading
from typing import Any

from app.exceptions import VideoNotFoundError
from app.models.video import MUTABLE_FIELDS, Video

logger = logging.getLogger(__name__)


class VideoStore:
    def __init__(self, videos: list[Video] | None = None):
        self._videos: list[Video] = list(videos or [])
        self._lock = threading.Lock()
        start = max((v.id for v in self._videos), default=-1) + 1
        self._ids = itertools.count(start)

    def next_id(self) -> int:
        with self._lock:
            return next(self._ids)

    def list_all(self) -> list[Video]:
        with self._lock:
            return list(self._videos)

    def _find(self, video_id: int) -> Video:
        for video in self._videos:
            if video.id == video_id:
                return video
        raise VideoNotFoundError(video_id)

    def get_by_id(self, video_id: int) -> Video:
        with self._lock:
            return self._find(video_id)

    def insert(self, video: Video) -> Video:
        """Append. Caller guarantees the id is unique (use next_id())."""
        with self._lock:
            self._videos.append(video)
        logger.info("Video %s created", video.id)
        return video

    def remove_by_id(self, video_id: int) -> None:
        with self._lock:
            self._videos.remove(self._find(video_id))
        logger.info("Video %s deleted", video_id)

    def clear(self) -> None:
        with self._lock:
            count = len(self._videos)
            self._videos.clear()
        logger.info("Video store cleared (%d removed)", count)

    def update_by_id(self, video_id: int, patch: dict[str, Any]) -> Video:
        """Apply patch in place. Only MUTABLE_FIELDS may be set."""
        unknown = set(patch) - set(MUTABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        with self._lock:
            video = self._find(video_id)
            for name, value in patch.items():
                setattr(video, name, value)
        logger.debug("Video %s updated: %s", video_id, ", ".join(patch))
        return video

    def __len__(self) -> int:
        with self._lock:
            return len(self._videos)
