from app.models.video import Video, AvailableResolution

__all__ = ["Video", "AvailableResolution"]
