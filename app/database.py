from fastapi import Request
from app.config import Settings, get_settings
from app.models.video import demo_video
from app.repositories.video_repository import VideoStore


def create_video_store(settings: Settings | None = None) -> VideoStore:
    settings = settings or get_settings()
    seed = [demo_video()] if settings.seed_demo_video else []
    return VideoStore(seed)


def get_video_store(request: Request) -> VideoStore:
    """One store per application, built in app.main.create_app()."""
    return request.app.state.videos
