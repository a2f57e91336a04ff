import re
from fastapi import APIRouter, Depends, Response, status
from app.database import get_video_store
from app.exceptions import VideoNotFoundError
from app.models.video import Video
from app.repositories.video_repository import VideoStore
from app.schemas.video import ErrorResponse, VideoCreate, VideoResponse, VideoUpdate
from app.services.video_service import create_video, update_video

router = APIRouter(prefix="/videos", tags=["videos"])

VIDEO_ID_PATTERN = re.compile(r"-?[0-9]+")


def _parse_id(video_id: str) -> int:
    """Only plain decimal ids can match a video; anything else is a 404."""
    if not VIDEO_ID_PATTERN.fullmatch(video_id):
        raise VideoNotFoundError(video_id)
    return int(video_id)


def get_existing_video_id(video_id: str, store: VideoStore = Depends(get_video_store)) -> int:
    """Resolved before the body is validated, so a missing video is 404 whatever the body."""
    parsed = _parse_id(video_id)
    store.get_by_id(parsed)
    return parsed


def _to_response(video: Video) -> VideoResponse:
    return VideoResponse(
        id=video.id,
        title=video.title,
        author=video.author,
        can_be_downloaded=video.can_be_downloaded,
        min_age_restriction=video.min_age_restriction,
        created_at=video.created_at,
        publication_date=video.publication_date,
        available_resolutions=video.available_resolutions,
    )


@router.get("", response_model=list[VideoResponse])
def list_videos(store: VideoStore = Depends(get_video_store)):
    return [_to_response(v) for v in store.list_all()]


@router.get("/{video_id}", response_model=VideoResponse, responses={404: {"description": "Not found"}})
def get_video(video_id: str, store: VideoStore = Depends(get_video_store)):
    return _to_response(store.get_by_id(_parse_id(video_id)))


@router.post(
    "",
    response_model=VideoResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def post_video(body: VideoCreate, store: VideoStore = Depends(get_video_store)):
    return _to_response(create_video(store, body))


@router.put(
    "/{video_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={400: {"model": ErrorResponse}, 404: {"description": "Not found"}},
)
def put_video(
    body: VideoUpdate,
    existing_id: int = Depends(get_existing_video_id),
    store: VideoStore = Depends(get_video_store),
):
    update_video(store, existing_id, body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{video_id}", status_code=status.HTTP_204_NO_CONTENT, responses={404: {"description": "Not found"}})
def delete_video(video_id: str, store: VideoStore = Depends(get_video_store)):
    store.remove_by_id(_parse_id(video_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_all_videos(store: VideoStore = Depends(get_video_store)):
    """Same as DELETE /testing/all-data."""
    store.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
