from fastapi import APIRouter, Depends, Response, status
from app.database import get_video_store
from app.repositories.video_repository import VideoStore

router = APIRouter(prefix="/testing", tags=["testing"])


@router.delete("/all-data", status_code=status.HTTP_204_NO_CONTENT)
def delete_all_data(store: VideoStore = Depends(get_video_store)):
    """Wipe every video (test suites reset state with this)."""
    store.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
