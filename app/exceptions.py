"""
Errors raised by the store. Mapped to HTTP responses in app.main:
VideoNotFoundError -> 404 (empty body). Body validation errors come from pydantic
(RequestValidationError -> 400 ErrorType).
"""


class VideoApiError(Exception):
    pass


class VideoNotFoundError(VideoApiError):
    def __init__(self, video_id):
        super().__init__(f"Video {video_id} not found")
        self.video_id = video_id
