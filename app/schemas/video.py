from typing import Annotated
from pydantic import AfterValidator, BaseModel, BeforeValidator, Field, StrictBool
from pydantic.alias_generators import to_camel
from app.models.video import AvailableResolution

TITLE_MAX_LENGTH = 40
AUTHOR_MAX_LENGTH = 20


def _trimmed_length(max_length: int):
    """1..max_length characters after trim; the value itself is kept as sent."""
    def check(value: str) -> str:
        if not 0 < len(value.strip()) <= max_length:
            raise ValueError(f"must be 1-{max_length} characters")
        return value
    return check


def _list_or_empty(value):
    # anything but a non-empty list means "no resolutions"
    return value if isinstance(value, list) and value else []


def _unique(values: list[AvailableResolution]) -> list[AvailableResolution]:
    return list(dict.fromkeys(values))


def _whole_number(value):
    # JSON has one number type: 12.0 is 12
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


Resolutions = Annotated[
    list[AvailableResolution],
    BeforeValidator(_list_or_empty),
    AfterValidator(_unique),
]
AgeRestriction = Annotated[int, Field(ge=0, le=18, strict=True), BeforeValidator(_whole_number)]


class VideoCreate(BaseModel):
    title: Annotated[str, AfterValidator(_trimmed_length(TITLE_MAX_LENGTH))]
    author: Annotated[str, AfterValidator(_trimmed_length(AUTHOR_MAX_LENGTH))]
    available_resolutions: Resolutions = Field(default_factory=list)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class VideoUpdate(VideoCreate):
    can_be_downloaded: StrictBool | None = None
    min_age_restriction: AgeRestriction | None = None
    publication_date: str | None = None


class VideoResponse(BaseModel):
    id: int
    title: str
    author: str
    can_be_downloaded: bool
    min_age_restriction: int | None
    created_at: str
    publication_date: str
    available_resolutions: list[AvailableResolution]

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ErrorMessage(BaseModel):
    message: str
    field: str


class ErrorResponse(BaseModel):
    errorsMessages: list[ErrorMessage]
