"""Resource and request payloads exchanged with the videos API."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Generic, Literal, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def id_from_uri(uri: str | None) -> int:
    """Parse the last "/"-separated segment of a resource URI as an integer.

    Returns 0 when the URI is absent or that segment is not plain ASCII digits
    (so a trailing slash also yields 0).
    """
    if not uri:
        return 0
    tail = uri.rsplit("/", 1)[-1]
    if not (tail.isascii() and tail.isdigit()):
        return 0
    return int(tail)


class Resource(BaseModel):
    """Common base for decoded API resources."""

    model_config = ConfigDict(extra="ignore")

    uri: str | None = None

    def get_id(self) -> int:
        return id_from_uri(self.uri)


class RequestModel(BaseModel):
    """Base for caller-supplied write payloads; unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


# ---------------------------------------------------------------------- #
# Resources
# ---------------------------------------------------------------------- #


class PictureSize(BaseModel):
    width: int | None = None
    height: int | None = None
    link: str | None = None
    link_with_play_button: str | None = None


class Pictures(Resource):
    active: bool | None = None
    type: str | None = None
    link: str | None = None
    resource_key: str | None = None
    sizes: list[PictureSize] = Field(default_factory=list)


class Privacy(BaseModel):
    view: str | None = None
    embed: str | None = None
    download: bool | None = None
    add: bool | None = None
    comments: str | None = None


class UploadInfo(BaseModel):
    """Upload ticket details the server attaches to a freshly created video."""

    status: str | None = None
    upload_link: str | None = None
    approach: str | None = None
    size: int | None = None
    form: str | None = None
    redirect_url: str | None = None
    link: str | None = None


class TranscodeInfo(BaseModel):
    status: str | None = None


class User(Resource):
    name: str | None = None
    link: str | None = None
    location: str | None = None
    bio: str | None = None
    created_time: datetime | None = None
    account: str | None = None
    resource_key: str | None = None


class Tag(Resource):
    name: str | None = None
    tag: str | None = None
    canonical: str | None = None
    resource_key: str | None = None
    metadata: dict[str, Any] | None = None


class Category(Resource):
    name: str | None = None
    link: str | None = None
    top_level: bool | None = None
    resource_key: str | None = None


class Video(Resource):
    name: str | None = None
    description: str | None = None
    link: str | None = None
    duration: int | None = None
    width: int | None = None
    height: int | None = None
    language: str | None = None
    license: str | None = None
    content_rating: list[str] | None = None
    created_time: datetime | None = None
    modified_time: datetime | None = None
    release_time: datetime | None = None
    privacy: Privacy | None = None
    pictures: Pictures | None = None
    tags: list[Tag] | None = None
    categories: list[Category] | None = None
    stats: dict[str, Any] | None = None
    user: User | None = None
    status: str | None = None
    resource_key: str | None = None
    upload: UploadInfo | None = None
    transcode: TranscodeInfo | None = None


class Comment(Resource):
    type: str | None = None
    text: str | None = None
    created_on: datetime | None = None
    user: User | None = None
    metadata: dict[str, Any] | None = None


class Credit(Resource):
    name: str | None = None
    role: str | None = None
    user: User | None = None
    video: Video | None = None


class Preset(Resource):
    name: str | None = None
    created_time: datetime | None = None
    settings: dict[str, Any] | None = None


class Domain(Resource):
    domain: str | None = None
    allow_hd: bool | None = None
    created_time: datetime | None = None


class TextTrack(Resource):
    active: bool | None = None
    type: str | None = None
    language: str | None = None
    link: str | None = None
    name: str | None = None
    hls_link: str | None = None


# ---------------------------------------------------------------------- #
# Requests
# ---------------------------------------------------------------------- #


class PrivacyRequest(RequestModel):
    view: str | None = None
    embed: str | None = None
    download: bool | None = None
    add: bool | None = None
    comments: str | None = None


class VideoRequest(RequestModel):
    name: str | None = None
    description: str | None = None
    license: str | None = None
    privacy: PrivacyRequest | None = None
    password: str | None = None
    review_link: bool | None = None
    locale: str | None = None
    content_rating: list[str] | None = None
    embed: dict[str, Any] | None = None


class CommentRequest(RequestModel):
    text: str | None = None


class CreditRequest(RequestModel):
    role: str | None = None
    name: str | None = None
    email: str | None = None
    user_uri: str | None = None


class PicturesRequest(RequestModel):
    time: float | None = None
    active: bool | None = None


class TextTrackRequest(RequestModel):
    active: bool | None = None
    type: str | None = None
    language: str | None = None
    name: str | None = None


class TagRequest(RequestModel):
    name: str


class TusUpload(RequestModel):
    """Resumable upload: the server hands back an upload link for ``size`` bytes."""

    approach: Literal["tus"] = "tus"
    size: int = Field(ge=0)


class PullUpload(RequestModel):
    """The server fetches the file itself from ``link``."""

    approach: Literal["pull"] = "pull"
    link: str


UploadDescriptor = Annotated[Union[TusUpload, PullUpload], Field(discriminator="approach")]


class UploadVideoRequest(RequestModel):
    name: str | None = None
    description: str | None = None
    privacy: PrivacyRequest | None = None
    upload: UploadDescriptor | None = None


# ---------------------------------------------------------------------- #
# Pagination
# ---------------------------------------------------------------------- #

ItemT = TypeVar("ItemT", bound=BaseModel)


class Paging(BaseModel):
    next: str | None = None
    previous: str | None = None
    first: str | None = None
    last: str | None = None


class Page(BaseModel, Generic[ItemT]):
    """Paginated list envelope; a missing ``data`` key decodes as an empty list."""

    model_config = ConfigDict(extra="ignore")

    data: list[ItemT] = Field(default_factory=list)
    total: int | None = None
    page: int | None = None
    per_page: int | None = None
    paging: Paging | None = None

    @field_validator("data", mode="before")
    @classmethod
    def _null_data(cls, value: Any) -> Any:
        return [] if value is None else value


__all__ = [
    "Category",
    "Comment",
    "CommentRequest",
    "Credit",
    "CreditRequest",
    "Domain",
    "Page",
    "Paging",
    "PictureSize",
    "Pictures",
    "PicturesRequest",
    "Preset",
    "Privacy",
    "PrivacyRequest",
    "PullUpload",
    "Resource",
    "Tag",
    "TagRequest",
    "TextTrack",
    "TextTrackRequest",
    "TusUpload",
    "UploadInfo",
    "UploadDescriptor",
    "UploadVideoRequest",
    "User",
    "Video",
    "VideoRequest",
    "id_from_uri",
]
