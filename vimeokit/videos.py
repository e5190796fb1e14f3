"""Videos resource: videos plus their nested sub-resources and upload initiation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence
from urllib.parse import quote

from .models import (
    Category,
    Comment,
    CommentRequest,
    Credit,
    CreditRequest,
    Domain,
    Pictures,
    PicturesRequest,
    Preset,
    PullUpload,
    Tag,
    TagRequest,
    TextTrack,
    TextTrackRequest,
    TusUpload,
    UploadVideoRequest,
    User,
    Video,
    VideoRequest,
)
from .options import CallOption

if TYPE_CHECKING:
    from .client import Client, Response

logger = logging.getLogger(__name__)


def _segment(value: str | int) -> str:
    return quote(str(value), safe="")


def _video_path(video_id: int, *parts: str | int) -> str:
    return "/".join([f"/videos/{_segment(video_id)}", *(_segment(p) for p in parts)])


def _uploads_path(user_id: str | int | None) -> str:
    if user_id is None:
        return "/me/videos"
    return f"/users/{_segment(user_id)}/videos"


def create_upload(client: "Client", method: str, path: str, request: UploadVideoRequest) -> tuple[Video, "Response"]:
    """Initiate an upload; the returned video carries the server's upload ticket."""
    video, response = client.fetch(method, path, Video, body=request)
    logger.info(
        "Upload initiated at %s",
        path,
        extra={
            "event": "video.upload_initiated",
            "approach": request.upload.approach if request.upload else None,
            "video_uri": video.uri,
        },
    )
    return video, response


def _with_upload(request: UploadVideoRequest | None, upload: TusUpload | PullUpload) -> UploadVideoRequest:
    base = request or UploadVideoRequest()
    return base.model_copy(update={"upload": upload})


class VideosService:
    """Operations on ``/videos`` and its nested collections."""

    def __init__(self, client: "Client") -> None:
        self._client = client

    # ------------------------------------------------------------------ #
    # Videos
    # ------------------------------------------------------------------ #

    def list(self, *options: CallOption) -> tuple[list[Video], "Response"]:
        """Search public videos; combine with ``opt_query`` and paging options."""
        return self._client.fetch_list("/videos", Video, options=options)

    def get(self, video_id: int, *options: CallOption) -> tuple[Video, "Response"]:
        return self._client.fetch("GET", _video_path(video_id), Video, options=options)

    def edit(self, video_id: int, request: VideoRequest) -> tuple[Video, "Response"]:
        return self._client.fetch("PATCH", _video_path(video_id), Video, body=request)

    def delete(self, video_id: int) -> "Response":
        return self._client.send("DELETE", _video_path(video_id))

    def list_category(self, video_id: int, *options: CallOption) -> tuple[list[Category], "Response"]:
        return self._client.fetch_list(_video_path(video_id, "categories"), Category, options=options)

    def list_related_video(self, video_id: int, *options: CallOption) -> tuple[list[Video], "Response"]:
        return self._client.fetch_list(_video_path(video_id, "videos"), Video, options=options)

    # ------------------------------------------------------------------ #
    # Comments and replies
    # ------------------------------------------------------------------ #

    def list_comment(self, video_id: int, *options: CallOption) -> tuple[list[Comment], "Response"]:
        return self._client.fetch_list(_video_path(video_id, "comments"), Comment, options=options)

    def get_comment(self, video_id: int, comment_id: int, *options: CallOption) -> tuple[Comment, "Response"]:
        return self._client.fetch("GET", _video_path(video_id, "comments", comment_id), Comment, options=options)

    def add_comment(self, video_id: int, request: CommentRequest) -> tuple[Comment, "Response"]:
        return self._client.fetch("POST", _video_path(video_id, "comments"), Comment, body=request)

    def edit_comment(self, video_id: int, comment_id: int, request: CommentRequest) -> tuple[Comment, "Response"]:
        return self._client.fetch("PATCH", _video_path(video_id, "comments", comment_id), Comment, body=request)

    def delete_comment(self, video_id: int, comment_id: int) -> "Response":
        return self._client.send("DELETE", _video_path(video_id, "comments", comment_id))

    def list_replies(self, video_id: int, comment_id: int, *options: CallOption) -> tuple[list[Comment], "Response"]:
        return self._client.fetch_list(_video_path(video_id, "comments", comment_id, "replies"), Comment, options=options)

    def add_replies(self, video_id: int, comment_id: int, request: CommentRequest) -> tuple[Comment, "Response"]:
        return self._client.fetch("POST", _video_path(video_id, "comments", comment_id, "replies"), Comment, body=request)

    # ------------------------------------------------------------------ #
    # Credits
    # ------------------------------------------------------------------ #

    def list_credit(self, video_id: int, *options: CallOption) -> tuple[list[Credit], "Response"]:
        return self._client.fetch_list(_video_path(video_id, "credits"), Credit, options=options)

    def get_credit(self, video_id: int, credit_id: int, *options: CallOption) -> tuple[Credit, "Response"]:
        return self._client.fetch("GET", _video_path(video_id, "credits", credit_id), Credit, options=options)

    def add_credit(self, video_id: int, request: CreditRequest) -> tuple[Credit, "Response"]:
        return self._client.fetch("POST", _video_path(video_id, "credits"), Credit, body=request)

    def edit_credit(self, video_id: int, credit_id: int, request: CreditRequest) -> tuple[Credit, "Response"]:
        return self._client.fetch("PATCH", _video_path(video_id, "credits", credit_id), Credit, body=request)

    def delete_credit(self, video_id: int, credit_id: int) -> "Response":
        return self._client.send("DELETE", _video_path(video_id, "credits", credit_id))

    # ------------------------------------------------------------------ #
    # Pictures
    # ------------------------------------------------------------------ #

    def list_pictures(self, video_id: int, *options: CallOption) -> tuple[list[Pictures], "Response"]:
        return self._client.fetch_list(_video_path(video_id, "pictures"), Pictures, options=options)

    def get_pictures(self, video_id: int, picture_id: int, *options: CallOption) -> tuple[Pictures, "Response"]:
        return self._client.fetch("GET", _video_path(video_id, "pictures", picture_id), Pictures, options=options)

    def create_pictures(self, video_id: int, request: PicturesRequest) -> tuple[Pictures, "Response"]:
        return self._client.fetch("POST", _video_path(video_id, "pictures"), Pictures, body=request)

    def edit_pictures(self, video_id: int, picture_id: int, request: PicturesRequest) -> tuple[Pictures, "Response"]:
        return self._client.fetch("PATCH", _video_path(video_id, "pictures", picture_id), Pictures, body=request)

    def delete_pictures(self, video_id: int, picture_id: int) -> "Response":
        return self._client.send("DELETE", _video_path(video_id, "pictures", picture_id))

    # ------------------------------------------------------------------ #
    # Embed presets
    # ------------------------------------------------------------------ #

    def get_preset(self, video_id: int, preset_id: int, *options: CallOption) -> tuple[Preset, "Response"]:
        return self._client.fetch("GET", _video_path(video_id, "presets", preset_id), Preset, options=options)

    def assign_preset(self, video_id: int, preset_id: int) -> "Response":
        return self._client.send("PUT", _video_path(video_id, "presets", preset_id))

    def unassign_preset(self, video_id: int, preset_id: int) -> "Response":
        return self._client.send("DELETE", _video_path(video_id, "presets", preset_id))

    # ------------------------------------------------------------------ #
    # Privacy allow-lists
    # ------------------------------------------------------------------ #

    def list_domain(self, video_id: int, *options: CallOption) -> tuple[list[Domain], "Response"]:
        return self._client.fetch_list(_video_path(video_id, "privacy", "domains"), Domain, options=options)

    def allow_domain(self, video_id: int, domain: str) -> "Response":
        return self._client.send("PUT", _video_path(video_id, "privacy", "domains", domain))

    def disallow_domain(self, video_id: int, domain: str) -> "Response":
        return self._client.send("DELETE", _video_path(video_id, "privacy", "domains", domain))

    def list_user(self, video_id: int, *options: CallOption) -> tuple[list[User], "Response"]:
        return self._client.fetch_list(_video_path(video_id, "privacy", "users"), User, options=options)

    def allow_users(self, video_id: int) -> "Response":
        """Allow every user the owner follows to view the video."""
        return self._client.send("PUT", _video_path(video_id, "privacy", "users"))

    def allow_user(self, video_id: int, user_id: str | int) -> "Response":
        return self._client.send("PUT", _video_path(video_id, "privacy", "users", user_id))

    def disallow_user(self, video_id: int, user_id: str | int) -> "Response":
        return self._client.send("DELETE", _video_path(video_id, "privacy", "users", user_id))

    # ------------------------------------------------------------------ #
    # Tags
    # ------------------------------------------------------------------ #

    def list_tag(self, video_id: int, *options: CallOption) -> tuple[list[Tag], "Response"]:
        return self._client.fetch_list(_video_path(video_id, "tags"), Tag, options=options)

    def get_tag(self, video_id: int, tag: str, *options: CallOption) -> tuple[Tag, "Response"]:
        return self._client.fetch("GET", _video_path(video_id, "tags", tag), Tag, options=options)

    def assign_tag(self, video_id: int, tag: str) -> "Response":
        return self._client.send("PUT", _video_path(video_id, "tags", tag))

    def unassign_tag(self, video_id: int, tag: str) -> "Response":
        return self._client.send("DELETE", _video_path(video_id, "tags", tag))

    def assign_tag_list(self, video_id: int, tags: Sequence[str]) -> "Response":
        """Replace the video's tags with ``tags``, keeping their order."""
        body = [TagRequest(name=name) for name in tags]
        return self._client.send("PUT", _video_path(video_id, "tags"), body=body)

    # ------------------------------------------------------------------ #
    # Text tracks
    # ------------------------------------------------------------------ #

    def list_text_track(self, video_id: int, *options: CallOption) -> tuple[list[TextTrack], "Response"]:
        return self._client.fetch_list(_video_path(video_id, "texttracks"), TextTrack, options=options)

    def get_text_track(self, video_id: int, track_id: int, *options: CallOption) -> tuple[TextTrack, "Response"]:
        return self._client.fetch("GET", _video_path(video_id, "texttracks", track_id), TextTrack, options=options)

    def add_text_track(self, video_id: int, request: TextTrackRequest) -> tuple[TextTrack, "Response"]:
        return self._client.fetch("POST", _video_path(video_id, "texttracks"), TextTrack, body=request)

    def edit_text_track(self, video_id: int, track_id: int, request: TextTrackRequest) -> tuple[TextTrack, "Response"]:
        return self._client.fetch("PATCH", _video_path(video_id, "texttracks", track_id), TextTrack, body=request)

    def delete_text_track(self, video_id: int, track_id: int) -> "Response":
        return self._client.send("DELETE", _video_path(video_id, "texttracks", track_id))

    # ------------------------------------------------------------------ #
    # Upload initiation
    # ------------------------------------------------------------------ #

    def upload_video(
        self,
        size: int,
        request: UploadVideoRequest | None = None,
        *,
        user_id: str | int | None = None,
    ) -> tuple[Video, "Response"]:
        """Reserve a resumable (tus) upload of ``size`` bytes.

        The file bytes themselves are sent to ``video.upload.upload_link``
        by the caller; this call only creates the video shell.
        """
        payload = _with_upload(request, TusUpload(size=size))
        return create_upload(self._client, "POST", _uploads_path(user_id), payload)

    def upload_video_by_url(
        self,
        link: str,
        request: UploadVideoRequest | None = None,
        *,
        user_id: str | int | None = None,
    ) -> tuple[Video, "Response"]:
        """Ask the platform to pull the source file from ``link``."""
        payload = _with_upload(request, PullUpload(link=link))
        return create_upload(self._client, "POST", _uploads_path(user_id), payload)
