"""Command line access to the most common videos operations."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from pydantic import BaseModel

from .client import Client, Response
from .config import ConfigError, load_config
from .errors import VimeoError
from .logging_utils import configure_logging
from .models import UploadVideoRequest
from .options import CallOption, opt_fields, opt_page, opt_per_page, opt_query

logger = logging.getLogger(__name__)


def _dump(result: Any, response: Response) -> str:
    if isinstance(result, list):
        items = [item.model_dump(mode="json", exclude_none=True) for item in result]
        document: Any = {
            "data": items,
            "total": response.total,
            "page": response.page,
            "per_page": response.per_page,
        }
    elif isinstance(result, BaseModel):
        document = result.model_dump(mode="json", exclude_none=True)
    else:
        document = {"status": response.status_code}
    return json.dumps(document, ensure_ascii=False, indent=2)


def _paging_options(args: argparse.Namespace) -> list[CallOption]:
    options: list[CallOption] = []
    if getattr(args, "page", None):
        options.append(opt_page(args.page))
    if getattr(args, "per_page", None):
        options.append(opt_per_page(args.per_page))
    if getattr(args, "fields", None):
        options.append(opt_fields([f.strip() for f in args.fields.split(",") if f.strip()]))
    return options


def run(args: argparse.Namespace, client: Client) -> str:
    """Dispatch a parsed command and return its JSON rendering."""
    options = _paging_options(args)
    videos = client.videos
    if args.command == "get":
        video, response = videos.get(args.video_id, *options)
        return _dump(video, response)
    if args.command == "list":
        if args.query:
            options.append(opt_query(args.query))
        items, response = videos.list(*options)
        return _dump(items, response)
    if args.command == "comments":
        comments, response = videos.list_comment(args.video_id, *options)
        return _dump(comments, response)
    if args.command == "upload-url":
        request = UploadVideoRequest(name=args.name, description=args.description)
        video, response = videos.upload_video_by_url(args.link, request)
        return _dump(video, response)
    if args.command == "delete":
        response = videos.delete(args.video_id)
        return _dump(None, response)
    raise ValueError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="vimeokit", description="Vimeo videos API client")
    p.add_argument("--env-file", type=Path, help="Path to a .env file with VIMEO_* settings")
    p.add_argument("--verbose", action="store_true")
    sub = p.add_subparsers(dest="command", required=True)

    get = sub.add_parser("get", help="Fetch one video")
    get.add_argument("video_id", type=int)
    get.add_argument("--fields", help="Comma-separated field list")

    lst = sub.add_parser("list", help="Search videos")
    lst.add_argument("--query")
    lst.add_argument("--page", type=int)
    lst.add_argument("--per-page", type=int)
    lst.add_argument("--fields")

    comments = sub.add_parser("comments", help="List comments on a video")
    comments.add_argument("video_id", type=int)
    comments.add_argument("--page", type=int)
    comments.add_argument("--per-page", type=int)

    upload = sub.add_parser("upload-url", help="Create a video pulled from a public URL")
    upload.add_argument("link")
    upload.add_argument("--name")
    upload.add_argument("--description")

    delete = sub.add_parser("delete", help="Delete a video")
    delete.add_argument("video_id", type=int)
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.env_file)
    except ConfigError as exc:
        print(f"configuration error: {exc}", file=sys.stderr)
        return 2
    configure_logging(config, level=logging.DEBUG if args.verbose else logging.INFO)

    with Client(config) as client:
        try:
            print(run(args, client))
        except VimeoError as exc:
            logger.error("Command %s failed: %s", args.command, exc)
            print(f"error: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
