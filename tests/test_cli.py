from __future__ import annotations

import json
import logging

from vimeokit import cli
from vimeokit.cli import build_parser, run


def test_get_command_passes_fields(client, api):
    api.on("GET", "/videos/1", json_body={"uri": "/videos/1", "name": "Test"})
    args = build_parser().parse_args(["get", "1", "--fields", "uri, name"])

    output = json.loads(run(args, client))

    assert output == {"uri": "/videos/1", "name": "Test"}
    assert api.last_params() == {"fields": "uri,name"}


def test_list_command_renders_paging(client, api):
    api.on("GET", "/videos", json_body={"total": 1, "page": 1, "per_page": 5, "data": [{"name": "cats"}]})
    args = build_parser().parse_args(["list", "--query", "cats", "--page", "1", "--per-page", "5"])

    output = json.loads(run(args, client))

    assert output == {"data": [{"name": "cats"}], "total": 1, "page": 1, "per_page": 5}
    assert api.last_params() == {"page": "1", "per_page": "5", "query": "cats"}


def test_upload_url_command(client, api):
    api.on("POST", "/me/videos", json_body={"uri": "/videos/3"})
    args = build_parser().parse_args(["upload-url", "http://video.com/1.mp4", "--name", "clip"])

    output = json.loads(run(args, client))

    assert output == {"uri": "/videos/3"}
    assert api.last_json() == {"name": "clip", "upload": {"approach": "pull", "link": "http://video.com/1.mp4"}}


def test_delete_command_reports_status(client, api):
    api.on("DELETE", "/videos/9", status=204)
    args = build_parser().parse_args(["delete", "9"])

    assert json.loads(run(args, client)) == {"status": 204}


def test_main_logs_at_info_unless_verbose(monkeypatch, tmp_path):
    levels = []
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli, "configure_logging", lambda config, level=None: levels.append(level))
    monkeypatch.setattr(cli, "run", lambda args, client: "{}")

    assert cli.main(["delete", "1"]) == 0
    assert cli.main(["--verbose", "delete", "1"]) == 0

    assert levels == [logging.INFO, logging.DEBUG]
