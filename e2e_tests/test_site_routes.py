"""Routing tests for everything outside the admin page."""

from unittest.mock import patch

import pytest
from django.db import OperationalError


@pytest.fixture
def build_dir(settings, tmp_path):
    (tmp_path / "index.html").write_text("<h1>home</h1>")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "index.html").write_text("<h1>docs</h1>")
    (tmp_path / "app.js").write_text("console.log('ok');")
    settings.BUILD_DIR = tmp_path
    return tmp_path


@pytest.mark.django_db
def test_health_check_ok(client):
    response = client.get("/health/")
    assert response.status_code == 200
    assert response.content == b"OK"


@pytest.mark.django_db
def test_health_check_reports_database_outage(client):
    with patch(
        "utils.health.connection.ensure_connection",
        side_effect=OperationalError("no database"),
    ):
        response = client.get("/health/")
    assert response.status_code == 503


def test_root_serves_build_index(client, build_dir):
    response = client.get("/")
    assert response.status_code == 200
    assert b"".join(response.streaming_content) == b"<h1>home</h1>"


def test_directory_serves_its_index(client, build_dir):
    response = client.get("/docs/")
    assert response.status_code == 200
    assert b"".join(response.streaming_content) == b"<h1>docs</h1>"


def test_build_file_content_type(client, build_dir):
    response = client.get("/app.js")
    assert response.status_code == 200
    assert "javascript" in response["Content-Type"]


def test_missing_build_file_is_404(client, build_dir):
    assert client.get("/nope.html").status_code == 404


def test_build_files_are_read_only(client, build_dir):
    assert client.post("/app.js").status_code == 405


@pytest.mark.parametrize("path", ["/_admin", "/health"])
def test_slashless_routes_redirect(client, build_dir, path):
    response = client.get(path)
    assert response.status_code == 301
    assert response["Location"] == f"{path}/"


def test_names_starting_like_routes_are_build_files(client, build_dir):
    (build_dir / "_admin.html").write_text("<h1>static admin</h1>")
    response = client.get("/_admin.html")
    assert response.status_code == 200
