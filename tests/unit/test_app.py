"""Tests for the FastAPI preview service in :mod:`app.main`."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def client(tmp_path: Path, fixtures_dir: Path, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    """Return a test client serving courses from a temporary data directory."""

    shutil.copy(fixtures_dir / "json" / "course_weeks.json", tmp_path / "7.json")
    (tmp_path / "7.instance.json").write_text(
        json.dumps({"blocktitle": "Calculus map", "enumerate": True}), encoding="utf-8"
    )
    monkeypatch.setenv("COURSECONTENTS_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("COURSECONTENTS_SETTINGS_PATH", str(tmp_path / "settings.json"))
    monkeypatch.setenv("COURSECONTENTS_WWWROOT", "https://lms.example.edu")
    return TestClient(app)


def test_course_page_embeds_block(client: TestClient) -> None:
    """Given a stored course When the page is requested Then the block is rendered in the side column."""

    response = client.get("/course/7", params={"section": 1})

    assert response.status_code == 200
    soup = BeautifulSoup(response.text, "html.parser")
    block = soup.find("section", attrs={"data-block": "course_contents"})
    assert block.find("h2").get_text() == "Calculus map"
    items = block.find_all("li")
    assert [item.find("span", class_="section-title").get_text() for item in items] == [
        "Announcements",
        "Derivatives",
        "Limits",
        "19 January - 25 January",
    ]
    assert items[1].find("a") is None
    assert items[2].find("a")["href"] == "https://lms.example.edu/course/view.php?id=7#section-2"


def test_block_endpoint_returns_entries(client: TestClient) -> None:
    """Given a stored course When the block JSON is requested Then entries carry their numbers."""

    response = client.get("/course/7/block")

    assert response.status_code == 200
    payload = response.json()
    assert payload["title"] == "Calculus map"
    assert [entry["number"] for entry in payload["entries"]] == [None, 1, 2, 3]


def test_unknown_course_returns_404(client: TestClient) -> None:
    """Given an unknown course id When requested Then a 404 is returned."""

    response = client.get("/course/99")

    assert response.status_code == 404
