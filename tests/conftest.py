from __future__ import annotations

import shutil
from collections import namedtuple

import pytest
from fastapi.testclient import TestClient

from phone_cleaner.app import create_app
from phone_cleaner.channels import registry
from phone_cleaner.config import settings

DiskUsage = namedtuple("DiskUsage", ["total", "used", "free"])

STORAGE_CHANNEL = "com.phonecleaner.app/storage"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    monkeypatch.setattr(registry, "_registry", {})
    monkeypatch.setattr(settings, "home_dir", tmp_path)
    monkeypatch.setattr(settings, "storage_channel", STORAGE_CHANNEL)
    monkeypatch.setattr(settings, "plugins", [])


@pytest.fixture
def volumes(monkeypatch):
    """Fake filesystem table: path string -> DiskUsage. Unknown paths do not exist."""
    table: dict[str, object] = {}

    def fake_disk_usage(path):
        try:
            entry = table[str(path)]
        except KeyError:
            raise FileNotFoundError(2, "No such file or directory", str(path))
        if isinstance(entry, BaseException):
            raise entry
        return entry

    monkeypatch.setattr(shutil, "disk_usage", fake_disk_usage)
    return table


@pytest.fixture
def client() -> TestClient:
    with TestClient(create_app()) as test_client:
        yield test_client
