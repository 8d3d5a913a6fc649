"""Shared test fixtures and configuration."""

import os

import pytest

from kb_search.domain.model import Document


@pytest.fixture(autouse=True)
def isolated_settings_env(monkeypatch):
    """Keep ambient KB_SEARCH_* variables from leaking into Settings()."""
    for key in list(os.environ):
        if key.upper().startswith("KB_SEARCH_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def support_documents() -> list[Document]:
    """Small help-desk corpus used across search tests."""
    return [
        Document(
            id="1",
            title="Password Reset",
            content="How to reset your account password",
            tags=["account", "security"],
        ),
        Document(
            id="2",
            title="WiFi Setup",
            content="Configure your wireless network connection",
            tags=["network"],
        ),
        Document(
            id="3",
            title="Printer Jam",
            content="Clear paper from the printer tray",
            tags=["hardware"],
        ),
    ]
