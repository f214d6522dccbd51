"""Tests for environment-driven settings."""

from config.settings import Settings
from util.constants import AUTOCOMPLETE_PAGE_SIZE


def test_autocomplete_limit_defaults_to_page_size(monkeypatch):
    monkeypatch.delenv("AUTOCOMPLETE_LIMIT", raising=False)
    assert Settings().AUTOCOMPLETE_LIMIT == AUTOCOMPLETE_PAGE_SIZE


def test_autocomplete_limit_read_from_environment(monkeypatch):
    monkeypatch.setenv("AUTOCOMPLETE_LIMIT", "5")
    assert Settings().AUTOCOMPLETE_LIMIT == 5


def test_seed_filenames_read_as_json(monkeypatch):
    monkeypatch.setenv("SEED_FILENAMES", '["x.txt", "y.txt"]')
    assert Settings().SEED_FILENAMES == ["x.txt", "y.txt"]
