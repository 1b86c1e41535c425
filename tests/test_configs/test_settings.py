"""Tests for required settings."""

import pytest

from foldertree.configs.settings import Settings, ensure_required_settings


def test_missing_mongo_url_exits():
    """Test the process exits when no connection string is configured."""
    with pytest.raises(SystemExit) as exc_info:
        ensure_required_settings(Settings(MONGO_URL=''))

    assert exc_info.value.code == 1


def test_mongo_url_present():
    """Test a configured connection string passes."""
    ensure_required_settings(Settings(MONGO_URL='mongodb://localhost:27017'))
