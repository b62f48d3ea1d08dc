"""
MyNotes Backend — Configuration Tests
=======================================

What:  Settings validation and engine option selection.
"""

import pytest
from pydantic import ValidationError

from mynotes.config import Settings
from mynotes.database import engine_options


class TestSettings:

    def test_note_store_is_normalized(self):
        assert Settings(note_store="MEMORY").note_store == "memory"

    def test_unknown_note_store_rejected(self):
        with pytest.raises(ValidationError, match="note_store"):
            Settings(note_store="redis")

    def test_log_level_is_uppercased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]


class TestEngineOptions:

    def test_sqlite_gets_no_pool_sizing(self):
        options = engine_options("sqlite+aiosqlite:///./x.db")
        assert "pool_size" not in options
        assert "max_overflow" not in options

    def test_server_database_gets_pool_sizing(self):
        options = engine_options("postgresql+asyncpg://u:p@h/db")
        assert options["pool_size"] >= 5
        assert options["pool_pre_ping"] is True
        assert options["pool_recycle"] == 3600
