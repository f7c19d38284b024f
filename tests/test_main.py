import logging

from config import Settings
from main import create_app


def test_create_app_applies_log_level_when_root_already_configured(tmp_path):
    root = logging.getLogger()
    previous = root.level
    root.setLevel(logging.WARNING)
    try:
        create_app(Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'books.db'}", log_level="debug"))
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)


def test_create_app_uses_configured_title(tmp_path):
    app = create_app(Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'books.db'}", app_title="Shelf"))
    assert app.title == "Shelf"
