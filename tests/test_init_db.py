"""init_db 测试，使用 conftest 中设置的内存 SQLite 连接"""
from unittest.mock import MagicMock

from sqlalchemy import inspect

from app.core.config import settings
from app.db import base


def test_creates_class_table(monkeypatch):
    monkeypatch.setattr(settings, "CREATE_TABLES", True)
    try:
        base.init_db()
        assert inspect(base.engine).has_table("class")
    finally:
        base.Base.metadata.drop_all(bind=base.engine)


def test_disabled_skips_table_creation(monkeypatch):
    create_all = MagicMock()
    monkeypatch.setattr(settings, "CREATE_TABLES", False)
    monkeypatch.setattr(base.Base.metadata, "create_all", create_all)

    base.init_db()

    create_all.assert_not_called()
