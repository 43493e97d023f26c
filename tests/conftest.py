"""
测试公共夹具

使用内存 SQLite 替代 MySQL，并通过依赖覆盖把测试会话注入到接口中
"""
import os

# 必须在导入 app 之前设置，避免连接真实的 MySQL
os.environ.setdefault("DATABASE_URI", "sqlite://")
os.environ.setdefault("CREATE_TABLES", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.models.class_record import ClassRecord


@pytest.fixture
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def class_payload():
    return {
        "courseCode": "CS101",
        "title": "Intro",
        "date": "01/03/2024",
        "timeStart": "9:00 AM",
        "timeEnd": "10:30 AM",
        "location": "Room 5",
    }


@pytest.fixture
def row_count(db_session):
    """返回一个统计 class 表行数的函数"""
    def _count() -> int:
        db_session.expire_all()
        return db_session.query(ClassRecord).count()
    return _count
