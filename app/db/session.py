from typing import Generator

from sqlalchemy.orm import Session

from app.db.base import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    获取数据库会话的依赖函数

    用于FastAPI依赖注入系统，每个请求从连接池取一个会话，请求结束后释放
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
