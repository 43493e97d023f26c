import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import settings

logger = logging.getLogger(__name__)


def _engine_options(uri: str) -> dict:
    """
    根据数据库类型生成引擎参数

    SQLite 不支持 pool_size / max_overflow，只在其他数据库上启用连接池设置
    """
    if make_url(uri).get_backend_name() == "sqlite":
        return {"connect_args": {"check_same_thread": False}, "echo": settings.DB_ECHO}
    return {
        "pool_pre_ping": True,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_recycle": settings.DB_POOL_RECYCLE,
        "echo": settings.DB_ECHO,
    }


# 创建数据库引擎
engine = create_engine(settings.SQLALCHEMY_DATABASE_URI, **_engine_options(settings.SQLALCHEMY_DATABASE_URI))

# 创建数据库会话
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 创建基本模型类
Base = declarative_base()


def _ensure_mysql_database(db_uri: str, db_name: str) -> None:
    """如果MySQL数据库不存在则创建"""
    # 创建不指定数据库的连接URI
    server_uri = db_uri.rsplit('/', 1)[0]

    temp_engine = create_engine(server_uri)
    try:
        with temp_engine.connect() as connection:
            result = connection.execute(text("SHOW DATABASES LIKE :name"), {"name": db_name})
            if not result.fetchone():
                connection.execute(text(f"CREATE DATABASE `{db_name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"))
                logger.info(f"数据库 {db_name} 已创建")
            else:
                logger.info(f"数据库 {db_name} 已存在")
    finally:
        temp_engine.dispose()


def init_db() -> None:
    """
    初始化数据库，如果表不存在则创建
    """
    if not settings.CREATE_TABLES:
        logger.info("自动创建表功能已禁用")
        return

    # 注册模型，保证 create_all 能看到 class 表
    from app.models import class_record  # noqa: F401

    try:
        if engine.dialect.name == "mysql" and not settings.DATABASE_URI:
            _ensure_mysql_database(settings.SQLALCHEMY_DATABASE_URI, settings.DB_NAME)

        Base.metadata.create_all(bind=engine)
        logger.info("所有表已创建或已存在")
    except Exception as e:
        logger.error(f"初始化数据库时出错: {str(e)}")
        raise
