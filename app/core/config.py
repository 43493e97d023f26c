import os
import json
from typing import List, Literal, Optional, Union

from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from pydantic import field_validator

project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
env_path = os.path.join(project_root, '.env')
load_dotenv(env_path)


class Settings(BaseSettings):
    # 基本设置
    PROJECT_NAME: str = "Class Records API"
    VERSION: str = "0.1.0"
    # 路由前缀，默认为空，即 /class/...
    API_PREFIX: str = ""

    # CORS 设置
    CORS_ORIGINS: List[str] = ["*"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            # 优先按JSON数组解析
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # 普通的逗号分隔字符串
                return [i.strip() for i in v.strip("[]").split(",") if i.strip()]

        if isinstance(v, list):
            return v

        return []

    # 数据库设置
    DB_HOST: str = "localhost"
    DB_PORT: str = "3306"
    DB_USER: str = "root"
    DB_PASSWORD: str = "password"
    DB_NAME: str = "lecturer"

    # 完整连接串，设置后覆盖上面的单项配置
    DATABASE_URI: Optional[str] = None

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """
        获取数据库URI
        """
        if self.DATABASE_URI:
            return self.DATABASE_URI

        # 默认使用MySQL
        return f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # 连接池设置
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_RECYCLE: int = 3600
    DB_ECHO: bool = False

    # 是否自动创建数据库表结构
    CREATE_TABLES: bool = True

    # 更新课程时用请求体中的 id 匹配哪一列：courseCode（兼容旧客户端）或 id
    CLASS_UPDATE_LOOKUP_FIELD: Literal["courseCode", "id"] = "courseCode"

    # 服务器启动配置
    HOST: str = "0.0.0.0"
    PORT: int = 8092
    RELOAD: bool = True
    LOG_DIR: str = "logs"

    class Config:
        case_sensitive = True
        env_file = ".env"


# 创建设置实例
settings = Settings()
