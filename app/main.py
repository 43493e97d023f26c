from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import sys
import traceback

from app.api.v1.api import api_router
from app.core.config import settings
from app.db.base import init_db
from app.infrastructure.response import error_response, standard_response

# 降低watchfiles日志级别，避免频繁输出
logging.getLogger('watchfiles').setLevel(logging.ERROR)
logging.getLogger('watchfiles.main').setLevel(logging.ERROR)

# 配置日志
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="讲师课程安排管理API"
)

# 配置CORS - 重要: 必须在其他中间件之前添加
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    请求体无法解析或字段类型错误时，返回统一格式的400响应
    """
    logger.info(f"请求体校验失败 {request.method} {request.url.path}: {exc.errors()}")
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    return error_response(msg="Invalid request body", code=400, error=details)


# 包含API路由
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.on_event("startup")
async def startup_db_client():
    """
    应用启动时初始化数据库
    """
    logger.info("正在初始化数据库...")
    try:
        init_db()
        logger.info("数据库初始化成功")
    except Exception as e:
        logger.error(f"数据库初始化失败: {str(e)}")
        logger.error(traceback.format_exc())
        # 没有数据库连接时接口会返回500，应用仍然继续启动
        logger.warning("应用将继续启动，但数据库功能可能不可用")


@app.get("/")
async def root():
    """健康检查接口"""
    return standard_response(
        code=200,
        msg=f"{settings.PROJECT_NAME} is running",
        Data={
            "status": "online",
            "version": settings.VERSION
        },
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)
