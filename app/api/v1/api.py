from fastapi import APIRouter

from app.api.v1.endpoints import class_record


api_router = APIRouter()

# 包含各模块的路由

api_router.include_router(class_record.router, prefix="/class", tags=["课程安排"])
