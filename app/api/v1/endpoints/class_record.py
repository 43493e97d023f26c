"""
课程安排相关API接口模块

为讲师端提供课程记录的增删改查接口，挂载在 /class 路径下。
每个接口把请求交给 ClassService，再把结果或异常统一转换为
{"Status_Code", "Message", ...} 格式的响应。
"""
import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends

from app.api.dependencies import get_class_service
from app.infrastructure.response import exception_response, success_response
from app.schemas.class_record import ClassCreate, ClassDelete, ClassUpdate
from app.services import ClassService

logger = logging.getLogger(__name__)

router = APIRouter()


# 新增课程接口
@router.post("/addclass")
def add_class(
        class_data: Optional[ClassCreate] = Body(default=None),
        service: ClassService = Depends(get_class_service),
):
    """
    新增一条课程记录

    Returns:
        {"Status_Code": 200, "Message": ..., "Inserted_Id": int}
    """
    # 没有请求体时按空对象处理，由服务层返回缺少字段
    class_data = class_data or ClassCreate()
    logger.info(f"收到新增课程请求: {class_data.model_dump()}")
    try:
        inserted_id = service.create_class(class_data)
    except Exception as e:
        logger.error(f"新增课程失败: {str(e)}")
        return exception_response(e, "Failed to add class data")

    return success_response("Class Data Is Added Successfully", Inserted_Id=inserted_id)


# 查询课程列表接口
@router.get("/viewclass")
def view_classes(service: ClassService = Depends(get_class_service)):
    """
    获取全部课程记录

    Returns:
        {"Status_Code": 200, "Message": ..., "Data": [...]}
    """
    try:
        rows = service.list_classes()
    except Exception as e:
        logger.error(f"查询课程失败: {str(e)}")
        return exception_response(e, "Failed to fetch class data")

    return success_response("Class Data Is Fetched Successfully", Data=rows)


# 更新课程接口
@router.put("/updateclass")
def update_class(
        class_data: Optional[ClassUpdate] = Body(default=None),
        service: ClassService = Depends(get_class_service),
):
    """
    覆盖更新一条课程记录，找不到时返回404

    Returns:
        {"Status_Code": 200, "Message": ..., "Updated_Id": id}
    """
    class_data = class_data or ClassUpdate()
    logger.info(f"收到更新课程请求: {class_data.model_dump()}")
    try:
        updated_id = service.update_class(class_data)
    except Exception as e:
        logger.error(f"更新课程失败: {str(e)}")
        return exception_response(e, "Failed to update class data")

    return success_response("Class Data Is Updated Successfully", Updated_Id=updated_id)


# 删除课程接口
@router.delete("/deleteclass")
def delete_class(
        class_data: Optional[ClassDelete] = Body(default=None),
        service: ClassService = Depends(get_class_service),
):
    """
    按ID删除一条课程记录，找不到时返回404

    Returns:
        {"Status_Code": 200, "Message": ..., "Deleted_Id": id}
    """
    class_data = class_data or ClassDelete()
    try:
        deleted_id = service.delete_class(class_data)
    except Exception as e:
        logger.error(f"删除课程失败: {str(e)}")
        return exception_response(e, "Failed to delete class data")

    return success_response("Class Data Is Deleted Successfully", Deleted_Id=deleted_id)
