from typing import Optional, Union

from pydantic import BaseModel


class ClassCreate(BaseModel):
    """
    课程创建请求模型

    字段都声明为可选，缺失字段由服务层统一校验并返回400，而不是框架默认的422
    """
    courseCode: Optional[str] = None
    title: Optional[str] = None
    date: Optional[str] = None  # DD/MM/YYYY
    timeStart: Optional[str] = None  # h:mm AM/PM
    timeEnd: Optional[str] = None  # h:mm AM/PM
    location: Optional[str] = None


class ClassUpdate(ClassCreate):
    """
    课程更新请求模型

    id 的取值按配置匹配 courseCode 列或主键列
    """
    id: Optional[Union[int, str]] = None


class ClassDelete(BaseModel):
    """课程删除请求模型"""
    id: Optional[Union[int, str]] = None
