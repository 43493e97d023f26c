"""
日期时间格式转换

客户端提交的日期为 DD/MM/YYYY，时间为12小时制 h:mm AM/PM；
数据库中保存为 YYYY-MM-DD 和24小时制 HH:MM:SS。
"""
import re
from datetime import date, datetime, time
from typing import Any, Dict

from app.infrastructure.exceptions import FormatError

INPUT_DATE_FORMAT = "%d/%m/%Y"
STORAGE_DATE_FORMAT = "%Y-%m-%d"
STORAGE_TIME_FORMAT = "%H:%M:%S"

# 9:00 AM / 09:00pm / 9:00:30 AM
_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?\s*([AaPp][Mm])$")


def parse_date(value: str) -> date:
    """把 DD/MM/YYYY 解析为 date"""
    try:
        return datetime.strptime(str(value).strip(), INPUT_DATE_FORMAT).date()
    except ValueError:
        raise FormatError(f"Invalid date '{value}', expected DD/MM/YYYY")


def parse_time(value: str) -> time:
    """把12小时制 h:mm AM/PM 解析为 time"""
    match = _TIME_PATTERN.match(str(value).strip())
    if not match:
        raise FormatError(f"Invalid time '{value}', expected h:mm AM/PM")

    hour, minute, second, marker = match.groups()
    canonical = f"{int(hour)}:{minute}:{second or '00'} {marker.upper()}"
    try:
        return datetime.strptime(canonical, "%I:%M:%S %p").time()
    except ValueError:
        raise FormatError(f"Invalid time '{value}', expected h:mm AM/PM")


def format_date(value: str) -> str:
    """DD/MM/YYYY -> YYYY-MM-DD"""
    return parse_date(value).strftime(STORAGE_DATE_FORMAT)


def format_time(value: str) -> str:
    """h:mm AM/PM -> HH:MM:SS"""
    return parse_time(value).strftime(STORAGE_TIME_FORMAT)


def to_storage_fields(payload) -> Dict[str, Any]:
    """
    把创建/更新请求体转换为模型字段

    Args:
        payload: ClassCreate 或 ClassUpdate

    Returns:
        Dict[str, Any]: 以 ClassRecord 属性名为键的字段字典

    Raises:
        FormatError: 日期或时间无法解析
    """
    return {
        "course_code": payload.courseCode,
        "title": payload.title,
        "date": parse_date(payload.date),
        "time_start": parse_time(payload.timeStart),
        "time_end": parse_time(payload.timeEnd),
        "location": payload.location,
    }
