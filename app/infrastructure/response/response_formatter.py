from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse

from app.infrastructure.exceptions import ClassRecordError, NotFoundError


def standard_response(
    code: int = 200,
    msg: str = "Success",
    error: Optional[str] = None,
    **payload: Any,
) -> Dict[str, Any]:
    """
    创建标准的响应格式

    参数:
        code: 响应状态码，与HTTP状态码一致
        msg: 响应消息
        error: 底层错误信息，只在失败时附带
        payload: 额外的字段，例如 Inserted_Id、Data

    返回:
        Dict[str, Any]: {"Status_Code": ..., "Message": ..., **payload}
    """
    body = {
        "Status_Code": code,
        "Message": msg,
    }
    body.update(payload)
    if error is not None:
        body["Error"] = error
    return body


def success_response(msg: str, **payload: Any) -> JSONResponse:
    """
    创建成功响应

    参数:
        msg: 成功消息
        payload: 响应数据字段

    返回:
        JSONResponse: 状态码200的响应
    """
    return JSONResponse(status_code=200, content=standard_response(code=200, msg=msg, **payload))


def error_response(msg: str, code: int = 500, error: Optional[str] = None) -> JSONResponse:
    """
    创建错误响应

    参数:
        msg: 错误消息
        code: HTTP状态码，默认500
        error: 可选的底层错误信息

    返回:
        JSONResponse: 状态码与 Status_Code 一致的响应
    """
    return JSONResponse(status_code=code, content=standard_response(code=code, msg=msg, error=error))


def not_found_response(msg: str = "Class not found") -> JSONResponse:
    return error_response(msg=msg, code=404)


def exception_response(exc: Exception, failure_msg: str) -> JSONResponse:
    """
    把异常转换为响应

    400/404 类错误直接使用异常自带的消息；其余错误一律按500返回，
    Message 使用调用方给出的失败描述，Error 附带底层错误信息
    """
    if isinstance(exc, NotFoundError):
        return not_found_response(exc.message)
    if isinstance(exc, ClassRecordError) and exc.status_code < 500:
        return error_response(msg=exc.message, code=exc.status_code)
    return error_response(msg=failure_msg, code=500, error=str(exc))
