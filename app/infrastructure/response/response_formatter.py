from typing import Any, Dict, List, Optional, Union

from app.core.exceptions import AppError

SUCCESS_STATUS = "Success"
ERROR_STATUS = "Error"


def standard_response(
    data: Optional[Union[Dict[str, Any], List[Any], str, int, float, bool]] = None,
    status: str = SUCCESS_STATUS,
    message: str = "操作成功",
    error: Optional[str] = None,
) -> Dict[str, Any]:
    """
    创建标准的响应格式

    参数:
        data: 响应数据，可以是任何类型
        status: "Success" 或 "Error"
        message: 响应消息
        error: 错误类型，仅错误响应携带

    返回:
        Dict[str, Any]: 标准格式的响应对象
    """
    response = {
        "status": status,
        "message": message,
        "data": data,
    }
    if error is not None:
        response["error"] = error
    return response


def success_response(
    data: Optional[Union[Dict[str, Any], List[Any], str, int, float, bool]] = None,
    message: str = "操作成功",
) -> Dict[str, Any]:
    """
    创建成功响应
    """
    return standard_response(data=data, status=SUCCESS_STATUS, message=message)


def paginated_response(
    items: List[Dict[str, Any]],
    key: str,
    total: int,
    page: int,
    limit: int,
    total_pages: int,
    message: str,
) -> Dict[str, Any]:
    """
    创建分页列表响应

    参数:
        items: 当前页数据
        key: 列表在data中的字段名，如 "users"
        total: 匹配的总记录数
        page: 当前页码
        limit: 每页条数
        total_pages: 总页数

    返回:
        Dict[str, Any]: data 为 {key: items, "pagination": {...}} 的成功响应
    """
    return success_response(
        data={
            key: items,
            "pagination": {
                "total": total,
                "page": page,
                "limit": limit,
                "totalPages": total_pages,
            },
        },
        message=message,
    )


def error_response(
    message: str = "操作失败",
    error: str = "Error",
    data: Optional[Union[Dict[str, Any], List[Any], str]] = None,
) -> Dict[str, Any]:
    """
    创建错误响应

    参数:
        message: 错误消息
        error: 错误类型名称
        data: 可选的错误详情数据

    返回:
        Dict[str, Any]: 标准格式的错误响应
    """
    return standard_response(data=data, status=ERROR_STATUS, message=message, error=error)


def app_error_response(exc: AppError) -> Dict[str, Any]:
    """将应用异常转换为错误响应"""
    return error_response(message=exc.message, error=exc.code)
