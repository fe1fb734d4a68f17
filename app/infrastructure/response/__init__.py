"""响应格式化基础设施组件导出"""

from .response_formatter import (
    standard_response,
    success_response,
    paginated_response,
    error_response,
    app_error_response,
)

__all__ = [
    "standard_response",
    "success_response",
    "paginated_response",
    "error_response",
    "app_error_response",
]
