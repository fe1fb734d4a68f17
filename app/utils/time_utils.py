from datetime import datetime, timezone
from typing import Optional


def to_utc_naive(value: datetime) -> datetime:
    """带时区的时间转换为UTC后去掉时区信息；不带时区的视为UTC"""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """
    输出规范的时间戳字符串，例如 2024-01-05T00:00:00.000Z

    Args:
        value: 数据库中保存的UTC时间

    Returns:
        Optional[str]: 时间戳字符串，值为空时返回None
    """
    if value is None:
        return None
    value = to_utc_naive(value)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
