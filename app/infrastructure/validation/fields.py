"""
Request field types

Reusable pydantic field types for the shop request models. Coercion and
range checks are left to pydantic; the before-validators only cover what
pydantic's lax mode does differently from the API contract (booleans are
not numbers, numbers are accepted as text, ``2024/01/05`` is a date).
"""
import math
import re
from datetime import datetime
from typing import Annotated, Any, ClassVar, Dict, Optional, Type

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, \
    ValidationInfo, field_validator, model_validator
from pydantic_core import PydanticCustomError

from app.models.enums import ShopEnum
from app.utils.time_utils import to_utc_naive

# 数据库整数列的上限
INT32_MAX = 2 ** 31 - 1
INT64_MAX = 2 ** 63 - 1

SEPARATED_DATE = re.compile(r"^(\d{4})[-/.](\d{1,2})[-/.](\d{1,2})(.*)$")
WHOLE_NUMBER = re.compile(r"^[+-]?\d+$", re.ASCII)


def is_absent(value: Any) -> bool:
    """Missing, null and blank-string values count as absent."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _as_text(value: Any) -> Any:
    # IMEI、费用等字段允许以数字提交
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _as_number(value: Any) -> Any:
    if isinstance(value, bool):
        raise PydanticCustomError("float_type", "Input should be a valid number")
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            raise PydanticCustomError("float_parsing", "Number is too large")
    if isinstance(value, float) and not math.isfinite(value):
        raise PydanticCustomError("finite_number", "Input should be a finite number")
    return value


def _as_whole_number(value: Any) -> Any:
    if isinstance(value, bool):
        raise PydanticCustomError("int_type", "Input should be a valid integer")
    if isinstance(value, str) and WHOLE_NUMBER.match(value.strip()):
        # 超出64位的数字串也先转成整数，由范围检查报告
        return int(value)
    return value


def _as_date_text(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    text = value.strip()
    match = SEPARATED_DATE.match(text)
    if match:
        year, month, day, rest = match.groups()
        text = f"{year}-{int(month):02d}-{int(day):02d}{rest}"
    return text


Text = Annotated[str, BeforeValidator(_as_text)]
Amount = Annotated[float, BeforeValidator(_as_number), Field(ge=0, allow_inf_nan=False)]
Count = Annotated[int, BeforeValidator(_as_whole_number), Field(ge=0, le=INT32_MAX)]
PhoneNumber = Annotated[int, BeforeValidator(_as_whole_number), Field(ge=0, le=INT64_MAX)]
RecordRef = Annotated[int, BeforeValidator(_as_whole_number)]
Timestamp = Annotated[datetime, BeforeValidator(_as_date_text), AfterValidator(to_utc_naive)]


class RequestModel(BaseModel):
    """
    请求数据模型基类

    空值（缺失、null、空白字符串）在校验前移除，因此必填字段为空时报缺失，
    更新时 exclude_unset 只保留客户端提交的字段。
    choices 声明取值受限的字段及其枚举类型。
    """
    model_config = ConfigDict(str_strip_whitespace=True, protected_namespaces=())

    choices: ClassVar[Dict[str, Type[ShopEnum]]] = {}

    @model_validator(mode="before")
    @classmethod
    def drop_absent(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if not is_absent(value)}
        return data

    @field_validator("*")
    @classmethod
    def check_choice(cls, value: Any, info: ValidationInfo) -> Any:
        enum_cls: Optional[Type[ShopEnum]] = cls.choices.get(info.field_name)
        if enum_cls is None or value is None:
            return value
        allowed = enum_cls.values()
        if value not in allowed:
            raise PydanticCustomError(
                "invalid_value",
                "Invalid {field} value. Must be one of {allowed}",
                {"field": info.field_name, "allowed": ", ".join(allowed)},
            )
        return value
