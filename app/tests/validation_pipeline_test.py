"""
测试请求模型和校验流程
验证必填检查、类型转换、范围检查和默认值在创建/更新模式下的行为
"""
from datetime import datetime

import pytest

from app.core.exceptions import InvalidDate, InvalidFormat, InvalidValue, MissingField
from app.infrastructure.validation import INT32_MAX, INT64_MAX, CreateRecord, PatchRecord, validate
from app.models.enums import AccessoryType, Brand, ItemStatus, ServiceType
from app.schemas.shop import (
    AccessoryCreate,
    AccessoryUpdate,
    MobileCreate,
    ProductCreate,
    ServiceCreate,
    UserCreate,
)


def required_field_missing_test():
    with pytest.raises(MissingField) as exc_info:
        validate({"contact_number": "9900000001"}, UserCreate)
    assert exc_info.value.field == "name"
    assert exc_info.value.message == "name is required"
    assert exc_info.value.status_code == 422


def blank_string_counts_as_missing_test():
    with pytest.raises(MissingField):
        validate({"name": "   ", "contact_number": "9900000001"}, UserCreate)


def first_violation_in_declaration_order_test():
    """model_name 和 purchase_price 都缺失时报告先声明的字段"""
    with pytest.raises(MissingField) as exc_info:
        validate({"brand": "NOT_A_BRAND"}, MobileCreate)
    assert exc_info.value.field == "model_name"


def create_mode_fills_defaults_test():
    record = validate(
        {"name": "USB-C Cable", "type": "CABLE", "selling_price": 10, "stock_count": 5},
        AccessoryCreate,
    )
    assert isinstance(record, CreateRecord)
    assert record["sold_count"] == 0
    assert record["status"] == "IN_STOCK"
    assert record["brand"] is None
    assert record["selling_price"] == 10.0
    assert set(record) == set(AccessoryCreate.model_fields)


def partial_mode_keeps_only_sent_fields_test():
    record = validate(
        {"name": "USB-C Cable", "type": "CABLE", "selling_price": "12.5", "stock_count": "4", "brand": ""},
        AccessoryUpdate,
        partial=True,
    )
    assert isinstance(record, PatchRecord)
    assert record == {"name": "USB-C Cable", "type": "CABLE", "selling_price": 12.5, "stock_count": 4}


def zero_is_a_present_value_test():
    record = validate(
        {"name": "Case", "type": "CASE", "selling_price": 0, "stock_count": 0},
        AccessoryCreate,
    )
    assert record["selling_price"] == 0.0
    assert record["stock_count"] == 0


def enum_value_outside_set_test():
    with pytest.raises(InvalidValue) as exc_info:
        validate({"name": "Laptop", "type": "LAPTOP", "selling_price": 1, "stock_count": 1}, AccessoryCreate)
    assert exc_info.value.field == "type"
    assert exc_info.value.message.startswith("Invalid type value. Must be one of CASE, CHARGER")
    assert "OTHER" in exc_info.value.allowed


@pytest.mark.parametrize("brand", Brand.values())
def every_brand_accepted_test(brand):
    record = validate({"model_name": "Phone", "purchase_price": 10, "brand": brand}, MobileCreate)
    assert record["brand"] == brand


@pytest.mark.parametrize("status", ItemStatus.values())
def every_item_status_accepted_test(status):
    record = validate({"model_name": "Phone", "purchase_price": 10, "status": status}, MobileCreate)
    assert record["status"] == status

    record = validate(
        {"name": "Case", "type": "CASE", "selling_price": 1, "stock_count": 1, "status": status},
        AccessoryCreate,
    )
    assert record["status"] == status


@pytest.mark.parametrize("accessory_type", AccessoryType.values())
def every_accessory_type_accepted_test(accessory_type):
    record = validate(
        {"name": "Item", "type": accessory_type, "selling_price": 1, "stock_count": 1},
        AccessoryCreate,
    )
    assert record["type"] == accessory_type


@pytest.mark.parametrize("service_type", ServiceType.values())
def every_service_type_accepted_test(service_type):
    record = validate({"model": "Pixel 7", "service_type": service_type}, ServiceCreate)
    assert record["service_type"] == service_type


@pytest.mark.parametrize("value", ["abc", "NaN", "inf", True])
def numeric_rejects_non_numbers_test(value):
    with pytest.raises(InvalidFormat):
        validate({"name": "Charger", "price": value, "category_id": 1}, ProductCreate)


def numeric_rejects_number_too_large_for_float_test():
    with pytest.raises(InvalidFormat) as exc_info:
        validate({"name": "Charger", "price": 10 ** 400, "category_id": 1}, ProductCreate)
    assert exc_info.value.field == "price"
    assert exc_info.value.message.endswith("Must be a number")


def negative_price_test():
    with pytest.raises(InvalidValue) as exc_info:
        validate({"name": "Charger", "price": -1, "category_id": 1}, ProductCreate)
    assert exc_info.value.message == "price must be a non-negative number"


def integer_coercion_test():
    record = validate({"name": "Ann", "contact_number": "9900000001"}, UserCreate)
    assert record["contact_number"] == 9900000001

    with pytest.raises(InvalidFormat):
        validate({"name": "Ann", "contact_number": "99-00"}, UserCreate)
    with pytest.raises(InvalidFormat):
        validate({"name": "Ann", "contact_number": 12.5}, UserCreate)
    with pytest.raises(InvalidFormat):
        validate({"name": "Ann", "contact_number": True}, UserCreate)


def integer_column_bounds_test():
    """整数字段不能超过数据库列的上限"""
    record = validate(
        {"name": "Case", "type": "CASE", "selling_price": 1, "stock_count": INT32_MAX},
        AccessoryCreate,
    )
    assert record["stock_count"] == INT32_MAX

    with pytest.raises(InvalidValue) as exc_info:
        validate({"name": "Case", "type": "CASE", "selling_price": 1, "stock_count": INT32_MAX + 1}, AccessoryCreate)
    assert exc_info.value.field == "stock_count"
    assert exc_info.value.message == f"stock_count must be at most {INT32_MAX}"

    with pytest.raises(InvalidValue) as exc_info:
        validate({"name": "Ann", "contact_number": INT64_MAX + 1}, UserCreate)
    assert exc_info.value.field == "contact_number"


def date_parsing_test():
    record = validate({"model": "Galaxy S21", "date": "2024-01-05"}, ServiceCreate)
    assert record["date"] == datetime(2024, 1, 5)

    # 带时区的时间统一转换为UTC
    record = validate({"model": "Galaxy S21", "date": "2024-01-05T10:00:00+02:00"}, ServiceCreate)
    assert record["date"] == datetime(2024, 1, 5, 8)

    record = validate({"model": "Galaxy S21", "date": "2024-01-05T10:00:00Z"}, ServiceCreate)
    assert record["date"] == datetime(2024, 1, 5, 10)

    with pytest.raises(InvalidDate) as exc_info:
        validate({"model": "Galaxy S21", "date": "2024-13-01"}, ServiceCreate)
    assert exc_info.value.message == "Invalid date format '2024-13-01'. Use YYYY-MM-DD"


@pytest.mark.parametrize("text", ["2024/01/05", "2024/1/5", "2024.01.05"])
def date_with_slash_or_dot_separators_test(text):
    record = validate({"model": "Galaxy S21", "date": text}, ServiceCreate)
    assert record["date"] == datetime(2024, 1, 5)


def boolean_parsing_test():
    assert validate({"model": "Pixel 7"}, ServiceCreate)["completed"] is False
    assert validate({"model": "Pixel 7", "completed": "yes"}, ServiceCreate)["completed"] is True
    assert validate({"model": "Pixel 7", "completed": "false"}, ServiceCreate)["completed"] is False

    with pytest.raises(InvalidFormat):
        validate({"model": "Pixel 7", "completed": "maybe"}, ServiceCreate)


def service_cost_kept_as_text_test():
    record = validate({"model": "Pixel 7", "service_cost": "1,200 + parts"}, ServiceCreate)
    assert record["service_cost"] == "1,200 + parts"

    record = validate({"model": "Pixel 7", "service_charge": 150}, ServiceCreate)
    assert record["service_charge"] == "150"
