"""
测试配件接口
覆盖默认值、名称唯一性、枚举校验、ID格式和重复删除
"""
from app.db.base import Base

CABLE = {"name": "USB-C Cable", "type": "CABLE", "selling_price": 10, "stock_count": 5}


def create_accessory_defaults_test(client):
    response = client.post("/accessories", json=CABLE)

    assert response.status_code == 201
    accessory = response.json()["data"]
    assert accessory["sold_count"] == 0
    assert accessory["status"] == "IN_STOCK"
    assert accessory["selling_price"] == 10.0
    assert accessory["stock_count"] == 5
    assert isinstance(accessory["id"], int)


def duplicate_name_test(client):
    client.post("/accessories", json=CABLE)

    response = client.post("/accessories", json=CABLE)

    assert response.status_code == 409
    assert response.json()["message"] == "Accessory name is already in use"


def update_to_own_name_test(client):
    accessory = client.post("/accessories", json=CABLE).json()["data"]

    response = client.put(f"/accessories/{accessory['id']}", json={**CABLE, "sold_count": 2})

    assert response.status_code == 200
    assert response.json()["data"]["sold_count"] == 2


def update_to_other_name_test(client):
    client.post("/accessories", json=CABLE)
    charger = client.post("/accessories", json={**CABLE, "name": "Charger", "type": "CHARGER"}).json()["data"]

    response = client.put(f"/accessories/{charger['id']}", json={**CABLE, "type": "CHARGER"})

    assert response.status_code == 409


def invalid_type_test(client):
    response = client.post("/accessories", json={**CABLE, "type": "LAPTOP"})

    assert response.status_code == 422
    assert response.json()["error"] == "InvalidValue"


def negative_stock_test(client):
    response = client.post("/accessories", json={**CABLE, "stock_count": -1})

    assert response.status_code == 422
    assert response.json()["message"] == "stock_count must be a non-negative number"


def malformed_json_test(client):
    response = client.post(
        "/accessories",
        content=b'{"name": "broken"',
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 422
    assert response.json()["error"] == "InvalidFormat"


def bad_id_test(client):
    response = client.get("/accessories/abc")

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid Accessory ID format"


def non_ascii_digit_id_test(client):
    response = client.get("/accessories/²")

    assert response.status_code == 400
    assert response.json()["error"] == "BadId"


def id_beyond_column_range_test(client):
    response = client.get("/accessories/99999999999999999999")

    assert response.status_code == 404
    assert response.json()["message"] == "Accessory not found!"


def bad_id_checked_before_body_test(client):
    """ID格式错误优先于请求体校验错误"""
    response = client.put("/accessories/abc", json={"type": "LAPTOP"})

    assert response.status_code == 400
    assert response.json()["error"] == "BadId"


def number_too_large_test(client):
    response = client.post(
        "/accessories",
        content=b'{"name": "Cable", "type": "CABLE", "selling_price": 1' + b"0" * 400 + b', "stock_count": 1}',
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 422
    assert response.json()["error"] == "InvalidFormat"


def stock_count_above_column_limit_test(client):
    response = client.post("/accessories", json={**CABLE, "stock_count": 2 ** 31})

    assert response.status_code == 422
    assert response.json()["error"] == "InvalidValue"
    assert response.json()["message"] == "stock_count must be at most 2147483647"


def store_failure_test(client, database):
    """数据库故障返回500和StoreError"""
    Base.metadata.tables["accessories"].drop(database.engine)

    response = client.get("/accessories")

    assert response.status_code == 500
    assert response.json()["status"] == "Error"
    assert response.json()["error"] == "StoreError"


def get_is_repeatable_test(client):
    accessory = client.post("/accessories", json=CABLE).json()["data"]

    first = client.get(f"/accessories/{accessory['id']}").json()
    second = client.get(f"/accessories/{accessory['id']}").json()

    assert first == second
    assert first["data"] == accessory


def delete_twice_test(client):
    accessory = client.post("/accessories", json=CABLE).json()["data"]

    first = client.delete(f"/accessories/{accessory['id']}")
    second = client.delete(f"/accessories/{accessory['id']}")

    assert first.status_code == 204
    assert first.content == b""
    assert second.status_code == 404
    assert second.json()["message"] == "Accessory not found!"


def list_accessories_test(client):
    for i in range(3):
        client.post("/accessories", json={**CABLE, "name": f"Cable {i}"})

    body = client.get("/accessories", params={"page": "x", "limit": "-5"}).json()

    assert body["data"]["pagination"] == {"total": 3, "page": 1, "limit": 10, "totalPages": 1}
    assert [a["name"] for a in body["data"]["accessories"]] == ["Cable 2", "Cable 1", "Cable 0"]
