"""
测试顾客接口
包括 multipart 创建、头像上传、联系电话唯一性、搜索分页和删除
"""


def _create_user(client, name, contact_number, **extra):
    response = client.post("/users", data={"name": name, "contact_number": contact_number, **extra})
    assert response.status_code == 201, response.text
    return response.json()["data"]


def create_user_with_photo_test(client, storage):
    response = client.post(
        "/users",
        data={"name": "Ann", "contact_number": "9900000001", "email": "ann@example.com"},
        files={"profile_photo": ("ann.png", b"png-bytes", "image/png")},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "Success"
    assert body["message"] == "New User Created Successfully!"
    user = body["data"]
    assert user["name"] == "Ann"
    assert user["contact_number"] == "9900000001"
    assert user["place"] is None
    assert storage.object_for(user["profile_photo"]) == b"png-bytes"
    assert user["created_at"].endswith("Z")


def create_user_without_photo_test(client):
    user = _create_user(client, "Ben", "9900000002")
    assert user["profile_photo"] is None


def duplicate_contact_number_test(client):
    _create_user(client, "Ann", "9900000001")

    response = client.post("/users", data={"name": "Other", "contact_number": "9900000001"})

    assert response.status_code == 409
    body = response.json()
    assert body["status"] == "Error"
    assert body["error"] == "Conflict"
    assert body["message"] == "Contact number 9900000001 is already in use!"


def missing_contact_number_test(client):
    response = client.post("/users", data={"name": "Ann"})

    assert response.status_code == 422
    assert response.json()["error"] == "MissingField"
    assert response.json()["message"] == "contact_number is required"


def contact_number_above_column_limit_test(client):
    response = client.post("/users", data={"name": "Ann", "contact_number": "9" * 20})

    assert response.status_code == 422
    assert response.json()["error"] == "InvalidValue"
    assert response.json()["message"] == "contact_number must be at most 9223372036854775807"


def search_users_with_pagination_test(client):
    """三个顾客的电话包含 99，limit=2 时第一页返回2条，共2页"""
    _create_user(client, "Ann", "9900000001")
    _create_user(client, "Ben", "9900000002")
    _create_user(client, "Cat", "8800000099")
    _create_user(client, "Dan", "7700000001")

    response = client.get("/users", params={"search": "99", "page": "1", "limit": "2"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert response.json()["message"] == "Users data fetched successfully"
    assert data["pagination"] == {"total": 3, "page": 1, "limit": 2, "totalPages": 2}
    assert len(data["users"]) == 2
    # 按创建时间倒序
    assert [u["name"] for u in data["users"]] == ["Cat", "Ben"]

    second = client.get("/users", params={"search": "99", "page": "2", "limit": "2"}).json()["data"]
    assert [u["name"] for u in second["users"]] == ["Ann"]


def search_is_case_insensitive_test(client):
    _create_user(client, "Ann Lee", "9900000001", place="Kochi")

    data = client.get("/users", params={"search": "KOCHI"}).json()["data"]

    assert data["pagination"]["total"] == 1
    assert data["users"][0]["name"] == "Ann Lee"


def update_user_keeps_photo_test(client, storage):
    created = client.post(
        "/users",
        data={"name": "Ann", "contact_number": "9900000001"},
        files={"profile_photo": ("ann.png", b"png-bytes", "image/png")},
    ).json()["data"]

    response = client.put(
        f"/users/{created['id']}",
        data={"name": "Ann Marie", "contact_number": "9900000001", "place": "Kochi"},
    )

    assert response.status_code == 200
    user = response.json()["data"]
    assert user["name"] == "Ann Marie"
    assert user["place"] == "Kochi"
    assert user["profile_photo"] == created["profile_photo"]


def update_user_to_taken_contact_number_test(client):
    _create_user(client, "Ann", "9900000001")
    ben = _create_user(client, "Ben", "9900000002")

    response = client.put(f"/users/{ben['id']}", data={"name": "Ben", "contact_number": "9900000001"})

    assert response.status_code == 409


def delete_user_test(client):
    user = _create_user(client, "Ann", "9900000001")

    assert client.delete(f"/users/{user['id']}").status_code == 204
    response = client.get(f"/users/{user['id']}")
    assert response.status_code == 404
    assert response.json()["message"] == "User not found!"


def upload_failure_test(client, storage):
    storage.fail = True

    response = client.post(
        "/users",
        data={"name": "Ann", "contact_number": "9900000001"},
        files={"profile_photo": ("ann.png", b"png-bytes", "image/png")},
    )

    assert response.status_code == 500
    assert response.json()["error"] == "UploadFailed"
    # 上传失败时不写入记录
    assert client.get("/users").json()["data"]["pagination"]["total"] == 0
