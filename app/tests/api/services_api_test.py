"""
测试维修服务接口
"""


def create_service_test(client):
    response = client.post("/services", json={
        "model": "Galaxy S21",
        "service_type": "SCREEN_REPLACEMENT",
        "date": "2024-01-05",
        "service_cost": "1500",
        "service_charge": "300 + tax",
    })

    assert response.status_code == 201
    service = response.json()["data"]
    assert response.json()["message"] == "Service Created Successfully"
    assert service["completed"] is False
    assert service["date"] == "2024-01-05T00:00:00.000Z"
    assert service["service_charge"] == "300 + tax"
    assert service["user_id"] is None


def service_for_existing_user_test(client):
    user = client.post("/users", data={"name": "Ann", "contact_number": "9900000001"}).json()["data"]

    response = client.post("/services", json={"model": "Pixel 7", "user_id": user["id"], "completed": "yes"})

    assert response.status_code == 201
    assert response.json()["data"]["user_id"] == user["id"]
    assert response.json()["data"]["completed"] is True


def service_for_unknown_user_test(client):
    response = client.post("/services", json={"model": "Pixel 7", "user_id": 999})

    assert response.status_code == 404
    assert response.json()["message"] == "User not found!"


def invalid_service_type_test(client):
    response = client.post("/services", json={"model": "Pixel 7", "service_type": "polish"})

    assert response.status_code == 422
    assert "SCREEN_REPLACEMENT" in response.json()["message"]


def update_service_test(client):
    service = client.post("/services", json={"model": "Pixel 7", "warranty": "3 months"}).json()["data"]

    response = client.put(f"/services/{service['id']}", json={"model": "Pixel 7", "completed": True})

    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["completed"] is True
    assert updated["warranty"] == "3 months"


def update_missing_service_test(client):
    response = client.put("/services/77", json={"model": "Pixel 7"})

    assert response.status_code == 404
    assert response.json()["message"] == "Service not found!"


def service_kept_after_user_deleted_test(client):
    user = client.post("/users", data={"name": "Ann", "contact_number": "9900000001"}).json()["data"]
    service = client.post("/services", json={"model": "Pixel 7", "user_id": user["id"]}).json()["data"]

    assert client.delete(f"/users/{user['id']}").status_code == 204

    response = client.get(f"/services/{service['id']}")
    assert response.status_code == 200
    assert response.json()["data"]["user_id"] == user["id"]
