"""
测试分类和商品接口，以及健康检查和未知路由
"""


def _category(client, name="Phones"):
    response = client.post("/categories", json={"name": name})
    assert response.status_code == 201
    return response.json()["data"]


def duplicate_category_test(client):
    _category(client)

    response = client.post("/categories", json={"name": "Phones"})

    assert response.status_code == 409
    assert response.json()["message"] == "Phones already exists!"


def create_product_embeds_category_test(client):
    category = _category(client)

    response = client.post("/products", json={"name": "Tempered Glass", "price": "4.5", "category_id": category["id"]})

    assert response.status_code == 201
    product = response.json()["data"]
    assert product["price"] == 4.5
    assert product["category"]["name"] == "Phones"


def product_for_unknown_category_test(client):
    response = client.post("/products", json={"name": "Glass", "price": 4, "category_id": 12})

    assert response.status_code == 404
    assert response.json()["message"] == "Category not found!"


def product_requires_category_test(client):
    response = client.post("/products", json={"name": "Glass", "price": 4})

    assert response.status_code == 422
    assert response.json()["message"] == "category_id is required"


def move_product_to_other_category_test(client):
    phones = _category(client, "Phones")
    cases = _category(client, "Cases")
    product = client.post("/products", json={"name": "Clear Case", "price": 3, "category_id": phones["id"]}).json()["data"]

    response = client.put(
        f"/products/{product['id']}",
        json={"name": "Clear Case", "price": 3, "category_id": cases["id"]},
    )

    assert response.status_code == 200
    assert response.json()["data"]["category"]["name"] == "Cases"


def list_products_test(client):
    category = _category(client)
    client.post("/products", json={"name": "Clear Case", "price": 3, "category_id": category["id"]})
    client.post("/products", json={"name": "Glass", "price": 4, "category_id": category["id"]})

    data = client.get("/products", params={"search": "case"}).json()["data"]

    assert data["pagination"]["total"] == 1
    assert data["products"][0]["name"] == "Clear Case"


def health_check_test(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "Success"
    assert response.json()["data"]["status"] == "online"


def unknown_route_test(client):
    response = client.get("/laptops")

    assert response.status_code == 404
    assert response.json()["status"] == "Error"
