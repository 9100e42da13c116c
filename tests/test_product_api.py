"""Testy endpointow /api/products."""

from tests.helpers import create_product


class TestProductCrud:
    def test_create_uses_camel_case_and_defaults(self, client, alice):
        _, headers = alice
        response = client.post(
            "/api/products",
            json={
                "name": "Monitor",
                "description": "27 inch",
                "price": 899,
                "category": "displays",
                "imageUrl": "https://img.example.com/monitor.png",
            },
            headers=headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["countInStock"] == 0
        assert body["imageUrl"] == "https://img.example.com/monitor.png"
        assert body["price"] == 899
        assert isinstance(body["id"], int)

    def test_create_requires_token(self, client):
        response = client.post(
            "/api/products",
            json={
                "name": "Keyboard",
                "description": "Mechanical keyboard",
                "price": 10,
                "category": "peripherals",
                "imageUrl": "k.png",
            },
        )

        assert response.status_code == 401

    def test_invalid_payload_is_bad_request(self, client, alice):
        _, headers = alice
        response = client.post(
            "/api/products",
            json={
                "name": "Broken",
                "description": "negative price",
                "price": -5,
                "category": "misc",
                "imageUrl": "x.png",
            },
            headers=headers,
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Bad request"}

    def test_list_and_filter_by_category(self, client, alice):
        _, headers = alice
        create_product(client, headers, name="Keyboard", category="peripherals")
        create_product(client, headers, name="Mouse", category="peripherals")
        create_product(client, headers, name="Monitor", category="displays")

        everything = client.get("/api/products").json()
        displays = client.get("/api/products", params={"category": "displays"}).json()

        assert [p["name"] for p in everything] == ["Keyboard", "Mouse", "Monitor"]
        assert [p["name"] for p in displays] == ["Monitor"]

    def test_get_missing_product(self, client):
        response = client.get("/api/products/42")

        assert response.status_code == 404
        assert response.json() == {"message": "Product not found"}

    def test_partial_update(self, client, alice):
        _, headers = alice
        product = create_product(client, headers, price=10, countInStock=3)

        response = client.put(
            f"/api/products/{product['id']}", json={"countInStock": 7}, headers=headers
        )

        assert response.status_code == 200
        body = response.json()
        assert body["countInStock"] == 7
        assert body["price"] == 10
        assert body["name"] == product["name"]

    def test_update_missing_product(self, client, alice):
        _, headers = alice
        response = client.put("/api/products/42", json={"price": 1}, headers=headers)

        assert response.status_code == 404

    def test_delete(self, client, alice):
        _, headers = alice
        product = create_product(client, headers)

        response = client.delete(f"/api/products/{product['id']}", headers=headers)

        assert response.status_code == 200
        assert client.get(f"/api/products/{product['id']}").status_code == 404
        assert client.delete(f"/api/products/{product['id']}", headers=headers).status_code == 404
