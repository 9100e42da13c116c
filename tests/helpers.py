"""Helpery do testow API."""


def register_and_login(client, name="Alice", email="alice@example.com", password="secret123"):
    """Rejestracja + logowanie, zwraca (user_id, naglowki z tokenem)."""
    response = client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 201
    user_id = response.json()["id"]

    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    token = response.json()["token"]

    return user_id, {"Authorization": f"Bearer {token}"}


def create_product(client, headers, **overrides):
    payload = {
        "name": "Keyboard",
        "description": "Mechanical keyboard",
        "price": 199.99,
        "category": "peripherals",
        "imageUrl": "https://img.example.com/keyboard.png",
        "countInStock": 10,
    }
    payload.update(overrides)
    response = client.post("/api/products", json=payload, headers=headers)
    assert response.status_code == 201
    return response.json()


def place_order(client, headers, products=None, amount=59.98, address=None):
    payload = {
        "products": products or [{"productId": 1, "quantity": 2}],
        "amount": amount,
        "address": address
        or {"street": "123 Main St", "city": "Anytown", "zip": "12345", "country": "USA"},
    }
    return client.post("/api/orders", json=payload, headers=headers)
