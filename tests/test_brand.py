"""Brand guide endpoint tests"""


def test_get_brand_guide_when_none_exists(client, headers):
    response = client.get("/api/brand", headers=headers)
    assert response.status_code == 200
    assert response.json()["data"] == {"brand_guide": None, "exists": False}


def test_create_and_fetch_brand_guide(client, headers, brand):
    assert brand["company_name"] == "Bloom & Co"
    assert brand["primary_colors"] == ["#FF6600", "#fff"]

    response = client.get("/api/brand", headers=headers)
    data = response.json()["data"]
    assert data["exists"] is True
    assert data["brand_guide"]["id"] == brand["id"]


def test_only_one_brand_guide_per_user(client, headers, brand):
    response = client.post("/api/brand", json={"company_name": "Second"}, headers=headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Brand guide already exists. Use PUT to update."


def test_invalid_hex_color_rejected(client, headers):
    response = client.post("/api/brand", json={"company_name": "Acme", "primary_colors": ["orange"]}, headers=headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed"


def test_too_many_colors_rejected(client, headers):
    colors = ["#000000"] * 7
    response = client.post("/api/brand", json={"company_name": "Acme", "primary_colors": colors}, headers=headers)
    assert response.status_code == 400


def test_update_brand_guide(client, headers, brand):
    response = client.put(
        f"/api/brand/{brand['id']}",
        json={"tone_guidelines": "Short sentences.", "voice_attributes": None},
        headers=headers,
    )
    assert response.status_code == 200
    guide = response.json()["data"]["brand_guide"]
    assert guide["tone_guidelines"] == "Short sentences."
    # null for a list field leaves it untouched
    assert guide["voice_attributes"] == ["warm", "playful"]


def test_other_users_guide_is_not_found(client, brand, register):
    other = register(email="other@example.com")
    response = client.put(f"/api/brand/{brand['id']}", json={"industry": "Hacked"}, headers=other)
    assert response.status_code == 404
    assert response.json()["message"] == "Brand guide not found"


def test_delete_brand_guide(client, headers, brand):
    response = client.delete(f"/api/brand/{brand['id']}", headers=headers)
    assert response.status_code == 200
    assert client.get("/api/brand", headers=headers).json()["data"]["exists"] is False
