"""Audience endpoint tests"""


def test_create_audience_with_summary(client, headers, make_audience):
    audience = make_audience(
        name="  Weekend Runners ",
        demographics={"age_range": {"min": 25, "max": 40}, "income": "$50k+", "location": ["Austin", "Denver"]},
        propensity_level="High",
    )
    assert audience["name"] == "Weekend Runners"
    assert audience["is_active"] is True
    assert audience["summary"]["demographics"] == "Ages 25-40, $50k+, Austin, Denver"
    assert audience["summary"]["propensity"] == "High"
    assert audience["summary"]["interests"] == "fashion"


def test_partial_age_range_in_summary(make_audience):
    audience = make_audience(name="Seniors", demographics={"age_range": {"min": 65}})
    assert audience["summary"]["demographics"] == "Ages 65-?"


def test_audience_names_are_unique_per_user(client, headers, make_audience, register):
    make_audience(name="Gamers")
    response = client.post("/api/audiences", json={"name": "Gamers"}, headers=headers)
    assert response.status_code == 400
    assert response.json()["message"] == "An audience with this name already exists"

    # same name is fine for someone else
    other = register(email="other@example.com")
    response = client.post("/api/audiences", json={"name": "Gamers"}, headers=other)
    assert response.status_code == 201


def test_audience_quota(client, headers, make_audience):
    for i in range(5):
        make_audience(name=f"Audience {i}")
    response = client.post("/api/audiences", json={"name": "One too many"}, headers=headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Maximum 5 audiences allowed per user"


def test_invalid_propensity_rejected(client, headers):
    response = client.post("/api/audiences", json={"name": "X", "propensity_level": "Extreme"}, headers=headers)
    assert response.status_code == 400


def test_list_and_toggle(client, headers, make_audience):
    first = make_audience(name="First")
    make_audience(name="Second")

    response = client.patch(f"/api/audiences/{first['id']}/toggle", headers=headers)
    assert response.status_code == 200
    assert response.json()["data"]["audience"]["is_active"] is False

    active = client.get("/api/audiences?active=true", headers=headers).json()
    assert [a["name"] for a in active["data"]["audiences"]] == ["Second"]

    everything = client.get("/api/audiences", headers=headers).json()
    assert everything["count"] == 2


def test_update_audience(client, headers, make_audience):
    audience = make_audience(name="Parents")
    response = client.put(
        f"/api/audiences/{audience['id']}",
        json={"preferred_tone": "Reassuring", "interests": None},
        headers=headers,
    )
    assert response.status_code == 200
    updated = response.json()["data"]["audience"]
    assert updated["preferred_tone"] == "Reassuring"
    assert updated["interests"] == ["fashion"]


def test_rename_to_existing_name_rejected(client, headers, make_audience):
    make_audience(name="Taken")
    audience = make_audience(name="Free")
    response = client.put(f"/api/audiences/{audience['id']}", json={"name": "Taken"}, headers=headers)
    assert response.status_code == 400


def test_other_users_audience_is_not_found(client, make_audience, register):
    audience = make_audience(name="Private")
    other = register(email="other@example.com")
    assert client.get(f"/api/audiences/{audience['id']}", headers=other).status_code == 404
    assert client.delete(f"/api/audiences/{audience['id']}", headers=other).status_code == 404


def test_delete_audience(client, headers, make_audience):
    audience = make_audience(name="Gone")
    assert client.delete(f"/api/audiences/{audience['id']}", headers=headers).status_code == 200
    assert client.get(f"/api/audiences/{audience['id']}", headers=headers).status_code == 404
