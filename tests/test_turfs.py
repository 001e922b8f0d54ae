import pytest

from tests.conftest import bearer


def test_list_seeded_turfs(client):
    turfs = client.get("/api/turfs").get_json()
    assert [t["id"] for t in turfs] == ["turf1", "turf2", "turf3", "turf4", "turf5"]
    assert turfs[0]["name"] == "Green Valley Turf"
    assert turfs[4]["amenities"] == ["Lights", "Parking", "Changing Room", "Canteen", "Gym Access"]


def test_get_turf(client):
    assert client.get("/api/turfs/turf3").get_json()["price"] == 700
    assert client.get("/api/turfs/turf_nope").status_code == 404


@pytest.mark.parametrize("prefix", ["/api/turfs", "/api/admin/turfs"])
def test_turf_crud_through_both_route_families(client, admin_headers, today, prefix):
    resp = client.post(prefix, headers=admin_headers, json={
        "name": "Night Owl Arena", "location": "Ring Road", "price": 650, "amenities": ["Lights"],
    })
    assert resp.status_code == 201
    turf = resp.get_json()
    assert turf["rating"] == 4.5

    slots = client.get(f"/api/slots?turfId={turf['id']}&date={today}").get_json()
    assert len(slots) == 8 and slots[0]["price"] == 650

    resp = client.put(f"{prefix}/{turf['id']}", headers=admin_headers, json={"price": 900})
    assert resp.status_code == 200
    updated = resp.get_json()
    assert updated["price"] == 900
    assert updated["name"] == "Night Owl Arena"

    resp = client.delete(f"{prefix}/{turf['id']}", headers=admin_headers)
    assert resp.status_code == 200
    assert client.get(f"/api/turfs/{turf['id']}").status_code == 404
    assert client.get(f"/api/slots?turfId={turf['id']}&date={today}").get_json() == []
    assert client.delete(f"{prefix}/{turf['id']}", headers=admin_headers).status_code == 404


@pytest.mark.parametrize("prefix", ["/api/turfs", "/api/admin/turfs"])
def test_turf_mutations_forbidden_for_users(client, user_headers, prefix):
    payload = {"name": "X", "location": "Y", "price": 100}
    assert client.post(prefix, headers=user_headers, json=payload).status_code == 403
    assert client.post(prefix, json=payload).status_code == 403
    assert client.put(f"{prefix}/turf1", headers=user_headers, json=payload).status_code == 403
    assert client.delete(f"{prefix}/turf1", headers=user_headers).status_code == 403


def test_create_turf_missing_fields(client, admin_headers):
    resp = client.post("/api/turfs", headers=admin_headers, json={"name": "Only name"})
    assert resp.status_code == 400
    assert resp.get_json() == {"message": "Missing required fields"}
