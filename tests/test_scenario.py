from tests.conftest import bearer


def test_register_book_and_cancel_walkthrough(client, today):
    t1 = client.post("/api/auth/register", json={
        "name": "A", "email": "a@b.com", "phone": "9000000000", "password": "pw1234",
    }).get_json()["token"]
    t2 = client.post("/api/auth/login", json={"email": "a@b.com", "password": "pw1234"}).get_json()["token"]
    assert t1 != t2
    for token in (t1, t2):
        assert client.get("/api/auth/me", headers=bearer(token)).status_code == 200

    assert len(client.get("/api/turfs").get_json()) == 5

    slots = client.get(f"/api/slots?turfId=turf1&date={today}").get_json()
    assert len(slots) == 8
    chosen = slots[:2]

    resp = client.post("/api/bookings", headers=bearer(t1), json={
        "turfId": "turf1",
        "turfName": "Green Valley Turf",
        "date": today,
        "slots": [s["id"] for s in chosen],
        "totalPrice": sum(s["price"] for s in chosen),
    })
    assert resp.status_code == 201
    booking = resp.get_json()
    assert (booking["status"], booking["paymentStatus"]) == ("confirmed", "pending")

    after = {s["id"]: s["available"] for s in client.get(f"/api/slots?turfId=turf1&date={today}").get_json()}
    assert not any(after[s["id"]] for s in chosen)

    cancelled = client.delete(f"/api/bookings/{booking['id']}", headers=bearer(t2)).get_json()["booking"]
    assert (cancelled["status"], cancelled["paymentStatus"]) == ("cancelled", "refunded")

    restored = {s["id"]: s["available"] for s in client.get(f"/api/slots?turfId=turf1&date={today}").get_json()}
    assert all(restored[s["id"]] for s in chosen)
