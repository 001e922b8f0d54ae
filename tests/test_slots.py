import pytest

from errors import Conflict, NotFound
from services.slot_registry import TIME_WINDOWS, slot_id_for


def test_list_slots_for_seeded_turf(client, today):
    resp = client.get(f"/api/slots?turfId=turf1&date={today}")
    assert resp.status_code == 200
    slots = resp.get_json()
    assert len(slots) == 8
    assert [s["time"] for s in slots] == TIME_WINDOWS
    assert all(s["available"] and s["price"] == 500 for s in slots)
    assert slots[0]["id"] == f"slot_turf1_{today}_0"


def test_list_slots_requires_turf_and_date(client, today):
    assert client.get(f"/api/slots?date={today}").status_code == 400
    assert client.get("/api/slots?turfId=turf1").status_code == 400


def test_list_slots_outside_horizon_is_empty(client):
    assert client.get("/api/slots?turfId=turf1&date=1999-01-01").get_json() == []


def test_get_single_slot(client, today):
    sid = slot_id_for("turf2", today, 3)
    body = client.get(f"/api/slots/{sid}").get_json()
    assert body["turfId"] == "turf2"
    assert body["time"] == "5:00 PM - 6:00 PM"
    assert client.get("/api/slots/slot_missing").status_code == 404


def test_claim_then_release_round_trip(ctx, today):
    ids = [slot_id_for("turf1", today, 0), slot_id_for("turf1", today, 1)]
    ctx.slots.claim(ids)

    by_id = {s.id: s.available for s in ctx.slots.list_slots("turf1", today)}
    assert by_id[ids[0]] is False and by_id[ids[1]] is False
    assert sum(1 for v in by_id.values() if v) == 6

    ctx.slots.release(ids)
    assert all(s.available for s in ctx.slots.list_slots("turf1", today))


def test_claim_skips_unknown_ids(ctx, today):
    known = slot_id_for("turf1", today, 2)
    assert ctx.slots.claim([known, "slot_does_not_exist"]) == [known]
    assert ctx.slots.get(known).available is False


def test_claim_rejects_taken_slot_without_partial_apply(ctx, today):
    taken = slot_id_for("turf1", today, 4)
    free = slot_id_for("turf1", today, 5)
    ctx.slots.claim([taken])

    with pytest.raises(Conflict):
        ctx.slots.claim([free, taken])

    assert ctx.slots.get(free).available is True
    assert ctx.slots.get(taken).available is False


def test_generate_is_idempotent(ctx, today):
    turf = ctx.catalog.get("turf1")
    assert ctx.slots.generate(turf) == 0
    assert len(ctx.slots.list_slots("turf1", today)) == 8


def test_get_unknown_slot_raises(ctx):
    with pytest.raises(NotFound):
        ctx.slots.get("slot_nope")
