from datetime import date as date_cls, timedelta

from flask import current_app

from errors import Conflict, NotFound
from models.slot import Slot

TIME_WINDOWS = [
    "6:00 AM - 7:00 AM",
    "7:00 AM - 8:00 AM",
    "8:00 AM - 9:00 AM",
    "5:00 PM - 6:00 PM",
    "6:00 PM - 7:00 PM",
    "7:00 PM - 8:00 PM",
    "8:00 PM - 9:00 PM",
    "9:00 PM - 10:00 PM",
]


def slot_id_for(turf_id: str, day: str, window: int) -> str:
    return f"slot_{turf_id}_{day}_{window}"


class SlotRegistry:
    """Bookable time windows per turf and day, and their availability."""

    def __init__(self, slots, config):
        self.slots = slots
        self.config = config

    def generate(self, turf, start=None, days=None, commit=True) -> int:
        """
        Creates the missing slots of ``turf`` for ``days`` days from ``start``.
        Existing slots keep their availability. Returns how many were added.
        """
        start = start or date_cls.today()
        if days is None:
            days = self.config.get("SLOT_HORIZON_DAYS", 30)

        dates = [(start + timedelta(days=n)).isoformat() for n in range(days)]
        existing = self.slots.ids_for_turf(turf.id, dates)

        created = 0
        for day in dates:
            for index, label in enumerate(TIME_WINDOWS):
                sid = slot_id_for(turf.id, day, index)
                if sid in existing:
                    continue
                self.slots.add(Slot(
                    id=sid,
                    turf_id=turf.id,
                    date=day,
                    window_index=index,
                    time=label,
                    price=turf.price,
                    available=True,
                ))
                created += 1

        if commit:
            self.slots.commit()
        if created:
            current_app.logger.debug("Generated %s slots for turf %s", created, turf.id)
        return created

    def generate_all(self, turfs, start=None) -> int:
        created = sum(self.generate(turf, start, commit=False) for turf in turfs)
        self.slots.commit()
        return created

    def list_slots(self, turf_id: str, day: str):
        return self.slots.list_for(turf_id, day)

    def get(self, slot_id: str) -> Slot:
        slot = self.slots.get(slot_id)
        if not slot:
            raise NotFound("Slot not found")
        return slot

    def claim(self, slot_ids, commit=True):
        """
        Marks every known slot in ``slot_ids`` unavailable, or none of them.

        Unknown ids are skipped. If any known slot is already taken the
        claim is rolled back and ``Conflict`` is raised.
        """
        ids = list(dict.fromkeys(slot_ids or []))
        known = self.slots.existing_ids(ids)
        changed = self.slots.mark_unavailable_if_available(known)
        if changed != len(known):
            self.slots.rollback()
            raise Conflict("One or more slots are already booked")
        if commit:
            self.slots.commit()
        return known

    def release(self, slot_ids, commit=True) -> int:
        ids = list(dict.fromkeys(slot_ids or []))
        changed = self.slots.mark_available(ids)
        if commit:
            self.slots.commit()
        return changed

    def price_of(self, slot_ids) -> float:
        return sum(s.price for s in self.slots.find_many(list(slot_ids or [])))

    def drop_open_slots(self, turf_id: str, commit=True) -> int:
        removed = self.slots.delete_available_for_turf(turf_id)
        if commit:
            self.slots.commit()
        return removed
