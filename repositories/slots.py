from sqlalchemy import select, update

from models.slot import Slot
from repositories.base import Repository


class SlotRepository(Repository):
    model = Slot

    def list_for(self, turf_id: str, date: str):
        return (
            self.session.query(Slot)
            .filter_by(turf_id=turf_id, date=date)
            .order_by(Slot.window_index.asc())
            .all()
        )

    def existing_ids(self, slot_ids):
        if not slot_ids:
            return []
        rows = self.session.execute(select(Slot.id).where(Slot.id.in_(slot_ids)))
        return [r[0] for r in rows]

    def find_many(self, slot_ids):
        if not slot_ids:
            return []
        return self.session.query(Slot).filter(Slot.id.in_(slot_ids)).all()

    def ids_for_turf(self, turf_id: str, dates):
        rows = self.session.execute(
            select(Slot.id).where(Slot.turf_id == turf_id, Slot.date.in_(list(dates)))
        )
        return {r[0] for r in rows}

    def mark_unavailable_if_available(self, slot_ids) -> int:
        """
        Conditional UPDATE: only rows still available are flipped.
        Returns the number of rows changed.
        """
        if not slot_ids:
            return 0
        result = self.session.execute(
            update(Slot)
            .where(Slot.id.in_(slot_ids), Slot.available.is_(True))
            .values(available=False)
            .execution_options(synchronize_session=False)
        )
        self.session.expire_all()
        return result.rowcount

    def mark_available(self, slot_ids) -> int:
        if not slot_ids:
            return 0
        result = self.session.execute(
            update(Slot)
            .where(Slot.id.in_(slot_ids))
            .values(available=True)
            .execution_options(synchronize_session=False)
        )
        self.session.expire_all()
        return result.rowcount

    def delete_available_for_turf(self, turf_id: str) -> int:
        return (
            self.session.query(Slot)
            .filter(Slot.turf_id == turf_id, Slot.available.is_(True))
            .delete(synchronize_session=False)
        )
