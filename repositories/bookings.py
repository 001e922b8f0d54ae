from sqlalchemy import func

from models.booking import Booking
from repositories.base import Repository


class BookingRepository(Repository):
    model = Booking

    def list_for_user(self, user_id: str):
        return (
            self.session.query(Booking)
            .filter_by(user_id=user_id)
            .order_by(Booking.created_at.asc())
            .all()
        )

    def list(self):
        return self.session.query(Booking).order_by(Booking.created_at.asc()).all()

    def revenue(self, payment_status: str = "completed") -> float:
        total = (
            self.session.query(func.coalesce(func.sum(Booking.total_price), 0))
            .filter(Booking.payment_status == payment_status)
            .scalar()
        )
        return total or 0
