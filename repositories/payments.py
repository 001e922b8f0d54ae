from models.payment import Payment
from repositories.base import Repository


class PaymentRepository(Repository):
    model = Payment

    def latest_for_booking(self, booking_id: str, user_id: str = None):
        query = self.session.query(Payment).filter_by(booking_id=booking_id)
        if user_id is not None:
            query = query.filter_by(user_id=user_id)
        return query.order_by(Payment.created_at.desc(), Payment.id.desc()).first()
