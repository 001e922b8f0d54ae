from datetime import datetime
from models.db import db

BOOKING_STATUSES = ("confirmed", "pending", "cancelled")
BOOKING_PAYMENT_STATUSES = ("pending", "completed", "refunded")


class Booking(db.Model):
    __tablename__ = "bookings"

    id = db.Column(db.String(64), primary_key=True)

    user_id = db.Column(db.String(64), db.ForeignKey("users.id"), nullable=False, index=True)
    turf_id = db.Column(db.String(64), nullable=False, index=True)
    turf_name = db.Column(db.String(120), nullable=True)

    date = db.Column(db.String(10), nullable=False)
    slots = db.Column(db.JSON, nullable=False, default=list)  # ordered slot ids
    total_price = db.Column(db.Float, nullable=False)

    status = db.Column(db.String(20), nullable=False, default="confirmed")
    payment_status = db.Column(db.String(20), nullable=False, default="pending")

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "turfId": self.turf_id,
            "turfName": self.turf_name,
            "date": self.date,
            "slots": list(self.slots or []),
            "totalPrice": self.total_price,
            "status": self.status,
            "paymentStatus": self.payment_status,
            "createdAt": self.created_at.isoformat(),
        }
