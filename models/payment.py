from datetime import datetime
from models.db import db

class Payment(db.Model):
    __tablename__ = "payments"

    id = db.Column(db.String(64), primary_key=True)
    order_id = db.Column(db.String(64), unique=True, nullable=False, index=True)

    # matched by id only, no hard link to bookings
    booking_id = db.Column(db.String(64), nullable=False, index=True)
    user_id = db.Column(db.String(64), db.ForeignKey("users.id"), nullable=False, index=True)

    amount = db.Column(db.Integer, nullable=False)  # smallest unit (paise)
    currency = db.Column(db.String(10), nullable=False, default="INR")

    status = db.Column(db.String(20), nullable=False, default="pending")  # pending, completed, failed
    payment_method = db.Column(db.String(20), nullable=False, default="upi")

    gateway_order_id = db.Column(db.String(255), nullable=True)
    gateway_payment_id = db.Column(db.String(255), nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    verified_at = db.Column(db.DateTime, nullable=True)

    def to_dict(self):
        return {
            "id": self.id,
            "orderId": self.order_id,
            "bookingId": self.booking_id,
            "userId": self.user_id,
            "amount": self.amount,
            "currency": self.currency,
            "status": self.status,
            "paymentMethod": self.payment_method,
            "razorpayOrderId": self.gateway_order_id,
            "razorpayPaymentId": self.gateway_payment_id,
            "createdAt": self.created_at.isoformat(),
        }
