from datetime import datetime

from flask import current_app

from errors import BadRequest, Forbidden, GatewayNotConfigured, NotFound
from models.payment import Payment
from services.bookings import ensure_owner_or_admin
from services.gateway import PaymentGateway
from utils.ids import new_id


def to_minor_units(amount) -> int:
    try:
        value = float(amount)
    except (TypeError, ValueError):
        raise BadRequest("amount must be a number")
    if value <= 0:
        raise BadRequest("amount must be positive")
    return int(round(value * 100))


class PaymentTracker:
    """
    Payment attempts for bookings.

    pending -> completed happens only through ``verify`` with a valid
    gateway signature. ``failed`` is a valid stored state but no operation
    currently moves a payment there.
    """

    def __init__(self, payments, booking_ledger, config):
        self.payments = payments
        self.booking_ledger = booking_ledger
        self.config = config

    @property
    def gateway(self) -> PaymentGateway:
        return PaymentGateway.from_config(self.config)

    def create_order(self, user, booking_id, amount, currency=None) -> dict:
        if not booking_id or not amount:
            raise BadRequest("Missing required fields")

        gateway = self.gateway
        if not gateway.is_configured:
            current_app.logger.error("Payment order requested but gateway keys are unset")
            raise GatewayNotConfigured()

        booking = self.booking_ledger.find(booking_id)
        if not booking:
            raise NotFound("Booking not found")
        ensure_owner_or_admin(user, booking)

        payment = Payment(
            id=new_id("payment"),
            order_id=gateway.new_order_id(),
            booking_id=booking.id,
            user_id=user.id,
            amount=to_minor_units(amount),
            currency=currency or self.config.get("PAYMENT_CURRENCY", "INR"),
            status="pending",
            payment_method="upi",
        )
        self.payments.add(payment)
        self.payments.commit()

        return {
            "paymentId": payment.id,
            "orderId": payment.order_id,
            "amount": payment.amount,
            "currency": payment.currency,
            "razorpayKeyId": gateway.key_id,
        }

    def _owned(self, user, payment_id) -> Payment:
        payment = self.payments.get(payment_id)
        if not payment:
            raise NotFound("Payment not found")
        if payment.user_id != user.id:
            raise Forbidden("Unauthorized payment access")
        return payment

    def verify(self, user, payment_id, gateway_order_id, gateway_payment_id, signature) -> Payment:
        if not payment_id or not gateway_order_id or not gateway_payment_id:
            raise BadRequest("Missing required fields")

        gateway = self.gateway
        if not gateway.is_configured:
            raise GatewayNotConfigured()

        payment = self._owned(user, payment_id)

        if not gateway.verify_signature(gateway_order_id, gateway_payment_id, signature):
            current_app.logger.warning("Invalid payment signature for %s", payment.id)
            raise BadRequest("Invalid payment signature")

        payment.status = "completed"
        payment.gateway_order_id = gateway_order_id
        payment.gateway_payment_id = gateway_payment_id
        payment.verified_at = datetime.utcnow()
        self.booking_ledger.mark_paid(payment.booking_id, commit=False)
        self.payments.commit()

        current_app.logger.info("Payment %s verified for booking %s", payment.id, payment.booking_id)
        return payment

    def get_status(self, user, payment_id) -> Payment:
        return self._owned(user, payment_id)

    def get_by_booking(self, user, booking_id) -> Payment:
        payment = self.payments.latest_for_booking(booking_id, user.id)
        if payment:
            return payment
        if self.payments.latest_for_booking(booking_id):
            raise Forbidden("Unauthorized payment access")
        raise NotFound("Payment not found")
