from flask import current_app

from errors import BadRequest, Forbidden, NotFound
from models.booking import Booking, BOOKING_PAYMENT_STATUSES, BOOKING_STATUSES
from services.catalog import require_admin
from utils.ids import new_id


def ensure_owner_or_admin(user, booking, message="You don't have access to this booking"):
    if booking.user_id != user.id and not user.is_admin:
        raise Forbidden(message)


class BookingLedger:
    """Reservations of slots, kept consistent with slot availability."""

    def __init__(self, bookings, slot_registry, turfs, config):
        self.bookings = bookings
        self.slot_registry = slot_registry
        self.turfs = turfs
        self.config = config

    def create(self, user, turf_id, turf_name, date, slot_ids, total_price) -> Booking:
        if not turf_id or not date or not slot_ids or not total_price:
            raise BadRequest("Missing required fields")
        if not isinstance(slot_ids, list) or not all(isinstance(s, str) for s in slot_ids):
            raise BadRequest("slots must be a list of slot ids")
        try:
            total_price = float(total_price)
        except (TypeError, ValueError):
            raise BadRequest("totalPrice must be a number")

        if not turf_name:
            turf = self.turfs.get(turf_id)
            turf_name = turf.name if turf else None

        # claim and insert commit together; a failed claim leaves nothing behind
        self.slot_registry.claim(slot_ids, commit=False)

        if self.config.get("RECOMPUTE_BOOKING_PRICE"):
            total_price = self.slot_registry.price_of(slot_ids)

        booking = Booking(
            id=new_id("booking"),
            user_id=user.id,
            turf_id=turf_id,
            turf_name=turf_name,
            date=date,
            slots=list(slot_ids),
            total_price=total_price,
            status="confirmed",
            payment_status="pending",
        )
        self.bookings.add(booking)
        self.bookings.commit()

        current_app.logger.info(
            "Booking %s created by %s for %s slot(s)", booking.id, user.id, len(slot_ids)
        )
        return booking

    def list_mine(self, user):
        return self.bookings.list_for_user(user.id)

    def list_all(self, user):
        require_admin(user, "Only admins can view all bookings")
        return self.bookings.list()

    def count(self) -> int:
        return self.bookings.count()

    def find(self, booking_id):
        return self.bookings.get(booking_id)

    def get(self, user, booking_id) -> Booking:
        booking = self.bookings.get(booking_id)
        if not booking:
            raise NotFound("Booking not found")
        ensure_owner_or_admin(user, booking)
        return booking

    def cancel(self, user, booking_id) -> Booking:
        booking = self.get(user, booking_id)
        if booking.status == "cancelled":
            raise BadRequest("Booking is already cancelled")

        self.slot_registry.release(booking.slots, commit=False)
        booking.status = "cancelled"
        booking.payment_status = "refunded"
        self.bookings.commit()

        current_app.logger.info("Booking %s cancelled by %s", booking.id, user.id)
        return booking

    def update_status(self, user, booking_id, status=None, payment_status=None) -> Booking:
        """
        Raw admin overwrite. Transitions are not checked, so e.g.
        cancelled -> confirmed is accepted and does not re-claim slots.
        Those slots may be booked by someone else meanwhile, and cancelling
        the revived booking again releases them under the other booking.
        """
        require_admin(user, "Only admins can update booking status")
        booking = self.bookings.get(booking_id)
        if not booking:
            raise NotFound("Booking not found")

        if status and status not in BOOKING_STATUSES:
            raise BadRequest(f"status must be one of {', '.join(BOOKING_STATUSES)}")
        if payment_status and payment_status not in BOOKING_PAYMENT_STATUSES:
            raise BadRequest(
                f"paymentStatus must be one of {', '.join(BOOKING_PAYMENT_STATUSES)}"
            )

        if status:
            booking.status = status
        if payment_status:
            booking.payment_status = payment_status
        self.bookings.commit()
        return booking

    def mark_paid(self, booking_id, commit=True):
        booking = self.bookings.get(booking_id)
        if booking and booking.status != "cancelled":
            booking.payment_status = "completed"
            if commit:
                self.bookings.commit()
        return booking

    def revenue(self) -> float:
        return self.bookings.revenue("completed")
