from flask import Blueprint, request, jsonify, g

from services import get_services
from utils.auth_context import login_required
from utils.audit import log_event

booking_bp = Blueprint("booking", __name__, url_prefix="/api/bookings")


@booking_bp.post("")
@login_required
def create_booking():
    data = request.get_json(silent=True) or {}
    booking = get_services().bookings.create(
        g.user,
        turf_id=data.get("turfId"),
        turf_name=data.get("turfName"),
        date=data.get("date"),
        slot_ids=data.get("slots"),
        total_price=data.get("totalPrice"),
    )
    log_event(
        "BOOKING_CREATE",
        user_id=g.user.id,
        entity="booking",
        entity_id=booking.id,
        metadata={"slots": booking.slots, "total_price": booking.total_price},
    )
    return jsonify(booking.to_dict()), 201


@booking_bp.get("/my-bookings")
@login_required
def my_bookings():
    rows = get_services().bookings.list_mine(g.user)
    return jsonify([b.to_dict() for b in rows]), 200


@booking_bp.get("/all")
def list_all_bookings():
    rows = get_services().bookings.list_all(g.user)
    return jsonify([b.to_dict() for b in rows]), 200


@booking_bp.get("/<booking_id>")
@login_required
def get_booking(booking_id: str):
    return jsonify(get_services().bookings.get(g.user, booking_id).to_dict()), 200


@booking_bp.delete("/<booking_id>")
@login_required
def cancel_booking(booking_id: str):
    booking = get_services().bookings.cancel(g.user, booking_id)
    log_event("BOOKING_CANCEL", user_id=g.user.id, entity="booking", entity_id=booking.id)
    return jsonify(message="Booking cancelled successfully", booking=booking.to_dict()), 200


@booking_bp.put("/<booking_id>/status")
def update_booking_status(booking_id: str):
    data = request.get_json(silent=True) or {}
    booking = get_services().bookings.update_status(
        g.user,
        booking_id,
        status=data.get("status"),
        payment_status=data.get("paymentStatus"),
    )
    log_event(
        "ADMIN_BOOKING_STATUS",
        user_id=g.user.id,
        entity="booking",
        entity_id=booking.id,
        metadata={"status": booking.status, "payment_status": booking.payment_status},
    )
    return jsonify(booking.to_dict()), 200
