from flask import Blueprint, request, jsonify, g

from errors import BadRequest
from services import get_services
from utils.auth_context import login_required
from utils.audit import log_event

payments_bp = Blueprint("payments", __name__, url_prefix="/api/payments")


@payments_bp.post("/create-order")
@login_required
def create_order():
    data = request.get_json(silent=True) or {}
    order = get_services().payments.create_order(
        g.user,
        booking_id=data.get("bookingId"),
        amount=data.get("amount"),
        currency=data.get("currency"),
    )
    log_event(
        "PAYMENT_ORDER_CREATED",
        user_id=g.user.id,
        entity="payment",
        entity_id=order["paymentId"],
        metadata={"order_id": order["orderId"], "booking_id": data.get("bookingId")},
    )
    return jsonify(order), 200


@payments_bp.post("/verify")
@login_required
def verify_payment():
    data = request.get_json(silent=True) or {}
    payment_id = data.get("paymentId")
    try:
        payment = get_services().payments.verify(
            g.user,
            payment_id=payment_id,
            gateway_order_id=data.get("razorpayOrderId"),
            gateway_payment_id=data.get("razorpayPaymentId"),
            signature=data.get("razorpaySignature"),
        )
    except BadRequest as exc:
        log_event("PAYMENT_VERIFY_FAIL", user_id=g.user.id, entity="payment", entity_id=payment_id,
                  metadata={"reason": exc.message})
        raise

    log_event("PAYMENT_PAID", user_id=g.user.id, entity="payment", entity_id=payment.id,
              metadata={"booking_id": payment.booking_id})
    return jsonify(message="Payment verified successfully", payment=payment.to_dict()), 200


@payments_bp.get("/<payment_id>")
@login_required
def payment_status(payment_id: str):
    return jsonify(get_services().payments.get_status(g.user, payment_id).to_dict()), 200


@payments_bp.get("/booking/<booking_id>")
@login_required
def payment_for_booking(booking_id: str):
    return jsonify(get_services().payments.get_by_booking(g.user, booking_id).to_dict()), 200
