from flask import Blueprint, request, jsonify

from errors import BadRequest
from services import get_services

slots_bp = Blueprint("slots", __name__, url_prefix="/api/slots")


@slots_bp.get("")
def list_slots():
    turf_id = request.args.get("turfId")
    date_str = request.args.get("date")  # YYYY-MM-DD
    if not turf_id or not date_str:
        raise BadRequest("turfId and date are required")

    slots = get_services().slots.list_slots(turf_id, date_str)
    return jsonify([s.to_dict() for s in slots]), 200


@slots_bp.get("/<slot_id>")
def get_slot(slot_id: str):
    return jsonify(get_services().slots.get(slot_id).to_dict()), 200
