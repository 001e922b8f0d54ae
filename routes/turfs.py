from flask import Blueprint, request, jsonify, g

from services import get_services
from utils.audit import log_event

turfs_bp = Blueprint("turfs", __name__, url_prefix="/api/turfs")


@turfs_bp.get("")
def list_turfs():
    return jsonify([t.to_dict() for t in get_services().catalog.list()]), 200


@turfs_bp.get("/<turf_id>")
def get_turf(turf_id: str):
    return jsonify(get_services().catalog.get(turf_id).to_dict()), 200


def create_turf_from_request():
    data = request.get_json(silent=True) or {}
    turf = get_services().catalog.create(
        g.user,
        name=data.get("name"),
        location=data.get("location"),
        price=data.get("price"),
        amenities=data.get("amenities"),
    )
    log_event("TURF_CREATE", user_id=g.user.id, entity="turf", entity_id=turf.id)
    return jsonify(turf.to_dict()), 201


def update_turf_from_request(turf_id: str):
    data = request.get_json(silent=True) or {}
    turf = get_services().catalog.update(
        g.user,
        turf_id,
        name=data.get("name"),
        location=data.get("location"),
        price=data.get("price"),
        amenities=data.get("amenities"),
    )
    log_event("TURF_UPDATE", user_id=g.user.id, entity="turf", entity_id=turf.id)
    return jsonify(turf.to_dict()), 200


def delete_turf_from_request(turf_id: str):
    get_services().catalog.delete(g.user, turf_id)
    log_event("TURF_DELETE", user_id=g.user.id, entity="turf", entity_id=turf_id)
    return jsonify(message="Turf deleted successfully"), 200


@turfs_bp.post("")
def create_turf():
    return create_turf_from_request()


@turfs_bp.put("/<turf_id>")
def update_turf(turf_id: str):
    return update_turf_from_request(turf_id)


@turfs_bp.delete("/<turf_id>")
def delete_turf(turf_id: str):
    return delete_turf_from_request(turf_id)
