from flask import Blueprint, jsonify, g

from services import get_services
from routes.turfs import (
    create_turf_from_request,
    update_turf_from_request,
    delete_turf_from_request,
)

admin_bp = Blueprint("admin", __name__, url_prefix="/api/admin")


@admin_bp.get("/stats")
def stats():
    return jsonify(get_services().admin.stats(g.user)), 200


@admin_bp.get("/turfs")
def list_turfs():
    return jsonify([t.to_dict() for t in get_services().admin.list_turfs(g.user)]), 200


# same catalog entry point as /api/turfs
@admin_bp.post("/turfs")
def create_turf():
    return create_turf_from_request()


@admin_bp.put("/turfs/<turf_id>")
def update_turf(turf_id: str):
    return update_turf_from_request(turf_id)


@admin_bp.delete("/turfs/<turf_id>")
def delete_turf(turf_id: str):
    return delete_turf_from_request(turf_id)


@admin_bp.get("/bookings")
def list_bookings():
    rows = get_services().admin.list_bookings(g.user)
    return jsonify([b.to_dict() for b in rows]), 200
