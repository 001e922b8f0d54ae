import os

from flask import Blueprint, jsonify

health_bp = Blueprint("health", __name__)


@health_bp.get("/api/ping")
def ping():
    return jsonify(message=os.getenv("PING_MESSAGE", "ping")), 200
