from flask import Blueprint, request, jsonify, g

from services import get_services
from services.credentials import normalize_email
from utils.audit import log_event
from utils.auth_context import login_required
from errors import Unauthorized


auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")


@auth_bp.post("/register")
def register():
    data = request.get_json(silent=True) or {}
    result = get_services().credentials.register(
        name=data.get("name"),
        email=data.get("email"),
        phone=data.get("phone"),
        password=data.get("password"),
    )
    log_event("REGISTER_SUCCESS", user_id=result["userId"])
    return jsonify(message="Registration successful", **result), 200


@auth_bp.post("/login")
def login():
    data = request.get_json(silent=True) or {}
    email = data.get("email")

    try:
        result = get_services().credentials.login(email, data.get("password"))
    except Unauthorized:
        log_event("LOGIN_FAIL", metadata={"email": normalize_email(email)})
        raise

    log_event("LOGIN_SUCCESS", user_id=result["userId"])
    return jsonify(message="Login successful", **result), 200


@auth_bp.get("/me")
@login_required
def me():
    return jsonify(g.user.to_dict()), 200


@auth_bp.post("/logout")
@login_required
def logout():
    get_services().credentials.revoke_token(g.token)
    log_event("LOGOUT", user_id=g.user.id)
    return jsonify(message="Logged out"), 200
