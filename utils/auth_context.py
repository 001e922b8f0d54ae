from functools import wraps
from flask import g
from errors import Unauthorized
from security.session import bearer_token_from_request
from services import get_services

def load_current_user():
    raw_token = bearer_token_from_request()
    g.token = raw_token
    g.user = get_services().credentials.resolve_token(raw_token) if raw_token else None

def login_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if getattr(g, "token", None) is None:
            raise Unauthorized("No token provided")
        if getattr(g, "user", None) is None:
            raise Unauthorized("Invalid token")
        return fn(*args, **kwargs)
    return wrapper
