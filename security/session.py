import hashlib
import secrets
from datetime import datetime, timedelta

from flask import request, has_request_context


def hash_token(token: str) -> str:
    # SHA-256 is fine for hashing random session tokens
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def generate_token() -> str:
    return secrets.token_hex(32)


def expiry_from(ttl_seconds: int, now: datetime = None):
    """None when tokens are configured to never expire."""
    if not ttl_seconds or ttl_seconds <= 0:
        return None
    return (now or datetime.utcnow()) + timedelta(seconds=ttl_seconds)


def is_expired(expires_at, now: datetime = None) -> bool:
    if expires_at is None:
        return False
    return expires_at <= (now or datetime.utcnow())


def bearer_token_from_request():
    header = request.headers.get("Authorization") or ""
    if not header:
        return None
    if header.startswith("Bearer "):
        header = header[len("Bearer "):]
    return header.strip() or None


def client_fingerprint():
    if not has_request_context():
        return None, None
    ip = request.headers.get("X-Forwarded-For", request.remote_addr)
    user_agent = (request.headers.get("User-Agent") or "")[:255]
    return ip, user_agent
