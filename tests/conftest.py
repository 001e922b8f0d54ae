import hashlib
import hmac
from datetime import date

import pytest

from app import create_app
from config import Config
from services import get_services

GATEWAY_SECRET = "test_gateway_secret"


class TestConfig(Config):
    __test__ = False

    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    BCRYPT_ROUNDS = 4
    SESSION_TTL_SECONDS = 0
    ADMIN_EMAIL = "admin@greenfield.com"
    ADMIN_PASSWORD = "admin123"
    SLOT_HORIZON_DAYS = 3
    RECOMPUTE_BOOKING_PRICE = False
    RAZORPAY_KEY_ID = "rzp_test_key"
    RAZORPAY_KEY_SECRET = GATEWAY_SECRET
    LOG_LEVEL = "WARNING"


@pytest.fixture
def app():
    return create_app(TestConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def ctx(app):
    with app.app_context():
        yield get_services()


@pytest.fixture
def today():
    return date.today().isoformat()


def sign(order_id, payment_id, secret=GATEWAY_SECRET):
    body = f"{order_id}|{payment_id}".encode("utf-8")
    return hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register(client):
    def _register(email="a@b.com", password="pw1234", name="Player One", phone="9876543210"):
        resp = client.post("/api/auth/register", json={
            "name": name,
            "email": email,
            "phone": phone,
            "password": password,
        })
        assert resp.status_code == 200, resp.get_json()
        return resp.get_json()
    return _register


@pytest.fixture
def user_headers(register):
    return bearer(register()["token"])


@pytest.fixture
def admin_headers(client):
    resp = client.post("/api/auth/login", json={"email": "admin@greenfield.com", "password": "admin123"})
    assert resp.status_code == 200
    return bearer(resp.get_json()["token"])


@pytest.fixture
def book(client, today):
    def _book(headers, slot_ids, turf_id="turf1", day=None, total=None):
        resp = client.post("/api/bookings", headers=headers, json={
            "turfId": turf_id,
            "turfName": "Green Valley Turf",
            "date": day or today,
            "slots": slot_ids,
            "totalPrice": total if total is not None else 500 * len(slot_ids),
        })
        return resp
    return _book
