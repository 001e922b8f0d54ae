from flask import current_app

from errors import BadRequest, Conflict, Unauthorized
from models.session import Session
from models.user import User, ROLE_ADMIN, ROLE_USER
from security.password import hash_password, verify_password
from security.session import (
    client_fingerprint,
    expiry_from,
    generate_token,
    hash_token,
    is_expired,
)
from utils.ids import new_id

BOOTSTRAP_ADMIN_ID = "admin1"


def normalize_email(value: str) -> str:
    return str(value or "").strip().lower()


class CredentialStore:
    """Accounts and the bearer tokens issued to them."""

    def __init__(self, users, sessions, config):
        self.users = users
        self.sessions = sessions
        self.config = config

    def _issue_token(self, user_id: str) -> str:
        raw_token = generate_token()
        ip, user_agent = client_fingerprint()
        self.sessions.add(Session(
            user_id=user_id,
            token_hash=hash_token(raw_token),
            expires_at=expiry_from(self.config.get("SESSION_TTL_SECONDS", 0)),
            ip=ip,
            user_agent=user_agent,
        ))
        return raw_token

    def register(self, name, email, phone, password) -> dict:
        email = normalize_email(email)
        if not name or not email or not phone or not password:
            raise BadRequest("Missing required fields")
        if not isinstance(password, str):
            raise BadRequest("password must be a string")

        if self.users.get_by_email(email):
            raise Conflict("Email already exists")

        user = User(
            id=new_id("user"),
            name=str(name).strip(),
            email=email,
            phone=str(phone).strip(),
            password_hash=hash_password(password, self.config.get("BCRYPT_ROUNDS", 12)),
            role=ROLE_USER,
        )
        self.users.add(user)
        self.users.flush()
        token = self._issue_token(user.id)
        self.users.commit()

        return {"token": token, "userId": user.id, "role": user.role}

    def login(self, email, password) -> dict:
        email = normalize_email(email)
        if not email or not password:
            raise BadRequest("Email and password are required")
        if not isinstance(password, str):
            raise Unauthorized("Invalid email or password")

        user = self.users.get_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            raise Unauthorized("Invalid email or password")

        # earlier tokens for this account stay valid
        token = self._issue_token(user.id)
        self.sessions.commit()

        return {"token": token, "userId": user.id, "role": user.role}

    def resolve_token(self, raw_token):
        if not raw_token:
            return None
        sess = self.sessions.get_by_token_hash(hash_token(raw_token))
        if not sess or sess.revoked or is_expired(sess.expires_at):
            return None
        return self.users.get(sess.user_id)

    def revoke_token(self, raw_token) -> bool:
        if not raw_token:
            return False
        sess = self.sessions.get_by_token_hash(hash_token(raw_token))
        if not sess or sess.revoked:
            return False
        sess.revoked = True
        self.sessions.commit()
        return True

    def ensure_admin(self) -> User:
        """Creates the bootstrap admin account if it is missing."""
        email = normalize_email(self.config.get("ADMIN_EMAIL", "admin@greenfield.com"))
        admin = self.users.get(BOOTSTRAP_ADMIN_ID) or self.users.get_by_email(email)
        if admin:
            return admin

        admin = User(
            id=BOOTSTRAP_ADMIN_ID,
            name="Admin User",
            email=email,
            phone="9999999999",
            password_hash=hash_password(
                self.config.get("ADMIN_PASSWORD", "admin123"),
                self.config.get("BCRYPT_ROUNDS", 12),
            ),
            role=ROLE_ADMIN,
        )
        self.users.add(admin)
        self.users.commit()
        current_app.logger.info("Bootstrap admin account created: %s", email)
        return admin

    def promote(self, email) -> User:
        user = self.users.get_by_email(normalize_email(email))
        if not user:
            return None
        if user.role != ROLE_ADMIN:
            user.role = ROLE_ADMIN
            self.users.commit()
        return user
