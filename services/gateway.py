import hashlib
import hmac

from utils.ids import new_id


class PaymentGateway:
    """
    Razorpay-style checkout collaborator.

    Orders are created locally and handed to the client, which drives the
    hosted checkout. The gateway signs ``"<order_id>|<payment_id>"`` with the
    key secret (HMAC-SHA256, hex) and the client posts that signature back.
    """

    def __init__(self, key_id: str, key_secret: str):
        self.key_id = key_id or ""
        self.key_secret = key_secret or ""

    @classmethod
    def from_config(cls, config):
        return cls(config.get("RAZORPAY_KEY_ID"), config.get("RAZORPAY_KEY_SECRET"))

    @property
    def is_configured(self) -> bool:
        return bool(self.key_id and self.key_secret)

    def new_order_id(self) -> str:
        return new_id("order")

    def sign(self, order_id: str, payment_id: str) -> str:
        body = f"{order_id}|{payment_id}".encode("utf-8")
        return hmac.new(self.key_secret.encode("utf-8"), body, hashlib.sha256).hexdigest()

    def verify_signature(self, order_id: str, payment_id: str, signature) -> bool:
        if not isinstance(signature, str) or not signature:
            return False
        expected = self.sign(order_id, payment_id)
        # exact, full-length, constant-time comparison
        return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))
