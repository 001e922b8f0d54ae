from flask import jsonify


class ApiError(Exception):
    """Base for errors that map straight onto an HTTP response."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_response(self):
        return jsonify(message=self.message), self.status_code


class BadRequest(ApiError):
    status_code = 400
    default_message = "Bad request"


class Unauthorized(ApiError):
    status_code = 401
    default_message = "Unauthorized"


class Forbidden(ApiError):
    status_code = 403
    default_message = "Forbidden"


class NotFound(ApiError):
    status_code = 404
    default_message = "Not found"


class Conflict(ApiError):
    status_code = 409
    default_message = "Conflict"


class GatewayNotConfigured(ApiError):
    status_code = 500
    default_message = (
        "Payment gateway not configured. "
        "Please set RAZORPAY_KEY_ID and RAZORPAY_KEY_SECRET"
    )
