"""
Failure taxonomy for the guest order endpoint.

Every failure carries the HTTP status and the exact message sent to the caller.
Messages are fixed strings: nothing derived from stored data or from an
exception ever ends up in a response body.
"""

MISSING_ORDER_ID = "Order ID is required and must be a string"
MISSING_ACCESS_TOKEN = "Access token is required and must be a string"
INVALID_ORDER_ID = "Invalid order ID format"
INVALID_ACCESS_TOKEN = "Invalid access token format"
ORDER_NOT_FOUND = "Order not found or invalid access token"
INTERNAL_ERROR = "Internal server error"


class GuestOrderError(Exception):
    status_code: int = 500
    message: str = INTERNAL_ERROR

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class RequestValidationFailed(GuestOrderError):
    status_code = 400


class OrderNotFound(GuestOrderError):
    # Same message whether the id is unknown, the token is wrong or the order
    # belongs to an account.
    status_code = 404
    message = ORDER_NOT_FOUND


class InternalFault(GuestOrderError):
    status_code = 500
    message = INTERNAL_ERROR
