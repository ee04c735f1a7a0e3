import re
from dataclasses import dataclass
from typing import Any

from guest_order.core.errors import (
    INVALID_ACCESS_TOKEN,
    INVALID_ORDER_ID,
    MISSING_ACCESS_TOKEN,
    MISSING_ORDER_ID,
    RequestValidationFailed,
)

UUID_RE = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE)
ACCESS_TOKEN_RE = re.compile(r"[0-9a-f]{64}", re.IGNORECASE)


@dataclass(frozen=True)
class GuestOrderRequest:
    order_id: str
    access_token: str


def validate_request(body: Any) -> GuestOrderRequest:
    """Check a decoded JSON body, failing on the first violated rule.

    Presence/type checks come before format checks so the caller learns which
    field is wrong. A body that is not a JSON object is treated as if both
    fields were missing.
    """
    if not isinstance(body, dict):
        body = {}
    order_id = body.get("orderId")
    access_token = body.get("accessToken")

    if not order_id or not isinstance(order_id, str):
        raise RequestValidationFailed(MISSING_ORDER_ID)
    if not access_token or not isinstance(access_token, str):
        raise RequestValidationFailed(MISSING_ACCESS_TOKEN)
    if not UUID_RE.fullmatch(order_id):
        raise RequestValidationFailed(INVALID_ORDER_ID)
    if not ACCESS_TOKEN_RE.fullmatch(access_token):
        raise RequestValidationFailed(INVALID_ACCESS_TOKEN)

    return GuestOrderRequest(order_id=order_id, access_token=access_token)
