import json
import logging
from typing import Iterator

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from guest_order.api.responses import json_response, preflight_response
from guest_order.core.errors import InternalFault, OrderNotFound
from guest_order.core.validation import validate_request
from guest_order.schemas import GuestOrderRead
from guest_order.services.guest_orders import GuestOrderCriteria, GuestOrderStore, SqlGuestOrderStore

logger = logging.getLogger(__name__)

router = APIRouter()

def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()

def get_guest_order_store(db: Session = Depends(get_db)) -> GuestOrderStore:
    return SqlGuestOrderStore(db)

async def read_json_body(request: Request):
    raw = await request.body()
    try:
        return json.loads(raw) if raw else None
    except (ValueError, RecursionError):
        return None

@router.options("/v1/orders")
def guest_order_preflight():
    return preflight_response()

@router.post("/v1/orders")
async def get_guest_order(request: Request, store: GuestOrderStore = Depends(get_guest_order_store)):
    params = validate_request(await read_json_body(request))
    criteria = GuestOrderCriteria.from_request(params.order_id, params.access_token)

    try:
        order = await run_in_threadpool(store.find_guest_order, criteria)
        if order is None:
            logger.info("guest order lookup miss for order_id=%s", params.order_id)
            raise OrderNotFound()
        body = GuestOrderRead.model_validate(order).model_dump(mode="json")
    except OrderNotFound:
        raise
    except Exception as e:
        logger.exception("Error fetching guest order %s", params.order_id)
        raise InternalFault() from e

    return json_response(body)
