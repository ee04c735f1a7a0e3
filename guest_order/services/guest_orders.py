"""
Guest order lookup.

The store connects with the service role, which is not subject to the
database's row-level policies. The only thing standing between an anonymous
caller and every order in the table is therefore ``GuestOrderCriteria``:
id match AND token match AND no owner. Every store implementation must go
through it.
"""
import hmac
import uuid
from dataclasses import dataclass
from typing import Optional, Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from guest_order.db.models import Order


@dataclass(frozen=True)
class GuestOrderCriteria:
    order_id: uuid.UUID
    access_token: str

    @classmethod
    def from_request(cls, order_id: str, access_token: str) -> "GuestOrderCriteria":
        return cls(order_id=uuid.UUID(order_id), access_token=access_token)

    def where_clause(self):
        return (
            (Order.id == self.order_id)
            & (Order.access_token == self.access_token)
            & (Order.user_id.is_(None))
        )

    def matches(self, order: Order) -> bool:
        if order.user_id is not None or order.access_token is None:
            return False
        if order.id != self.order_id:
            return False
        return hmac.compare_digest(order.access_token.encode(), self.access_token.encode())


class GuestOrderStore(Protocol):
    def find_guest_order(self, criteria: GuestOrderCriteria) -> Optional[Order]: ...


class SqlGuestOrderStore:
    def __init__(self, db: Session):
        self.db = db

    def find_guest_order(self, criteria: GuestOrderCriteria) -> Optional[Order]:
        stmt = (
            select(Order)
            .where(criteria.where_clause())
            .options(selectinload(Order.order_items), selectinload(Order.status))
        )
        order = self.db.execute(stmt).scalars().one_or_none()
        # re-check in constant time; the SQL comparison is not
        if order is None or not criteria.matches(order):
            return None
        return order
