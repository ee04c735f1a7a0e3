from decimal import Decimal
from datetime import datetime, timezone
from typing import Annotated, List, Optional
from uuid import UUID

from pydantic import AfterValidator, BaseModel, PlainSerializer

# Monetary columns are NUMERIC; clients expect plain JSON numbers.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
# Stored as UTC; some drivers hand back naive values (SQLite drops the offset).
UtcDatetime = Annotated[datetime, AfterValidator(lambda v: v if v.tzinfo else v.replace(tzinfo=timezone.utc))]

class OrderStatusRead(BaseModel):
    id: UUID
    name: str
    color: Optional[str] = None
    class Config: from_attributes = True

class OrderItemRead(BaseModel):
    id: UUID
    name: str
    price: Money
    quantity: int
    total: Money
    product_id: Optional[UUID] = None
    modification_id: Optional[UUID] = None
    service_id: Optional[UUID] = None
    class Config: from_attributes = True

class GuestOrderRead(BaseModel):
    """Public view of a guest order. access_token and user_id are not part of it."""
    id: UUID
    order_number: str = ""
    first_name: str
    last_name: str
    email: str = ""
    phone: str = ""
    delivery_method: Optional[str] = None
    delivery_address: Optional[str] = None
    delivery_city: Optional[str] = None
    payment_method: str
    subtotal: Money
    total: Money
    notes: Optional[str] = None
    created_at: UtcDatetime
    updated_at: UtcDatetime
    status_id: Optional[UUID] = None
    status: Optional[OrderStatusRead] = None
    order_items: List[OrderItemRead] = []
    class Config: from_attributes = True
