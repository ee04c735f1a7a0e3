import secrets
import uuid
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from guest_order.db.models import Order, OrderItem, OrderStatus
from guest_order.db.session import Base, create_db_engine, create_session_factory
from guest_order.main import create_app



@pytest.fixture
def session_factory():
    engine = create_db_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield create_session_factory(engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def app(session_factory):
    return create_app(session_factory=session_factory)


@pytest.fixture
def client(app):
    return TestClient(app)


def make_order(db, *, user_id=None, with_status=True) -> Order:
    status = None
    if with_status:
        status = OrderStatus(name="New", color="#3b82f6", sort_order=0)
        db.add(status)
    order = Order(
        order_number="ORD-1001",
        first_name="Olena",
        last_name="Shevchenko",
        email="olena@example.com",
        phone="+380501234567",
        delivery_method="nova_poshta",
        delivery_address="Warehouse 12",
        delivery_city="Kyiv",
        payment_method="cash_on_delivery",
        subtotal=Decimal("300.00"),
        total=Decimal("350.00"),
        notes="Call before delivery",
        user_id=user_id,
        access_token=secrets.token_hex(32),
        status=status,
    )
    order.order_items.append(OrderItem(
        name="Ceramic mug", price=Decimal("100.00"), quantity=2, total=Decimal("200.00"),
        product_id=uuid.uuid4(),
    ))
    order.order_items.append(OrderItem(
        name="Gift wrapping", price=Decimal("100.00"), quantity=1, total=Decimal("100.00"),
        service_id=uuid.uuid4(),
    ))
    db.add(order)
    db.commit()
    return order


@pytest.fixture
def guest_order(db) -> Order:
    return make_order(db)


@pytest.fixture
def owned_order(db) -> Order:
    return make_order(db, user_id=uuid.uuid4(), with_status=False)
