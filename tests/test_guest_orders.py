import secrets
import uuid

from guest_order.db.models import Order
from guest_order.services.guest_orders import GuestOrderCriteria, SqlGuestOrderStore


def transient_order(**overrides) -> Order:
    fields = {"id": uuid.uuid4(), "user_id": None, "access_token": secrets.token_hex(32)}
    fields.update(overrides)
    return Order(**fields)


class TestGuestOrderCriteria:
    def test_matches_ownerless_order_with_its_token(self):
        order = transient_order()
        assert GuestOrderCriteria(order.id, order.access_token).matches(order)

    def test_from_request_accepts_upper_case_id(self):
        order = transient_order()
        criteria = GuestOrderCriteria.from_request(str(order.id).upper(), order.access_token)
        assert criteria.matches(order)

    def test_rejects_owned_order_even_with_correct_token(self):
        order = transient_order(user_id=uuid.uuid4())
        assert not GuestOrderCriteria(order.id, order.access_token).matches(order)

    def test_rejects_token_off_by_one_character(self):
        order = transient_order()
        last = "0" if order.access_token[-1] != "0" else "1"
        assert not GuestOrderCriteria(order.id, order.access_token[:-1] + last).matches(order)

    def test_rejects_different_order_id(self):
        order = transient_order()
        assert not GuestOrderCriteria(uuid.uuid4(), order.access_token).matches(order)

    def test_rejects_order_without_token(self):
        order = transient_order(access_token=None)
        assert not GuestOrderCriteria(order.id, "a" * 64).matches(order)


class TestSqlGuestOrderStore:
    def test_finds_guest_order_with_items_and_status(self, db, guest_order):
        store = SqlGuestOrderStore(db)
        found = store.find_guest_order(GuestOrderCriteria(guest_order.id, guest_order.access_token))
        assert found is not None
        assert found.id == guest_order.id
        assert sorted(i.name for i in found.order_items) == ["Ceramic mug", "Gift wrapping"]
        assert found.status.name == "New"

    def test_items_are_loaded_eagerly(self, session_factory, guest_order):
        with session_factory() as db:
            found = SqlGuestOrderStore(db).find_guest_order(
                GuestOrderCriteria(guest_order.id, guest_order.access_token))
        # session closed: a lazy load here would raise DetachedInstanceError
        assert len(found.order_items) == 2

    def test_owned_order_is_never_returned(self, db, owned_order):
        store = SqlGuestOrderStore(db)
        assert store.find_guest_order(GuestOrderCriteria(owned_order.id, owned_order.access_token)) is None

    def test_wrong_token_returns_none(self, db, guest_order):
        store = SqlGuestOrderStore(db)
        assert store.find_guest_order(GuestOrderCriteria(guest_order.id, secrets.token_hex(32))) is None

    def test_unknown_id_returns_none(self, db, guest_order):
        store = SqlGuestOrderStore(db)
        assert store.find_guest_order(GuestOrderCriteria(uuid.uuid4(), guest_order.access_token)) is None

    def test_does_not_write(self, session_factory, guest_order):
        with session_factory() as db:
            SqlGuestOrderStore(db).find_guest_order(GuestOrderCriteria(guest_order.id, guest_order.access_token))
            assert not db.dirty and not db.new and not db.deleted
