"""
Unit tests for the dashboard snapshot

Uses an in-memory fake in place of the REST gateway.
"""
from datetime import date

import pytest

from printdesk.exceptions import GatewayError, OrderValidationError
from printdesk.schemas.catalog import ColourRead, FilamentCreate, FilamentRead
from printdesk.schemas.dashboard import SortDirection, SortKey
from printdesk.schemas.order import OrderRead, OrderWrite
from printdesk.services.dashboard_state import DashboardState

COLOURS = ["black", "blue"]


class FakeGateway:
    """Records calls and serves canned collections"""

    def __init__(self):
        self.orders = [
            OrderRead(id=1, nickname="mare_bella", status="Finished", payment_received=True,
                      date_of_order=date(2024, 1, 2), price=100),
            OrderRead(id=2, nickname="pony_club", status="Printing", payment_received=False,
                      date_of_order=date(2024, 1, 10), price=50),
        ]
        self.colours = [ColourRead(id=1, colour_name="black"), ColourRead(id=2, colour_name="blue")]
        self.filaments = [
            FilamentRead(id=1, size=1000, amount_used=300, material="PLA", colour_name="black"),
        ]
        self.calls = []
        self.fail = set()
        self.next_id = 100

    def _call(self, name, *args):
        self.calls.append((name,) + args)
        if name in self.fail:
            raise GatewayError(f"{name} failed")

    def list_orders(self):
        self._call("list_orders")
        return list(self.orders)

    def list_colours(self):
        self._call("list_colours")
        return list(self.colours)

    def list_filaments(self):
        self._call("list_filaments")
        return list(self.filaments)

    def create_order(self, order):
        self._call("create_order", order)
        return self.next_id

    def update_order(self, order_id, order):
        self._call("update_order", order_id, order)

    def delete_order(self, order_id):
        self._call("delete_order", order_id)
        self.orders = [o for o in self.orders if o.id != order_id]

    def create_colour(self, colour_name):
        self._call("create_colour", colour_name)
        return self.next_id

    def update_colour(self, colour_id, colour_name):
        self._call("update_colour", colour_id, colour_name)

    def delete_colour(self, colour_id):
        self._call("delete_colour", colour_id)

    def create_filament(self, filament):
        self._call("create_filament", filament)
        return self.next_id

    def update_filament(self, filament):
        self._call("update_filament", filament)
        self.filaments = [filament if f.id == filament.id else f for f in self.filaments]

    def delete_filament(self, filament_id):
        self._call("delete_filament", filament_id)
        self.filaments = [f for f in self.filaments if f.id != filament_id]


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def state(gateway):
    state = DashboardState(gateway, COLOURS)
    state.refresh_all()
    return state


class TestRefresh:
    """Test loading collections"""

    def test_refresh_all_loads_everything(self, state):
        assert len(state.orders) == 2
        assert len(state.colours) == 2
        assert len(state.filaments) == 1
        assert state.is_loaded("orders")

    def test_not_loaded_before_first_fetch(self, gateway):
        state = DashboardState(gateway, COLOURS)

        assert state.is_loaded("orders") is False
        assert state.orders == []

    def test_failed_fetch_keeps_previous_snapshot(self, state, gateway):
        gateway.fail.add("list_orders")

        assert state.refresh_orders() is False
        assert len(state.orders) == 2

    def test_refresh_all_reports_partial_failure(self, gateway):
        gateway.fail.add("list_colours")
        state = DashboardState(gateway, COLOURS)

        assert state.refresh_all() is False
        assert state.is_loaded("orders")
        assert not state.is_loaded("colours")

    def test_stale_response_discarded(self, gateway):
        state = DashboardState(gateway, COLOURS)
        stale = [OrderRead(id=9, nickname="stale")]
        original_list = gateway.list_orders

        def slow_list_orders():
            # A newer refresh completes while this one is still in flight
            gateway.list_orders = original_list
            state.refresh_orders()
            return stale

        gateway.list_orders = slow_list_orders

        assert state.refresh_orders() is False
        assert [o.id for o in state.orders] == [1, 2]

    def test_fetch_older_than_local_save_discarded(self, gateway):
        state = DashboardState(gateway, COLOURS)
        state.refresh_filaments()
        original_list = gateway.list_orders

        def list_then_save():
            gateway.list_orders = original_list
            state.save_order(OrderWrite(nickname="walk_in"))
            return []

        gateway.list_orders = list_then_save
        state.refresh_orders()

        assert [o.nickname for o in state.orders] == ["walk_in"]


class TestTableState:
    """Test filter and sort driven through the snapshot"""

    def test_default_rows_newest_first(self, state):
        assert [o.id for o in state.rows()] == [2, 1]

    def test_status_filter(self, state):
        state.set_status_filter("Printing")

        assert [o.id for o in state.rows()] == [2]

        state.set_status_filter("")
        assert state.filter_state.status is None

    def test_payment_toggle_cycles(self, state):
        state.toggle_payment_received_filter()
        assert [o.id for o in state.rows()] == [1]

        state.toggle_payment_received_filter()
        assert [o.id for o in state.rows()] == [2]

        state.toggle_payment_received_filter()
        assert len(state.rows()) == 2

    def test_clear_filters(self, state):
        state.set_status_filter("Sent")
        state.toggle_payment_received_filter()
        state.clear_filters()

        assert state.filter_state.status is None
        assert state.filter_state.payment_received is None

    def test_request_sort(self, state):
        state.request_sort(SortKey.PRICE)
        assert state.sort_state.direction == SortDirection.ASC
        assert [o.id for o in state.rows()] == [2, 1]

        state.request_sort(SortKey.PRICE)
        assert state.sort_state.direction == SortDirection.DESC
        assert [o.id for o in state.rows()] == [1, 2]


class TestCharts:
    """Test chart data from the snapshot"""

    def test_filament_remaining(self, state):
        rows = state.filament_remaining()

        assert [(r.label, r.remaining) for r in rows] == [("black (PLA)", 700), ("blue (N/A)", 0)]

    def test_orders_per_week(self, state):
        weeks = state.orders_per_week(today=date(2024, 1, 15))

        assert [w.count for w in weeks] == [1, 1, 0]


class TestSaveOrder:
    """Test the save workflow"""

    def test_create_appends_locally(self, state, gateway):
        saved = state.save_order(OrderWrite(nickname="new_lead", price=80, discount=50))

        assert saved.id == 100
        assert saved.price == pytest.approx(40)
        assert state.orders[-1].id == 100
        assert gateway.calls[-1][0] == "create_order"

    def test_update_replaces_locally(self, state, gateway):
        saved = state.save_order(
            OrderWrite(id=2, nickname="pony_club", status="Printed", color="black", price=50),
            filament_id=1,
            amount_used=40,
        )

        assert saved.status == "Printed"
        assert [o.id for o in state.orders] == [1, 2]
        assert state.orders[1].amount_used == 40
        assert [c[0] for c in gateway.calls[-2:]] == ["update_filament", "update_order"]
        assert state.filaments[0].amount_used == 340

    def test_validation_error_propagates_without_calls(self, state, gateway):
        calls_before = len(gateway.calls)

        with pytest.raises(OrderValidationError):
            state.save_order(OrderWrite(id=2, status="Printing"))

        assert len(gateway.calls) == calls_before

    def test_gateway_failure_returns_none(self, state, gateway):
        gateway.fail.add("create_order")

        assert state.save_order(OrderWrite(nickname="x")) is None
        assert len(state.orders) == 2

    def test_failed_order_call_leaves_spool_unchanged(self, state, gateway):
        gateway.fail.add("create_order")
        order = OrderWrite(nickname="pony_club", status="Printing", color="black")

        assert state.save_order(order, filament_id=1, amount_used=50) is None
        assert state.save_order(order, filament_id=1, amount_used=50) is None

        assert state.filaments[0].amount_used == 300
        assert gateway.filaments[0].amount_used == 300
        assert len(state.orders) == 2

    def test_failed_order_call_puts_original_spool_back(self, state, gateway):
        gateway.fail.add("update_order")

        state.save_order(OrderWrite(id=2, status="Printed", color="black"), filament_id=1, amount_used=40)

        booked, order_call, restored = gateway.calls[-3:]
        assert booked[0] == "update_filament" and booked[1].amount_used == 340
        assert order_call[0] == "update_order"
        assert restored[0] == "update_filament" and restored[1].amount_used == 300

    def test_failed_usage_booking_skips_order_call(self, state, gateway):
        gateway.fail.add("update_filament")

        result = state.save_order(OrderWrite(status="Order", color="black"), filament_id=1, amount_used=20)

        assert result is None
        assert gateway.calls[-1][0] == "update_filament"
        assert state.filaments[0].amount_used == 300

    def test_resave_from_edit_form_keeps_price(self, state):
        saved = state.save_order(OrderWrite(nickname="new_lead", price=80, discount=25))
        form = state.edit_order(saved.id)

        assert form.price == 80
        assert saved.list_price == 80

        resaved = state.save_order(form)

        assert resaved.price == pytest.approx(60)
        assert state.orders[-1].price == pytest.approx(60)

    def test_edit_unknown_order(self, state):
        assert state.edit_order(999) is None

    def test_delete_order_refetches(self, state, gateway):
        assert state.delete_order(1) is True

        assert [o.id for o in state.orders] == [2]
        assert gateway.calls[-1] == ("list_orders",)


class TestCatalog:
    """Test colour and spool maintenance"""

    def test_add_rename_remove_colour(self, state):
        colour = state.add_colour("pink")
        assert colour.id == 100

        state.rename_colour(100, "lavender")
        assert state.colours[-1].colour_name == "lavender"

        state.remove_colour(100)
        assert [c.id for c in state.colours] == [1, 2]

    def test_failed_colour_add(self, state, gateway):
        gateway.fail.add("create_colour")

        assert state.add_colour("pink") is None
        assert len(state.colours) == 2

    def test_add_and_update_filament(self, state):
        created = state.add_filament(FilamentCreate(size=1000, material="PETG", colour_name="blue"))
        assert created.id == 100

        state.update_filament(created.model_copy(update={"amount_used": 250}))
        assert state.filaments[-1].amount_used == 250
        assert state.filament_remaining()[1].remaining == 750

    def test_remove_filament_refetches(self, state, gateway):
        assert state.remove_filament(1) is True

        assert state.filaments == []
        assert gateway.calls[-1] == ("list_filaments",)
