"""
Dashboard State

In-memory snapshot of the orders, colours and filaments a dashboard shows,
plus the table's filter/sort state. A presentation layer drives it; the view
pipeline and the chart aggregators read from it.

Every fetch and every local write takes a ticket from one monotonic counter.
A fetch only replaces a collection if no newer ticket has touched that
collection yet, so a slow response that resolves after a newer one (or after
a local save) is dropped instead of overwriting fresher data.

Gateway failures are logged and leave the snapshot as it was.
"""
import itertools
import threading
from datetime import date
from typing import Callable, List, Optional, Sequence

from printdesk.exceptions import GatewayError
from printdesk.logging_config import get_logger
from printdesk.schemas.catalog import ColourRead, FilamentCreate, FilamentRead
from printdesk.schemas.dashboard import (
    FilamentRemaining,
    FilterState,
    SortKey,
    SortState,
    WeeklyOrderCount,
)
from printdesk.schemas.order import OrderRead, OrderWrite
from printdesk.services import analytics, order_service, order_view
from printdesk.services.gateway import RemoteDataGateway

logger = get_logger(__name__)

ORDERS = "orders"
COLOURS = "colours"
FILAMENTS = "filaments"


class DashboardState:
    """
    Holds the latest successfully fetched collections.

    Attributes:
        orders / colours / filaments: Current snapshots (empty until loaded)
        filter_state / sort_state: Table state, newest orders first by default
    """

    def __init__(self, gateway: RemoteDataGateway, color_options: Sequence[str]):
        self.gateway = gateway
        self.color_options = list(color_options)

        self.orders: List[OrderRead] = []
        self.colours: List[ColourRead] = []
        self.filaments: List[FilamentRead] = []

        self.filter_state = FilterState()
        self.sort_state = SortState()

        self._lock = threading.Lock()
        self._tickets = itertools.count(1)
        self._applied = {ORDERS: 0, COLOURS: 0, FILAMENTS: 0}

    # ------------------------------------------------------------------
    # Snapshot bookkeeping
    # ------------------------------------------------------------------

    def _next_ticket(self) -> int:
        with self._lock:
            return next(self._tickets)

    def is_loaded(self, collection: str) -> bool:
        """False until a fetch or local write has populated the collection."""
        return self._applied[collection] > 0

    def _refresh(self, collection: str, fetch: Callable[[], list]) -> bool:
        ticket = self._next_ticket()
        try:
            data = fetch()
        except GatewayError as e:
            logger.error(
                f"Failed to fetch {collection}: {e.message}",
                extra={"collection": collection, "error_code": e.error_code},
            )
            return False

        with self._lock:
            if ticket < self._applied[collection]:
                logger.info(
                    f"Discarding stale {collection} response",
                    extra={"collection": collection, "ticket": ticket, "applied": self._applied[collection]},
                )
                return False
            self._applied[collection] = ticket
            setattr(self, collection, data)
        logger.info(f"Loaded {len(data)} {collection}", extra={"collection": collection, "count": len(data)})
        return True

    def _apply_local(self, collection: str, update: Callable[[list], list]) -> None:
        # Takes its ticket under the same lock, so in-flight fetches become stale
        with self._lock:
            self._applied[collection] = next(self._tickets)
            setattr(self, collection, update(getattr(self, collection)))

    def refresh_orders(self) -> bool:
        return self._refresh(ORDERS, self.gateway.list_orders)

    def refresh_colours(self) -> bool:
        return self._refresh(COLOURS, self.gateway.list_colours)

    def refresh_filaments(self) -> bool:
        return self._refresh(FILAMENTS, self.gateway.list_filaments)

    def refresh_all(self) -> bool:
        results = [self.refresh_orders(), self.refresh_colours(), self.refresh_filaments()]
        return all(results)

    # ------------------------------------------------------------------
    # Table state
    # ------------------------------------------------------------------

    def rows(self) -> List[OrderRead]:
        """Order table rows for the current filter and sort."""
        return order_view.render_orders(self.orders, self.filter_state, self.sort_state)

    def request_sort(self, key: SortKey) -> None:
        self.sort_state = self.sort_state.request_sort(key)

    def set_status_filter(self, status: Optional[str]) -> None:
        self.filter_state = self.filter_state.model_copy(update={"status": status or None})

    def toggle_payment_received_filter(self) -> None:
        value = order_view.cycle_tri_state(self.filter_state.payment_received)
        self.filter_state = self.filter_state.model_copy(update={"payment_received": value})

    def clear_filters(self) -> None:
        self.filter_state = self.filter_state.cleared()

    # ------------------------------------------------------------------
    # Charts
    # ------------------------------------------------------------------

    def filament_remaining(self) -> List[FilamentRemaining]:
        return analytics.filament_remaining(self.filaments, self.color_options)

    def orders_per_week(self, today: Optional[date] = None) -> List[WeeklyOrderCount]:
        return analytics.orders_per_week(self.orders, today)

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    def save_order(
        self,
        order: OrderWrite,
        filament_id: Optional[int] = None,
        amount_used: Optional[float] = None,
    ) -> Optional[OrderRead]:
        """
        Save an order as entered in the form.

        Books material usage against the chosen spool first, then creates
        (id 0) or updates the order. If the order call fails the spool is put
        back as it was, and the local snapshot only changes once both calls
        have succeeded.

        Returns:
            The saved order, or None if the REST service call failed

        Raises:
            OrderValidationError: The order cannot be saved as entered
        """
        prepared, updated_filament = order_service.prepare_order_save(
            order, self.filaments, filament_id, amount_used, self.color_options
        )
        original_filament = None
        if updated_filament is not None:
            original_filament = next(f for f in self.filaments if f.id == updated_filament.id)

        try:
            if updated_filament is not None:
                self.gateway.update_filament(updated_filament)
        except GatewayError as e:
            logger.error(
                f"Failed to book filament usage: {e.message}",
                extra={"filament_id": updated_filament.id, "error_code": e.error_code},
            )
            return None

        try:
            if prepared.is_new:
                order_id = self.gateway.create_order(prepared)
            else:
                order_id = prepared.id
                self.gateway.update_order(order_id, prepared)
        except GatewayError as e:
            logger.error(
                f"Failed to save order: {e.message}",
                extra={"order_id": prepared.id, "error_code": e.error_code},
            )
            if original_filament is not None:
                self._restore_filament(original_filament)
            return None

        if updated_filament is not None:
            self._apply_local(FILAMENTS, lambda spools: [
                updated_filament if spool.id == updated_filament.id else spool
                for spool in spools
            ])

        saved = OrderRead.model_validate({**prepared.model_dump(), "id": order_id})
        if prepared.is_new:
            self._apply_local(ORDERS, lambda orders: orders + [saved])
        else:
            self._apply_local(ORDERS, lambda orders: [
                saved if existing.id == saved.id else existing for existing in orders
            ])
        logger.info("Order saved", extra={"order_id": order_id, "status": saved.status})
        return saved

    def _restore_filament(self, original: FilamentRead) -> None:
        try:
            self.gateway.update_filament(original)
        except GatewayError as e:
            logger.error(
                f"Failed to restore filament {original.id} after a failed order save: {e.message}",
                extra={"filament_id": original.id, "error_code": e.error_code},
            )

    def edit_order(self, order_id: int) -> Optional[OrderWrite]:
        """Order form for a loaded order, priced at its list price."""
        order = next((o for o in self.orders if o.id == order_id), None)
        if order is None:
            return None
        return order_service.edit_form(order)

    def delete_order(self, order_id: int) -> bool:
        """Delete an order, then reload the order list."""
        try:
            self.gateway.delete_order(order_id)
        except GatewayError as e:
            logger.error(f"Failed to delete order {order_id}: {e.message}", extra={"order_id": order_id})
            return False
        self.refresh_orders()
        return True

    # ------------------------------------------------------------------
    # Colour catalog
    # ------------------------------------------------------------------

    def add_colour(self, colour_name: str) -> Optional[ColourRead]:
        try:
            colour_id = self.gateway.create_colour(colour_name)
        except GatewayError as e:
            logger.error(f"Failed to add colour {colour_name}: {e.message}")
            return None
        colour = ColourRead(id=colour_id, colour_name=colour_name)
        self._apply_local(COLOURS, lambda colours: colours + [colour])
        return colour

    def rename_colour(self, colour_id: int, colour_name: str) -> bool:
        try:
            self.gateway.update_colour(colour_id, colour_name)
        except GatewayError as e:
            logger.error(f"Failed to rename colour {colour_id}: {e.message}")
            return False
        renamed = ColourRead(id=colour_id, colour_name=colour_name)
        self._apply_local(COLOURS, lambda colours: [
            renamed if colour.id == colour_id else colour for colour in colours
        ])
        return True

    def remove_colour(self, colour_id: int) -> bool:
        try:
            self.gateway.delete_colour(colour_id)
        except GatewayError as e:
            logger.error(f"Failed to delete colour {colour_id}: {e.message}")
            return False
        self._apply_local(COLOURS, lambda colours: [c for c in colours if c.id != colour_id])
        return True

    # ------------------------------------------------------------------
    # Filament catalog
    # ------------------------------------------------------------------

    def add_filament(self, filament: FilamentCreate) -> Optional[FilamentRead]:
        try:
            filament_id = self.gateway.create_filament(filament)
        except GatewayError as e:
            logger.error(f"Failed to add filament: {e.message}")
            return None
        created = FilamentRead.model_validate({**filament.model_dump(), "id": filament_id})
        self._apply_local(FILAMENTS, lambda spools: spools + [created])
        return created

    def update_filament(self, filament: FilamentRead) -> bool:
        try:
            self.gateway.update_filament(filament)
        except GatewayError as e:
            logger.error(f"Failed to update filament {filament.id}: {e.message}")
            return False
        self._apply_local(FILAMENTS, lambda spools: [
            filament if spool.id == filament.id else spool for spool in spools
        ])
        return True

    def remove_filament(self, filament_id: int) -> bool:
        """Delete a spool, then reload the spool list."""
        try:
            self.gateway.delete_filament(filament_id)
        except GatewayError as e:
            logger.error(f"Failed to delete filament {filament_id}: {e.message}")
            return False
        self.refresh_filaments()
        return True
