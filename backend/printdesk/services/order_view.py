"""
Order View Service

Turns the raw order collection plus the table's filter/sort state into the
rows that get displayed. Everything here is a pure function over in-memory
lists: filter first, then sort, recomputed from scratch on every change.
"""
from enum import Enum
from functools import cmp_to_key
from typing import Any, Iterable, List, Optional, Sequence

from printdesk.schemas.dashboard import (
    FilterState,
    SortDirection,
    SortKey,
    SortState,
)
from printdesk.schemas.order import OrderBase


class SortKind(str, Enum):
    """How values of a sort column compare"""
    DATE = "date"
    NUMBER = "number"
    BOOLEAN = "boolean"
    TEXT = "text"


SORT_KINDS = {
    SortKey.DATE_OF_ORDER: SortKind.DATE,
    SortKey.PRICE: SortKind.NUMBER,
    SortKey.SIZE_X: SortKind.NUMBER,
    SortKey.SIZE_Y: SortKind.NUMBER,
    SortKey.SIZE_Z: SortKind.NUMBER,
    SortKey.DISCOUNT: SortKind.NUMBER,
    SortKey.AMOUNT_USED: SortKind.NUMBER,
    SortKey.ID: SortKind.NUMBER,
    SortKey.PAYMENT_RECEIVED: SortKind.BOOLEAN,
    SortKey.NICKNAME: SortKind.TEXT,
    SortKey.COLOR: SortKind.TEXT,
    SortKey.ENTRY: SortKind.TEXT,
    SortKey.SOURCE_OF_ORDER: SortKind.TEXT,
    SortKey.PAYMENT: SortKind.TEXT,
    SortKey.STATUS: SortKind.TEXT,
}


# ============================================================================
# Filter Predicate
# ============================================================================

def matches_filters(order: OrderBase, filter_state: Optional[FilterState]) -> bool:
    """
    Check one order against every active filter.

    A status filter of None or "" and a payment filter of None impose nothing.
    Status matching is exact and case-sensitive.
    """
    if filter_state is None:
        return True
    if filter_state.status and order.status != filter_state.status:
        return False
    if (
        filter_state.payment_received is not None
        and order.payment_received != filter_state.payment_received
    ):
        return False
    return True


def filter_orders(orders: Iterable[OrderBase], filter_state: Optional[FilterState]) -> list:
    """Orders passing every active filter, in their original order."""
    return [order for order in orders if matches_filters(order, filter_state)]


def cycle_tri_state(value: Optional[bool]) -> Optional[bool]:
    """Filter toggle button: off -> only True -> only False -> off."""
    if value is None:
        return True
    if value is True:
        return False
    return None


# ============================================================================
# Comparator
# ============================================================================

def sort_value(order: OrderBase, sort_key: SortKey) -> Any:
    """Value of the sort column, coerced to the column's kind (None stays None)."""
    value = getattr(order, SortKey(sort_key).value)
    if value is None:
        return None

    kind = SORT_KINDS[SortKey(sort_key)]
    if kind is SortKind.NUMBER:
        return float(value)
    if kind is SortKind.BOOLEAN:
        return bool(value)
    if kind is SortKind.TEXT:
        return value.value if isinstance(value, Enum) else str(value)
    return value


def _compare_values(a: Any, b: Any) -> int:
    # None sorts before any concrete value
    if a is None and b is None:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    return (a > b) - (a < b)


def compare_orders(
    a: OrderBase,
    b: OrderBase,
    sort_key: SortKey,
    direction: SortDirection = SortDirection.ASC,
) -> int:
    """
    Compare two orders on a single column.

    Args:
        a, b: Orders to compare
        sort_key: Column to compare on
        direction: DESC flips the whole result, None placement included

    Returns:
        -1, 0 or 1
    """
    result = _compare_values(sort_value(a, sort_key), sort_value(b, sort_key))
    if SortDirection(direction) is SortDirection.DESC:
        return -result
    return result


def sort_orders(orders: Sequence[OrderBase], sort_state: Optional[SortState]) -> list:
    """Stable sort: orders with equal keys keep their input order in both directions."""
    if sort_state is None:
        sort_state = SortState()

    def comparator(a: OrderBase, b: OrderBase) -> int:
        return compare_orders(a, b, sort_state.sort_key, sort_state.direction)

    return sorted(orders, key=cmp_to_key(comparator))


# ============================================================================
# View Pipeline
# ============================================================================

def render_orders(
    orders: Iterable[OrderBase],
    filter_state: Optional[FilterState] = None,
    sort_state: Optional[SortState] = None,
) -> List[OrderBase]:
    """
    Rows of the order table: filter, then sort.

    Args:
        orders: Raw order collection
        filter_state: Active filters (None = show everything)
        sort_state: Active sort (None = newest first)

    Returns:
        New list; the input is never modified
    """
    return sort_orders(filter_orders(orders, filter_state), sort_state)
