"""
Pydantic schemas for the REST payloads and the dashboard view-model
"""
from printdesk.schemas.common import ResourceId
from printdesk.schemas.order import (
    OrderStatus,
    PaymentMethod,
    INITIAL_STATUS,
    Dimensions,
    OrderBase,
    OrderWrite,
    OrderRead,
)
from printdesk.schemas.catalog import (
    ColourCreate,
    ColourUpdate,
    ColourRead,
    FilamentCreate,
    FilamentUpdate,
    FilamentRead,
)
from printdesk.schemas.dashboard import (
    SortKey,
    SortDirection,
    FilterState,
    SortState,
    FilamentRemaining,
    WeeklyOrderCount,
)

__all__ = [
    "ResourceId",
    "OrderStatus", "PaymentMethod", "INITIAL_STATUS", "Dimensions",
    "OrderBase", "OrderWrite", "OrderRead",
    "ColourCreate", "ColourUpdate", "ColourRead",
    "FilamentCreate", "FilamentUpdate", "FilamentRead",
    "SortKey", "SortDirection", "FilterState", "SortState",
    "FilamentRemaining", "WeeklyOrderCount",
]
