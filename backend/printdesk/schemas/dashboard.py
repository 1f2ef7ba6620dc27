"""
Dashboard view-model schemas

Filter/sort state for the order table and the rows of the two charts.
"""
from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class SortKey(str, Enum):
    """Order fields the table can be sorted by"""
    DATE_OF_ORDER = "date_of_order"
    NICKNAME = "nickname"
    COLOR = "color"
    SIZE_X = "size_x"
    SIZE_Y = "size_y"
    SIZE_Z = "size_z"
    ENTRY = "entry"
    PRICE = "price"
    SOURCE_OF_ORDER = "source_of_order"
    PAYMENT = "payment"
    STATUS = "status"
    PAYMENT_RECEIVED = "payment_received"
    DISCOUNT = "discount"
    AMOUNT_USED = "amount_used"
    ID = "id"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class FilterState(BaseModel):
    """
    Active table filters. None (or an empty status) means "match all".
    """
    status: Optional[str] = None
    payment_received: Optional[bool] = None

    def cleared(self) -> "FilterState":
        return FilterState()

    class Config:
        frozen = True


class SortState(BaseModel):
    """Active sort column and direction; newest orders first by default"""
    sort_key: SortKey = SortKey.DATE_OF_ORDER
    direction: SortDirection = SortDirection.DESC

    def request_sort(self, key: SortKey) -> "SortState":
        """
        Column header click: the active column flips from ascending to
        descending, anything else starts ascending.
        """
        is_asc = self.sort_key == key and self.direction == SortDirection.ASC
        return SortState(
            sort_key=key,
            direction=SortDirection.DESC if is_asc else SortDirection.ASC,
        )

    class Config:
        frozen = True


class FilamentRemaining(BaseModel):
    """One bar of the remaining-filament chart"""
    label: str
    remaining: float
    colour: str
    fill: Optional[str] = None  # Swatch hex, None for colours without one


class WeeklyOrderCount(BaseModel):
    """One point of the orders-per-week chart"""
    week_label: str
    week_start: date
    count: int
