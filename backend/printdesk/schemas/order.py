"""
Order Pydantic Schemas

OrderRead is what the REST service hands out and what the view pipeline
consumes; it tolerates missing values so that filtering and sorting stay total
over whatever is stored. OrderWrite is what gets sent back and is strict about
the enumerated fields.
"""
from datetime import date
from enum import Enum
from typing import NamedTuple, Optional

from pydantic import BaseModel, Field, field_validator

from printdesk.schemas.common import parse_wire_date


# ============================================================================
# Enums
# ============================================================================

class OrderStatus(str, Enum):
    """Order workflow, in order"""
    CONTACT = "Contact"
    ORDER = "Order"
    PRINTING = "Printing"
    PRINTED = "Printed"
    FINISHED = "Finished"
    SENT = "Sent"


class PaymentMethod(str, Enum):
    """Accepted payment methods"""
    CASH = "cash"
    TRANSFER = "transfer"
    BLIK = "blik"
    PAYPAL = "paypal"


# Orders in this status have not consumed any material yet
INITIAL_STATUS = OrderStatus.CONTACT


class Dimensions(NamedTuple):
    x: Optional[float]
    y: Optional[float]
    z: Optional[float]


# ============================================================================
# Order Schemas
# ============================================================================

class OrderBase(BaseModel):
    """Fields shared by every order payload"""
    nickname: Optional[str] = ""
    source_of_order: Optional[str] = ""
    size_x: Optional[float] = 0
    size_y: Optional[float] = 0
    size_z: Optional[float] = 0
    color: Optional[str] = ""
    entry: Optional[str] = ""
    payment: Optional[str] = ""
    payment_received: bool = False
    discount: float = 0
    price: float = 0
    list_price: Optional[float] = None  # Price before discount
    date_of_order: Optional[date] = None
    status: Optional[str] = INITIAL_STATUS.value
    description: Optional[str] = ""
    filament_id: Optional[int] = None
    amount_used: float = 0

    @field_validator("date_of_order", mode="before")
    @classmethod
    def normalise_date(cls, v):
        return parse_wire_date(v)

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(self.size_x, self.size_y, self.size_z)


class OrderWrite(OrderBase):
    """
    Order as submitted for create (POST, id 0) or update (PUT).

    In the form the price is the list price. The save workflow keeps it in
    list_price and sends the discounted price.
    """
    id: int = 0
    discount: float = Field(0, ge=0, le=100, description="Discount in percent")
    date_of_order: date = Field(default_factory=date.today)
    status: OrderStatus = Field(default=INITIAL_STATUS.value, validate_default=True)

    @field_validator("payment")
    @classmethod
    def check_payment(cls, v: Optional[str]) -> str:
        """Empty while undecided, otherwise one of the payment methods"""
        if not v:
            return ""
        allowed = [method.value for method in PaymentMethod]
        if v not in allowed:
            raise ValueError(f"payment must be one of {', '.join(allowed)}")
        return v

    @property
    def is_new(self) -> bool:
        return self.id == 0

    class Config:
        use_enum_values = True


class OrderRead(OrderBase):
    """Order as stored"""
    id: int

    class Config:
        from_attributes = True
