"""
Order model

One customer job: what to print, in which colour, for how much, and where it
is in the Contact → Sent workflow.
"""
from sqlalchemy import Column, Integer, String, Float, Boolean, Date, Text

from printdesk.db.base import Base


class Order(Base):
    """Order model - matches orders table"""
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)

    # Customer
    nickname = Column(String(255), nullable=True)
    source_of_order = Column(String(255), nullable=True)  # Allegro, Instagram, walk-in, ...

    # Dimensions (arbitrary unit, whatever the workshop measures in)
    size_x = Column(Float, nullable=True, default=0)
    size_y = Column(Float, nullable=True, default=0)
    size_z = Column(Float, nullable=True, default=0)

    color = Column(String(50), nullable=True)  # Colour name, not an id
    entry = Column(String(255), nullable=True)  # Free-form batch label, e.g. "18 standard"

    # Payment
    payment = Column(String(50), nullable=True)
    payment_received = Column(Boolean, nullable=False, default=False)
    discount = Column(Float, nullable=False, default=0)  # Percent, 0-100
    price = Column(Float, nullable=False, default=0)  # Already discounted
    list_price = Column(Float, nullable=True)  # As entered, before the discount

    date_of_order = Column(Date, nullable=True, index=True)
    status = Column(String(50), nullable=False, default="Contact", index=True)
    # Contact, Order, Printing, Printed, Finished, Sent

    description = Column(Text, nullable=True)

    # Material usage (no foreign key: filaments can be deleted independently)
    filament_id = Column(Integer, nullable=True)
    amount_used = Column(Float, nullable=False, default=0)

    def __repr__(self):
        return f"<Order {self.id}: {self.nickname} ({self.status})>"
