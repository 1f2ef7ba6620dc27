"""
Order Service

Prepares an order for saving the way the order form does:
- blocks saves that leave Contact status without recording material usage
- books the used weight against the chosen spool
- appends a usage note to the description
- applies the discount to the list price
"""
from typing import Optional, Sequence, Tuple

from printdesk.exceptions import OrderValidationError
from printdesk.schemas.catalog import FilamentRead
from printdesk.schemas.order import INITIAL_STATUS, OrderRead, OrderWrite


def format_quantity(value: float) -> str:
    """1000.0 -> "1000", 12.5 -> "12.5"."""
    return f"{value:g}"


def apply_discount(price: float, discount: float) -> float:
    """Price after a percentage discount."""
    return price * (1 - discount / 100)


def usage_note(filament: FilamentRead, amount_used: float) -> str:
    """Text appended to an order's description when material is booked."""
    return (
        f" Filament used: {filament.material}:{filament.colour_name}:"
        f"{format_quantity(filament.size)} (Weight) - {format_quantity(amount_used)}"
    )


def requires_material_usage(order: OrderWrite) -> bool:
    return order.status != INITIAL_STATUS.value


def check_colour(color: Optional[str], color_options: Sequence[str]) -> None:
    """An empty colour means "not chosen yet"; anything else must be enumerated."""
    if color and color not in color_options:
        raise OrderValidationError(
            f"Unknown colour: {color}",
            details={"color": color, "allowed": list(color_options)},
        )


def validate_order(
    order: OrderWrite,
    filament_id: Optional[int],
    amount_used: Optional[float],
    color_options: Sequence[str],
) -> None:
    """
    Raise OrderValidationError if the order cannot be saved as entered.
    """
    check_colour(order.color, color_options)
    if requires_material_usage(order) and (not filament_id or not amount_used or amount_used <= 0):
        raise OrderValidationError(
            "Select a filament and a positive amount used for orders past Contact status",
            details={"status": order.status, "filament_id": filament_id, "amount_used": amount_used},
        )


def edit_form(order: OrderRead) -> OrderWrite:
    """
    Order form prefilled from a stored order.

    The price field holds the list price, so saving an unchanged form stores
    the same discounted price again. Orders saved before list prices were
    kept fall back to their stored price.
    """
    data = order.model_dump(exclude={"list_price"})
    if data["date_of_order"] is None:
        del data["date_of_order"]
    if order.list_price is not None:
        data["price"] = order.list_price
    return OrderWrite.model_validate(data)


def prepare_order_save(
    order: OrderWrite,
    filaments: Sequence[FilamentRead],
    filament_id: Optional[int],
    amount_used: Optional[float],
    color_options: Sequence[str],
) -> Tuple[OrderWrite, Optional[FilamentRead]]:
    """
    Build the payloads for saving an order.

    Args:
        order: Order as entered (price before discount)
        filaments: Current spool snapshot
        filament_id: Spool the material came from, if any
        amount_used: Weight taken from that spool
        color_options: The enumerated colour set

    Returns:
        (order to send, spool to send or None when no usage is booked)

    Raises:
        OrderValidationError: Missing usage on a non-initial status, unknown
            spool, or a colour outside the enumerated set
    """
    validate_order(order, filament_id, amount_used, color_options)

    updates = {
        "list_price": order.price,
        "price": apply_discount(order.price, order.discount),
    }
    updated_filament = None

    if requires_material_usage(order):
        filament = next((f for f in filaments if f.id == filament_id), None)
        if filament is None:
            raise OrderValidationError(
                f"Filament not found: {filament_id}",
                details={"filament_id": filament_id},
            )
        updated_filament = filament.model_copy(
            update={"amount_used": filament.amount_used + amount_used}
        )
        updates["description"] = (order.description or "") + usage_note(filament, amount_used)
        updates["filament_id"] = filament.id
        updates["amount_used"] = amount_used

    return order.model_copy(update=updates), updated_filament
