"""
Order Endpoints

CRUD for customer orders under /data. The stored price is whatever the client
sends; the discount was already applied when the order was saved. Colours
outside the configured set are rejected.
"""
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from printdesk.core.settings import Settings, get_settings
from printdesk.db.session import get_db
from printdesk.exceptions import NotFoundError
from printdesk.logging_config import audit_log, get_client_ip, get_logger
from printdesk.models.order import Order
from printdesk.schemas.common import ResourceId
from printdesk.schemas.order import OrderRead, OrderWrite
from printdesk.services.order_service import check_colour

logger = get_logger(__name__)

router = APIRouter(prefix="/data", tags=["Orders"])


def _get_order_or_404(db: Session, order_id: int) -> Order:
    order = db.query(Order).filter(Order.id == order_id).first()
    if not order:
        raise NotFoundError("order", order_id)
    return order


@router.get("", response_model=List[OrderRead])
def list_orders(db: Session = Depends(get_db)):
    """All orders, in insertion order. Sorting and filtering happen in the view-model."""
    return db.query(Order).order_by(Order.id).all()


@router.post("", response_model=ResourceId, status_code=status.HTTP_201_CREATED)
def create_order(
    payload: OrderWrite,
    request: Request,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Create an order.

    New orders arrive with id 0 (or no id); the body id is ignored and the
    database assigns one.
    """
    check_colour(payload.color, settings.COLOR_OPTIONS)
    order = Order(**payload.model_dump(exclude={"id"}))
    db.add(order)
    db.commit()
    db.refresh(order)

    logger.info("Order created", extra={"order_id": order.id, "status": order.status})
    audit_log(
        "ORDER_CREATED",
        resource_type="order",
        resource_id=order.id,
        details={"status": order.status, "price": order.price},
        ip_address=get_client_ip(request),
    )
    return ResourceId(id=order.id)


@router.put("/{order_id}", response_model=ResourceId)
def update_order(
    order_id: int,
    payload: OrderWrite,
    request: Request,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Replace every field of an order (last write wins)."""
    order = _get_order_or_404(db, order_id)
    check_colour(payload.color, settings.COLOR_OPTIONS)
    for field, value in payload.model_dump(exclude={"id"}).items():
        setattr(order, field, value)
    db.commit()

    audit_log(
        "ORDER_UPDATED",
        resource_type="order",
        resource_id=order_id,
        details={"status": order.status, "price": order.price},
        ip_address=get_client_ip(request),
    )
    return ResourceId(id=order_id)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_order(
    order_id: int,
    request: Request,
    db: Session = Depends(get_db),
):
    order = _get_order_or_404(db, order_id)
    db.delete(order)
    db.commit()

    audit_log(
        "ORDER_DELETED",
        resource_type="order",
        resource_id=order_id,
        ip_address=get_client_ip(request),
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
