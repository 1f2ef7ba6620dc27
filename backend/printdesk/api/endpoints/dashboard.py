"""
Dashboard Endpoints

Server-side rendition of the order table and the two charts, for clients
that would rather not run the view-model themselves.
"""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from printdesk.core.settings import Settings, get_settings
from printdesk.db.session import get_db
from printdesk.models.filament import Filament
from printdesk.models.order import Order
from printdesk.schemas.catalog import FilamentRead
from printdesk.schemas.dashboard import (
    FilamentRemaining,
    FilterState,
    SortDirection,
    SortKey,
    SortState,
    WeeklyOrderCount,
)
from printdesk.schemas.order import OrderRead
from printdesk.services import analytics, order_view

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


def _load_orders(db: Session) -> List[OrderRead]:
    return [OrderRead.model_validate(order) for order in db.query(Order).order_by(Order.id).all()]


@router.get("/orders", response_model=List[OrderRead])
def get_order_rows(
    status: Optional[str] = None,
    payment_received: Optional[bool] = None,
    sort_key: SortKey = SortKey.DATE_OF_ORDER,
    direction: SortDirection = SortDirection.DESC,
    db: Session = Depends(get_db),
):
    """
    Order table rows: filtered by status / payment received, then sorted on
    a single column. Equal keys keep insertion order.
    """
    return order_view.render_orders(
        _load_orders(db),
        FilterState(status=status, payment_received=payment_received),
        SortState(sort_key=sort_key, direction=direction),
    )


@router.get("/filament-remaining", response_model=List[FilamentRemaining])
def get_filament_remaining(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Remaining weight per configured colour (first matching spool only)."""
    filaments = [FilamentRead.model_validate(f) for f in db.query(Filament).order_by(Filament.id).all()]
    return analytics.filament_remaining(filaments, settings.COLOR_OPTIONS)


@router.get("/orders-per-week", response_model=List[WeeklyOrderCount])
def get_orders_per_week(
    today: Optional[date] = None,
    db: Session = Depends(get_db),
):
    """Weekly order counts from the first week of the year through `today` (default: now)."""
    return analytics.orders_per_week(_load_orders(db), today)
